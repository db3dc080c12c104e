"""
National averages and per-year safety ranks derived from the crime dataset.
"""
import numpy as np
import pandas as pd
import config
from typing import Dict, Optional
from data_manager import CrimeDataset


# --- NATIONAL AVERAGES ---
def national_averages(dataset: CrimeDataset) -> pd.DataFrame:
    """
    Mean rate per crime category for every year, across all cities.
    Missing rates are left out of both the sum and the count, so a category
    with no reported values in a year comes back as NaN.
    Returns: DataFrame indexed by year with one column per category key.
    """
    df = dataset.all()
    rates = df[list(config.CRIME_COLUMNS.values())].rename(
        columns={col: key for key, col in config.CRIME_COLUMNS.items()}
    )
    rates["year"] = df["year"]
    return rates.groupby("year")[config.CRIME_CATEGORIES].mean()


def national_average(dataset: CrimeDataset, year: int) -> Dict[str, float]:
    """National average for a single year; every category is NaN if the year is absent."""
    averages = national_averages(dataset)
    if year not in averages.index:
        return {key: np.nan for key in config.CRIME_CATEGORIES}
    row = averages.loc[year]
    return {key: float(row[key]) for key in config.CRIME_CATEGORIES}


# --- SAFETY RANK ---
def dense_ranks(dataset: CrimeDataset) -> pd.Series:
    """
    Dense rank of violent_per_100k within each year, lowest rate = 1.
    Aligned with dataset.all(); cities with no total rate get <NA>.
    """
    df = dataset.all()
    ranks = df.groupby("year")[config.TOTAL_COLUMN].rank(method="dense", ascending=True)
    return ranks.astype("Int64").rename("rank")


def city_rank(dataset: CrimeDataset, city: str, year: int) -> Optional[int]:
    df = dataset.all()
    df["rank"] = dense_ranks(dataset)
    match = df[(df["city"] == city) & (df["year"] == year)]
    if match.empty or pd.isna(match["rank"].iloc[0]):
        return None
    return int(match["rank"].iloc[0])
