import pandas as pd
import streamlit as st
import config
from typing import List, Optional
from exceptions import DataLoadError
from logger_config import setup_logger

logger = setup_logger(__name__)

NUMERIC_COLUMNS = ["lat", "lon", "total_pop", config.TOTAL_COLUMN] + list(config.CRIME_COLUMNS.values())


class CrimeDataset:
    """
    Read-only view over the per-city, per-year crime table.
    Every query hands back a new DataFrame so callers can't mutate the store.
    """

    def __init__(self, df: pd.DataFrame):
        self._df = df.sort_values(["city", "year"]).reset_index(drop=True)

    def __len__(self) -> int:
        return len(self._df)

    def all(self) -> pd.DataFrame:
        return self._df.copy()

    def for_year(self, year: int) -> pd.DataFrame:
        return self._df[self._df["year"] == year].reset_index(drop=True)

    def for_city(self, city: str) -> pd.DataFrame:
        return self._df[self._df["city"] == city].reset_index(drop=True)

    def has_city(self, city: Optional[str]) -> bool:
        return city is not None and bool((self._df["city"] == city).any())

    def cities(self) -> List[str]:
        return sorted(self._df["city"].unique().tolist())

    def years(self) -> List[int]:
        return sorted(int(y) for y in self._df["year"].unique())


# --- DATA LOADING ---
def read_crime_csv(path: str) -> CrimeDataset:
    """
    Loads the crime CSV into a CrimeDataset.
    Raises DataLoadError if the file is missing, unreadable or malformed.
    """
    try:
        df = pd.read_csv(path)
    except FileNotFoundError as e:
        raise DataLoadError(f"File not found: {path}") from e
    except OSError as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Could not parse {path}: {e}") from e

    df.columns = df.columns.str.strip()

    missing = [col for col in config.REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DataLoadError(f"{path} is missing required columns: {', '.join(missing)}")
    if df.empty:
        raise DataLoadError(f"{path} has no rows")

    if df["city"].isna().any():
        raise DataLoadError(f"{path} has rows without a city")
    df["city"] = df["city"].astype(str).str.strip()

    years = pd.to_numeric(df["year"], errors="coerce")
    if years.isna().any() or (years % 1 != 0).any():
        raise DataLoadError(f"{path} has rows with a missing or non-integer year")
    df["year"] = years.astype(int)

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    dupes = df.duplicated(subset=["city", "year"], keep=False)
    if dupes.any():
        pairs = df.loc[dupes, ["city", "year"]].drop_duplicates().head(5)
        listing = ", ".join(f"{c} {y}" for c, y in pairs.itertuples(index=False))
        raise DataLoadError(f"{path} repeats city/year pairs: {listing}")

    n_missing = int(df[list(config.CRIME_COLUMNS.values())].isna().sum().sum())
    if n_missing:
        logger.debug(f"{n_missing} missing category rates in {path}")

    logger.info(f"Loaded {len(df)} rows ({df['city'].nunique()} cities) from {path}")
    return CrimeDataset(df)


@st.cache_data
def load_dataset(path: str = config.DATA_FILE) -> CrimeDataset:
    """Cached wrapper so Streamlit reruns only read the CSV once."""
    return read_crime_csv(path)
