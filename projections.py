"""
Projections that turn the crime dataset into what the dashboard draws:
the single-city time series, the per-city map markers and the comparison
table against the national average.
"""
from html import escape
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

import config
from aggregates import dense_ranks, national_averages
from data_manager import CrimeDataset
from logger_config import setup_logger

logger = setup_logger(__name__)

SERIES_COLUMNS = ["year", "series", "value"]
POPULATION_COLUMNS = ["year", "population_k"]
MAP_COLUMNS = ["city", "lat", "lon", "marker_size", "html_label"]
TABLE_COLUMNS = ["Year"] + [config.CRIME_LABELS[key] for key in config.CRIME_CATEGORIES] + ["Safety Rank"]


def selected_categories(categories: Optional[Iterable[str]]) -> List[str]:
    """Known category keys from a selection, in canonical order."""
    chosen = set(categories or [])
    unknown = chosen - set(config.CRIME_CATEGORIES)
    if unknown:
        logger.warning(f"Ignoring unknown crime categories: {sorted(unknown)}")
    return [key for key in config.CRIME_CATEGORIES if key in chosen]


# --- SINGLE CITY SERIES ---
def city_series(dataset: CrimeDataset, city: str, categories: Optional[Iterable[str]]) -> pd.DataFrame:
    """
    Long-form rate series for one city.
    "Total Violent Crimes" is always included; a category line is only
    present when that category is selected. Unknown cities give an empty frame.
    Returns: DataFrame with columns year, series, value ordered by year.
    """
    rows = dataset.for_city(city)
    if rows.empty:
        logger.debug(f"No records for city {city!r}")
        return pd.DataFrame(columns=SERIES_COLUMNS)

    labels = {config.TOTAL_COLUMN: config.TOTAL_LABEL}
    for key in selected_categories(categories):
        labels[config.CRIME_COLUMNS[key]] = config.CRIME_LABELS[key]

    long_df = (
        rows[["year"] + list(labels)]
        .rename(columns=labels)
        .melt(id_vars="year", var_name="series", value_name="value")
    )
    long_df["series"] = pd.Categorical(long_df["series"], categories=list(labels.values()), ordered=True)
    long_df = long_df.sort_values(["year", "series"]).reset_index(drop=True)
    long_df["series"] = long_df["series"].astype(str)
    return long_df[SERIES_COLUMNS]


def population_series(dataset: CrimeDataset, city: str) -> pd.DataFrame:
    """Population in thousands per year, for the optional chart overlay."""
    rows = dataset.for_city(city)
    if rows.empty:
        return pd.DataFrame(columns=POPULATION_COLUMNS)
    return pd.DataFrame({
        "year": rows["year"],
        "population_k": rows["total_pop"] / 1000,
    }).sort_values("year").reset_index(drop=True)


# --- MAP MARKERS ---
def category_scale_factor(categories: Iterable[str]) -> int:
    """
    Legacy visual-calibration heuristic for marker sizes.

    Homicide and rape rates are an order of magnitude below robbery and
    assault, so without either of those two the summed rate is inflated:
    x8 when rape is selected, x20 otherwise. Any selection with robbery or
    assault is left as-is. This is a fudge factor for the map, not a
    statistical normalization, and can be dropped without touching the
    rest of the rendering path.
    """
    chosen = set(categories)
    if "robbery" in chosen or "assault" in chosen:
        return 1
    if "rape" in chosen:
        return 8
    return 20


def _pretty(value) -> str:
    if pd.isna(value):
        return "N/A"
    return f"{int(round(value)):,}"


def city_label_html(record) -> str:
    """HTML summary of one city-year shown when hovering a marker."""
    items = [
        ("Total Population", record["total_pop"]),
        ("Total Crime (per 100k)", record[config.TOTAL_COLUMN]),
        ("Homicide (per 100k)", record["homs_per_100k"]),
        ("Rape (per 100k)", record["rape_per_100k"]),
        ("Robbery (per 100k)", record["rob_per_100k"]),
        ("Assault (per 100k)", record["agg_ass_per_100k"]),
    ]
    body = "".join(f"<li>{name}: {_pretty(value)}</li>" for name, value in items)
    return f"<ul> <b>{escape(str(record['city']))}</b>{body}</ul>"


def map_intensity(dataset: CrimeDataset, year: int, categories: Optional[Iterable[str]]) -> pd.DataFrame:
    """
    Marker size and hover label for every city reporting in `year`.
    Size is 0.008 * (sum of the selected rates, missing = 0) * scale factor,
    so an empty selection yields zero-size markers.
    """
    rows = dataset.for_year(year)
    if rows.empty:
        logger.debug(f"No records for year {year}")
        return pd.DataFrame(columns=MAP_COLUMNS)

    keys = selected_categories(categories)
    if keys:
        cols = [config.CRIME_COLUMNS[key] for key in keys]
        raw_sum = rows[cols].fillna(0).sum(axis=1)
    else:
        raw_sum = pd.Series(0.0, index=rows.index)

    result = rows[["city", "lat", "lon"]].copy()
    result["marker_size"] = config.MARKER_SCALE * raw_sum * category_scale_factor(keys)
    result["html_label"] = [city_label_html(row) for _, row in rows.iterrows()]
    return result


# --- COMPARISON TABLE ---
def comparison_table(dataset: CrimeDataset, city: str) -> pd.DataFrame:
    """
    Per-year difference between a city's rates and the national average,
    computed as round((city - average) / 100, 2), plus the city's safety rank.
    The values are shown with a "%" suffix but are not a share of the average.
    """
    ranked = dataset.all()
    ranked["rank"] = dense_ranks(dataset)
    rows = ranked[ranked["city"] == city].sort_values("year").reset_index(drop=True)
    if rows.empty:
        logger.debug(f"No comparison table for unknown city {city!r}")
        return pd.DataFrame(columns=TABLE_COLUMNS)

    averages = national_averages(dataset)
    table = pd.DataFrame({"Year": rows["year"]})
    for key, col in config.CRIME_COLUMNS.items():
        average = rows["year"].map(averages[key])
        table[config.CRIME_LABELS[key]] = ((rows[col] - average) / 100).round(2)
    table["Safety Rank"] = rows["rank"]
    return table[TABLE_COLUMNS]


def _percent(value) -> str:
    if pd.isna(value):
        return "N/A"
    return f"{np.format_float_positional(value, trim='-')} %"


def format_comparison_table(table: pd.DataFrame) -> pd.DataFrame:
    """Render deviations as "<value> %" strings for display; whole numbers lose the trailing ".0"."""
    formatted = table.copy()
    for key in config.CRIME_CATEGORIES:
        label = config.CRIME_LABELS[key]
        formatted[label] = formatted[label].map(_percent)
    return formatted


def paginate(table: pd.DataFrame, page: int, page_size: int = config.DEFAULT_PAGE_SIZE) -> Tuple[pd.DataFrame, int]:
    """
    Slice one page out of a table; page is 1-based and clamped to range.
    Returns: (page rows indexed from 1, total page count)
    """
    page_size = max(1, int(page_size))
    total_pages = max(1, (len(table) + page_size - 1) // page_size)
    page = min(max(1, int(page)), total_pages)

    start_idx = (page - 1) * page_size
    page_df = table.iloc[start_idx:start_idx + page_size].copy()
    page_df.index = pd.RangeIndex(start=start_idx + 1, stop=start_idx + 1 + len(page_df))
    return page_df, total_pages


# --- AUTOPLAY ---
def next_year(current: int) -> int:
    """Year shown on the next animation frame, looping back after the last year."""
    if current >= config.MAX_YEAR or current < config.MIN_YEAR:
        return config.MIN_YEAR
    return current + 1
