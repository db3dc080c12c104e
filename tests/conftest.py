import numpy as np
import pandas as pd
import pytest

from data_manager import read_crime_csv


def _row(city, year, violent, homs, rape, rob, agg, pop=100000, lat=40.0, lon=-90.0):
    return {
        'city': city, 'year': year, 'lat': lat, 'lon': lon, 'total_pop': pop,
        'violent_per_100k': violent, 'homs_per_100k': homs, 'rape_per_100k': rape,
        'rob_per_100k': rob, 'agg_ass_per_100k': agg,
    }


@pytest.fixture
def sample_df():
    return pd.DataFrame([
        _row('Atlanta, GA', 1980, 900.0, 5.2, 40.0, 400.0, 454.8, pop=425022, lat=33.75, lon=-84.39),
        _row('Atlanta, GA', 1981, 800.0, 6.0, 30.0, 350.0, 414.0, pop=430000, lat=33.75, lon=-84.39),
        _row('Boston, MA', 1980, 500.0, 2.8, np.nan, 200.0, 297.2, pop=562994, lat=42.36, lon=-71.06),
        _row('Boston, MA', 1981, 800.0, 3.0, 20.0, 400.0, 377.0, pop=560000, lat=42.36, lon=-71.06),
        _row('Chicago, IL', 1981, 300.0, 9.0, 10.0, 100.0, 181.0, pop=3000000, lat=41.88, lon=-87.63),
    ])


@pytest.fixture
def sample_csv(tmp_path, sample_df):
    path = tmp_path / 'crime_lat_long.csv'
    sample_df.to_csv(path, index=False)
    return path


@pytest.fixture
def dataset(sample_csv):
    return read_crime_csv(str(sample_csv))
