import folium
import pandas as pd
import plotly.graph_objects as go

import config
from charts import create_city_line_chart, create_crime_map
from projections import city_series, map_intensity, population_series


def _markers(m):
    return [child for child in m._children.values() if isinstance(child, folium.CircleMarker)]


class TestCrimeMap:
    def test_one_marker_per_city(self, dataset):
        m = create_crime_map(map_intensity(dataset, 1981, config.CRIME_CATEGORIES))
        assert isinstance(m, folium.Map)
        assert len(_markers(m)) == 3

    def test_rows_without_coordinates_skipped(self, dataset):
        intensity = map_intensity(dataset, 1981, ['robbery'])
        intensity.loc[0, 'lat'] = float('nan')
        assert len(_markers(create_crime_map(intensity))) == 2

    def test_empty_intensity_gives_bare_map(self):
        empty = pd.DataFrame(columns=['city', 'lat', 'lon', 'marker_size', 'html_label'])
        assert _markers(create_crime_map(empty)) == []


class TestCityLineChart:
    def test_one_trace_per_series(self, dataset):
        fig = create_city_line_chart(city_series(dataset, 'Atlanta, GA', ['homicide']))
        assert isinstance(fig, go.Figure)
        assert [trace.name for trace in fig.data] == ['Total Violent Crimes', 'Homicide']
        assert fig.data[0].line.color == config.SERIES_COLORS['Total Violent Crimes']

    def test_population_overlay(self, dataset):
        fig = create_city_line_chart(
            city_series(dataset, 'Atlanta, GA', []),
            population_series(dataset, 'Atlanta, GA'),
        )
        assert isinstance(fig.data[0], go.Bar)
        assert list(fig.data[0].y) == [425.022, 430.0]

    def test_empty_series(self, dataset):
        fig = create_city_line_chart(city_series(dataset, 'Springfield', []))
        assert len(fig.data) == 0
