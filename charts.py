"""
Map and chart builders for the dashboard
"""
import folium
import pandas as pd
import plotly.graph_objects as go
from folium import CircleMarker, Tooltip
from typing import Optional

import config


# --- MAP ---
def create_crime_map(intensity: pd.DataFrame) -> folium.Map:
    """Circle marker per city, sized by the selected crime rates."""
    m = folium.Map(location=[config.DEFAULT_LAT, config.DEFAULT_LON], zoom_start=config.DEFAULT_ZOOM)

    plot_df = intensity.dropna(subset=["lat", "lon"])
    for _, row in plot_df.iterrows():
        CircleMarker(
            location=[row["lat"], row["lon"]],
            radius=float(row["marker_size"]),
            color=config.MARKER_COLOR,
            stroke=False,
            fill=True,
            fill_color=config.MARKER_COLOR,
            fill_opacity=config.MARKER_FILL_OPACITY,
            tooltip=Tooltip(row["html_label"], sticky=True)
        ).add_to(m)

    return m


# --- LINE CHART ---
def create_city_line_chart(series: pd.DataFrame, population: Optional[pd.DataFrame] = None) -> go.Figure:
    """
    One line per crime series, with optional population bars (thousands)
    drawn behind the lines.
    """
    fig = go.Figure()

    if population is not None and not population.empty:
        fig.add_trace(go.Bar(
            x=population["year"],
            y=population["population_k"],
            name="Population (thousands)",
            marker_color=config.POPULATION_COLOR,
        ))

    for label in series["series"].unique():
        line = series[series["series"] == label]
        fig.add_trace(go.Scatter(
            x=line["year"],
            y=line["value"],
            mode="lines",
            name=label,
            line={"color": config.SERIES_COLORS.get(label), "width": 1.5},
        ))

    fig.update_layout(
        template="plotly_white",
        height=450,
        legend_title_text="",
        xaxis={
            "title": "Year",
            "range": [config.MIN_YEAR - 0.5, config.MAX_YEAR + 1.5],
            "tickmode": "linear",
            "tick0": config.MIN_YEAR,
            "dtick": 5,
        },
        yaxis={"title": "Crime Rate per 100k People"},
    )
    return fig
