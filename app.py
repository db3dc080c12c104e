import time

import streamlit as st
from streamlit_folium import st_folium

import charts
import config
import data_manager
import projections
from exceptions import DataLoadError
from logger_config import setup_logger

logger = setup_logger("crime_explorer")

# --- APP CONFIG ---
st.set_page_config(page_title="Crime Data", layout="wide")
st.markdown("<h1 style='text-align: center;'>Violent Crime Rates in the United States</h1>", unsafe_allow_html=True)


# --- DATA LOADING ---
try:
    dataset = data_manager.load_dataset(config.DATA_FILE)
except DataLoadError as e:
    logger.error(f"Startup failed: {e}")
    st.error(f"Could not load crime data: {e}")
    st.stop()


def category_checkboxes(prefix: str):
    """One checkbox per crime type, all ticked by default."""
    st.markdown("**Select a Crime**")
    return [
        key for key in config.CRIME_CATEGORIES
        if st.checkbox(config.CRIME_LABELS[key], value=True, key=f"{prefix}_{key}")
    ]


# --- SELECTION STATE ---
if "year_input" not in st.session_state:
    st.session_state.year_input = config.DEFAULT_YEAR

# Advance the slider before it is drawn; widget state is frozen afterwards
if st.session_state.get("playing") and st.session_state.pop("advance_year", False):
    st.session_state.year_input = projections.next_year(st.session_state.year_input)

tab_map, tab_city, tab_help = st.tabs(["Map", "Single City", "Help"])

with tab_map:
    controls, main = st.columns([1, 3])
    with controls:
        year = st.slider("Select a year", config.MIN_YEAR, config.MAX_YEAR, step=1, key="year_input")
        st.checkbox("▶ Play through years", value=False, key="playing")
        map_crimes = category_checkboxes("map")

    with main:
        intensity = projections.map_intensity(dataset, year, map_crimes)
        if intensity.empty:
            st.info(f"No cities reported data for {year}.")
        m = charts.create_crime_map(intensity)
        st_folium(m, width=900, height=600, returned_objects=[], key="crime_map")

with tab_city:
    controls, main = st.columns([1, 3])
    with controls:
        cities = dataset.cities()
        city = st.selectbox("Select a city", cities, index=0)
        city_crimes = category_checkboxes("city")
        show_population = st.checkbox("Show population", value=False)

    with main:
        series = projections.city_series(dataset, city, city_crimes)
        population = projections.population_series(dataset, city) if show_population else None
        fig = charts.create_city_line_chart(series, population)
        st.plotly_chart(fig, use_container_width=True)

        st.divider()
        st.markdown("<h4 style='text-align: center;'>Comparisons from the National Average and City Safety Ranking</h4>", unsafe_allow_html=True)

        table = projections.format_comparison_table(projections.comparison_table(dataset, city))

        col_size, col_page = st.columns(2)
        with col_size:
            page_size = st.selectbox(
                "Rows per page",
                config.PAGE_SIZES,
                index=config.PAGE_SIZES.index(config.DEFAULT_PAGE_SIZE),
            )
        _, total_pages = projections.paginate(table, 1, page_size)
        with col_page:
            page = st.number_input("Page", min_value=1, max_value=total_pages, value=1, step=1, key=f"page_{city}_{page_size}")

        page_df, _ = projections.paginate(table, page, page_size)
        st.dataframe(page_df, use_container_width=True)
        st.caption(f"Page {int(page)} of {total_pages} ({len(table)} years)")

with tab_help:
    _, col_text, _ = st.columns([1, 2, 1])
    with col_text:
        st.markdown(
            "This app allows you to compare violent crime rates from 1975 to 2014 for various cities "
            "across the United States. The data has been sourced from The Marshall Project and contains "
            "population data and violent crime rates for homicide, rape, robbery, and aggravated assault. "
            "With the different tabs you are able to compare national and municipal level data."
        )
        st.divider()
        st.markdown("#### Map")
        st.markdown(
            "Use the slider to select a single year, or tick *Play through years* to step through every "
            "year in a loop. Each crime type can be selected individually by ticking its checkbox. When "
            "several are selected their rates are combined; the default has all crimes selected, which "
            "shows the total violent crime rate. Hover over a circle to see the city's figures."
        )
        st.divider()
        st.markdown("#### Single City")
        st.markdown(
            "Select a city from the drop-down menu and control which lines are drawn with the crime "
            "checkboxes; the total violent crime line is always shown. The table displays the difference "
            f"from the national average, calculated from this data set, and a safety ranking out of "
            f"{len(dataset.cities())} cities based on the total crime rate for that year (1 = safest)."
        )

# --- AUTOPLAY ---
if st.session_state.get("playing"):
    time.sleep(config.ANIMATION_INTERVAL)
    st.session_state.advance_year = True
    st.rerun()
