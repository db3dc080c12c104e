# Configuration settings for the US Violent Crime Explorer App

# Data File
DATA_FILE = "crime_lat_long.csv"

REQUIRED_COLUMNS = [
    "city", "year", "lat", "lon", "total_pop", "violent_per_100k",
    "homs_per_100k", "rape_per_100k", "rob_per_100k", "agg_ass_per_100k",
]

# Year Slider
MIN_YEAR = 1975
MAX_YEAR = 2014
DEFAULT_YEAR = 2000
ANIMATION_INTERVAL = 0.7  # seconds between frames when playing

# Crime Categories (key -> CSV column / display label)
CRIME_COLUMNS = {
    "homicide": "homs_per_100k",
    "rape": "rape_per_100k",
    "robbery": "rob_per_100k",
    "assault": "agg_ass_per_100k",
}
CRIME_LABELS = {
    "homicide": "Homicide",
    "rape": "Rape",
    "robbery": "Robbery",
    "assault": "Aggravated Assault",
}
CRIME_CATEGORIES = list(CRIME_COLUMNS.keys())

TOTAL_COLUMN = "violent_per_100k"
TOTAL_LABEL = "Total Violent Crimes"

SERIES_COLORS = {
    "Total Violent Crimes": "#e6194b",
    "Homicide": "#fc8d62",
    "Rape": "#4363d8",
    "Robbery": "#e78ac3",
    "Aggravated Assault": "#a6d854",
}
POPULATION_COLOR = "rgba(198, 226, 255, 0.5)"  # slategray1 at half opacity

# Map Settings - US Center
DEFAULT_LAT = 39.8
DEFAULT_LON = -98.6
DEFAULT_ZOOM = 4
MARKER_SCALE = 0.008
MARKER_COLOR = "blue"
MARKER_FILL_OPACITY = 0.25

# Comparison Table
PAGE_SIZES = [5, 10, 15]
DEFAULT_PAGE_SIZE = 5
