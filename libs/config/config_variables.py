# This file contains configuration variables for the application.
# ---------------------------------------------------------------
from pathlib import Path


# Constants for formats
# ---------------------------------------------------------------
DEFAULT_FONT = "DejaVu Sans"
DATE_FORMAT = "%d-%m-%y"
EVENT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Paths
# ---------------------------------------------------------------
BASE_DIR = Path(__file__).parent.parent.parent

LOG_DIR = BASE_DIR / "logs"

# Fuente del catálogo (Laboratorio de Sismología, Universidad de Atenas)
# ---------------------------------------------------------------
CATALOG_URL = (
    "http://www.geophysics.geol.uoa.gr/stations/gmaps3/event_output2j.php?type=cat"
)
CATALOG_ENCODING = "utf-8"
TIMEOUT_API_REQUEST = 120  # segundos

# Esquema del catálogo en texto plano (orden fijo)
CATALOG_COLUMNS = [
    "Year",
    "Month",
    "Day",
    "Hour",
    "Minute",
    "Second",
    "Latitude",
    "Longitude",
    "Depth",
    "Magnitude",
    "RMS",
    "dx",
    "dy",
    "dz",
    "Np",
    "Na",
    "Gap",
]
REQUIRED_NUMERIC_COLUMNS = [
    "Year",
    "Month",
    "Day",
    "Latitude",
    "Longitude",
    "Depth",
    "Magnitude",
]
EVENT_TIME_COLUMNS = ["Year", "Month", "Day", "Hour", "Minute", "Second"]

# Filtros de la región (Amorgos y Santorini)
# ---------------------------------------------------------------
DATE_FILTER = {"year": 2025, "min_month": 2}
BOUNDING_BOX = {
    "min_lat": 35.5,
    "max_lat": 37.2,
    "min_lon": 24.8,
    "max_lon": 26.5,
}
MAP_EXTENT = [
    BOUNDING_BOX["min_lon"],
    BOUNDING_BOX["max_lon"],
    BOUNDING_BOX["min_lat"],
    BOUNDING_BOX["max_lat"],
]

# Categorías de magnitud: (límite inferior, límite superior, etiqueta, color)
# ---------------------------------------------------------------
MAGNITUDE_BINS = [
    (1.0, 2.0, "Micro (1.0–1.9)", "#ADD8E6"),
    (2.0, 3.0, "Minor (2.0–2.9)", "#00CED1"),
    (3.0, 4.0, "Slight (3.0–3.9)", "#FFD700"),
    (4.0, 5.0, "Light (4.0–4.9)", "#FF8C00"),
    (5.0, 6.0, "Moderate (5.0–5.9)", "#B22222"),
]
MAGNITUDE_COLORS = {label: color for _, _, label, color in MAGNITUDE_BINS}
UNCATEGORIZED_COLOR = "#7F7F7F"

# Estilos de los gráficos
# ---------------------------------------------------------------
MARKER_SIZE_RANGE = (3, 12)  # diámetro en puntos
SIZE_LEGEND_BREAKS = [2, 3, 4, 5]
SIZE_LEGEND_LABELS = ["2.0", "3.0", "4.0", "5.0"]
POINT_ALPHA = 0.8
STRONGEST_ALPHA = 1.0
TIMELINE_MARKER_SIZE = 6  # diámetro en puntos
LOWESS_FRACTION = 0.75
CONFIDENCE_Z = 1.96
MIN_RECORDS_FOR_TREND = 5

BASEMAP_FILL = "lightgray"
BASEMAP_EDGE = "white"
BASEMAP_SCALE = "50m"  # resolución media de Natural Earth

MAP_TITLE = "Earthquake activity (From Feb 1, 2025)"
TIMELINE_TITLE = "Earthquake Timeline (From Feb 1, 2025)"

# Salidas
# ---------------------------------------------------------------
OUTPUT_MAP = "earthquake_map"
OUTPUT_TIMELINE = "earthquake_timeline"
OUTPUT_COMBINED = "earthquake_combined"
OUTPUT_FORMATS = ["png"]
OUTPUT_DPI = 300

MAP_FIGSIZE = (10, 9)
TIMELINE_FIGSIZE = (12, 7)
COMBINED_FIGSIZE = (22, 9)
