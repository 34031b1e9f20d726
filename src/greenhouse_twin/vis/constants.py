"""Visualization constants: colors, chart styling and CSS tokens."""

# Greenhouse Theme
COLOR_TWIN_PRIMARY = "#06B6D4"
COLOR_TWIN_SUCCESS = "#4ADE80"
COLOR_TWIN_WARNING = "#FACC15"
COLOR_TWIN_ERROR = "#F87171"
COLOR_TWIN_YIELD = "#FBBF24"
COLOR_TWIN_PANEL_BG = "#F5F7FA"

# Health band -> colour used on the health score card
HEALTH_BAND_COLORS = {
    "good": COLOR_TWIN_SUCCESS,
    "fair": COLOR_TWIN_WARNING,
    "poor": COLOR_TWIN_ERROR,
}

# Chart Color Map
CHART_COLOR_MAP = {
    "cyan": COLOR_TWIN_PRIMARY,
    "green": COLOR_TWIN_SUCCESS,
    "amber": COLOR_TWIN_YIELD,
    "red": COLOR_TWIN_ERROR,
}
