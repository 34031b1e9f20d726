"""Default parameter values for the Greenhouse Digital Twin.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas.  They live here (in the schemas layer) rather than in
`core/` so that `schemas` does not depend on `core`.

Units: temperature in °C, humidity / light / water level in percent,
CO2 in ppm, height in cm, yield in kg per plant.
"""

# =============================================================================
# CONTROL PARAMETERS
# =============================================================================
# Each parameter has a hard input range (what the controller may set) and
# a default.  The input ranges match the dashboard sliders; the defaults
# sit inside every optimal band so a fresh twin scores 100.

# --- Temperature (°C) ---
DEFAULT_TEMPERATURE = 22.0
TEMPERATURE_MIN = 10.0
TEMPERATURE_MAX = 35.0
TEMPERATURE_STEP = 0.5

# --- Relative humidity (%) ---
DEFAULT_HUMIDITY = 65.0
HUMIDITY_MIN = 30.0
HUMIDITY_MAX = 95.0
HUMIDITY_STEP = 1.0

# --- Light intensity (% of max) ---
DEFAULT_LIGHT = 75.0
LIGHT_MIN = 0.0
LIGHT_MAX = 100.0
LIGHT_STEP = 5.0

# --- CO2 concentration (ppm) ---
DEFAULT_CO2 = 400.0
CO2_MIN = 300.0
CO2_MAX = 600.0
CO2_STEP = 10.0

# --- Water level (% of capacity) ---
DEFAULT_WATER_LEVEL = 70.0
WATER_LEVEL_MIN = 0.0
WATER_LEVEL_MAX = 100.0
WATER_LEVEL_STEP = 5.0

# =============================================================================
# OPTIMAL RANGES
# =============================================================================
# (min, max, optimal) per parameter.  Penalties in the health score are
# measured from `optimal`, but only once a value leaves [min, max].
# Light and water level are only penalised below `min`.
OPTIMAL_TEMPERATURE = (18.0, 24.0, 21.0)
OPTIMAL_HUMIDITY = (60.0, 75.0, 68.0)
OPTIMAL_LIGHT = (60.0, 90.0, 75.0)
OPTIMAL_CO2 = (350.0, 450.0, 400.0)
OPTIMAL_WATER_LEVEL = (60.0, 80.0, 70.0)

# =============================================================================
# GROWTH MODEL
# =============================================================================
DEFAULT_HORIZON_DAYS = 90  # full potato growth cycle
DEFAULT_MAX_YIELD_KG = 25.0  # kg per plant at maturity with full health
DEFAULT_SEED_HEIGHT_CM = 5.0  # height on day 0
DEFAULT_MAX_GROWTH_CM = 45.0  # height gained over the horizon at full health
SEED_HEALTH = 100.0
SEED_YIELD_KG = 0.0

# Tubers start forming around day 30 and finish with the horizon.
TUBER_ONSET_DAY = 30

# =============================================================================
# PLAYBACK
# =============================================================================
SPEED_OPTIONS = (1, 2, 5, 10)  # simulated days per wall-clock second
DEFAULT_SPEED_MULTIPLIER = 1

# =============================================================================
# ECONOMICS (dashboard estimate only)
# =============================================================================
DEFAULT_PLANT_COUNT = 30
DEFAULT_PRICE_PER_KG = 2.5  # USD

# =============================================================================
# HEALTH BANDS
# =============================================================================
HEALTH_GOOD_THRESHOLD = 80.0
HEALTH_FAIR_THRESHOLD = 60.0
