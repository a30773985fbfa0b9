import os

# ────────────────────────────────────────────────
# Base directory
# ────────────────────────────────────────────────
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# ────────────────────────────────────────────────
# Paths
# ────────────────────────────────────────────────
MODEL_FILENAME = "bhousing.cbm"
MODEL_PATH = os.path.join(BASE_DIR, MODEL_FILENAME)
LOG_FILE = os.environ.get("HOUSE_PRICE_LOG_FILE") or None

# ────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────
LOGGER_NAME = "house_price"
LOG_LEVEL = os.environ.get("HOUSE_PRICE_LOG_LEVEL", "INFO")

# ────────────────────────────────────────────────
# Stepper bounds: (min, max, step, default)
# ────────────────────────────────────────────────
ROOMS_BOUNDS = (1, 9, 1, 6)
AGE_BOUNDS = (1, 100, 1, 70)

# ────────────────────────────────────────────────
# Screen copy
# ────────────────────────────────────────────────
PAGE_TITLE = "House Price Predictor"
HEADING = "House Requirements"
CALCULATE_LABEL = "Calculate Price"
DISMISS_LABEL = "OK"

SUCCESS_TITLE = "The price is…"
ERROR_TITLE = "Error"
ERROR_MESSAGE = "Sorry, there was a problem calculating the house price."


def model_path():
    """HOUSE_PRICE_MODEL_PATH if set, else the artifact next to app.py."""
    return os.environ.get("HOUSE_PRICE_MODEL_PATH", MODEL_PATH)
