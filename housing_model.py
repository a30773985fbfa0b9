import logging
import math
import os

import numpy as np
import pandas as pd
from catboost import CatBoostRegressor

import config

logger = logging.getLogger(f"{config.LOGGER_NAME}.housing_model")

FEATURES = ("RM", "AGE")
TARGET = "PRICE"


class PredictionError(Exception):
    """The model could not produce a price for the given features."""


class ModelNotFoundError(PredictionError):
    """The bundled model artifact is missing."""


# ────────────────────────────────────────────────
# Prediction
# ────────────────────────────────────────────────
class HousingModel:
    """
    Thin wrapper around a trained regressor.

    predict({'RM': float, 'AGE': float}) -> {'PRICE': float}
    """

    def __init__(self, regressor):
        self.regressor = regressor

    def predict(self, features):
        input_data = pd.DataFrame([encode_features(features)], columns=list(FEATURES))

        try:
            prediction = self.regressor.predict(input_data)
            price = float(np.ravel(prediction)[0])
        except Exception as exc:
            raise PredictionError(f"model failed to predict: {exc}") from exc

        if not math.isfinite(price):
            raise PredictionError(f"model returned a non-finite price: {price}")

        logger.debug("Predicted %s=%s for %s", TARGET, price, features)
        return {TARGET: price}


def encode_features(features):
    """Check the feature mapping and coerce its values to float."""
    if not isinstance(features, dict):
        raise PredictionError("features must be a mapping of RM and AGE")

    missing = [name for name in FEATURES if name not in features]
    unexpected = [name for name in features if name not in FEATURES]
    if missing or unexpected:
        raise PredictionError(
            f"invalid feature names (missing={missing}, unexpected={unexpected})"
        )

    row = {}
    for name in FEATURES:
        value = features[name]
        if isinstance(value, bool):
            raise PredictionError(f"{name} must be a number, got {value!r}")
        try:
            value = float(value)
        except (TypeError, ValueError) as exc:
            raise PredictionError(f"{name} must be a number, got {value!r}") from exc
        if not math.isfinite(value):
            raise PredictionError(f"{name} must be finite, got {value!r}")
        row[name] = value
    return row


# ────────────────────────────────────────────────
# Loading
# ────────────────────────────────────────────────
def load_model(path=None):
    """
    Load the bundled CatBoost artifact.

    Raises ModelNotFoundError when the file is missing and PredictionError
    when CatBoost cannot read it.
    """
    path = path or config.model_path()

    if not os.path.exists(path):
        raise ModelNotFoundError(f"model not found at: {path}")

    regressor = CatBoostRegressor()
    try:
        regressor.load_model(path)
    except Exception as exc:
        raise PredictionError(f"could not load model from {path}: {exc}") from exc

    logger.info("Loaded model from %s", path)
    return HousingModel(regressor)
