import logging
from dataclasses import dataclass

import config
from housing_model import TARGET, load_model

logger = logging.getLogger(f"{config.LOGGER_NAME}.controller")


@dataclass(frozen=True)
class Stepper:
    """Bounds of an increment/decrement control."""
    minimum: int
    maximum: int
    step: int
    default: int

    def __post_init__(self):
        if self.minimum > self.maximum or self.step <= 0:
            raise ValueError(f"invalid stepper bounds: {self}")
        if not self.contains(self.default):
            raise ValueError(f"default {self.default} outside [{self.minimum}, {self.maximum}]")

    def contains(self, value):
        return self.minimum <= value <= self.maximum

    def increment(self, value):
        nxt = value + self.step
        return nxt if self.contains(nxt) else value

    def decrement(self, value):
        nxt = value - self.step
        return nxt if self.contains(nxt) else value


ROOMS_STEPPER = Stepper(*config.ROOMS_BOUNDS)
AGE_STEPPER = Stepper(*config.AGE_BOUNDS)


@dataclass
class AlertState:
    title: str = ""
    message: str = ""
    visible: bool = False


class PricePredictionController:
    """
    Holds the screen state and runs the prediction.

    The steppers keep rooms/age in bounds; the setters store whatever they get.
    """

    def __init__(self, model_loader=load_model,
                 rooms_stepper=ROOMS_STEPPER, age_stepper=AGE_STEPPER):
        self.model_loader = model_loader
        self.rooms_stepper = rooms_stepper
        self.age_stepper = age_stepper

        self.rooms = rooms_stepper.default
        self.age = age_stepper.default
        self.alert = AlertState()

    # Read-only views for the presentation layer
    @property
    def alert_title(self):
        return self.alert.title

    @property
    def alert_message(self):
        return self.alert.message

    @property
    def alert_visible(self):
        return self.alert.visible

    # ────────────────────────────────────────────────
    # Inputs
    # ────────────────────────────────────────────────
    def set_rooms(self, value):
        self.rooms = value

    def set_age(self, value):
        self.age = value

    def increment_rooms(self):
        self.set_rooms(self.rooms_stepper.increment(self.rooms))

    def decrement_rooms(self):
        self.set_rooms(self.rooms_stepper.decrement(self.rooms))

    def increment_age(self):
        self.set_age(self.age_stepper.increment(self.age))

    def decrement_age(self):
        self.set_age(self.age_stepper.decrement(self.age))

    # ────────────────────────────────────────────────
    # Prediction
    # ────────────────────────────────────────────────
    def calculate_price(self):
        try:
            model = self.model_loader()
            prediction = model.predict({"RM": float(self.rooms), "AGE": float(self.age)})
            message = str(float(prediction[TARGET]))
        except Exception:
            logger.exception("Price calculation failed for rooms=%s age=%s", self.rooms, self.age)
            self.alert = AlertState(config.ERROR_TITLE, config.ERROR_MESSAGE, True)
        else:
            logger.info("Predicted price %s for rooms=%s age=%s", message, self.rooms, self.age)
            self.alert = AlertState(config.SUCCESS_TITLE, message, True)
        return self.alert

    def dismiss_alert(self):
        self.alert.visible = False
