"""Fakes shared by the test modules."""

from __future__ import annotations

import numpy as np


class StubRegressor:
    """Records the frames it sees and returns a fixed prediction."""

    def __init__(self, value: float = 21.5, error: Exception | None = None) -> None:
        self.value = value
        self.error = error
        self.frames = []

    def predict(self, frame):
        self.frames.append(frame)
        if self.error is not None:
            raise self.error
        return np.array([self.value])


class FakeModel:
    def __init__(self, price: float = 21.5, error: Exception | None = None) -> None:
        self.price = price
        self.error = error
        self.calls: list[dict[str, float]] = []

    def predict(self, features: dict[str, float]) -> dict[str, float]:
        self.calls.append(features)
        if self.error is not None:
            raise self.error
        return {"PRICE": self.price}


class FakeLoader:
    """Callable model loader that counts how often a model is requested."""

    def __init__(self, model: FakeModel | None = None, error: Exception | None = None) -> None:
        self.model = model or FakeModel()
        self.error = error
        self.loads = 0

    def __call__(self) -> FakeModel:
        self.loads += 1
        if self.error is not None:
            raise self.error
        return self.model
