from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..errors import InsufficientData, InvalidConfiguration
from .buffers import MeasurementBuffer


logger = logging.getLogger(__name__)

# Smallest window length the search considers.
MIN_WINDOW = 3


class PredictiveAlgorithm(ABC):
    """Predicts successive values of a time series."""

    @abstractmethod
    def predict_next(self) -> float:
        ...

    def predict_many(self, steps: int) -> List[float]:
        """Extend the series by ``steps`` forecasts, each fed into the next."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        return [self.predict_next() for _ in range(steps)]


class MovingAveragePredictor(PredictiveAlgorithm):
    """Moving-average forecaster that picks its own window length.

    On the first prediction every window length in
    ``[MIN_WINDOW, max_samples_used]`` is scored by the mean-squared error of
    its one-step-ahead forecasts over the whole history, and the lowest-error
    window (smallest on ties) is kept for the lifetime of the predictor.

    The predictor works on a private copy of the buffer taken at construction.
    Each forecast is appended to that copy, so consecutive calls continue the
    series. Instances are not thread-safe: callers must serialize
    ``predict_next()`` on a given instance.
    """

    def __init__(self, buffer: MeasurementBuffer, max_samples_used: int = MIN_WINDOW) -> None:
        if max_samples_used < MIN_WINDOW:
            raise InvalidConfiguration(
                f"max_samples_used must be >= {MIN_WINDOW}, got {max_samples_used}"
            )

        self._work_data: List[float] = list(buffer.snapshot())
        self.max_samples_used: int = min(max_samples_used, len(self._work_data))
        self._best_window: Optional[int] = None
        self._window_errors: Optional[Dict[int, float]] = None

        if len(self._work_data) <= max_samples_used:
            raise InsufficientData(
                f"window search up to {max_samples_used} samples needs at least "
                f"{max_samples_used + 1} measurements, got {len(self._work_data)}"
            )

    @property
    def work_data_count(self) -> int:
        return len(self._work_data)

    @property
    def best_window(self) -> Optional[int]:
        return self._best_window

    @property
    def window_errors(self) -> Optional[Dict[int, float]]:
        if self._window_errors is None:
            return None
        return dict(self._window_errors)

    def snapshot(self) -> List[float]:
        return list(self._work_data)

    def predict_next(self) -> float:
        if self._best_window is None:
            self._best_window = self._find_best_window()

        window = self._best_window
        prediction = sum(self._work_data[-window:]) / window
        self._work_data.append(prediction)
        logger.debug(
            "Moving-average forecast",
            extra={"window": window, "prediction": prediction, "work_data_count": len(self._work_data)},
        )
        return prediction

    def _find_best_window(self) -> int:
        errors: Dict[int, float] = {}
        for window in range(MIN_WINDOW, self.max_samples_used + 1):
            errors[window] = self._mean_squared_error(window)

        if not errors:
            raise InsufficientData(
                f"no window length in [{MIN_WINDOW}, {self.max_samples_used}] to evaluate"
            )

        # min() keeps the first minimum, i.e. the smallest window on ties
        best = min(errors, key=errors.__getitem__)
        self._window_errors = errors
        logger.info(
            "Selected moving-average window",
            extra={"window": best, "mse": errors[best], "candidates": len(errors)},
        )
        return best

    def _mean_squared_error(self, window: int) -> float:
        data = self._work_data
        positions = len(data) - window
        if positions <= 0:
            raise InsufficientData(
                f"window {window} needs more than {window} measurements, got {len(data)}"
            )

        total = 0.0
        for i in range(window, len(data)):
            forecast = sum(data[i - window : i]) / window
            total += (forecast - data[i]) ** 2
        return total / positions
