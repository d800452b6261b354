"""Self-tuning moving-average predictor for numeric time series.

A predictor scores every candidate window length by the mean-squared error of
its one-step-ahead forecasts over the available history, keeps the best one,
and extends the series one forecast at a time.
"""

from .core.buffers import MeasurementBuffer
from .core.methods import create_predictor
from .core.predict import MovingAveragePredictor, PredictiveAlgorithm
from .errors import CapacityExceeded, InsufficientData, InvalidConfiguration, PredictorError

__all__ = [
    "MeasurementBuffer",
    "MovingAveragePredictor",
    "PredictiveAlgorithm",
    "create_predictor",
    "CapacityExceeded",
    "InsufficientData",
    "InvalidConfiguration",
    "PredictorError",
]
