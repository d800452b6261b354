"""
Exceptions raised by buffers, predictors and configuration loading.
"""

from __future__ import annotations


class PredictorError(Exception):
    """Base exception for prediction failures."""


class InvalidConfiguration(PredictorError, ValueError):
    """Raised when a predictor or config file carries an unusable setting."""


class InsufficientData(PredictorError, ValueError):
    """Raised when the history is too short to score any window length."""


class CapacityExceeded(PredictorError, IndexError):
    """Raised when appending to a measurement buffer that is already full."""
