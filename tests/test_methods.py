from __future__ import annotations

import pytest

from movavg.config import PredictorConfig
from movavg.core.buffers import MeasurementBuffer
from movavg.core.methods import build_registry, create_predictor
from movavg.core.predict import MovingAveragePredictor
from movavg.errors import InsufficientData, InvalidConfiguration


def test_registry_contains_moving_average() -> None:
    registry = build_registry()
    assert "moving_average" in registry
    assert registry["moving_average"].build is MovingAveragePredictor


def test_create_predictor_from_config() -> None:
    buf = MeasurementBuffer.from_sequence([1, 2, 3, 4, 5, 6, 7, 8])
    pred = create_predictor(buf, PredictorConfig(max_samples_used=5))
    assert isinstance(pred, MovingAveragePredictor)
    assert pred.predict_next() == 7.0


def test_create_predictor_unknown_method() -> None:
    buf = MeasurementBuffer.from_sequence([1, 2, 3, 4])
    with pytest.raises(InvalidConfiguration):
        create_predictor(buf, PredictorConfig(method="arima"))


def test_create_predictor_propagates_insufficient_data() -> None:
    buf = MeasurementBuffer.from_sequence([1, 2, 3])
    with pytest.raises(InsufficientData):
        create_predictor(buf, PredictorConfig())
