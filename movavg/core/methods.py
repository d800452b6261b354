from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from ..errors import InvalidConfiguration
from ..config import PredictorConfig
from .buffers import MeasurementBuffer
from .predict import MovingAveragePredictor, PredictiveAlgorithm


PredictorFactory = Callable[[MeasurementBuffer, int], PredictiveAlgorithm]


@dataclass
class MethodSpec:
    key: str
    build: PredictorFactory
    label: str


def build_registry() -> Dict[str, MethodSpec]:
    return {
        "moving_average": MethodSpec(
            key="moving_average",
            build=MovingAveragePredictor,
            label="Moving average (self-tuned window)",
        ),
    }


def create_predictor(buffer: MeasurementBuffer, config: PredictorConfig) -> PredictiveAlgorithm:
    """Build the algorithm named by ``config.method`` over ``buffer``."""
    registry = build_registry()
    spec = registry.get(config.method)
    if spec is None:
        raise InvalidConfiguration(
            f"unknown method {config.method!r}; expected one of {sorted(registry)}"
        )
    return spec.build(buffer, config.max_samples_used)
