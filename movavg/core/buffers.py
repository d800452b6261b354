from __future__ import annotations

from typing import Iterable, List

from ..errors import CapacityExceeded


class MeasurementBuffer:
    """Append-only buffer of real-valued measurements with a fixed capacity.

    Storage is allocated up front; slots at or beyond ``count()`` are unused.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity: int = capacity
        self._measurements: List[float] = [0.0] * capacity
        self._count: int = 0

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> "MeasurementBuffer":
        items = list(values)
        buffer = cls(len(items))
        for value in items:
            buffer.append(value)
        return buffer

    def append(self, value: float) -> None:
        if self._count >= self._capacity:
            raise CapacityExceeded(
                f"buffer is full ({self._capacity} measurements)"
            )
        self._measurements[self._count] = float(value)
        self._count += 1

    def count(self) -> int:
        return self._count

    def capacity(self) -> int:
        return self._capacity

    def raw_values(self) -> List[float]:
        """Underlying storage, including unused slots past ``count()``."""
        return self._measurements

    def snapshot(self) -> List[float]:
        return self._measurements[: self._count]
