"""Calibrated one-dimensional histogram with underflow and overflow bins."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import numpy as np


@dataclass(frozen=True)
class Range:
    """Affine mapping from raw values onto the unit interval."""

    min: float
    width: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and math.isfinite(self.width)):
            raise ValueError(f"Range width must be positive, got {self.width}")

    @property
    def max(self) -> float:
        return self.min + self.width

    def normalize(self, value: float) -> float:
        return (value - self.min) / self.width


@dataclass(frozen=True, eq=False)
class Histogram:
    """Uniformly binned histogram.

    ``values[0]`` and ``values[-1]`` hold the underflow and overflow
    accumulators; the interior entries are the calibrated bins spanning
    ``range``.
    """

    range: Range
    values: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=float)
        if values.ndim != 1 or values.size < 3:
            raise ValueError(
                "Histogram needs underflow, overflow and at least one interior bin"
            )
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @classmethod
    def from_values(
        cls, min_value: float, width: float, values: Sequence[float]
    ) -> "Histogram":
        return cls(Range(float(min_value), float(width)), np.asarray(values, dtype=float))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Histogram":
        """Build a histogram from ``{min, width, values}`` (``max`` may replace ``width``)."""

        min_value = float(data["min"])
        if "width" in data:
            width = float(data["width"])
        else:
            width = float(data["max"]) - min_value
        return cls.from_values(min_value, width, data["values"])

    def interior(self) -> np.ndarray:
        return self.values[1:-1]

    def number_of_bins(self) -> int:
        return int(self.values.size - 2)

    def normalization(self) -> float:
        return float(self.interior().sum())

    def find_bin(self, value: float) -> int:
        """Return the index into ``values``; 0 and ``n + 1`` are under/overflow."""

        if math.isnan(value):
            return 0
        position = self.range.normalize(value)
        if position < 0.0:
            return 0
        if position >= 1.0:
            return self.number_of_bins() + 1
        return 1 + int(position * self.number_of_bins())

    def value(self, value: float) -> float:
        return float(self.values[self.find_bin(value)])

    def normalized_value(self, value: float) -> float:
        total = self.normalization()
        if total <= 0.0:
            return 0.0
        return self.value(value) / total
