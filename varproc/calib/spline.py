"""Piecewise cubic spline through equidistant histogram bin contents."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from scipy.interpolate import PchipInterpolator

_MIN_AREA = 1e-9


class Spline:
    """Shape-preserving cubic spline over the unit interval.

    The ``n`` supplied points sit at ``x = i / (n - 1)``. PCHIP tangents keep
    the curve inside the range of neighbouring points, so non-negative bin
    contents give a non-negative curve and a monotone integral.

    ``area()`` is measured in units of segments, i.e. the integral over
    ``[0, 1]`` times the number of segments, so that
    ``eval(x) * number_of_entries() / area()`` approximates a density that
    integrates to one over the unit interval.
    """

    def __init__(self, values: Sequence[float]):
        points = np.asarray(values, dtype=float)
        if points.ndim != 1 or points.size == 0:
            raise ValueError("Spline needs at least one point")
        if not np.all(np.isfinite(points)):
            raise ValueError("Spline points must be finite")
        self._entries = int(points.size)

        if points.size == 1:
            self._constant = float(points[0])
            self._curve = None
            self._antiderivative = None
            self._total = self._constant
            self._area = self._constant
            return

        segments = points.size - 1
        knots = np.linspace(0.0, 1.0, points.size)

        self._constant = None
        self._curve = PchipInterpolator(knots, points, extrapolate=False)
        self._antiderivative = self._curve.antiderivative()
        self._total = float(self._antiderivative(1.0))
        self._area = self._total * segments

    def number_of_entries(self) -> int:
        return self._entries

    def area(self) -> float:
        return self._area

    def eval(self, x: float) -> float:
        """Interpolated value at ``x``; clamped to the end points outside [0, 1]."""

        if math.isnan(x):
            return 0.0
        if self._curve is None:
            return self._constant
        x = min(max(x, 0.0), 1.0)
        return float(self._curve(x))

    def integral(self, x: float) -> float:
        """Normalized cumulative integral from 0 to ``x``, in [0, 1]."""

        if math.isnan(x) or x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        if self._curve is None:
            return x
        if self._total < _MIN_AREA:
            return 0.0
        return min(1.0, max(0.0, float(self._antiderivative(x)) / self._total))
