"""Density models built from calibrated histograms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from varproc.calib.calibration import SigBkgCalibration
from varproc.calib.histogram import Histogram
from varproc.calib.spline import Spline


class DensityModel(Protocol):
    """Protocol describing a calibrated one-dimensional density."""

    def density(self, value: float) -> float:
        """Return the per-entry density estimate at ``value``."""


class SplineDensity:
    """Spline fitted to the interior bins of a histogram."""

    def __init__(self, histogram: Histogram):
        self.min = histogram.range.min
        self.width = histogram.range.width
        self.spline = Spline(histogram.interior())

    def density(self, value: float) -> float:
        area = self.spline.area()
        if area <= 0.0:
            return 0.0
        value = (value - self.min) / self.width
        return self.spline.eval(value) * self.spline.number_of_entries() / area

    def cumulative(self, value: float) -> float:
        return self.spline.integral((value - self.min) / self.width)


class HistogramDensity:
    """Raw histogram lookup, rescaled to the spline's per-entry scale."""

    def __init__(self, histogram: Histogram):
        self.histogram = histogram

    def density(self, value: float) -> float:
        return self.histogram.normalized_value(value) * self.histogram.number_of_bins()


def build_density(histogram: Histogram, use_splines: bool = True) -> DensityModel:
    if use_splines:
        return SplineDensity(histogram)
    return HistogramDensity(histogram)


@dataclass(frozen=True)
class SigBkg:
    signal: DensityModel
    background: DensityModel

    @classmethod
    def from_calibration(cls, calib: SigBkgCalibration) -> "SigBkg":
        return cls(
            signal=build_density(calib.signal, calib.use_splines),
            background=build_density(calib.background, calib.use_splines),
        )
