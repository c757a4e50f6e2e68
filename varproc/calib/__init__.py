"""Calibration data and density primitives."""

from .calibration import (
    LikelihoodCalibration,
    NormalizeCalibration,
    SigBkgCalibration,
    load_calibration,
)
from .histogram import Histogram, Range
from .spline import Spline

__all__ = [
    "Histogram",
    "Range",
    "Spline",
    "SigBkgCalibration",
    "LikelihoodCalibration",
    "NormalizeCalibration",
    "load_calibration",
]
