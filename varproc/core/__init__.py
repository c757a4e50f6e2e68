"""Variable processors and the machinery they share."""

from .category import CategorySelector, VarFlag
from .density import DensityModel, HistogramDensity, SigBkg, SplineDensity, build_density
from .likelihood import LikelihoodStage
from .normalize import NormalizeStage
from .processor import StageConfigurationError, VarProcessor

__all__ = [
    "CategorySelector",
    "VarFlag",
    "DensityModel",
    "HistogramDensity",
    "SplineDensity",
    "SigBkg",
    "build_density",
    "LikelihoodStage",
    "NormalizeStage",
    "StageConfigurationError",
    "VarProcessor",
]
