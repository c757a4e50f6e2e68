"""Calibration records consumed by the variable processors."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import yaml

from varproc.calib.histogram import Histogram
from varproc.config import load_settings, resolve_value


def load_calibration(yaml_path: str | None = None) -> Dict[str, Any]:
    """Load calibration data from YAML."""

    path = resolve_value(yaml_path, load_settings().calibration_path)
    if not path:
        raise RuntimeError(
            "No calibration file given and VARPROC_CALIBRATION_YAML is not set"
        )
    with open(os.path.expanduser(path), "r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _category_index(data: Mapping[str, Any]) -> Optional[int]:
    value = data.get("category_index")
    if value is None:
        return None
    index = int(value)
    # negative indices mean "no category", as in the stored format
    return index if index >= 0 else None


@dataclass(frozen=True)
class SigBkgCalibration:
    signal: Histogram
    background: Histogram
    use_splines: bool = True

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], use_splines: bool = True
    ) -> "SigBkgCalibration":
        return cls(
            signal=Histogram.from_mapping(data["signal"]),
            background=Histogram.from_mapping(data["background"]),
            use_splines=bool(data.get("use_splines", use_splines)),
        )


@dataclass(frozen=True)
class LikelihoodCalibration:
    """Flat list of signal/background pairs, category-major."""

    pdfs: List[SigBkgCalibration] = field(default_factory=list)
    category_index: Optional[int] = None
    bias: float = 1.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LikelihoodCalibration":
        settings = load_settings()
        pdfs = [
            SigBkgCalibration.from_mapping(entry, use_splines=settings.use_splines)
            for entry in data.get("pdfs", [])
        ]
        return cls(
            pdfs=pdfs,
            category_index=_category_index(data),
            bias=float(data.get("bias", settings.default_bias)),
        )


@dataclass(frozen=True)
class NormalizeCalibration:
    """Flat list of per-variable distributions, category-major."""

    distr: List[Histogram] = field(default_factory=list)
    category_index: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NormalizeCalibration":
        return cls(
            distr=[Histogram.from_mapping(entry) for entry in data.get("distr", [])],
            category_index=_category_index(data),
        )
