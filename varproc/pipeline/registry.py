"""Build variable processors from their stored calibration by name."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from varproc.calib.calibration import (
    LikelihoodCalibration,
    NormalizeCalibration,
    load_calibration,
)
from varproc.core.likelihood import LikelihoodStage
from varproc.core.normalize import NormalizeStage
from varproc.core.processor import VarProcessor

StageFactory = Callable[[Mapping[str, Any]], VarProcessor]


def _build_likelihood(data: Mapping[str, Any]) -> VarProcessor:
    return LikelihoodStage.from_calibration(LikelihoodCalibration.from_mapping(data))


def _build_normalize(data: Mapping[str, Any]) -> VarProcessor:
    return NormalizeStage.from_calibration(NormalizeCalibration.from_mapping(data))


STAGE_FACTORIES: Dict[str, StageFactory] = {
    LikelihoodStage.name: _build_likelihood,
    NormalizeStage.name: _build_normalize,
}


def build_stage(name: str, calibration: Mapping[str, Any]) -> VarProcessor:
    factory = STAGE_FACTORIES.get(name)
    if factory is None:
        raise RuntimeError(f"Unsupported variable processor: {name}")
    return factory(calibration)


def build_stages_from_yaml(yaml_path: str | None = None) -> Dict[str, VarProcessor]:
    """Build every processor named at the top level of a calibration file."""

    data = load_calibration(yaml_path)
    return {name: build_stage(name, section or {}) for name, section in data.items()}
