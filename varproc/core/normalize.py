"""Equalize variables through their calibrated cumulative distributions."""

from __future__ import annotations

from typing import List, Optional, Sequence

from varproc.calib.calibration import NormalizeCalibration

from .category import VarFlag
from .density import SplineDensity
from .processor import Event, VarProcessor


class NormalizeStage(VarProcessor):
    """Map each of the n values of every input variable onto [0, 1].

    The value is first scaled by the calibration range, then passed through
    the integral of the spline fitted to the variable's distribution.
    """

    name = "ProcNormalize"

    def __init__(
        self,
        maps: Sequence[SplineDensity],
        category_index: Optional[int] = None,
    ):
        super().__init__(len(maps), category_index)
        self.maps = tuple(maps)

    @classmethod
    def from_calibration(cls, calib: NormalizeCalibration) -> "NormalizeStage":
        return cls(
            [SplineDensity(histogram) for histogram in calib.distr],
            category_index=calib.category_index,
        )

    def _output_flags(self) -> List[VarFlag]:
        return [VarFlag.ALL] * self.selector.variables

    def evaluate(self, event: Event) -> List[Optional[List[float]]]:
        self._check_event(event)
        block = self.selector.select(event)
        if block is None:
            return [None] * self.selector.variables
        start, stop = block

        slots = self.selector.variable_slots(event)
        return [
            [distribution.cumulative(value) for value in values]
            for distribution, values in zip(self.maps[start:stop], slots)
        ]
