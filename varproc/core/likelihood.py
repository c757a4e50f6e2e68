"""Likelihood estimator combining per-variable signal/background densities."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from varproc.calib.calibration import LikelihoodCalibration

from .category import VarFlag
from .density import SigBkg
from .processor import Event, VarProcessor

logger = logging.getLogger(__name__)

_MIN_PROBABILITY = 1e-30


def _underflow_threshold(factors: int) -> float:
    return math.exp(-6 * factors - 2)


class LikelihoodStage(VarProcessor):
    """Read 0..n values for m variables and output ``s / (s + b)``.

    Every value contributes its signal and background density as a factor to
    the respective product; values neither density can discriminate are
    skipped. The output is optional: no contributing values, or products
    that underflowed, yield None.
    """

    name = "ProcLikelihood"

    def __init__(
        self,
        pdfs: Sequence[SigBkg],
        category_index: Optional[int] = None,
        bias: float = 1.0,
    ):
        super().__init__(len(pdfs), category_index)
        self.pdfs = tuple(pdfs)
        self.bias = float(bias)

    @classmethod
    def from_calibration(cls, calib: LikelihoodCalibration) -> "LikelihoodStage":
        return cls(
            [SigBkg.from_calibration(entry) for entry in calib.pdfs],
            category_index=calib.category_index,
            bias=calib.bias,
        )

    def _output_flags(self) -> List[VarFlag]:
        return [VarFlag.OPTIONAL]

    def evaluate(self, event: Event) -> Optional[float]:
        self._check_event(event)
        block = self.selector.select(event)
        if block is None:
            return None
        start, stop = block

        contributing = 0
        signal = self.bias
        background = 1.0
        slots = self.selector.variable_slots(event)
        for pdf, values in zip(self.pdfs[start:stop], slots):
            for value in values:
                signal_prob = max(0.0, pdf.signal.density(value))
                background_prob = max(0.0, pdf.background.density(value))
                if signal_prob + background_prob < _MIN_PROBABILITY:
                    continue
                contributing += 1
                signal *= signal_prob
                background *= background_prob

        if not contributing:
            return None
        if signal + background < _underflow_threshold(contributing):
            logger.debug(
                "Likelihood product underflowed after %d factor(s)", contributing
            )
            return None
        return signal / (signal + background)
