"""Base class for calibrated variable processors."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .category import CategorySelector, VarFlag

logger = logging.getLogger(__name__)

Event = Sequence[Sequence[float]]


class StageConfigurationError(RuntimeError):
    """Raised by the host when a stage refuses the offered slot layout."""


class VarProcessor:
    """Configure once against the upstream slot count, then evaluate events.

    ``configure`` returns False when the calibration does not fit the
    offered layout; the stage then stays unconfigured and ``evaluate``
    raises instead of producing output.
    """

    name = "VarProcessor"

    def __init__(self, block_count: int, category_index: Optional[int] = None):
        self.selector = CategorySelector(category_index, block_count)
        self.configured = False
        self.input_flags: List[VarFlag] = []
        self.output_flags: List[VarFlag] = []

    @property
    def category_index(self) -> Optional[int]:
        return self.selector.category_index

    @property
    def category_count(self) -> int:
        return self.selector.category_count

    def _output_flags(self) -> List[VarFlag]:
        raise NotImplementedError

    def configure(self, n: int) -> bool:
        self.configured = False
        self.input_flags = []
        self.output_flags = []
        if not self.selector.configure(n):
            logger.warning(
                "%s cannot be configured: %d input slot(s) against %d calibration "
                "block(s) with category index %s",
                self.name,
                n,
                self.selector.block_count,
                self.category_index,
            )
            return False

        self.input_flags = self.selector.input_flags()
        self.output_flags = self._output_flags()
        self.configured = True
        logger.debug(
            "%s configured for %d slot(s) and %d category block(s)",
            self.name,
            n,
            self.category_count,
        )
        return True

    def _check_event(self, event: Event) -> None:
        if not self.configured:
            raise RuntimeError(f"{self.name} evaluated before successful configuration")
        if len(event) != self.selector.slots:
            raise ValueError(
                f"{self.name} expects {self.selector.slots} input slot(s), "
                f"got {len(event)}"
            )

    def evaluate(self, event: Event) -> Any:
        raise NotImplementedError
