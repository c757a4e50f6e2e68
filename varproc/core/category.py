"""Category selection shared by the variable processors."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class VarFlag(str, Enum):
    NONE = "none"
    ALL = "all"
    OPTIONAL = "optional"


class CategorySelector:
    """Negotiate slot layout and pick the calibration block for an event.

    The calibration list is flat and category-major: with ``m`` variables per
    category, block ``c`` covers entries ``[c * m, (c + 1) * m)``.
    """

    def __init__(self, category_index: Optional[int], block_count: int):
        self.category_index = category_index
        self.block_count = block_count
        self.slots = 0
        self.category_count = 1

    @property
    def variables(self) -> int:
        """Number of non-category slots per event."""

        if self.category_index is None:
            return self.slots
        return self.slots - 1

    def configure(self, n: int) -> bool:
        if self.category_index is None:
            if n != self.block_count:
                return False
            category_count = 1
        else:
            if n < self.category_index + 1 or n < 2:
                return False
            category_count, remainder = divmod(self.block_count, n - 1)
            if remainder:
                return False
        self.slots = n
        self.category_count = category_count
        return True

    def input_flags(self) -> List[VarFlag]:
        return [
            VarFlag.NONE if slot == self.category_index else VarFlag.ALL
            for slot in range(self.slots)
        ]

    def select(self, event: Sequence[Sequence[float]]) -> Optional[Tuple[int, int]]:
        """Return the ``(start, stop)`` calibration block, or None to reject."""

        if self.category_index is None:
            return 0, self.block_count

        values = event[self.category_index]
        if len(values) == 0 or not math.isfinite(values[0]):
            logger.debug("Rejecting event without a usable category value")
            return None
        category = int(values[0])
        if category < 0 or category >= self.category_count:
            logger.debug(
                "Category %d outside [0, %d), rejecting event",
                category,
                self.category_count,
            )
            return None
        start = category * self.variables
        return start, start + self.variables

    def variable_slots(
        self, event: Sequence[Sequence[float]]
    ) -> Iterator[Sequence[float]]:
        """Yield the value sequences of every non-category slot, in order."""

        for slot, values in enumerate(event):
            if slot != self.category_index:
                yield values
