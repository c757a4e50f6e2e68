"""Drive a configured processor over a batch of events."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from varproc.core.processor import Event, StageConfigurationError, VarProcessor


def configure_or_raise(stage: VarProcessor, n_slots: int) -> VarProcessor:
    if not stage.configure(n_slots):
        raise StageConfigurationError(
            f"{stage.name} rejected a layout of {n_slots} input slot(s)"
        )
    return stage


def evaluate_events(
    stage: VarProcessor,
    events: Iterable[Event],
    *,
    n_slots: Optional[int] = None,
) -> List[Any]:
    """Evaluate every event, configuring the stage first when needed.

    Without ``n_slots`` an unconfigured stage is configured against the slot
    count of the first event.
    """

    results: List[Any] = []
    for event in events:
        if not stage.configured or (
            n_slots is not None and stage.selector.slots != n_slots
        ):
            configure_or_raise(stage, n_slots if n_slots is not None else len(event))
        results.append(stage.evaluate(event))
    return results


def summarize(results: Iterable[Optional[float]]) -> Dict[str, Any]:
    """Count present and absent discriminants and average the present ones."""

    present: List[float] = []
    absent = 0
    for value in results:
        if value is None:
            absent += 1
        else:
            present.append(value)

    mean = sum(present) / len(present) if present else None
    return {
        "events": len(present) + absent,
        "present": len(present),
        "absent": absent,
        "mean": mean,
    }
