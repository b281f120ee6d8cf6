from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

from .errors import PauseRequested, StaleStateError
from .state_store import SENTINEL, MarkerStore

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single named, idempotent step."""

    name: str

    def run(self, ctx: Any) -> None:
        ...


class RunStatus(str, Enum):
    COMPLETED = "completed"
    PAUSED = "paused"
    FAILED = "failed"


@dataclass
class RunResult:
    status: RunStatus
    marker_before: str
    marker_after: str
    step: Optional[str] = None
    error: Optional[BaseException] = None
    message: Optional[str] = None
    ran_steps: List[str] = field(default_factory=list)
    skipped_steps: List[str] = field(default_factory=list)


def validate_steps(steps: Sequence[Step]) -> List[str]:
    names = [s.name for s in steps]
    if not names:
        raise ValueError("Step sequence is empty")
    seen: set[str] = set()
    for n in names:
        if n == SENTINEL:
            raise ValueError(f"Step name {SENTINEL!r} is reserved")
        if n in seen:
            raise ValueError(f"Duplicate step name: {n}")
        seen.add(n)
    return names


def resume_index(names: Sequence[str], marker: str) -> int:
    """Index of the first step to run for a given marker value."""
    if marker == SENTINEL:
        return 0
    try:
        return names.index(marker) + 1
    except ValueError:
        raise StaleStateError(marker, names) from None


def run_sequence(steps: Sequence[Step], store: MarkerStore, ctx: Any = None) -> RunResult:
    """Run steps in order, resuming after the persisted marker.

    The marker is saved after every successful step. A step raising
    PauseRequested stops the run without touching the marker, so the same step
    runs again next time. Any other exception stops the run, also leaving the
    marker where it was.
    """

    names = validate_steps(steps)

    marker = store.load()
    if marker is None:
        marker = SENTINEL
        store.save(marker)
    else:
        logger.info("Resuming from step: %s", marker)

    start = resume_index(names, marker)
    result = RunResult(
        status=RunStatus.COMPLETED,
        marker_before=marker,
        marker_after=marker,
        skipped_steps=names[:start],
    )

    for step in steps[start:]:
        logger.info("Running step %s", step.name)
        try:
            step.run(ctx)
        except PauseRequested as p:
            logger.warning("Step %s paused: %s", step.name, p.message)
            result.status = RunStatus.PAUSED
            result.step = step.name
            result.message = p.message
            return result
        except Exception as e:
            logger.exception("Step %s failed", step.name)
            result.status = RunStatus.FAILED
            result.step = step.name
            result.error = e
            return result

        store.save(step.name)
        result.marker_after = step.name
        result.ran_steps.append(step.name)
        logger.info("Progress saved: %s", step.name)

    return result
