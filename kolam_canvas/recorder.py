"""
Freehand stroke capture.

Two states: Idle (no open stroke) and Recording (``current`` is a path).
Pointer-down opens a stroke, pointer-move extends it, pointer-up / leave
closes it. Closed strokes with fewer than 2 points are dropped so a stray tap
never leaves a zero-length mark.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Path = Tuple[Point, ...]

MIN_STROKE_POINTS = 2


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class PointerLeave:
    pass


@dataclass(frozen=True)
class Recording:
    committed: Tuple[Path, ...] = ()
    current: Optional[Path] = None

    @property
    def idle(self) -> bool:
        return self.current is None


def record(rec: Recording, event) -> Tuple[Recording, Optional[Tuple[Path, ...]]]:
    """Apply one pointer event; returns the new recording and the committed
    set when a stroke was just completed."""
    if isinstance(event, PointerDown):
        # A press without a release restarts the stroke
        return Recording(rec.committed, ((event.x, event.y),)), None

    if rec.idle:
        return rec, None

    if isinstance(event, PointerMove):
        return Recording(rec.committed, rec.current + ((event.x, event.y),)), None

    if isinstance(event, (PointerUp, PointerLeave)):
        stroke = rec.current
        if len(stroke) < MIN_STROKE_POINTS:
            logger.debug("[PathRecorder] Dropped stroke with %d point(s)", len(stroke))
            return Recording(rec.committed, None), None
        committed = rec.committed + (tuple(stroke),)
        logger.debug("[PathRecorder] Committed stroke %d (%d points)", len(committed), len(stroke))
        return Recording(committed, None), committed

    raise TypeError(f"Unsupported pointer event: {event!r}")


__all__ = [
    "MIN_STROKE_POINTS",
    "PointerDown",
    "PointerLeave",
    "PointerMove",
    "PointerUp",
    "Recording",
    "record",
]
