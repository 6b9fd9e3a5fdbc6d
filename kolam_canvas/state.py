"""
Drawing-surface state and its transition function.

CanvasState is an immutable value; every host operation is an event and
``transition(state, event)`` returns the next state plus the committed path
set to report to the host (or None when nothing was completed). Rendering is
a projection of the state and never happens here.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from .recorder import PointerDown, PointerLeave, PointerMove, PointerUp, Recording, record
from .templates import generate

Point = Tuple[float, float]
Path = Tuple[Point, ...]


@dataclass(frozen=True)
class CanvasState:
    grid_size: int = 9
    dot_spacing: float = 40
    width: int = 400
    height: int = 400
    symmetry_enabled: bool = False
    committed_paths: Tuple[Path, ...] = field(default_factory=tuple)
    in_progress_path: Optional[Path] = None

    @property
    def recording(self) -> bool:
        return self.in_progress_path is not None

    def to_dict(self):
        return {
            "grid_size": self.grid_size,
            "dot_spacing": self.dot_spacing,
            "width": self.width,
            "height": self.height,
            "symmetry_enabled": self.symmetry_enabled,
            "committed_paths": [[list(p) for p in path] for path in self.committed_paths],
            "in_progress_path": (
                None if self.in_progress_path is None
                else [list(p) for p in self.in_progress_path]
            ),
        }


@dataclass(frozen=True)
class LoadTemplate:
    template_id: str


@dataclass(frozen=True)
class SetSymmetry:
    enabled: bool


@dataclass(frozen=True)
class Clear:
    pass


Event = Union[PointerDown, PointerMove, PointerUp, PointerLeave, LoadTemplate, SetSymmetry, Clear]


def transition(state: CanvasState, event: Event) -> Tuple[CanvasState, Optional[Tuple[Path, ...]]]:
    if isinstance(event, (PointerDown, PointerMove, PointerUp, PointerLeave)):
        recording = Recording(state.committed_paths, state.in_progress_path)
        recording, completed = record(recording, event)
        new_state = replace(
            state,
            committed_paths=recording.committed,
            in_progress_path=recording.current,
        )
        return new_state, completed

    if isinstance(event, LoadTemplate):
        # Destructive: prior freehand work and any open stroke are dropped
        paths = generate(event.template_id, state.width, state.height)
        new_state = replace(state, committed_paths=paths, in_progress_path=None)
        return new_state, paths

    if isinstance(event, SetSymmetry):
        return replace(state, symmetry_enabled=bool(event.enabled)), None

    if isinstance(event, Clear):
        return replace(state, committed_paths=(), in_progress_path=None), None

    raise TypeError(f"Unsupported canvas event: {event!r}")


__all__ = [
    "CanvasState",
    "Clear",
    "Event",
    "LoadTemplate",
    "SetSymmetry",
    "transition",
]
