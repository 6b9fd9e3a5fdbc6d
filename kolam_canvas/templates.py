"""
Procedural Kolam templates.

Each template maps a canvas size to a fixed tuple of paths centered on the
canvas midpoint. Generators are pure: the same id and canvas size always give
the same paths, so a template can seed a drawing surface or be checked in a
test without any rendering backend.

- square: 120 x 120 axis-aligned loop (5 points, first point repeated)
- flower: 6 triangular petals, each leaving and returning to the center
- star:   5-point star alternating outer/inner radius (11 points, closed)
"""

from math import cos, sin, pi
from typing import Callable, Dict, Tuple

Point = Tuple[float, float]
Path = Tuple[Point, ...]

SQUARE_SIZE = 120

FLOWER_PETALS = 6
FLOWER_RADIUS = 50

STAR_POINTS = 5
STAR_OUTER_RADIUS = 60
STAR_INNER_RADIUS = 25


def square_paths(center: Point, canvas_w: float, canvas_h: float) -> Tuple[Path, ...]:
    cx, cy = center
    half = SQUARE_SIZE / 2
    corners = (
        (cx - half, cy - half),
        (cx + half, cy - half),
        (cx + half, cy + half),
        (cx - half, cy + half),
    )
    return (corners + corners[:1],)


def flower_paths(center: Point, canvas_w: float, canvas_h: float) -> Tuple[Path, ...]:
    cx, cy = center
    petals = []
    for k in range(FLOWER_PETALS):
        a0 = 2 * pi * k / FLOWER_PETALS
        a1 = 2 * pi * (k + 1) / FLOWER_PETALS
        petals.append((
            (cx, cy),
            (cx + FLOWER_RADIUS * cos(a0), cy + FLOWER_RADIUS * sin(a0)),
            (cx + FLOWER_RADIUS * cos(a1), cy + FLOWER_RADIUS * sin(a1)),
            (cx, cy),
        ))
    return tuple(petals)


def star_paths(center: Point, canvas_w: float, canvas_h: float) -> Tuple[Path, ...]:
    cx, cy = center
    vertices = []
    for i in range(2 * STAR_POINTS):
        radius = STAR_OUTER_RADIUS if i % 2 == 0 else STAR_INNER_RADIUS
        angle = i * pi / STAR_POINTS - pi / 2
        vertices.append((cx + radius * cos(angle), cy + radius * sin(angle)))
    vertices.append(vertices[0])
    return (tuple(vertices),)


TEMPLATES: Dict[str, Callable[[Point, float, float], Tuple[Path, ...]]] = {
    "square": square_paths,
    "flower": flower_paths,
    "star": star_paths,
}

TEMPLATE_IDS = tuple(TEMPLATES)


def generate(template_id: str, canvas_w: float, canvas_h: float) -> Tuple[Path, ...]:
    """Paths for a named template; unknown ids give an empty tuple."""
    paths_of = TEMPLATES.get(template_id)
    if paths_of is None:
        return ()
    center = (canvas_w / 2, canvas_h / 2)
    return paths_of(center, canvas_w, canvas_h)


__all__ = ["TEMPLATE_IDS", "TEMPLATES", "generate"]
