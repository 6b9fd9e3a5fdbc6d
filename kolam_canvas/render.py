"""
Redraw pipeline for the Kolam drawing surface.

The pipeline always paints in the same back-to-front order:

1. clear
2. background fill
3. symmetry guides (only when enabled)
4. grid dots
5. committed paths, each as one polyline
6. the in-progress path, same stroke style

Drawing goes through a small DrawContext interface so the same pipeline can
target a Pillow raster or a plain command list.
"""

from math import hypot
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .grid import dots
from .symmetry import GUIDE_DASH, GUIDE_WIDTH, guide_lines

Point = Tuple[float, float]

DOT_RADIUS = 3
LINE_WIDTH = 3


class Palette:
    def __init__(self, background="#2e5f3b", dot="#f4e4c1", line="white", guide="#9fbfa6"):
        self.background = background
        self.dot = dot
        self.line = line
        self.guide = guide


DEFAULT_PALETTE = Palette()


class DrawContext:
    """Minimal set of drawing primitives the pipeline needs."""

    width = 0
    height = 0

    def clear(self):
        raise NotImplementedError

    def fill_background(self, color):
        raise NotImplementedError

    def dashed_line(self, start: Point, end: Point, color, width: int, dash: Tuple[int, int]):
        raise NotImplementedError

    def dot(self, center: Point, radius: float, color):
        raise NotImplementedError

    def polyline(self, points: Sequence[Point], color, width: int):
        raise NotImplementedError

    def raster(self):
        raise NotImplementedError


def dash_segments(start: Point, end: Point, dash: Tuple[int, int]) -> List[Tuple[Point, Point]]:
    """Split a segment into the 'on' pieces of a dash pattern."""
    on, off = dash
    (x0, y0), (x1, y1) = start, end
    length = hypot(x1 - x0, y1 - y0)
    if length == 0 or on <= 0:
        return []
    ux, uy = (x1 - x0) / length, (y1 - y0) / length

    pieces = []
    pos = 0.0
    while pos < length:
        stop = min(pos + on, length)
        pieces.append(((x0 + ux * pos, y0 + uy * pos), (x0 + ux * stop, y0 + uy * stop)))
        pos = stop + off
    return pieces


class PillowContext(DrawContext):
    """Draws onto an RGBA Pillow image."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.draw = ImageDraw.Draw(self.image)

    def clear(self):
        self.draw.rectangle([0, 0, self.width, self.height], fill=(0, 0, 0, 0))

    def fill_background(self, color):
        self.draw.rectangle([0, 0, self.width, self.height], fill=color)

    def dashed_line(self, start, end, color, width, dash):
        for a, b in dash_segments(start, end, dash):
            self.draw.line([a, b], fill=color, width=width)

    def dot(self, center, radius, color):
        x, y = center
        self.draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=color)

    def polyline(self, points, color, width):
        self.draw.line(list(points), fill=color, width=width, joint="curve")
        # Round caps
        r = width / 2
        for x, y in (points[0], points[-1]):
            self.draw.ellipse([x - r, y - r, x + r, y + r], fill=color)

    def raster(self) -> Image.Image:
        return self.image.copy()


class RecordingContext(DrawContext):
    """Collects drawing commands instead of pixels."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.commands = []

    def clear(self):
        self.commands = [("clear",)]

    def fill_background(self, color):
        self.commands.append(("background", color))

    def dashed_line(self, start, end, color, width, dash):
        self.commands.append(("dashed_line", tuple(start), tuple(end), color, width, tuple(dash)))

    def dot(self, center, radius, color):
        self.commands.append(("dot", tuple(center), radius, color))

    def polyline(self, points, color, width):
        self.commands.append(("polyline", tuple(tuple(p) for p in points), color, width))

    def raster(self):
        return tuple(self.commands)


def _stroke(context: DrawContext, path, palette: Palette):
    if path is None or len(path) < 2:
        return
    context.polyline(path, palette.line, LINE_WIDTH)


def render(state, context: Optional[DrawContext], palette: Palette = DEFAULT_PALETTE):
    """Paint ``state`` onto ``context`` and return its raster.

    A missing context (surface not attached yet) is not an error: nothing is
    drawn and None is returned.
    """
    if context is None:
        return None

    w, h = context.width, context.height

    context.clear()
    context.fill_background(palette.background)

    for start, end in guide_lines(state.symmetry_enabled, w, h):
        context.dashed_line(start, end, palette.guide, GUIDE_WIDTH, GUIDE_DASH)

    for point in dots(state.grid_size, state.dot_spacing, w, h):
        context.dot(point, DOT_RADIUS, palette.dot)

    for path in state.committed_paths:
        _stroke(context, path, palette)

    _stroke(context, state.in_progress_path, palette)

    return context.raster()


__all__ = [
    "DEFAULT_PALETTE",
    "DOT_RADIUS",
    "DrawContext",
    "LINE_WIDTH",
    "Palette",
    "PillowContext",
    "RecordingContext",
    "dash_segments",
    "render",
]
