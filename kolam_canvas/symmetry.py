from typing import List, Tuple

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

# Dash pattern for guide lines: 5 px on, 5 px off
GUIDE_DASH = (5, 5)
GUIDE_WIDTH = 1


def guide_lines(enabled: bool, canvas_w: float, canvas_h: float) -> List[Segment]:
    """Vertical, horizontal and both diagonal guides, or nothing when disabled."""
    if not enabled:
        return []
    return [
        ((canvas_w / 2, 0.0), (canvas_w / 2, float(canvas_h))),
        ((0.0, canvas_h / 2), (float(canvas_w), canvas_h / 2)),
        ((0.0, 0.0), (float(canvas_w), float(canvas_h))),
        ((float(canvas_w), 0.0), (0.0, float(canvas_h))),
    ]


__all__ = ["GUIDE_DASH", "GUIDE_WIDTH", "Segment", "guide_lines"]
