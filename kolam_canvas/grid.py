from typing import List, Tuple

import numpy as np

Point = Tuple[float, float]


def dots(grid_size: int, spacing: float, canvas_w: float, canvas_h: float) -> List[Point]:
    """Dot positions of an N x N grid centered in the canvas, column by column."""
    if grid_size <= 0:
        return []

    offset_x = (canvas_w - (grid_size - 1) * spacing) / 2
    offset_y = (canvas_h - (grid_size - 1) * spacing) / 2

    steps = np.arange(grid_size, dtype=float) * spacing
    xs = offset_x + steps
    ys = offset_y + steps

    # i walks x (outer), j walks y (inner)
    return [(float(x), float(y)) for x in xs for y in ys]


__all__ = ["Point", "dots"]
