from .grid import dots
from .templates import TEMPLATE_IDS, generate
from .symmetry import guide_lines
from .state import CanvasState
from .surface import KolamCanvas

__all__ = [
    "CanvasState",
    "KolamCanvas",
    "TEMPLATE_IDS",
    "dots",
    "generate",
    "guide_lines",
]
