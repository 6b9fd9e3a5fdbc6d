import logging
import os

from .exporter import DEFAULT_FILENAME, encode_image, export_image
from .recorder import PointerDown, PointerLeave, PointerMove, PointerUp
from .render import DEFAULT_PALETTE, PillowContext, render
from .state import CanvasState, Clear, LoadTemplate, SetSymmetry, transition

logger = logging.getLogger(__name__)


class KolamCanvas:
    """A single drawing surface.

    Owns its CanvasState, applies host operations as events, redraws after
    every change and reports completed patterns through ``on_pattern_complete``.
    Grid size and dot spacing are fixed for the lifetime of the surface.
    Without an explicit ``context`` it draws on a Pillow raster; pass
    ``attached=False`` for a surface with no render target yet.
    """

    def __init__(
        self,
        grid_size=9,
        dot_spacing=40,
        width=400,
        height=400,
        show_symmetry=False,
        on_pattern_complete=None,
        context=None,
        attached=True,
        palette=DEFAULT_PALETTE,
    ):
        self.state = CanvasState(
            grid_size=grid_size,
            dot_spacing=dot_spacing,
            width=width,
            height=height,
            symmetry_enabled=bool(show_symmetry),
        )
        self.on_pattern_complete = on_pattern_complete
        self.palette = palette
        if context is None and attached:
            context = PillowContext(width, height)
        self.context = context
        self._raster = None
        self.redraw()

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(
            grid_size=config.grid_size,
            dot_spacing=config.dot_spacing,
            width=config.width,
            height=config.height,
            show_symmetry=config.show_symmetry,
            **kwargs,
        )

    # ---------------- state plumbing ----------------

    def _dispatch(self, event):
        self.state, completed = transition(self.state, event)
        self.redraw()
        if completed is not None and self.on_pattern_complete is not None:
            self.on_pattern_complete([list(p) for p in completed])
        return self.state

    def attach(self, context):
        self.context = context
        self.redraw()

    def detach(self):
        self.context = None
        self._raster = None

    def redraw(self):
        self._raster = render(self.state, self.context, self.palette)
        return self._raster

    @property
    def raster(self):
        return self._raster

    @property
    def committed_paths(self):
        return self.state.committed_paths

    @property
    def in_progress_path(self):
        return self.state.in_progress_path

    # ---------------- pointer input ----------------

    def pointer_down(self, x, y):
        return self._dispatch(PointerDown(x, y))

    def pointer_move(self, x, y):
        return self._dispatch(PointerMove(x, y))

    def pointer_up(self):
        return self._dispatch(PointerUp())

    def pointer_leave(self):
        return self._dispatch(PointerLeave())

    # ---------------- commands ----------------

    def load_template(self, template_id):
        state = self._dispatch(LoadTemplate(template_id))
        if not state.committed_paths:
            logger.info("[KolamCanvas] Unknown template '%s', canvas cleared", template_id)
        return state

    def set_symmetry_enabled(self, enabled):
        return self._dispatch(SetSymmetry(enabled))

    def toggle_symmetry(self):
        return self.set_symmetry_enabled(not self.state.symmetry_enabled)

    def clear(self):
        return self._dispatch(Clear())

    # ---------------- export ----------------

    def image_bytes(self, fmt="png"):
        return encode_image(self._raster, fmt)

    def export_image(self, path=None, fmt=None, directory="."):
        if path is None:
            path = os.path.join(directory, DEFAULT_FILENAME)
        return export_image(self._raster, path, fmt)


__all__ = ["KolamCanvas"]
