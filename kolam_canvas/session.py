import asyncio

from .surface import KolamCanvas


class CanvasSession:
    """One drawing surface shared by the web host.

    Every operation goes through ``apply`` so surface mutations never
    interleave. Completed-pattern events are counted, and only the latest
    completed set is kept.
    """

    def __init__(self, config):
        self.config = config
        self._lock = asyncio.Lock()  # ensures atomic updates
        self._new_canvas()

    def _new_canvas(self):
        self.pattern_events = 0
        self.last_completed = None
        self.canvas = KolamCanvas.from_config(self.config, on_pattern_complete=self._on_pattern_complete)

    def _on_pattern_complete(self, paths):
        self.pattern_events += 1
        self.last_completed = paths

    async def apply(self, operation, *args):
        async with self._lock:
            return operation(self.canvas, *args)

    async def apply_counted(self, operation, *args):
        """Like ``apply`` but also returns the event count read under the same lock."""
        async with self._lock:
            return operation(self.canvas, *args), self.pattern_events

    async def reset(self):
        async with self._lock:
            self._new_canvas()
            return self.canvas.state, self.pattern_events
