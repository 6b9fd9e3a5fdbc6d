from dataclasses import replace

from kolam_canvas.render import (
    DEFAULT_PALETTE,
    DOT_RADIUS,
    LINE_WIDTH,
    PillowContext,
    RecordingContext,
    dash_segments,
    render,
)
from kolam_canvas.state import CanvasState
from kolam_canvas.templates import generate


def kinds(commands):
    return [c[0] for c in commands]


def test_missing_context_is_skipped():
    assert render(CanvasState(), None) is None


def test_z_order():
    state = CanvasState(
        grid_size=2,
        symmetry_enabled=True,
        committed_paths=(((0, 0), (10, 10)),),
        in_progress_path=((5, 5), (6, 6)),
    )
    commands = render(state, RecordingContext(400, 400))
    assert kinds(commands) == (
        ["clear", "background"]
        + ["dashed_line"] * 4
        + ["dot"] * 4
        + ["polyline", "polyline"]
    )
    assert commands[-1][1] == ((5, 5), (6, 6))
    # in-progress path uses the committed stroke style
    assert commands[-1][2:] == commands[-2][2:] == (DEFAULT_PALETTE.line, LINE_WIDTH)


def test_short_paths_are_not_stroked():
    state = CanvasState(grid_size=1, in_progress_path=((5, 5),))
    commands = render(state, RecordingContext(100, 100))
    assert kinds(commands) == ["clear", "background", "dot"]
    assert commands[2] == ("dot", (50.0, 50.0), DOT_RADIUS, DEFAULT_PALETTE.dot)


def test_render_is_idempotent():
    state = CanvasState(symmetry_enabled=True, committed_paths=generate("flower", 400, 400))
    context = PillowContext(400, 400)
    first = render(state, context)
    second = render(state, context)
    assert first.tobytes() == second.tobytes()
    assert render(state, RecordingContext(400, 400)) == render(state, RecordingContext(400, 400))


def test_cleared_state_shows_only_background_and_dots():
    blank = render(CanvasState(), PillowContext(400, 400))
    context = PillowContext(400, 400)
    render(CanvasState(committed_paths=generate("star", 400, 400)), context)
    after_clear = render(CanvasState(), context)
    assert after_clear.tobytes() == blank.tobytes()


def test_paths_change_pixels():
    blank = render(CanvasState(), PillowContext(400, 400))
    drawn = render(CanvasState(committed_paths=generate("square", 400, 400)), PillowContext(400, 400))
    assert drawn.tobytes() != blank.tobytes()
    # square edge passes through (200, 140)
    assert drawn.getpixel((200, 140)) != blank.getpixel((200, 140))


def test_symmetry_toggle_restores_raster():
    state = CanvasState()
    before = render(state, PillowContext(400, 400)).tobytes()
    on = render(replace(state, symmetry_enabled=True), PillowContext(400, 400)).tobytes()
    off = render(replace(state, symmetry_enabled=False), PillowContext(400, 400)).tobytes()
    assert on != before
    assert off == before


def test_dash_segments():
    pieces = dash_segments((0, 0), (22, 0), (5, 5))
    assert pieces == [
        ((0.0, 0.0), (5.0, 0.0)),
        ((10.0, 0.0), (15.0, 0.0)),
        ((20.0, 0.0), (22.0, 0.0)),
    ]
    assert dash_segments((3, 3), (3, 3), (5, 5)) == []
