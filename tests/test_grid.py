import pytest

from kolam_canvas.grid import dots


@pytest.mark.parametrize("n,spacing,w,h", [
    (1, 40, 400, 400),
    (3, 25, 300, 200),
    (9, 40, 400, 400),
    (10, 12.5, 640, 480),
])
def test_dots_count_and_center_symmetry(n, spacing, w, h):
    pts = dots(n, spacing, w, h)
    assert len(pts) == n * n

    cx, cy = w / 2, h / 2
    for x, y in pts:
        mirrored = (2 * cx - x, 2 * cy - y)
        assert any(mx == pytest.approx(mirrored[0]) and my == pytest.approx(mirrored[1]) for mx, my in pts)


def test_dots_layout_order():
    pts = dots(3, 40, 400, 400)
    # x is the outer loop, y the inner
    assert pts[:3] == [(160.0, 160.0), (160.0, 200.0), (160.0, 240.0)]
    assert pts[3] == (200.0, 160.0)
    assert pts[-1] == (240.0, 240.0)


def test_single_dot_is_centered():
    assert dots(1, 40, 400, 300) == [(200.0, 150.0)]


@pytest.mark.parametrize("n", [0, -3])
def test_degenerate_grid_is_empty(n):
    assert dots(n, 40, 400, 400) == []
