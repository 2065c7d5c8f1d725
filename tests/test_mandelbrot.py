import pytest

from egedemos.colors import hsl_to_rgb
from egedemos.mandelbrot import (
    Viewport,
    escape_count,
    fit_selection,
    make_palette,
    pixel_color,
    render,
)


def test_origin_never_escapes():
    assert escape_count(0j, 1000) == 0


@pytest.mark.parametrize("n", [5, 50, 1000])
def test_far_point_escapes_immediately(n):
    assert escape_count(10 + 0j, n) == n - 1


def test_escape_count_bounded():
    for c in (0.3 + 0.5j, -0.75 + 0.1j, 0.26 + 0j):
        assert 0 <= escape_count(c, 200) < 200


def test_palette_shape():
    palette = make_palette(300)
    assert len(palette) == 300
    assert palette[0] == 0
    assert palette[-1] == hsl_to_rgb(330, 1.0, 0.0)
    assert palette[10] == hsl_to_rgb(240, 1.0, 20 / 300)


def test_odd_palette_middle_is_black():
    assert make_palette(5)[2] == 0


def test_pixel_color_inside_is_black():
    assert pixel_color(0j, make_palette(), 1000) == 0


def test_pixel_color_outside_uses_palette():
    palette = make_palette(300)
    assert pixel_color(10 + 0j, palette, 1000) == palette[1]


def test_point_at_corners():
    view = Viewport()
    assert view.point_at(0, 0, 640, 480) == complex(-2.2, -1.65)
    centre = view.point_at(320, 240, 640, 480)
    assert centre.real == pytest.approx(0.0)
    assert centre.imag == pytest.approx(0.0)


def test_zoom_full_screen_is_identity():
    view = Viewport()
    zoomed = view.zoom(0, 0, 640, 480, 640, 480)
    assert zoomed.from_x == pytest.approx(view.from_x)
    assert zoomed.to_x == pytest.approx(view.to_x)
    assert zoomed.from_y == pytest.approx(view.from_y)
    assert zoomed.to_y == pytest.approx(view.to_y)


def test_zoom_maps_corners():
    view = Viewport()
    zoomed = view.zoom(100, 50, 300, 200, 640, 480)
    assert complex(zoomed.from_x, zoomed.from_y) == pytest.approx(view.point_at(100, 50, 640, 480))
    assert complex(zoomed.to_x, zoomed.to_y) == pytest.approx(view.point_at(300, 200, 640, 480))


@pytest.mark.parametrize("rect", [(0, 5, 0, 40), (7, 3, 90, 3)])
def test_fit_selection_degenerate(rect):
    assert fit_selection(*rect) is None


@pytest.mark.parametrize(
    "rect",
    [(10, 10, 50, 100), (200, 300, 100, 100), (0, 0, 640, 10), (33, 17, 34, 18), (400, 20, 10, 470)],
)
def test_fit_selection_is_four_by_three(rect):
    x0, y0, x1, y1 = fit_selection(*rect)
    assert x0 < x1 and y0 < y1
    assert (x1 - x0) * 3 == (y1 - y0) * 4


def test_render_grid_matches_pixels():
    palette = make_palette(30)
    view = Viewport()
    rows = render(view, 8, 6, palette, 40)
    assert len(rows) == 6
    assert all(len(row) == 8 for row in rows)
    assert rows[3][4] == 0
    assert rows[0][0] == pixel_color(view.point_at(0, 0, 8, 6), palette, 40)