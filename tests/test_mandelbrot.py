import pytest

from cursus.canvas import HEIGHT, WIDTH, Canvas
from cursus.mandelbrot import (
    MAX_ITER,
    MAX_ZOOM,
    MIN_ZOOM,
    View,
    escape_iterations,
    pixel_color,
    render_mandelbrot,
    zoom_at,
)


def _plane(view, x, y):
    return (
        (x / WIDTH - 0.5) * 4.0 / view.zoom + view.x_off,
        (y / HEIGHT - 0.5) * 4.0 / view.zoom + view.y_off,
    )


def test_origin_never_escapes():
    assert escape_iterations(0.0, 0.0) == MAX_ITER


def test_far_point_escapes_after_one_step():
    assert escape_iterations(2.0, 2.0) == 1


def test_minus_one_is_in_the_set():
    assert escape_iterations(-1.0, 0.0) == MAX_ITER


def test_escape_count_bounded():
    for real in (-2.0, -0.75, 0.3, 0.5, 1.0):
        count = escape_iterations(real, 0.1)
        assert 1 <= count <= MAX_ITER


def test_inside_color_is_black():
    assert pixel_color(MAX_ITER) == 0


@pytest.mark.parametrize("iterations", [1, 7, 100, 254])
def test_outside_color_layout(iterations):
    color = pixel_color(iterations)
    assert color & 0xFFFFFF == 0x0000FF
    assert color >> 24 == iterations


def test_render_small_canvas():
    canvas = Canvas(8, 8)
    render_mandelbrot(canvas, View())
    assert canvas.get_pixel(4, 4) == 0
    corner = canvas.get_pixel(0, 0)
    assert corner & 0xFF == 0xFF
    assert corner >> 24 == escape_iterations(-2.0, -2.0)


def test_render_respects_offset():
    canvas = Canvas(8, 8)
    render_mandelbrot(canvas, View(zoom=1.0, x_off=2.0, y_off=2.0))
    assert canvas.get_pixel(4, 4) == pixel_color(escape_iterations(2.0, 2.0))


def test_other_button_keeps_view():
    view = View(zoom=2.0, x_off=0.5, y_off=-0.25)
    assert zoom_at(view, 1, 100, 200) == view


@pytest.mark.parametrize("button", [4, 5])
@pytest.mark.parametrize("x,y", [(0, 0), (400, 400), (123, 650)])
def test_point_under_cursor_stays_fixed(button, x, y):
    view = View(zoom=1.5, x_off=-0.3, y_off=0.2)
    after = zoom_at(view, button, x, y)
    before_r, before_i = _plane(view, x, y)
    after_r, after_i = _plane(after, x, y)
    assert after_r == pytest.approx(before_r)
    assert after_i == pytest.approx(before_i)


def test_wheel_direction():
    view = View()
    assert zoom_at(view, 4, 400, 400).zoom > view.zoom
    assert zoom_at(view, 5, 400, 400).zoom < view.zoom


def test_zoom_clamped():
    assert zoom_at(View(zoom=MAX_ZOOM), 4, 10, 10).zoom == MAX_ZOOM
    assert zoom_at(View(zoom=MIN_ZOOM), 5, 10, 10).zoom == MIN_ZOOM


def test_centre_zoom_keeps_offset():
    view = View(zoom=1.0, x_off=0.7, y_off=-0.4)
    after = zoom_at(view, 4, WIDTH // 2, HEIGHT // 2)
    assert after.x_off == pytest.approx(0.7)
    assert after.y_off == pytest.approx(-0.4)