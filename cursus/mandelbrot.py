"""Mandelbrot set rendering and mouse-wheel zooming."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cursus.canvas import HEIGHT, WIDTH, Canvas

MAX_ITER = 255
ZOOM_IN_BUTTON = 4
ZOOM_OUT_BUTTON = 5
ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9
MIN_ZOOM = 1e-10
MAX_ZOOM = 1e10
_SPAN = 4.0
_BLUE = 0x0000FF


@dataclass(frozen=True, slots=True)
class View:
    """Zoom factor and offset of the complex plane shown on screen."""

    zoom: float = 1.0
    x_off: float = 0.0
    y_off: float = 0.0


def escape_iterations(real: float, imag: float) -> int:
    """Iterations before ``z*z + c`` leaves radius 2; ``MAX_ITER`` if it never does."""
    zr = zi = 0.0
    count = 0
    while zr * zr + zi * zi <= 4:
        count += 1
        if count >= MAX_ITER:
            break
        zr, zi = zr * zr - zi * zi + real, 2 * zr * zi + imag
    return count


def pixel_color(iterations: int) -> int:
    """Black inside the set, otherwise blue with the iteration count as alpha."""
    if iterations == MAX_ITER:
        return 0x000000
    return ((iterations << 24) | _BLUE) & 0xFFFFFFFF


def render_mandelbrot(canvas: Canvas, view: View) -> None:
    """Draw the set on every pixel, centred on the view's offset."""
    scale = (_SPAN / canvas.width) / view.zoom
    half_w = canvas.width / 2.0
    half_h = canvas.height / 2.0
    for y in range(canvas.height):
        imag = (y - half_h) * scale + view.y_off
        for x in range(canvas.width):
            real = (x - half_w) * scale + view.x_off
            canvas.put_pixel(x, y, pixel_color(escape_iterations(real, imag)))


def _plane_offset(coord: int, size: int, zoom: float) -> float:
    return (coord / size - 0.5) * _SPAN / zoom


def zoom_at(view: View, button: int, x: int, y: int) -> View:
    """View after a wheel click at pixel ``(x, y)``, keeping that point fixed.

    Button 4 zooms in and button 5 zooms out; other buttons leave the view as is.
    """
    mouse_r = _plane_offset(x, WIDTH, view.zoom) + view.x_off
    mouse_i = _plane_offset(y, HEIGHT, view.zoom) + view.y_off
    if button == ZOOM_IN_BUTTON:
        zoom = view.zoom * ZOOM_IN_FACTOR
    elif button == ZOOM_OUT_BUTTON:
        zoom = view.zoom * ZOOM_OUT_FACTOR
    else:
        return view
    zoom = min(max(zoom, MIN_ZOOM), MAX_ZOOM)
    return replace(
        view,
        zoom=zoom,
        x_off=mouse_r - _plane_offset(x, WIDTH, zoom),
        y_off=mouse_i - _plane_offset(y, HEIGHT, zoom),
    )