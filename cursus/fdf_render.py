"""Isometric projection and wireframe drawing for height maps."""

from __future__ import annotations

import math
import struct

from cursus.canvas import Canvas
from cursus.fdf_map import HeightMap, Point

TO_RAD = 0.017453292519943295
PROJECTION_DEGREES = 45
_BASE_COLOR = 0x0000FF
_MAX_Z = 100


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def project_point(point: Point, degrees: int) -> Point:
    """Project a grid point to screen coordinates, truncating toward zero."""
    rad = _as_float32(degrees * TO_RAD)
    return Point(
        int((point.x - point.y) * math.cos(rad)),
        int((point.x + point.y) * math.sin(rad) - point.z),
    )


def draw_line(canvas: Canvas, start: Point, end: Point, color: int) -> None:
    """Draw a Bresenham line from ``start`` to ``end``, both ends included."""
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    step_x = 1 if start.x <= end.x else -1
    step_y = 1 if start.y <= end.y else -1
    x, y = start.x, start.y
    err = dx - dy
    while True:
        canvas.put_pixel(x, y, color)
        if x == end.x and y == end.y:
            break
        doubled = 2 * err
        if doubled > -dy:
            err -= dy
            x += step_x
        if doubled < dx:
            err += dx
            y += step_y


def height_color(z: int) -> int:
    """Blue with a red component that grows with height, capped at full red."""
    scaled = z * 255
    shade = abs(scaled) // _MAX_Z
    if scaled < 0:
        shade = -shade
    shade = min(shade, 255)
    return (_BASE_COLOR | (shade << 16)) & 0xFFFFFFFF


def draw_map(canvas: Canvas, height_map: HeightMap) -> None:
    """Draw each point's links to its right and lower neighbours."""
    rows = height_map.points
    for y, row in enumerate(rows):
        for x, point in enumerate(row):
            origin = project_point(point, PROJECTION_DEGREES)
            color = height_color(point.z)
            if x + 1 < height_map.width:
                right = project_point(row[x + 1], PROJECTION_DEGREES)
                draw_line(canvas, origin, right, color)
            if y + 1 < height_map.height:
                below = project_point(rows[y + 1][x], PROJECTION_DEGREES)
                draw_line(canvas, origin, below, color)