"""Command that loads a height map and shows its wireframe in a window."""

from __future__ import annotations

import sys
from typing import Sequence

from cursus.canvas import HEIGHT, WIDTH, Canvas
from cursus.fdf_map import MapError, load_map
from cursus.fdf_render import draw_map

_TITLE = "FDF"
_FPS = 30


def _show(canvas: Canvas) -> int:
    import pygame

    try:
        pygame.display.init()
    except pygame.error:
        return 3
    try:
        try:
            screen = pygame.display.set_mode((canvas.width, canvas.height))
        except pygame.error:
            return 4
        pygame.display.set_caption(_TITLE)
        image = pygame.image.frombuffer(
            canvas.to_rgb_bytes(), (canvas.width, canvas.height), "RGB"
        )
        clock = pygame.time.Clock()
        while not any(event.type == pygame.QUIT for event in pygame.event.get()):
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.display.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Show the map named by the single argument.

    Returns 1 for a wrong argument count, 2 for an unusable map, 3 when the
    display cannot start and 4 when the window cannot be opened.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        height_map = load_map(args[0])
    except MapError:
        return 2
    canvas = Canvas(WIDTH, HEIGHT)
    draw_map(canvas, height_map)
    return _show(canvas)


if __name__ == "__main__":
    sys.exit(main())