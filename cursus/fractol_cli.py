"""Command that shows the Mandelbrot set in a zoomable window."""

from __future__ import annotations

import sys
from typing import Sequence

import pygame

from cursus.canvas import HEIGHT, WIDTH, Canvas
from cursus.mandelbrot import View, render_mandelbrot, zoom_at

_TITLE = "Fract.ol"
_FPS = 30


def _apply_event(view: View, event: "pygame.event.Event") -> View | None:
    """View after ``event``, or None when the window should close."""
    if event.type == pygame.QUIT:
        return None
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return None
    if event.type == pygame.MOUSEBUTTONDOWN:
        x, y = event.pos
        return zoom_at(view, event.button, x, y)
    return view


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer until the window is closed or Escape is pressed.

    Returns 1 when the display or window cannot be opened, 0 otherwise.
    """
    try:
        pygame.display.init()
    except pygame.error:
        return 1
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error:
            return 1
        pygame.display.set_caption(_TITLE)
        canvas = Canvas(WIDTH, HEIGHT)
        clock = pygame.time.Clock()
        view: View | None = View()
        shown: View | None = None
        image = None
        while True:
            for event in pygame.event.get():
                view = _apply_event(view, event)
                if view is None:
                    return 0
            if view != shown or image is None:
                canvas.clear()
                render_mandelbrot(canvas, view)
                image = pygame.image.frombuffer(
                    canvas.to_rgb_bytes(), (WIDTH, HEIGHT), "RGB"
                )
                shown = view
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.display.quit()


if __name__ == "__main__":
    sys.exit(main())