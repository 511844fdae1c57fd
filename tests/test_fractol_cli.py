from unittest import mock

import pygame
import pytest

from cursus import fractol_cli
from cursus.mandelbrot import View, zoom_at


@pytest.fixture
def dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


def test_quit_event_ends_loop(dummy_display):
    events = [pygame.event.Event(pygame.QUIT)]
    with mock.patch("pygame.event.get", return_value=events):
        assert fractol_cli.main([]) == 0


def test_escape_key_ends_loop(dummy_display):
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with mock.patch("pygame.event.get", return_value=events):
        assert fractol_cli.main() == 0


def test_display_failure_returns_one():
    with mock.patch("pygame.display.init", side_effect=pygame.error("no display")):
        assert fractol_cli.main([]) == 1


def test_wheel_event_zooms():
    view = View()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(100, 300))
    assert fractol_cli._apply_event(view, event) == zoom_at(view, 4, 100, 300)


def test_unrelated_event_keeps_view():
    view = View(zoom=3.0, x_off=0.1, y_off=0.2)
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert fractol_cli._apply_event(view, event) == view


def test_close_event_gives_none():
    assert fractol_cli._apply_event(View(), pygame.event.Event(pygame.QUIT)) is None