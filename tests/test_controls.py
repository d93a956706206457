from __future__ import annotations

import pygame
import pytest

from falling_blocks.game import Action
from falling_blocks.visualization.controls import translate_event
from falling_blocks.visualization.layout import PAD_BUTTONS, compute_layout


@pytest.fixture
def layout():
    return compute_layout()


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(x: float, y: float, button: int = 1, touch: bool = False) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button, touch=touch)


def rect_center(rect):
    x, y, w, h = rect
    return x + w // 2, y + h // 2


@pytest.mark.parametrize(
    "k,action",
    [
        (pygame.K_LEFT, Action.LEFT),
        (pygame.K_RIGHT, Action.RIGHT),
        (pygame.K_UP, Action.ROTATE),
        (pygame.K_DOWN, Action.SOFT_DROP),
        (pygame.K_SPACE, Action.HARD_DROP),
    ],
)
def test_keyboard_while_playing(layout, k, action):
    assert translate_event(key(k), layout) == action


def test_keyboard_restart_after_game_over(layout):
    assert translate_event(key(pygame.K_RETURN), layout, game_over=True) == Action.RESTART
    assert translate_event(key(pygame.K_SPACE), layout, game_over=True) == Action.RESTART
    assert translate_event(key(pygame.K_RETURN), layout) is None


def test_unmapped_events(layout):
    assert translate_event(key(pygame.K_a), layout) is None
    assert translate_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT), layout) is None
    assert translate_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 5), rel=(0, 0), buttons=(0, 0, 0)), layout) is None


def test_pad_buttons(layout):
    for action, _label in PAD_BUTTONS:
        x, y = rect_center(layout.buttons[action])
        assert translate_event(click(x, y), layout) == action


def test_board_click_means_restart(layout):
    x, y = rect_center(layout.board_rect)
    assert translate_event(click(x, y), layout) == Action.RESTART


def test_clicks_outside_controls(layout):
    assert translate_event(click(1, 1), layout) is None
    x, y = rect_center(layout.board_rect)
    assert translate_event(click(x, y, button=3), layout) is None


def test_touch_is_not_counted_twice(layout):
    x, y = rect_center(layout.buttons[Action.ROTATE])
    assert translate_event(click(x, y, touch=True), layout) is None
    finger = pygame.event.Event(
        pygame.FINGERDOWN,
        x=x / layout.total_w,
        y=y / layout.total_h,
        dx=0.0,
        dy=0.0,
        touch_id=0,
        finger_id=0,
        pressure=1.0,
    )
    assert translate_event(finger, layout) == Action.ROTATE


def test_layout_geometry(layout):
    assert layout.board_w == 10 * layout.cell
    assert layout.board_h == 20 * layout.cell
    assert layout.button_at(-5, -5) is None
    rects = [layout.buttons[action] for action, _ in PAD_BUTTONS]
    for (x1, _, w1, _), (x2, _, _, _) in zip(rects, rects[1:]):
        assert x1 + w1 <= x2
    assert rects[-1][0] + rects[-1][2] <= layout.total_w
