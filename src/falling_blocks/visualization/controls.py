from __future__ import annotations

from typing import Dict, Optional

import pygame

from falling_blocks.game import Action
from .layout import Layout


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


def _pointer_action(layout: Layout, x: float, y: float) -> Optional[Action]:
    action = layout.button_at(x, y)
    if action is not None:
        return action
    # Tapping the board restarts; the engine ignores it while playing.
    if layout.in_board(x, y):
        return Action.RESTART
    return None


def translate_event(event: pygame.event.Event, layout: Layout, game_over: bool = False) -> Optional[Action]:
    """Map one pygame event to an engine action, or None if it means nothing."""
    if event.type == pygame.KEYDOWN:
        if game_over and event.key in RESTART_KEYS:
            return Action.RESTART
        return KEY_TO_ACTION.get(event.key)

    if event.type == pygame.MOUSEBUTTONDOWN:
        # Touch input also arrives as FINGERDOWN; skip the emulated mouse copy.
        if getattr(event, "touch", False) or getattr(event, "button", 1) != 1:
            return None
        x, y = event.pos
        return _pointer_action(layout, x, y)

    if event.type == pygame.FINGERDOWN:
        return _pointer_action(layout, event.x * layout.total_w, event.y * layout.total_h)

    return None
