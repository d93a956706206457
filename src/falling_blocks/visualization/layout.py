from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from falling_blocks.game import Action, BOARD_COLS, BOARD_ROWS, CELL_SIZE

# On-screen pad, left to right
PAD_BUTTONS: Tuple[Tuple[Action, str], ...] = (
    (Action.LEFT, "Left"),
    (Action.ROTATE, "Rotate"),
    (Action.RIGHT, "Right"),
    (Action.SOFT_DROP, "Down"),
    (Action.HARD_DROP, "Drop"),
)

Rect = Tuple[int, int, int, int]


def _contains(rect: Rect, x: float, y: float) -> bool:
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


@dataclass
class Layout:
    cell: int
    margin: int
    panel_w: int
    pad_h: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    total_w: int
    total_h: int
    buttons: Dict[Action, Rect] = field(default_factory=dict)

    @property
    def board_rect(self) -> Rect:
        return (self.board_x, self.board_y, self.board_w, self.board_h)

    def in_board(self, x: float, y: float) -> bool:
        return _contains(self.board_rect, x, y)

    def button_at(self, x: float, y: float) -> Optional[Action]:
        for action, rect in self.buttons.items():
            if _contains(rect, x, y):
                return action
        return None


def compute_layout(cell: int = CELL_SIZE, margin: int = 16, panel_w: int = 160, pad_h: int = 56) -> Layout:
    board_w = BOARD_COLS * cell
    board_h = BOARD_ROWS * cell

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin + pad_h + margin

    gap = 8
    pad_y = board_y + board_h + margin
    button_w = (total_w - 2 * margin - gap * (len(PAD_BUTTONS) - 1)) // len(PAD_BUTTONS)
    buttons: Dict[Action, Rect] = {}
    for i, (action, _label) in enumerate(PAD_BUTTONS):
        buttons[action] = (margin + i * (button_w + gap), pad_y, button_w, pad_h)

    return Layout(
        cell=cell, margin=margin, panel_w=panel_w, pad_h=pad_h,
        board_x=board_x, board_y=board_y, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=panel_y, total_w=total_w, total_h=total_h,
        buttons=buttons,
    )
