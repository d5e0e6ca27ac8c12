"""A simple three-action combat menu along the bottom of the screen."""

from __future__ import annotations

from enum import IntEnum

from . import constants
from .menu_base import Button, Display, InputSource, MenuBase, MenuResult

_MENU_Y = 260
_X_SPACING = 50


class CombatAction(IntEnum):
    ATTACK = 0
    DEFEND = 1
    ITEM = 2


class CombatMenu(MenuBase):
    """Attack, Defend and Item laid out in a row, with a highlighted choice."""

    OPTIONS = ("Attack", "Defend", "Item")

    def __init__(self, display: Display, input_source: InputSource) -> None:
        super().__init__(display, input_source, len(self.OPTIONS))
        self._shown: int | None = None

    def activate(self) -> None:
        super().activate()
        self._shown = None

    def render(self) -> None:
        """Redraw the row whenever the highlighted option is not the one on screen."""
        if self.is_active and self._shown != self.selected_option:
            self._draw_menu_area()
            self._shown = self.selected_option

    def _draw_menu_area(self) -> None:
        d = self.display
        d.fill_rect(0, 250, constants.SCREEN_WIDTH, 70, constants.COLOR_BLACK)
        for index, label in enumerate(self.OPTIONS):
            x = 10 + index * _X_SPACING
            color = constants.COLOR_WHITE
            if index == self.selected_option:
                d.fill_rect(x - 2, _MENU_Y - 2, 44, 20, constants.COLOR_WHITE)
                color = constants.COLOR_BLACK
            d.draw_text(label, x, _MENU_Y, color, 1)

    def handle_input(self) -> MenuResult:
        if not self.is_active:
            return MenuResult.NONE
        pressed = self.input_source.was_pressed
        if pressed(Button.UP):
            self.move_selection_up()
        elif pressed(Button.DOWN):
            self.move_selection_down()
        elif pressed(Button.A):
            self.selection_made = self.selected_option
            return MenuResult.SELECTED
        elif pressed(Button.B):
            return MenuResult.CANCELLED
        return MenuResult.NONE

    def selected_action(self) -> CombatAction:
        """The confirmed action; ValueError if none has been chosen."""
        if self.selection_made is None:
            raise ValueError("no combat action has been selected")
        return CombatAction(self.selection_made)