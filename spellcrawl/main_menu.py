"""The title screen menu."""

from __future__ import annotations

import logging
from enum import IntEnum

from . import constants
from .menu_base import Button, Display, InputSource, MenuBase, MenuResult

log = logging.getLogger(__name__)

_OPTIONS_Y = 160
_OPTIONS_SPACING = 30
_CURSOR_X = 30

_TITLE = (
    ("ESP32", 50, 40, 2),
    ("DUNGEON", 30, 65, 2),
    ("CRAWLER", 25, 90, 2),
    ("v0.1.0", 60, 120, 1),
)
_INSTRUCTIONS = (
    ("UP/DOWN: Navigate", 15, 280),
    ("A: Select", 55, 295),
)


class MainMenuOption(IntEnum):
    START_GAME = 0
    SETTINGS = 1
    CREDITS = 2


class MainMenu(MenuBase):
    """Title, three options and a moving cursor, redrawn only where needed."""

    OPTIONS = ("Start Game", "Settings", "Credits")

    def __init__(self, display: Display, input_source: InputSource) -> None:
        super().__init__(display, input_source, len(self.OPTIONS))
        self._screen_drawn = False
        self._cursor_row: int | None = None

    def activate(self) -> None:
        super().activate()
        self._screen_drawn = False
        self._cursor_row = None

    def render(self) -> None:
        if not self.is_active:
            return
        if not self._screen_drawn:
            self._draw_full_menu()
            self._screen_drawn = True
        elif self.selected_option != self._cursor_row:
            if self._cursor_row is not None and 0 <= self._cursor_row < self.max_options:
                self.display.fill_rect(
                    _CURSOR_X, self._row_y(self._cursor_row), 18, 16, constants.COLOR_BLACK
                )
            self._draw_cursor()

    def _draw_full_menu(self) -> None:
        white = constants.COLOR_WHITE
        d = self.display
        d.clear()
        for text, x, y, size in _TITLE:
            d.draw_text(text, x, y, white, size)
        for index, label in enumerate(self.OPTIONS):
            d.draw_text(label, 50, self._row_y(index), white, 2)
        for text, x, y in _INSTRUCTIONS:
            d.draw_text(text, x, y, white, 1)
        self._draw_cursor()

    @staticmethod
    def _row_y(option: int) -> int:
        return _OPTIONS_Y + option * _OPTIONS_SPACING

    def _draw_cursor(self) -> None:
        row = self.selected_option
        self.display.draw_text(">", _CURSOR_X, self._row_y(row), constants.COLOR_WHITE, 2)
        self._cursor_row = row

    def handle_input(self) -> MenuResult:
        if not self.is_active:
            return MenuResult.NONE

        if self.selection_made is not None:
            log.warning("MainMenu starting with unexpected selection: %s", self.selection_made)
            self.selection_made = None

        pressed = self.input_source.was_pressed
        for button, step in (
            (Button.UP, self.move_selection_up),
            (Button.DOWN, self.move_selection_down),
        ):
            if pressed(button):
                step()
                return MenuResult.NONE

        if not pressed(Button.A):
            return MenuResult.NONE
        if 0 <= self.selected_option < self.max_options:
            self.selection_made = self.selected_option
            return MenuResult.SELECTED
        log.error("Invalid selection in MainMenu: %d", self.selected_option)
        self.selected_option = 0
        return MenuResult.NONE

    def selected_main_option(self) -> MainMenuOption:
        """The confirmed option, falling back to starting the game."""
        made = self.selection_made
        if made is not None and 0 <= made < self.max_options:
            return MainMenuOption(made)
        log.error("Invalid selection in MainMenu: %s", made)
        return MainMenuOption.START_GAME