"""The four-slot spell menu shown during combat."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol, Sequence

from . import constants
from .menu_base import Button, Display, InputSource, MenuBase, MenuResult
from .spells import Spell

log = logging.getLogger(__name__)

SLOT_COUNT = 4
EMPTY_NAME = "Empty"
_MENU_Y = 260
_SLOT_WIDTH = 70
_SLOT_HEIGHT = 25
_SLOT_SPACING = 10


class SpellCombatAction(IntEnum):
    CAST_SPELL_1 = 0
    CAST_SPELL_2 = 1
    CAST_SPELL_3 = 2
    CAST_SPELL_4 = 3
    DEFEND = 4


class _SpellCaster(Protocol):
    equipped_spells: Sequence[Optional[Spell]]
    current_mana: int


@dataclass
class SpellSlotInfo:
    """What a spell slot shows: name, colour, cost and whether it can be cast."""

    name: str = EMPTY_NAME
    short_name: str = "----"
    color: int = constants.COLOR_GRAY
    available: bool = False
    mana_cost: int = 0
    power: int = 0

    @property
    def is_empty(self) -> bool:
        return self.name == EMPTY_NAME

    @classmethod
    def for_spell(cls, spell: Optional[Spell], mana: int) -> SpellSlotInfo:
        if spell is None:
            return cls()
        return cls(
            name=spell.name,
            short_name=spell.name[:8],
            color=spell.element_color,
            available=mana >= spell.mana_cost,
            mana_cost=spell.mana_cost,
            power=spell.base_power,
        )


def _slot_origin(slot: int) -> tuple[int, int]:
    row, col = divmod(slot, 2)
    return (
        10 + col * (_SLOT_WIDTH + _SLOT_SPACING),
        _MENU_Y + row * (_SLOT_HEIGHT + _SLOT_SPACING),
    )


class SpellCombatMenu(MenuBase):
    """A 2x2 grid of the player's equipped spells with a moving cursor."""

    def __init__(self, display: Display, input_source: InputSource, player: _SpellCaster) -> None:
        super().__init__(display, input_source, SLOT_COUNT)
        self.player = player
        self._last_rendered = -1
        self._needs_redraw = True
        self._slots = [SpellSlotInfo() for _ in range(SLOT_COUNT)]

    @property
    def slot_info(self) -> tuple[SpellSlotInfo, ...]:
        return tuple(self._slots)

    def activate(self) -> None:
        super().activate()
        self._update_spell_info()
        self._last_rendered = -1
        self._needs_redraw = True

    def _update_spell_info(self) -> None:
        equipped = list(self.player.equipped_spells)
        mana = self.player.current_mana
        self._slots = [
            SpellSlotInfo.for_spell(equipped[slot] if slot < len(equipped) else None, mana)
            for slot in range(SLOT_COUNT)
        ]

    def render(self) -> None:
        if not self.is_active:
            return
        self._update_spell_info()
        if self._needs_redraw:
            self._draw_full_menu()
            self._needs_redraw = False
        elif self.selected_option != self._last_rendered:
            self._update_cursor()

    def _draw_full_menu(self) -> None:
        self.display.fill_rect(0, _MENU_Y, constants.SCREEN_WIDTH, 60, constants.COLOR_BLACK)
        for slot in range(SLOT_COUNT):
            self._draw_slot(slot, *_slot_origin(slot))
        self._draw_cursor(self.selected_option)
        self._last_rendered = self.selected_option

    def _draw_slot(self, slot: int, x: int, y: int) -> None:
        d = self.display
        info = self._slots[slot]
        border = constants.COLOR_WHITE
        if not info.available and not info.is_empty:
            border = constants.COLOR_RED
        d.draw_rect(x, y, _SLOT_WIDTH, _SLOT_HEIGHT, border)
        d.fill_rect(x + 1, y + 1, _SLOT_WIDTH - 2, _SLOT_HEIGHT - 2, constants.COLOR_BLACK)
        d.draw_text(str(slot + 1), x + 3, y + 1, constants.COLOR_WHITE, 1)
        if info.is_empty:
            d.draw_text(EMPTY_NAME, x + 3, y + 12, constants.COLOR_GRAY, 1)
            return
        text_color = info.color if info.available else constants.COLOR_GRAY
        d.draw_text(info.short_name, x + 3, y + 10, text_color, 1)
        d.draw_text(str(info.mana_cost), x + 50, y + 18, constants.COLOR_BLUE, 1)
        d.draw_text(str(info.power), x + 3, y + 18, constants.COLOR_WHITE, 1)

    def _draw_cursor(self, option: int) -> None:
        if 0 <= option < SLOT_COUNT:
            x, y = _slot_origin(option)
            self.display.draw_text(">", x - 8, y + 10, constants.COLOR_WHITE)

    def _clear_cursor(self, option: int) -> None:
        if 0 <= option < SLOT_COUNT:
            x, y = _slot_origin(option)
            self.display.fill_rect(x - 8, y + 10, 8, 8, constants.COLOR_BLACK)

    def _update_cursor(self) -> None:
        if 0 <= self._last_rendered < SLOT_COUNT:
            self._clear_cursor(self._last_rendered)
        self._draw_cursor(self.selected_option)
        self._last_rendered = self.selected_option

    def handle_input(self) -> MenuResult:
        if not self.is_active:
            return MenuResult.NONE
        pressed = self.input_source.was_pressed
        if pressed(Button.UP):
            self.move_selection_up()
            return MenuResult.NONE
        if pressed(Button.DOWN):
            self.move_selection_down()
            return MenuResult.NONE
        if pressed(Button.A):
            if not self.is_selected_action_valid():
                log.info("Invalid spell selection!")
                return MenuResult.NONE
            self.selection_made = self.selected_option
            return MenuResult.SELECTED
        if pressed(Button.B):
            return MenuResult.CANCELLED
        return MenuResult.NONE

    def selected_action(self) -> SpellCombatAction:
        """The confirmed action; ValueError if none has been chosen."""
        if self.selection_made is None:
            raise ValueError("no spell action has been selected")
        return SpellCombatAction(self.selection_made)

    def is_selected_action_valid(self) -> bool:
        """True if the highlighted slot holds a spell the player can afford."""
        if not 0 <= self.selected_option < SLOT_COUNT:
            return False
        info = self._slots[self.selected_option]
        return not info.is_empty and info.available

    def selected_spell_slot(self) -> Optional[int]:
        """The confirmed spell slot, or None if no slot was chosen."""
        if self.selection_made is not None and 0 <= self.selection_made < SLOT_COUNT:
            return self.selection_made
        return None

    def refresh_spell_data(self) -> None:
        self._update_spell_info()
        self._needs_redraw = True

    def text_area_bounds(self) -> tuple[int, int, int, int]:
        """(x, y, width, height) of the combat text area above the spell grid."""
        return 10, 210, constants.SCREEN_WIDTH - 20, 40