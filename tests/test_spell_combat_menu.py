from dataclasses import dataclass, field

import pytest

from spellcrawl import constants
from spellcrawl.menu_base import Button, MenuResult
from spellcrawl.spell_combat_menu import SpellCombatAction, SpellCombatMenu, SpellSlotInfo
from spellcrawl.spells import Fireball, Immolation, LightningBolt, MagicMissile


@dataclass
class Wizard:
    equipped_spells: list = field(default_factory=list)
    current_mana: int = 50


class Harness:
    """A spell menu wired to a recording screen and a scripted button pad."""

    def __init__(self, spells, mana=50):
        self.drawn = []
        self._held = None
        self.player = Wizard(list(spells), mana)
        self.menu = SpellCombatMenu(self, self, self.player)
        self.menu.activate()

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return lambda *args, **kwargs: self.drawn.append((name, *args, *kwargs.values()))

    def was_pressed(self, button):
        return button is self._held

    def tap(self, button):
        self._held = button
        result = self.menu.handle_input()
        self._held = None
        return result

    def of_kind(self, kind):
        return [entry for entry in self.drawn if entry[0] == kind]


def test_slot_info_reflects_equipped_spells():
    fireball = Fireball()
    h = Harness([fireball, None])
    first, *rest = h.menu.slot_info
    assert (first.name, first.mana_cost, first.power, first.color) == (
        fireball.name,
        fireball.mana_cost,
        fireball.base_power,
        fireball.element_color,
    )
    assert first.available is True
    assert all(info.is_empty for info in rest)


def test_short_name_truncated():
    bolt = LightningBolt()
    short = Harness([bolt]).menu.slot_info[0].short_name
    assert len(short) <= 8
    assert bolt.name.startswith(short)


def test_unaffordable_spell_is_unavailable():
    h = Harness([Immolation()], mana=Immolation().mana_cost - 1)
    assert h.menu.slot_info[0].available is False
    assert h.menu.is_selected_action_valid() is False
    assert h.tap(Button.A) is MenuResult.NONE
    assert h.menu.selected_spell_slot() is None


def test_select_valid_spell():
    h = Harness([MagicMissile(), Fireball()])
    h.tap(Button.DOWN)
    assert h.tap(Button.A) is MenuResult.SELECTED
    assert h.menu.selected_action() is SpellCombatAction.CAST_SPELL_2
    assert h.menu.selected_spell_slot() == 1


def test_empty_slot_cannot_be_selected():
    h = Harness([MagicMissile()])
    h.tap(Button.UP)
    assert h.menu.current_selection == 3
    assert h.tap(Button.A) is MenuResult.NONE


def test_cancel_and_no_selection():
    h = Harness([MagicMissile()])
    assert h.tap(Button.B) is MenuResult.CANCELLED
    with pytest.raises(ValueError):
        h.menu.selected_action()


def test_unaffordable_slot_has_red_border():
    h = Harness([Immolation()], mana=0)
    h.menu.render()
    borders = [entry[5] for entry in h.of_kind("draw_rect")]
    assert borders == [constants.COLOR_RED] + [constants.COLOR_WHITE] * 3


def test_cursor_move_only_redraws_cursor():
    h = Harness([MagicMissile()])
    h.menu.render()
    h.drawn.clear()
    h.tap(Button.DOWN)
    h.menu.render()
    assert [entry[0] for entry in h.drawn] == ["fill_rect", "draw_text"]


def test_refresh_picks_up_mana_change():
    h = Harness([Fireball()], mana=50)
    h.menu.render()
    h.player.current_mana = 0
    h.drawn.clear()
    h.menu.refresh_spell_data()
    assert h.menu.slot_info[0].available is False
    h.menu.render()
    assert h.of_kind("draw_rect")


def test_text_area_fits_screen():
    h = Harness([])
    menu = SpellCombatMenu(h, h, h.player)
    x, y, width, height = menu.text_area_bounds()
    assert x + width + x == constants.SCREEN_WIDTH
    assert y + height <= 260


def test_empty_slot_info_defaults():
    info = SpellSlotInfo()
    assert info.is_empty
    assert info.available is False
    assert info.color == constants.COLOR_GRAY