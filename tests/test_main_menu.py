from types import SimpleNamespace

import pytest

from spellcrawl.main_menu import MainMenu, MainMenuOption
from spellcrawl.menu_base import Button, MenuResult


class Screen:
    """Records every drawing call made on it."""

    def __init__(self):
        self.log = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return lambda *args, **kwargs: self.log.append((name, *args, *kwargs.values()))

    def kinds(self):
        return [entry[0] for entry in self.log]

    def texts(self):
        return [entry[1] for entry in self.log if entry[0] == "draw_text"]


def make(active=True):
    held = set()
    screen = Screen()
    menu = MainMenu(screen, SimpleNamespace(was_pressed=held.__contains__))

    def tap(*buttons):
        result = MenuResult.NONE
        for button in buttons:
            held.add(button)
            result = menu.handle_input()
            held.clear()
        return result

    if active:
        menu.activate()
    return menu, screen, tap


def test_inactive_menu_ignores_input_and_render():
    menu, screen, tap = make(active=False)
    assert tap(Button.A) is MenuResult.NONE
    menu.render()
    assert screen.log == []


def test_full_render_shows_options_and_cursor():
    menu, screen, _ = make()
    menu.render()
    texts = screen.texts()
    assert screen.kinds()[0] == "clear"
    assert {"Start Game", "Settings", "Credits"} <= set(texts)
    assert texts.count(">") == 1


def test_second_render_without_change_draws_nothing():
    menu, screen, _ = make()
    menu.render()
    before = len(screen.log)
    menu.render()
    assert len(screen.log) == before


def test_selection_change_updates_cursor_only():
    menu, screen, tap = make()
    menu.render()
    screen.log.clear()
    tap(Button.DOWN)
    menu.render()
    assert screen.kinds() == ["fill_rect", "draw_text"]


@pytest.mark.parametrize("steps, expected", list(enumerate(MainMenuOption)))
def test_select_each_option(steps, expected):
    menu, _, tap = make()
    assert tap(*[Button.DOWN] * steps, Button.A) is MenuResult.SELECTED
    assert menu.selected_main_option() is expected


def test_up_from_first_wraps_to_credits():
    menu, _, tap = make()
    tap(Button.UP, Button.A)
    assert menu.selected_main_option() is MainMenuOption.CREDITS


def test_no_selection_defaults_to_start_game():
    menu, _, _ = make()
    assert menu.selected_main_option() is MainMenuOption.START_GAME


def test_stale_selection_is_cleared_on_next_input():
    menu, _, tap = make()
    tap(Button.DOWN, Button.A)
    assert menu.selection_result == 1
    assert tap(Button.B) is MenuResult.NONE
    assert menu.selection_result is None