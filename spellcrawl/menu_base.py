"""Shared behaviour for button-driven menus drawn on the game display."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Protocol


class Button(Enum):
    UP = auto()
    DOWN = auto()
    A = auto()
    B = auto()


class MenuResult(Enum):
    NONE = auto()
    SELECTED = auto()
    CANCELLED = auto()
    EXIT = auto()


class Display(Protocol):
    """Drawing surface a menu renders onto."""

    def clear(self) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None: ...

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None: ...

    def draw_text(self, text: str, x: int, y: int, color: int, size: int = 1) -> None: ...


class InputSource(Protocol):
    """Button state for the current frame."""

    def was_pressed(self, button: Button) -> bool: ...


class MenuBase(ABC):
    """A menu with a wrapping selection cursor over a fixed number of options."""

    def __init__(self, display: Display, input_source: InputSource, num_options: int) -> None:
        self.display = display
        self.input_source = input_source
        self.max_options = num_options
        self.selected_option = 0
        self.is_active = False
        self.selection_made: Optional[int] = None

    @property
    def current_selection(self) -> int:
        return self.selected_option

    @property
    def selection_result(self) -> Optional[int]:
        """Index of the last confirmed selection, or None."""
        return self.selection_made

    def activate(self) -> None:
        self.is_active = True
        self.selected_option = 0
        self.selection_made = None

    def deactivate(self) -> None:
        self.is_active = False

    def reset(self) -> None:
        self.selected_option = 0
        self.selection_made = None
        self.is_active = False

    def move_selection_up(self) -> None:
        self.selected_option -= 1
        self._wrap_selection()

    def move_selection_down(self) -> None:
        self.selected_option += 1
        self._wrap_selection()

    def _wrap_selection(self) -> None:
        if self.selected_option < 0:
            self.selected_option = self.max_options - 1
        elif self.selected_option >= self.max_options:
            self.selected_option = 0

    @abstractmethod
    def render(self) -> None:
        """Draw the menu if anything changed since the last call."""

    @abstractmethod
    def handle_input(self) -> MenuResult:
        """Process this frame's buttons and report the outcome."""