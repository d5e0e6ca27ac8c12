"""Spells, a spell grimoire and button-driven menus for a small wizard dungeon crawler."""

__version__ = "0.2.0"

__all__ = [
    "constants",
    "spells",
    "factory",
    "library",
    "menu_base",
    "main_menu",
    "combat_menu",
    "spell_combat_menu",
]