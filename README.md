# spellcrawl

This package holds the game logic of a small wizard dungeon crawler:

- the spells and the synergy rules between them,
- the wizard's grimoire of known and equipped spells,
- the menus the player steers with four buttons (UP, DOWN, A, B).

The package does no drawing and reads no input by itself. Each menu is given
objects that meet the `Display` and `InputSource` protocols from
`spellcrawl.menu_base`. Those objects can be a real screen, a terminal front
end or a test double. Messages are written with the standard `logging` module.

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Spells: `spellcrawl.spells`

The module defines these types:

- `ElementType` has one member for each school: Fire, Ice, Lightning, Arcane,
  Earth and Shadow. Each member has a display name as its value and a `color`
  in RGB565.
- `SpellEffect` covers damage, damage over time, heal, shield, buff and
  debuff. Each member has a `description`.
- `Spell` is the base class. There is one subclass for each spell in the game:
  `Fireball`, `Ignite`, `Immolation`, `FrostBolt`, `IceBarrier`, `Blizzard`,
  `LightningBolt`, `ChainLightning`, `Shock`, `MagicMissile`, `ArcaneShield`,
  `PowerSurge`, `Meditate`, `StoneSpear`, `EarthWall`, `Earthquake`,
  `ShadowBolt`, `Drain` and `DarkRitual`.

`Spell.cast(caster, target, other_spells=(), text_box=None)` returns `False`
in two cases:

- the caster or the target is missing;
- the caster has less mana than the spell costs.

Otherwise the cast goes ahead in this order:

1. The spell's mana cost is spent.
2. A synergy bonus is computed from `other_spells` and added to the spell's
   base power.
3. If the bonus is greater than zero, it is announced on the text box.
4. The primary effect is applied, then any secondary effect.
5. The method returns `True`.

`calculate_synergy_bonus(recent_spells)` adds up these bonuses:

- +5 for each recent spell of the same element.
- A pair bonus for each recent spell whose element pairs with this one:
  - Fire and Ice: +8
  - Arcane and Shadow: +9
  - Ice and Lightning: +7
  - Fire and Earth: +6
  - Lightning and Arcane: +6
  - Earth and Shadow: +5

`Caster`, `Target` and `TextBox` are protocols. Any object with the matching
methods will do:

- a caster needs `current_mana`, `spend_mana`, `restore_mana`, `heal` and
  `add_spell_effect`;
- a target needs `take_damage`;
- a text box needs `show_synergy_bonus`.

`Meditate` costs no mana, needs no target and restores mana instead of health.
It counts consecutive casts in the class attribute `Meditate.consecutive_uses`,
which is shared by every instance:

| Cast in the streak | Mana restored |
| --- | --- |
| first | 5 |
| second | 10 |
| third and later | 15 |

Casting any other spell resets the streak. So does
`Meditate.reset_consecutive_uses()`.

## Creating spells: `spellcrawl.factory`

```python
import random
from spellcrawl.factory import create_spell, create_random_spell, create_starter_spells

fireball = create_spell(1)                          # ValueError for an unknown id
scroll = create_random_spell(1, 2, random.Random(7))
starters = create_starter_spells()                  # Magic Missile and Meditate
```

`create_random_spell(min_tier=1, max_tier=3, rng=None)` picks from the tiers
in range. It returns `None` when no tier falls in that range.

Other functions in the module:

- `tier1_spells()`, `tier2_spells()` and `tier3_spells()` return the spell ids
  of each tier.
- `create_spells_of_element(element)` builds every spell of one element.
- `create_all_spells()` builds one of every spell, in tier order.

## The grimoire: `spellcrawl.library`

`SpellLibrary` holds the spells a wizard knows. It has four equip slots and
keeps the last three casts, which feed the synergy bonus.

```python
from spellcrawl.factory import create_spell
from spellcrawl.library import SpellLibrary

grimoire = SpellLibrary()
grimoire.learn_spell(create_spell(31))   # False if already known
grimoire.equip_spell(31, 0)              # False for an unknown spell or bad slot
grimoire.cast_spell(0, caster, target, text_box)
```

**Methods that change the grimoire**

- `forget_spell(spell_id)` removes a spell and empties every slot that held it.
- `unequip_spell(slot)` empties one slot.
- `record_cast(spell)` adds a spell to the recent casts.
- `clear_recent_casts()` empties the recent casts.

**Queries**

- `equipped_spell(slot)` returns the spell in a slot.
- `has_spell(spell_id)` tells whether a spell is known.
- `has_equip_slot()` tells whether a slot is free.
- `can_learn_more()` always returns `True`.

**Read-only properties**

- `known_spells`
- `equipped_spells`, which keeps `None` for empty slots
- `recent_casts`
- `known_spell_count`
- `equipped_spell_count`

**Reports as text**

- `known_spells_report()`
- `equipped_spells_report()`
- `spell_details(spell_id)`

## Menus

`spellcrawl.menu_base.MenuBase` is the abstract base of every menu. It tracks
the highlighted option, and `move_selection_up()` and `move_selection_down()`
wrap around at either end. It also provides `activate()`, `deactivate()` and
`reset()`.

Each menu has two methods to call every frame:

- `handle_input()` returns a `MenuResult`: `NONE`, `SELECTED` or `CANCELLED`.
- `render()` draws onto the `Display`, but only what changed since the last
  call.

The three menus:

- `spellcrawl.main_menu.MainMenu` shows Start Game, Settings and Credits.
  `selected_main_option()` returns a `MainMenuOption`. If nothing has been
  selected, it falls back to `START_GAME`.
- `spellcrawl.combat_menu.CombatMenu` shows Attack, Defend and Item. B
  cancels. `selected_action()` returns a `CombatAction`, or raises
  `ValueError` if nothing has been chosen.
- `spellcrawl.spell_combat_menu.SpellCombatMenu` shows the player's four
  equipped spells in a 2×2 grid.

`SpellCombatMenu` needs more than the other two menus:

- The player object must have `equipped_spells` and `current_mana`.
- The menu refuses a slot that is empty and a slot whose spell costs more mana
  than the player has. `is_selected_action_valid()` applies the same check to
  the highlighted slot.

Its methods:

- `selected_action()` returns a `SpellCombatAction`.
- `selected_spell_slot()` returns the chosen slot, or `None`.
- `slot_info` holds a `SpellSlotInfo` for each slot.
- `refresh_spell_data()` forces a full redraw.
- `text_area_bounds()` returns `(x, y, width, height)` of the area kept free
  for combat messages.

A typical loop:

```python
from spellcrawl.main_menu import MainMenu
from spellcrawl.menu_base import MenuResult

menu = MainMenu(display, buttons)
menu.activate()
while True:
    result = menu.handle_input()
    menu.render()
    if result is MenuResult.SELECTED:
        choice = menu.selected_main_option()
        break
```

`spellcrawl.constants` holds:

- the screen size and colours,
- input timings,
- game balance values such as starting stats, enemy stats and costs.

## What this package does not do

This package is a library, not a playable game. It has:

- no command to run,
- no screen or input driver,
- no player, enemy or combat-turn classes,
- no dungeon floors or rooms,
- no saving.

You supply the display, the buttons, the caster and the target, and you write
the game loop that ties the menus and spells together.