"""Creation of spells by identifier, tier and element."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .spells import (
    ArcaneShield,
    Blizzard,
    ChainLightning,
    DarkRitual,
    Drain,
    EarthWall,
    Earthquake,
    ElementType,
    Fireball,
    FrostBolt,
    IceBarrier,
    Ignite,
    Immolation,
    LightningBolt,
    MagicMissile,
    Meditate,
    PowerSurge,
    ShadowBolt,
    Shock,
    Spell,
    StoneSpear,
)

log = logging.getLogger(__name__)

_SPELLS_BY_ID: dict[int, Callable[[], Spell]] = {
    1: Fireball,
    2: Ignite,
    3: Immolation,
    11: FrostBolt,
    12: IceBarrier,
    13: Blizzard,
    21: LightningBolt,
    22: ChainLightning,
    23: Shock,
    31: MagicMissile,
    32: ArcaneShield,
    33: PowerSurge,
    34: Meditate,
    41: StoneSpear,
    42: EarthWall,
    43: Earthquake,
    51: ShadowBolt,
    52: Drain,
    53: DarkRitual,
}

_IDS_BY_ELEMENT: dict[ElementType, tuple[int, ...]] = {
    ElementType.FIRE: (1, 2, 3),
    ElementType.ICE: (11, 12, 13),
    ElementType.LIGHTNING: (21, 22, 23),
    ElementType.ARCANE: (31, 32, 33, 34),
    ElementType.EARTH: (41, 42, 43),
    ElementType.SHADOW: (51, 52, 53),
}


def tier1_spells() -> list[int]:
    """Identifiers of the basic spells."""
    return [1, 11, 21, 31, 34, 41, 51]


def tier2_spells() -> list[int]:
    """Identifiers of the intermediate spells."""
    return [2, 12, 22, 32, 42, 52]


def tier3_spells() -> list[int]:
    """Identifiers of the advanced spells."""
    return [3, 13, 23, 33, 43, 53]


def create_spell(spell_id: int) -> Spell:
    """Return a new spell with the given identifier."""
    try:
        factory = _SPELLS_BY_ID[spell_id]
    except KeyError:
        raise ValueError(f"Unknown spell ID: {spell_id}") from None
    return factory()


def create_random_spell(
    min_tier: int = 1,
    max_tier: int = 3,
    rng: Optional[random.Random] = None,
) -> Optional[Spell]:
    """Return a random spell from the tiers in range, or None if none qualify."""
    tiers = ((1, tier1_spells), (2, tier2_spells), (3, tier3_spells))
    candidates = [
        spell_id
        for tier, ids in tiers
        if min_tier <= tier <= max_tier
        for spell_id in ids()
    ]
    if not candidates:
        return None
    chooser = rng if rng is not None else random
    return create_spell(chooser.choice(candidates))


def create_starter_spells() -> list[Spell]:
    """The spells a new wizard begins with."""
    return [MagicMissile(), Meditate()]


def create_spells_of_element(element: ElementType) -> list[Spell]:
    """One of every spell belonging to the given element."""
    return [create_spell(spell_id) for spell_id in _IDS_BY_ELEMENT.get(element, ())]


def create_all_spells() -> list[Spell]:
    """One of every spell, in tier order."""
    return [
        create_spell(spell_id)
        for spell_id in (*tier1_spells(), *tier2_spells(), *tier3_spells())
    ]