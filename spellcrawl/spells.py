"""Spells, their elements and effects, and the synergy rules between them."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import ClassVar, Iterable, Optional, Protocol

from . import constants

log = logging.getLogger(__name__)

MEDITATE_ID = 34


class ElementType(Enum):
    """The six schools of magic; the value is the display name."""

    FIRE = "Fire"
    ICE = "Ice"
    LIGHTNING = "Lightning"
    ARCANE = "Arcane"
    EARTH = "Earth"
    SHADOW = "Shadow"

    @property
    def color(self) -> int:
        return _ELEMENT_COLORS.get(self, constants.COLOR_WHITE)


_ELEMENT_COLORS = {
    ElementType.FIRE: constants.COLOR_RED,
    ElementType.ARCANE: constants.COLOR_MAGENTA,
    ElementType.EARTH: constants.COLOR_GREEN,
}


class SpellEffect(IntEnum):
    DAMAGE = 0
    DAMAGE_OVER_TIME = 1
    HEAL = 2
    SHIELD = 3
    BUFF = 4
    DEBUFF = 5

    @property
    def description(self) -> str:
        return _EFFECT_DESCRIPTIONS[self]


_EFFECT_DESCRIPTIONS = {
    SpellEffect.DAMAGE: "damages enemies",
    SpellEffect.HEAL: "restores health",
    SpellEffect.SHIELD: "provides protection",
    SpellEffect.BUFF: "enhances abilities",
    SpellEffect.DEBUFF: "weakens foes",
    SpellEffect.DAMAGE_OVER_TIME: "inflicts lasting harm",
}

# (element being cast, element cast recently) -> bonus
_PAIR_SYNERGIES = {
    (ElementType.FIRE, ElementType.ICE): 8,
    (ElementType.FIRE, ElementType.EARTH): 6,
    (ElementType.ICE, ElementType.FIRE): 8,
    (ElementType.ICE, ElementType.LIGHTNING): 7,
    (ElementType.LIGHTNING, ElementType.ICE): 7,
    (ElementType.LIGHTNING, ElementType.ARCANE): 6,
    (ElementType.ARCANE, ElementType.LIGHTNING): 6,
    (ElementType.ARCANE, ElementType.SHADOW): 9,
    (ElementType.EARTH, ElementType.FIRE): 6,
    (ElementType.EARTH, ElementType.SHADOW): 5,
    (ElementType.SHADOW, ElementType.ARCANE): 9,
    (ElementType.SHADOW, ElementType.EARTH): 5,
}
SAME_ELEMENT_BONUS = 5


class Caster(Protocol):
    """What a spell needs from the one casting it."""

    current_mana: int

    def spend_mana(self, amount: int) -> None: ...

    def restore_mana(self, amount: int) -> None: ...

    def heal(self, amount: int) -> None: ...

    def add_spell_effect(self, effect: SpellEffect, power: int, duration: int) -> None: ...


class Target(Protocol):
    """What a spell needs from its target."""

    def take_damage(self, amount: int) -> None: ...


class TextBox(Protocol):
    """Combat text output that can announce synergy bonuses."""

    def show_synergy_bonus(self, spell_name: str, bonus: int) -> None: ...


class Spell:
    """A castable spell with a primary and optional secondary effect."""

    def __init__(
        self,
        spell_id: int,
        name: str,
        element: ElementType,
        effect: SpellEffect,
        power: int,
        mana_cost: int = 0,
    ) -> None:
        self.spell_id = spell_id
        self.name = name
        self.element = element
        self.primary_effect = effect
        self.base_power = power
        self.mana_cost = mana_cost
        self.has_secondary = False
        self.secondary_effect = SpellEffect.DAMAGE
        self.secondary_power = 0
        self.duration = 0
        self.description = f"A {self.element_name} spell that {self.effect_name}."

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.spell_id}, name={self.name!r})"

    @property
    def element_name(self) -> str:
        return self.element.value

    @property
    def effect_name(self) -> str:
        return self.primary_effect.description

    @property
    def element_color(self) -> int:
        return self.element.color

    def add_secondary_effect(self, effect: SpellEffect, power: int, duration: int = 0) -> None:
        self.has_secondary = True
        self.secondary_effect = effect
        self.secondary_power = power
        self.duration = duration

    def calculate_synergy_bonus(self, recent_spells: Iterable[Optional[Spell]]) -> int:
        """Bonus power earned from the elements of recently cast spells."""
        bonus = 0
        for recent in recent_spells:
            if recent is None:
                continue
            if recent.element is self.element:
                bonus += SAME_ELEMENT_BONUS
            bonus += _PAIR_SYNERGIES.get((self.element, recent.element), 0)
        return bonus

    def cast(
        self,
        caster: Optional[Caster],
        target: Optional[Target],
        other_spells: Iterable[Optional[Spell]] = (),
        text_box: Optional[TextBox] = None,
    ) -> bool:
        """Cast at the target; return False if it could not be cast."""
        if caster is None or target is None:
            return False
        if caster.current_mana < self.mana_cost:
            log.info("Not enough mana to cast %s!", self.name)
            return False

        if self.spell_id != MEDITATE_ID:
            Meditate.reset_consecutive_uses()

        caster.spend_mana(self.mana_cost)
        synergy = self.calculate_synergy_bonus(other_spells)
        total = self.base_power + synergy

        if text_box is not None and synergy > 0:
            text_box.show_synergy_bonus(self.name, synergy)

        self._apply_primary(caster, target, total)
        if self.has_secondary:
            self._apply_secondary(caster, target)
        return True

    def _apply_primary(self, caster: Caster, target: Target, total: int) -> None:
        effect = self.primary_effect
        if effect in (SpellEffect.DAMAGE, SpellEffect.DAMAGE_OVER_TIME):
            target.take_damage(total)
            log.info("%s deals %d damage!", self.name, total)
        elif effect is SpellEffect.HEAL:
            if self.spell_id == MEDITATE_ID:
                caster.restore_mana(total)
                log.info("%s restores %d mana!", self.name, total)
            else:
                caster.heal(total)
                log.info("%s heals %d HP!", self.name, total)
        elif effect is SpellEffect.SHIELD:
            caster.add_spell_effect(SpellEffect.SHIELD, total, 3)
            log.info("%s grants %d shield!", self.name, total)
        elif effect is SpellEffect.BUFF:
            caster.add_spell_effect(SpellEffect.BUFF, total, self.duration)
            log.info("%s provides a magical enhancement!", self.name)
        elif effect is SpellEffect.DEBUFF:
            log.info("%s weakens the enemy!", self.name)

    def _apply_secondary(self, caster: Caster, target: Target) -> None:
        effect = self.secondary_effect
        power = self.secondary_power
        if effect is SpellEffect.HEAL:
            if self.spell_id == MEDITATE_ID:
                caster.restore_mana(power)
            else:
                caster.heal(power)
        elif effect is SpellEffect.DAMAGE_OVER_TIME:
            target.take_damage(power)
        elif effect is SpellEffect.BUFF:
            caster.add_spell_effect(SpellEffect.BUFF, power, self.duration)
        elif effect is SpellEffect.DEBUFF:
            log.info("  Also applies debuff!")


class Meditate(Spell):
    """Free mana restoration that strengthens with consecutive use."""

    consecutive_uses: ClassVar[int] = 0

    def __init__(self) -> None:
        super().__init__(MEDITATE_ID, "Meditate", ElementType.ARCANE, SpellEffect.HEAL, 5, 0)
        self.description = (
            "Focus your mind to restore mana. Grows stronger with consecutive use."
        )

    @classmethod
    def reset_consecutive_uses(cls) -> None:
        Meditate.consecutive_uses = 0

    def calculate_synergy_bonus(self, recent_spells: Iterable[Optional[Spell]]) -> int:
        uses = Meditate.consecutive_uses
        if uses <= 1:
            return 0
        if uses == 2:
            return 5
        return 10

    def cast(
        self,
        caster: Optional[Caster],
        target: Optional[Target] = None,
        other_spells: Iterable[Optional[Spell]] = (),
        text_box: Optional[TextBox] = None,
    ) -> bool:
        if caster is None:
            return False
        Meditate.consecutive_uses += 1
        synergy = self.calculate_synergy_bonus(other_spells)
        total = self.base_power + synergy
        if text_box is not None and synergy > 0:
            text_box.show_synergy_bonus(self.name, synergy)
        caster.restore_mana(total)
        log.info("Meditate restores %d mana.", total)
        return True


class MagicMissile(Spell):
    def __init__(self) -> None:
        super().__init__(31, "Magic Missile", ElementType.ARCANE, SpellEffect.DAMAGE, 18, 4)
        self.description = "Reliable arcane projectiles that never miss."


class ArcaneShield(Spell):
    def __init__(self) -> None:
        super().__init__(32, "Arcane Shield", ElementType.ARCANE, SpellEffect.SHIELD, 20, 8)
        self.description = "A shimmering barrier of pure magical energy."
        self.add_secondary_effect(SpellEffect.BUFF, 5, 3)


class PowerSurge(Spell):
    def __init__(self) -> None:
        super().__init__(33, "Power Surge", ElementType.ARCANE, SpellEffect.BUFF, 12, 10)
        self.description = "Channels raw magic to enhance all abilities."
        self.add_secondary_effect(SpellEffect.BUFF, 8, 4)


class Fireball(Spell):
    def __init__(self) -> None:
        super().__init__(1, "Fireball", ElementType.FIRE, SpellEffect.DAMAGE, 25, 6)
        self.description = "A blazing orb of fire that burns enemies."


class Ignite(Spell):
    def __init__(self) -> None:
        super().__init__(2, "Ignite", ElementType.FIRE, SpellEffect.DAMAGE_OVER_TIME, 8, 5)
        self.description = "Sets the enemy ablaze, dealing damage over time."
        self.add_secondary_effect(SpellEffect.DAMAGE_OVER_TIME, 6, 3)


class Immolation(Spell):
    def __init__(self) -> None:
        super().__init__(3, "Immolation", ElementType.FIRE, SpellEffect.DAMAGE, 35, 12)
        self.description = "A devastating fire spell that consumes everything."


class FrostBolt(Spell):
    def __init__(self) -> None:
        super().__init__(11, "Frost Bolt", ElementType.ICE, SpellEffect.DAMAGE, 20, 5)
        self.description = "A shard of ice that pierces and slows enemies."
        self.add_secondary_effect(SpellEffect.DEBUFF, 3, 2)


class IceBarrier(Spell):
    def __init__(self) -> None:
        super().__init__(12, "Ice Barrier", ElementType.ICE, SpellEffect.SHIELD, 15, 7)
        self.description = "Creates a protective barrier of magical ice."


class Blizzard(Spell):
    def __init__(self) -> None:
        super().__init__(13, "Blizzard", ElementType.ICE, SpellEffect.DAMAGE, 30, 11)
        self.description = "A freezing storm that devastates the battlefield."
        self.add_secondary_effect(SpellEffect.DEBUFF, 5, 2)


class LightningBolt(Spell):
    def __init__(self) -> None:
        super().__init__(21, "Lightning Bolt", ElementType.LIGHTNING, SpellEffect.DAMAGE, 28, 6)
        self.description = "A crackling bolt of pure electrical energy."


class ChainLightning(Spell):
    def __init__(self) -> None:
        super().__init__(22, "Chain Lightning", ElementType.LIGHTNING, SpellEffect.DAMAGE, 22, 8)
        self.description = "Lightning that jumps between targets with increasing power."


class Shock(Spell):
    def __init__(self) -> None:
        super().__init__(23, "Shock", ElementType.LIGHTNING, SpellEffect.DEBUFF, 10, 9)
        self.description = "Stuns the enemy, reducing their accuracy and speed."
        self.add_secondary_effect(SpellEffect.DEBUFF, 8, 3)


class StoneSpear(Spell):
    def __init__(self) -> None:
        super().__init__(41, "Stone Spear", ElementType.EARTH, SpellEffect.DAMAGE, 24, 5)
        self.description = "Conjures a sharp spear of hardened earth."


class EarthWall(Spell):
    def __init__(self) -> None:
        super().__init__(42, "Earth Wall", ElementType.EARTH, SpellEffect.SHIELD, 25, 9)
        self.description = "Raises a protective wall of solid stone."
        self.add_secondary_effect(SpellEffect.HEAL, 10, 0)


class Earthquake(Spell):
    def __init__(self) -> None:
        super().__init__(43, "Earthquake", ElementType.EARTH, SpellEffect.DAMAGE, 32, 13)
        self.description = "Shakes the very foundations of the battlefield."
        self.add_secondary_effect(SpellEffect.DEBUFF, 6, 3)


class ShadowBolt(Spell):
    def __init__(self) -> None:
        super().__init__(51, "Shadow Bolt", ElementType.SHADOW, SpellEffect.DAMAGE, 22, 6)
        self.description = "A bolt of pure darkness that drains life force."
        self.add_secondary_effect(SpellEffect.HEAL, 8, 0)


class Drain(Spell):
    def __init__(self) -> None:
        super().__init__(52, "Drain", ElementType.SHADOW, SpellEffect.DAMAGE, 15, 7)
        self.description = "Siphons health and energy from the enemy."
        self.add_secondary_effect(SpellEffect.HEAL, 15, 0)


class DarkRitual(Spell):
    def __init__(self) -> None:
        super().__init__(53, "Dark Ritual", ElementType.SHADOW, SpellEffect.BUFF, 5, 15)
        self.description = "A forbidden ritual that grants immense power."
        self.add_secondary_effect(SpellEffect.BUFF, 15, 5)