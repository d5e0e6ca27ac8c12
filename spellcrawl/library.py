"""The wizard's grimoire: known spells, equipped slots and recent casts."""

from __future__ import annotations

import logging
from typing import Optional

from .spells import Caster, Spell, Target, TextBox

log = logging.getLogger(__name__)

MAX_EQUIPPED = 4
MAX_RECENT = 3


class SpellLibrary:
    """Known spells, up to four equipped slots and the last few casts."""

    def __init__(self) -> None:
        self._known: list[Spell] = []
        self._equipped: list[Optional[Spell]] = [None] * MAX_EQUIPPED
        self._recent: list[Spell] = []

    @property
    def known_spells(self) -> list[Spell]:
        return list(self._known)

    @property
    def equipped_spells(self) -> list[Optional[Spell]]:
        """Every slot in order, with None for empty ones."""
        return list(self._equipped)

    @property
    def recent_casts(self) -> list[Spell]:
        return list(self._recent)

    @property
    def known_spell_count(self) -> int:
        return len(self._known)

    @property
    def equipped_spell_count(self) -> int:
        return sum(spell is not None for spell in self._equipped)

    def _find(self, spell_id: int) -> Optional[Spell]:
        return next((s for s in self._known if s.spell_id == spell_id), None)

    @staticmethod
    def _valid_slot(slot: int) -> bool:
        return 0 <= slot < MAX_EQUIPPED

    def learn_spell(self, spell: Optional[Spell]) -> bool:
        """Add a spell; False if it is missing or already known."""
        if spell is None:
            return False
        if self.has_spell(spell.spell_id):
            log.info("Spell already known: %s", spell.name)
            return False
        self._known.append(spell)
        log.info("Learned spell: %s", spell.name)
        return True

    def forget_spell(self, spell_id: int) -> bool:
        """Remove a known spell and clear any slot holding it."""
        spell = self._find(spell_id)
        if spell is None:
            return False
        self._equipped = [
            None if s is not None and s.spell_id == spell_id else s
            for s in self._equipped
        ]
        self._known.remove(spell)
        return True

    def equip_spell(self, spell_id: int, slot: int) -> bool:
        """Put a known spell into a slot."""
        if not self._valid_slot(slot):
            return False
        spell = self._find(spell_id)
        if spell is None:
            return False
        self._equipped[slot] = spell
        log.info("Equipped %s to slot %d", spell.name, slot + 1)
        return True

    def unequip_spell(self, slot: int) -> bool:
        if not self._valid_slot(slot):
            return False
        self._equipped[slot] = None
        log.info("Unequipped spell from slot %d", slot + 1)
        return True

    def equipped_spell(self, slot: int) -> Optional[Spell]:
        if not self._valid_slot(slot):
            return None
        return self._equipped[slot]

    def cast_spell(
        self,
        slot: int,
        caster: Optional[Caster],
        target: Optional[Target],
        text_box: Optional[TextBox] = None,
    ) -> bool:
        """Cast the spell in a slot, drawing synergy from recent casts."""
        spell = self.equipped_spell(slot)
        if spell is None:
            return False
        if spell.cast(caster, target, list(self._recent), text_box):
            self.record_cast(spell)
            return True
        return False

    def record_cast(self, spell: Optional[Spell]) -> None:
        if spell is None:
            return
        self._recent.append(spell)
        del self._recent[:-MAX_RECENT]

    def clear_recent_casts(self) -> None:
        self._recent.clear()

    def has_spell(self, spell_id: int) -> bool:
        return self._find(spell_id) is not None

    def can_learn_more(self) -> bool:
        return True

    def has_equip_slot(self) -> bool:
        return self.equipped_spell_count < MAX_EQUIPPED

    def known_spells_report(self) -> str:
        lines = ["=== SPELL GRIMOIRE ===", f"Known spells: {len(self._known)}"]
        for number, spell in enumerate(self._known, start=1):
            lines.append(
                f"{number}. {spell.name} ({spell.element_name}) - Power: {spell.base_power}"
            )
            lines.append(f"   {spell.description}")
        return "\n".join(lines)

    def equipped_spells_report(self) -> str:
        lines = ["=== EQUIPPED SPELLS ==="]
        for number, spell in enumerate(self._equipped, start=1):
            content = "Empty" if spell is None else f"{spell.name} ({spell.element_name})"
            lines.append(f"Slot {number}: {content}")
        return "\n".join(lines)

    def spell_details(self, spell_id: int) -> str:
        spell = self._find(spell_id)
        if spell is None:
            return "Spell not found in grimoire."
        return "\n".join(
            [
                f"=== {spell.name} ===",
                f"Element: {spell.element_name}",
                f"Power: {spell.base_power}",
                f"Mana Cost: {spell.mana_cost}",
                f"Effect: {spell.effect_name}",
                f"Description: {spell.description}",
            ]
        )