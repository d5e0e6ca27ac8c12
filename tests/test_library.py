import pytest

from spellcrawl.library import MAX_EQUIPPED, MAX_RECENT, SpellLibrary
from spellcrawl.spells import (
    SAME_ELEMENT_BONUS,
    Fireball,
    FrostBolt,
    MagicMissile,
    Meditate,
    StoneSpear,
)


class FakeCaster:
    def __init__(self, mana=100):
        self.current_mana = mana
        self.healed = 0
        self.effects = []

    def spend_mana(self, amount):
        self.current_mana -= amount

    def restore_mana(self, amount):
        self.current_mana += amount

    def heal(self, amount):
        self.healed += amount

    def add_spell_effect(self, effect, power, duration):
        self.effects.append((effect, power, duration))


class FakeTarget:
    def __init__(self):
        self.damage = []

    def take_damage(self, amount):
        self.damage.append(amount)


class FakeTextBox:
    def __init__(self):
        self.calls = []

    def show_synergy_bonus(self, spell_name, bonus):
        self.calls.append((spell_name, bonus))


@pytest.fixture(autouse=True)
def reset_meditate():
    Meditate.reset_consecutive_uses()
    yield
    Meditate.reset_consecutive_uses()


@pytest.fixture
def library():
    lib = SpellLibrary()
    lib.learn_spell(Fireball())
    lib.learn_spell(MagicMissile())
    return lib


def test_learn_spell_and_duplicates(library):
    assert library.known_spell_count == 2
    assert library.learn_spell(Fireball()) is False
    assert library.learn_spell(None) is False
    assert library.known_spell_count == 2


def test_has_spell(library):
    assert library.has_spell(Fireball().spell_id)
    assert not library.has_spell(FrostBolt().spell_id)


def test_new_library_has_empty_slots():
    lib = SpellLibrary()
    assert lib.equipped_spells == [None] * MAX_EQUIPPED
    assert lib.has_equip_slot()
    assert lib.can_learn_more()


def test_equip_and_lookup(library):
    fireball_id = Fireball().spell_id
    assert library.equip_spell(fireball_id, 2)
    assert library.equipped_spell(2).spell_id == fireball_id
    assert library.equipped_spell_count == 1


def test_equip_rejects_unknown_and_bad_slot(library):
    assert library.equip_spell(FrostBolt().spell_id, 0) is False
    assert library.equip_spell(Fireball().spell_id, MAX_EQUIPPED) is False
    assert library.equip_spell(Fireball().spell_id, -1) is False
    assert library.equipped_spell_count == 0


def test_equipped_spell_out_of_range(library):
    assert library.equipped_spell(MAX_EQUIPPED) is None
    assert library.equipped_spell(-1) is None


def test_unequip(library):
    library.equip_spell(Fireball().spell_id, 0)
    assert library.unequip_spell(0)
    assert library.equipped_spell(0) is None
    assert library.unequip_spell(MAX_EQUIPPED) is False


def test_full_slots_leave_no_equip_slot(library):
    for slot in range(MAX_EQUIPPED):
        library.equip_spell(MagicMissile().spell_id, slot)
    assert library.equipped_spell_count == MAX_EQUIPPED
    assert not library.has_equip_slot()


def test_forget_clears_equipped_slots(library):
    fireball_id = Fireball().spell_id
    library.equip_spell(fireball_id, 0)
    library.equip_spell(fireball_id, 3)
    assert library.forget_spell(fireball_id)
    assert not library.has_spell(fireball_id)
    assert library.equipped_spell(0) is None
    assert library.equipped_spell(3) is None
    assert library.forget_spell(fireball_id) is False


def test_record_cast_keeps_only_recent():
    lib = SpellLibrary()
    spells = [Fireball(), FrostBolt(), StoneSpear(), MagicMissile(), Meditate()]
    for spell in spells:
        lib.record_cast(spell)
    assert lib.recent_casts == spells[-MAX_RECENT:]
    lib.record_cast(None)
    assert len(lib.recent_casts) == MAX_RECENT
    lib.clear_recent_casts()
    assert lib.recent_casts == []


def test_cast_spell_spends_mana_and_records(library):
    fireball = library.known_spells[0]
    library.equip_spell(fireball.spell_id, 0)
    caster = FakeCaster(mana=100)
    target = FakeTarget()
    assert library.cast_spell(0, caster, target)
    assert caster.current_mana == 100 - fireball.mana_cost
    assert target.damage == [fireball.base_power]
    assert library.recent_casts == [fireball]


def test_second_same_element_cast_gets_synergy(library):
    fireball = library.known_spells[0]
    library.equip_spell(fireball.spell_id, 0)
    caster = FakeCaster(mana=100)
    target = FakeTarget()
    box = FakeTextBox()
    library.cast_spell(0, caster, target, box)
    library.cast_spell(0, caster, target, box)
    assert target.damage[1] == fireball.base_power + SAME_ELEMENT_BONUS
    assert box.calls == [(fireball.name, SAME_ELEMENT_BONUS)]


def test_cast_spell_fails_without_mana(library):
    fireball = library.known_spells[0]
    library.equip_spell(fireball.spell_id, 0)
    caster = FakeCaster(mana=fireball.mana_cost - 1)
    target = FakeTarget()
    assert library.cast_spell(0, caster, target) is False
    assert library.recent_casts == []
    assert target.damage == []


def test_cast_spell_empty_or_invalid_slot(library):
    caster = FakeCaster()
    assert library.cast_spell(1, caster, FakeTarget()) is False
    assert library.cast_spell(MAX_EQUIPPED, caster, FakeTarget()) is False


def test_known_spells_report(library):
    report = library.known_spells_report().splitlines()
    assert report[0] == "=== SPELL GRIMOIRE ==="
    assert report[1] == "Known spells: 2"
    fireball = library.known_spells[0]
    assert report[2] == (
        f"1. {fireball.name} ({fireball.element_name}) - Power: {fireball.base_power}"
    )
    assert report[3] == f"   {fireball.description}"


def test_equipped_spells_report(library):
    fireball = library.known_spells[0]
    library.equip_spell(fireball.spell_id, 1)
    lines = library.equipped_spells_report().splitlines()
    assert lines[0] == "=== EQUIPPED SPELLS ==="
    assert lines[1] == "Slot 1: Empty"
    assert lines[2] == f"Slot 2: {fireball.name} ({fireball.element_name})"
    assert len(lines) == MAX_EQUIPPED + 1


def test_spell_details(library):
    fireball = library.known_spells[0]
    details = library.spell_details(fireball.spell_id).splitlines()
    assert details[0] == f"=== {fireball.name} ==="
    assert f"Mana Cost: {fireball.mana_cost}" in details
    assert library.spell_details(999) == "Spell not found in grimoire."


def test_lists_are_copies(library):
    known = library.known_spells
    known.clear()
    assert library.known_spell_count == 2