import pytest

from env import ActionType, Character, CharacterType, Command, GameState, Stats, estimate_damage
from env.core.types import rounded_percent

from conftest import make_character


def test_rounded_percent_rounds_half_up():
    assert rounded_percent(1, 8) == 13  # 12.5
    assert rounded_percent(45, 80) == 56  # 56.25
    assert rounded_percent(2, 3) == 67
    assert rounded_percent(0, 0) == 0


@pytest.mark.parametrize("kwargs", [
    {"health": -1},
    {"health": 120},  # above max
    {"mana": 5, "max_mana": 0},
])
def test_stats_reject_bad_values(kwargs):
    values = dict(health=50, max_health=100, mana=0, max_mana=0, attack_power=10, defense=5)
    values.update(kwargs)
    with pytest.raises(ValueError):
        Stats(**values)


def test_character_type_parse():
    assert CharacterType.parse("mage") is CharacterType.MAGE
    assert CharacterType.parse("ROGUE") is CharacterType.ROGUE
    assert CharacterType.parse(CharacterType.ARCHER) is CharacterType.ARCHER
    with pytest.raises(ValueError):
        CharacterType.parse("bard")


def test_character_requires_name():
    with pytest.raises(ValueError):
        Character(" ", CharacterType.WARRIOR, Stats(1, 1, 0, 0, 1, 1))


def test_character_dict_roundtrip():
    knight = make_character("Knight", CharacterType.WARRIOR, health=90, max_health=150)
    restored = Character.from_dict(knight.to_dict())
    assert restored.name == knight.name
    assert restored.type is knight.type
    assert restored.stats == knight.stats


def test_estimate_damage_applies_defense_with_floor():
    attacker = make_character("A", attack_power=25)
    assert estimate_damage(attacker, make_character("T", defense=4)) == 21
    assert estimate_damage(attacker, make_character("Wall", defense=40)) == 1


def test_command_factories_and_serialization():
    hero = make_character("Hero")
    goblin = make_character("Goblin")

    attack = Command.attack(hero, goblin)
    assert attack.type == ActionType.ATTACK
    assert attack.to_dict() == {"type": "ATTACK", "params": {"actor": "Hero", "target": "Goblin"}}
    assert str(attack) == "ATTACK Hero -> Goblin"

    heal = Command.heal(goblin, 30)
    assert heal.actor is None
    assert heal.to_dict() == {"type": "HEAL", "params": {"target": "Goblin", "amount": 30}}


def test_command_validates_params():
    with pytest.raises(ValueError):
        Command(ActionType.ATTACK, {"target": make_character("X")})
    with pytest.raises(ValueError):
        Command.heal(make_character("X"), -5)


def test_game_state_rejects_negative_counters():
    with pytest.raises(ValueError):
        GameState(round_number=-1, turn_number=0)
    assert GameState.from_dict({"round_number": 3}).to_dict() == {"round_number": 3, "turn_number": 1}


def test_stats_health_percent():
    assert Stats(45, 80, 0, 0, 10, 5).health_percent == 56
    assert Stats(0, 0, 0, 0, 10, 5).health_percent == 0
