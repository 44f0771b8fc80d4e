from pathlib import Path
import sys

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from env import Character, CharacterType, GameState, Stats  # noqa: E402


def make_character(name, kind=CharacterType.WARRIOR, health=100, max_health=100,
                   attack_power=20, defense=10, mana=0, max_mana=0):
    return Character(name, kind, Stats(health, max_health, mana, max_mana, attack_power, defense))


@pytest.fixture(autouse=True)
def clean_agent_env(monkeypatch):
    """Keep developer BATTLE_AGENT_* settings out of the tests."""
    for var in (
        "BATTLE_AGENT_MODEL",
        "BATTLE_AGENT_TIMEOUT",
        "BATTLE_AGENT_TEMPERATURE",
        "BATTLE_AGENT_HEAL_AMOUNT",
        "BATTLE_AGENT_LOG_LEVEL",
        "BATTLE_AGENT_LOG_JSON",
        "BATTLE_AGENT_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def hero():
    return make_character("Aria", CharacterType.MAGE, health=45, max_health=80,
                          attack_power=25, defense=5, mana=30, max_mana=60)


@pytest.fixture
def allies(hero):
    return [
        make_character("Cleric", CharacterType.MAGE, health=20, max_health=70),
        make_character("Knight", CharacterType.WARRIOR, health=140, max_health=150, defense=18),
    ]


@pytest.fixture
def enemies():
    return [
        make_character("Orc", CharacterType.WARRIOR, health=40, max_health=120, defense=12),
        make_character("Goblin", CharacterType.ROGUE, health=15, max_health=60, defense=4),
    ]


@pytest.fixture
def game_state():
    return GameState(round_number=2, turn_number=5)
