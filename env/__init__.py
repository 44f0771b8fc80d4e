"""
Battle engine stand-ins consumed by the agents.

The agents only read characters and counters and hand back commands; the
engine owns resolution and turn order.
"""

from .core import CharacterType, ActionType, Stats, Command
from .entities import Character
from .mechanics import estimate_damage
from .world import GameState

__all__ = [
    "CharacterType",
    "ActionType",
    "Stats",
    "Command",
    "Character",
    "estimate_damage",
    "GameState",
]
