"""
Core types and constants for the battle engine.
"""

# Instead of from env.core.types import Stats, you can do: from env.core import Stats
from .types import (
    CharacterType,
    ActionType,
    Stats,
    rounded_percent,
)
from .actions import Command


__all__ = [
    "CharacterType",
    "ActionType",
    "Stats",
    "rounded_percent",
    "Command",
]
