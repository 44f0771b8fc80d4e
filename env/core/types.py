"""
Core type definitions for the battle engine.

This module contains the fundamental enums and value types shared by the
engine and the agents. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# CHARACTER ARCHETYPES
# ============================================================================

class CharacterType(Enum):
    """Fixed set of character archetypes."""
    WARRIOR = "warrior"  # Tank, front line
    MAGE = "mage"  # Caster
    ARCHER = "archer"  # Ranged damage
    ROGUE = "rogue"  # Finesse / burst

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, raw: str | CharacterType) -> CharacterType:
        """Accept either the enum, its name or its value (case-insensitive)."""
        if isinstance(raw, CharacterType):
            return raw
        text = str(raw).strip()
        for member in cls:
            if text.upper() == member.name or text.lower() == member.value:
                return member
        raise ValueError(f"Unknown character type '{raw}'")


# ============================================================================
# COMMANDS
# ============================================================================

class ActionType(Enum):
    """Types of commands a character can issue."""
    ATTACK = auto()  # Strike an enemy
    HEAL = auto()  # Restore health to an ally

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """Lower-case label used in prompts and model replies."""
        return self.name.lower()


# ============================================================================
# STATS
# ============================================================================

@dataclass(frozen=True)
class Stats:
    """
    Four-field stats block of a character (health and mana carry a maximum).

    Attributes:
        health: Current health points
        max_health: Maximum health points
        mana: Current mana
        max_mana: Maximum mana
        attack_power: Raw attack strength
        defense: Flat damage reduction
    """
    health: int
    max_health: int
    mana: int
    max_mana: int
    attack_power: int
    defense: int

    def __post_init__(self):
        for name in ("health", "max_health", "mana", "max_mana", "attack_power", "defense"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"'{name}' must be a non-negative int, got {value!r}")
        if self.health > self.max_health:
            raise ValueError(f"health {self.health} exceeds max_health {self.max_health}")
        if self.mana > self.max_mana:
            raise ValueError(f"mana {self.mana} exceeds max_mana {self.max_mana}")

    @property
    def health_percent(self) -> int:
        """Health as a percentage of max, rounded half up (0 when max is 0)."""
        return rounded_percent(self.health, self.max_health)

    def to_dict(self) -> dict:
        return {
            "health": self.health,
            "max_health": self.max_health,
            "mana": self.mana,
            "max_mana": self.max_mana,
            "attack_power": self.attack_power,
            "defense": self.defense,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Stats:
        return cls(
            health=int(data["health"]),
            max_health=int(data["max_health"]),
            mana=int(data.get("mana", 0)),
            max_mana=int(data.get("max_mana", 0)),
            attack_power=int(data["attack_power"]),
            defense=int(data["defense"]),
        )


def rounded_percent(current: int, maximum: int) -> int:
    """Integer percentage of current/maximum, halves rounded up."""
    if maximum <= 0:
        return 0
    # Integer arithmetic keeps 12.5 -> 13 exact (round() would give banker's rounding)
    return (current * 200 + maximum) // (maximum * 2)
