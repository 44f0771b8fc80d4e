"""
Character entity - a single combatant in a party.

A character:
- Has a name that is unique within its battle
- Belongs to one archetype (warrior, mage, archer, rogue)
- Carries a stats block that the engine replaces as the battle progresses
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any

from ..core.types import CharacterType, Stats


@dataclass(eq=False)
class Character:
    """
    A live combatant owned by the battle engine.

    Equality is identity: two characters with identical stats are still
    different combatants. Agents only read from characters; the engine is
    the sole owner of stat changes.
    """

    name: str
    type: CharacterType
    stats: Stats

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Character requires a non-blank name")
        self.type = CharacterType.parse(self.type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.name,
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Character:
        """Construct a character from a dictionary (e.g. an HTTP payload)."""
        return cls(
            name=data["name"],
            type=CharacterType.parse(data["type"]),
            stats=Stats.from_dict(data["stats"]),
        )

    def __repr__(self) -> str:
        return f"Character(name={self.name!r}, type={self.type.name}, hp={self.stats.health}/{self.stats.max_health})"
