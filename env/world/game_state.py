"""
GameState - round/turn counters the engine exposes to agents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class GameState:
    """
    Read-only counters describing where the battle currently is.

    Attributes:
        round_number: Current round (0-based or 1-based, as the engine counts)
        turn_number: Current turn within the battle
    """

    round_number: int = 1
    turn_number: int = 1

    def __post_init__(self):
        for name in ("round_number", "turn_number"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"'{name}' must be a non-negative int, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"round_number": self.round_number, "turn_number": self.turn_number}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        return cls(
            round_number=int(data.get("round_number", 1)),
            turn_number=int(data.get("turn_number", 1)),
        )
