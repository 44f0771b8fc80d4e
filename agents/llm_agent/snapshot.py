"""
Read-only snapshots of the battle taken at decision time.

The prompt is built from these frozen views instead of the live engine
objects, so nothing the agent does can touch engine state and the same
battle always renders the same prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from env.core.types import CharacterType, Stats
from env.entities.character import Character
from env.world.game_state import GameState


@dataclass(frozen=True)
class CharacterSnapshot:
    """Name, archetype and stats of one character at decision time."""

    name: str
    type: CharacterType
    stats: Stats

    @classmethod
    def of(cls, character: Character) -> CharacterSnapshot:
        # Stats is already frozen; sharing the instance is safe
        return cls(name=character.name, type=character.type, stats=character.stats)


@dataclass(frozen=True)
class BattleContext:
    """
    Everything the prompt needs about the current decision.

    Allies and enemies keep the caller's order, which only affects display
    and tie-breaking.
    """

    character: CharacterSnapshot
    allies: Tuple[CharacterSnapshot, ...]
    enemies: Tuple[CharacterSnapshot, ...]
    round_number: int
    turn_number: int

    @classmethod
    def capture(
        cls,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> BattleContext:
        return cls(
            character=CharacterSnapshot.of(character),
            allies=tuple(CharacterSnapshot.of(c) for c in allies),
            enemies=tuple(CharacterSnapshot.of(c) for c in enemies),
            round_number=game_state.round_number,
            turn_number=game_state.turn_number,
        )
