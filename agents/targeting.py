"""
Target selection helpers shared by every agent.

- resolve_target: free-text name -> live character within a pool
- weakest: lowest current health, pool order breaks ties
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from env.entities.character import Character
from env.mechanics.combat import Combatant

T = TypeVar("T")
C = TypeVar("C", bound=Combatant)


def _require_candidates(pool: Sequence[T], what: str) -> None:
    if not pool:
        raise ValueError(f"{what} requires a non-empty candidate pool")


def resolve_target(name: str | None, pool: Sequence[Character]) -> Character:
    """
    Map a free-text name to a character in `pool`.

    Matching is exact and case-insensitive after trimming; the first match in
    pool order wins. When nothing matches, the first pool member is returned.
    This default is deliberate: an unrecognised name never aborts the turn.

    Raises:
        ValueError: If `pool` is empty (the caller must never ask for this)
    """
    _require_candidates(pool, "resolve_target")
    wanted = (name or "").strip().casefold()
    for candidate in pool:
        if candidate.name.strip().casefold() == wanted:
            return candidate
    return pool[0]


def is_known_name(name: str | None, pool: Sequence[Character]) -> bool:
    """True when `name` matches a pool member under resolve_target's rules."""
    wanted = (name or "").strip().casefold()
    return any(c.name.strip().casefold() == wanted for c in pool)


def weakest(pool: Sequence[C]) -> C:
    """
    Character with the lowest current health; earliest in pool order on ties.

    Raises:
        ValueError: If `pool` is empty
    """
    _require_candidates(pool, "weakest")
    # min() keeps the first of equal keys, which is the tie-break we want
    return min(pool, key=lambda c: c.stats.health)
