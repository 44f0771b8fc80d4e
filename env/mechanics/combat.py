"""
Combat estimation helpers.

Full combat resolution lives in the battle engine proper; agents only need a
side-effect-free estimate of what an attack would deal.
"""

from __future__ import annotations

from typing import Callable, Protocol

from ..core.types import Stats


class Combatant(Protocol):
    """Anything carrying a stats block: live characters and their snapshots."""

    stats: Stats


DamageEstimator = Callable[[Combatant, Combatant], int]

MIN_DAMAGE = 1


def base_damage(attacker: Combatant) -> int:
    """Raw damage before the target's defense is applied."""
    return attacker.stats.attack_power


def reduce_damage(target: Combatant, raw_damage: int) -> int:
    """Apply the target's flat defense; a hit always deals at least MIN_DAMAGE."""
    return max(MIN_DAMAGE, raw_damage - target.stats.defense)


def estimate_damage(attacker: Combatant, target: Combatant) -> int:
    """
    Estimate the damage `attacker` would deal to `target` right now.

    Pure: reads stats only and never mutates either character.
    """
    return reduce_damage(target, base_damage(attacker))
