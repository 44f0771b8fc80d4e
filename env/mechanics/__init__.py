"""
Mechanics module - stateless combat helpers.

This module provides:
- estimate_damage: Expected damage of an attack, used for prompting
- DamageEstimator: Callable signature agents accept for injection
"""

from .combat import Combatant, DamageEstimator, estimate_damage

__all__ = [
    "Combatant",
    "DamageEstimator",
    "estimate_damage",
]
