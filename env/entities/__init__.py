"""
Entity definitions for the battle engine.

This module exports:
- Character (a single combatant)
"""

from .character import Character

__all__ = [
    "Character",
]
