"""
Battle state exposed to agents.

This module provides:
- GameState: Round/turn counters
"""

from .game_state import GameState

__all__ = [
    "GameState",
]
