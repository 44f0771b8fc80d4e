"""
Random agent implementation for testing and baseline comparison.

This agent attacks a uniformly random enemy every turn.
"""

import random
from typing import Any, Dict, Optional, Sequence, Tuple

from env.core.actions import Command
from env.entities.character import Character
from env.world.game_state import GameState
from .base_agent import BaseAgent
from .registry import register_agent


@register_agent("random")
class RandomAgent(BaseAgent):
    """
    Agent that attacks random enemies.

    This serves as a baseline for comparing the LLM agent.
    """

    def __init__(
        self,
        name: str = None,
        seed: Optional[int] = None,
        **_: Any,
    ):
        """
        Initialize random agent.

        Args:
            name: Agent name (default: "RandomAgent")
            seed: Random seed for reproducibility (None = random)
        """
        super().__init__(name)
        self.rng = random.Random(seed)

    def decide(
        self,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> Tuple[Command, Dict[str, Any]]:
        if not enemies:
            raise ValueError("RandomAgent requires a non-empty enemy pool")
        target = self.rng.choice(list(enemies))
        metadata = {
            "policy": "random",
            "round_number": game_state.round_number,
            "turn_number": game_state.turn_number,
        }
        return Command.attack(character, target), metadata
