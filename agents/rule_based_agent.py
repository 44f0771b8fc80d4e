"""
Rule-based agent: always attack the weakest enemy.

The same rule is the LLM agent's fallback whenever the model cannot produce a
usable decision, so both share `fallback_command`.
"""

from typing import Any, Dict, Sequence, Tuple

from env.core.actions import Command
from env.entities.character import Character
from env.world.game_state import GameState
from .base_agent import BaseAgent
from .registry import register_agent
from .targeting import weakest


def fallback_command(character: Character, enemies: Sequence[Character]) -> Command:
    """
    Attack the enemy with the lowest current health (pool order breaks ties).

    Pure and total for a non-empty enemy pool.
    """
    return Command.attack(character, weakest(enemies))


@register_agent("rule_based")
class RuleBasedAgent(BaseAgent):
    """
    Deterministic focus-fire policy.

    Decision process:
    - Attack the enemy with the lowest current health.
    """

    def __init__(self, name: str = None, **_: Any):
        super().__init__(name)

    def decide(
        self,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> Tuple[Command, Dict[str, Any]]:
        command = fallback_command(character, enemies)
        metadata = {
            "policy": "rule_based",
            "fallback_used": False,
            "round_number": game_state.round_number,
            "turn_number": game_state.turn_number,
        }
        return command, metadata
