"""
Base agent interface for the battle engine.

Every controller (LLM, rule-based, random) implements this interface so the
battle loop can ask any of them for a command the same way.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

from env.core.actions import Command
from env.entities.character import Character
from env.world.game_state import GameState


class BaseAgent(ABC):
    """
    Abstract base class for all agents.

    An agent is asked once per turn, per character it controls, for exactly
    one command. It never signals failure to the caller.

    Subclasses must implement:
    - decide(): Produce the command plus diagnostic metadata

    Attributes:
        name: Agent name for logging/identification
    """

    def __init__(self, name: str = None):
        """
        Initialize the agent.

        Args:
            name: Optional name for the agent (defaults to class name)
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    def decide(
        self,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> Tuple[Command, Dict[str, Any]]:
        """
        Decide this turn's command for `character`.

        Args:
            character: The acting character
            allies: Characters on the same side (non-empty for heals to be possible)
            enemies: Opposing characters; must be non-empty
            game_state: Round/turn counters

        Returns:
            Tuple of (command, metadata). Metadata is diagnostic only.
        """
        pass

    def decide_action(
        self,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> Command:
        """Return only the command; this is the call the battle loop makes."""
        command, _metadata = self.decide(character, allies, enemies, game_state)
        return command

    def __str__(self) -> str:
        """String representation."""
        return self.name

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"{self.__class__.__name__}(name='{self.name}')"
