"""
Command definitions and utilities.

Commands are what an agent hands back to the battle engine. This module provides:
- Command dataclass
- Command parameter validation
- Command factory methods
- Command serialization (names only, for logs and the HTTP API)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, TYPE_CHECKING

from .types import ActionType

if TYPE_CHECKING:
    from ..entities.character import Character


@dataclass
class Command:
    """
    A combat command issued by one character for this turn.

    Commands consist of a type and parameters that reference live engine
    characters. The parameters are validated based on the command type.

    Use static factory methods for construction:
        - Command.attack(actor, target)
        - Command.heal(target, amount)
    """

    type: ActionType
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate command parameters after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate that parameters match the command type.

        Raises:
            ValueError: If parameters are invalid for the command type
        """
        if self.type == ActionType.ATTACK:
            if "actor" not in self.params or "target" not in self.params:
                raise ValueError("ATTACK command requires 'actor' and 'target' parameters")

        elif self.type == ActionType.HEAL:
            if "target" not in self.params:
                raise ValueError("HEAL command requires 'target' parameter")
            amount = self.params.get("amount")
            if not isinstance(amount, int) or amount < 0:
                raise ValueError(f"'amount' must be a non-negative int, got {amount!r}")

    @property
    def target(self) -> "Character":
        return self.params["target"]

    @property
    def actor(self) -> "Character | None":
        return self.params.get("actor")

    @property
    def amount(self) -> int | None:
        return self.params.get("amount")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert command to a JSON-serializable dictionary.

        Characters are reduced to their names.
        """
        params_dict = {}
        for key, value in self.params.items():
            params_dict[key] = getattr(value, "name", value)

        return {
            "type": self.type.name,
            "params": params_dict,
        }

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.type == ActionType.ATTACK:
            return f"ATTACK {self.actor.name} -> {self.target.name}"
        elif self.type == ActionType.HEAL:
            return f"HEAL {self.target.name} +{self.amount}"
        return f"{self.type.name}({self.params})"

    # FACTORY METHODS
    @staticmethod
    def attack(actor: "Character", target: "Character") -> Command:
        """
        Create an ATTACK command.

        Args:
            actor: Character performing the attack
            target: Enemy character being attacked

        Returns:
            Command that attacks the target.
        """
        return Command(ActionType.ATTACK, {"actor": actor, "target": target})

    @staticmethod
    def heal(target: "Character", amount: int) -> Command:
        """
        Create a HEAL command.

        Args:
            target: Ally receiving the heal
            amount: Fixed number of health points restored

        Returns:
            Command that heals the target.
        """
        return Command(ActionType.HEAL, {"target": target, "amount": amount})
