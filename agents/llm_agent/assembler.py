"""
Command assembly: the only place an action label becomes a command type.

Adding an action means adding a row to ACTION_POOLS and COMMAND_BUILDERS,
plus its line in the prompt's action section and the guidance table.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from env.core.actions import Command
from env.core.types import ActionType
from env.entities.character import Character

CommandBuilder = Callable[[Character, Character, int], Command]

# Which side a label's target is resolved against.
ACTION_POOLS: Dict[str, str] = {
    ActionType.ATTACK.label: "enemies",
    ActionType.HEAL.label: "allies",
}

COMMAND_BUILDERS: Dict[str, CommandBuilder] = {
    ActionType.ATTACK.label: lambda actor, target, _amount: Command.attack(actor, target),
    ActionType.HEAL.label: lambda _actor, target, amount: Command.heal(target, amount),
}


def candidate_pool(
    action: str,
    allies: Sequence[Character],
    enemies: Sequence[Character],
) -> Sequence[Character]:
    """Heal resolves against allies, attack against enemies."""
    return allies if ACTION_POOLS[action] == "allies" else enemies


def assemble_command(
    action: str,
    target: Character,
    actor: Character,
    heal_amount: int,
) -> Command:
    """
    Build the engine command for a normalized action label.

    Raises:
        KeyError: If `action` has no builder (validated decisions never do)
    """
    return COMMAND_BUILDERS[action](actor, target, heal_amount)
