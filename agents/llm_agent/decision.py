"""
Decision contract between the model service and the agent, and its validation.

- Decision: the structured reply the model must produce
- DecisionUnavailable: explicit "no usable reply" outcome from the client
- DecisionValidation / validate_decision: shape and label checks before a
  decision is allowed to become a command
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from env.core.types import ActionType


class Decision(BaseModel):
    """The model's proposed action for this turn."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    action: Optional[str] = Field(
        description='What to do this turn: "attack" or "heal".',
        examples=["attack", "heal"],
    )
    target: Optional[str] = Field(
        description="Exact name of the character to attack (an enemy) or heal (an ally).",
    )
    reasoning: Optional[str] = Field(
        default=None,
        description="Brief tactical explanation. Diagnostic only.",
    )


@dataclass(frozen=True)
class DecisionUnavailable:
    """
    The model could not produce a Decision.

    Error codes:
        - "TRANSPORT_ERROR": Service unreachable or the request failed
        - "TIMEOUT": Service did not answer in time
        - "INVALID_REPLY": Reply was not JSON or did not match the Decision shape
    """

    error_code: str
    message: str


DecisionOutcome = Union[Decision, DecisionUnavailable]

# Action labels the agent can turn into commands.
VALID_ACTIONS = frozenset(a.label for a in ActionType)


@dataclass(frozen=True)
class DecisionValidation:
    """
    Structured result of validating a decision outcome.

    Attributes:
        valid: Whether the outcome may be turned into a command
        action: Normalized action label (only when valid)
        target_name: Trimmed target name (only when valid)
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "UNAVAILABLE": The client reported no usable reply
        - "MISSING_ACTION": Action is null or blank
        - "MISSING_TARGET": Target is null or blank
        - "UNKNOWN_ACTION": Action is not one of VALID_ACTIONS
        - "NO_CANDIDATES": The action's target pool is empty
    """

    valid: bool
    action: Optional[str] = None
    target_name: Optional[str] = None
    error_code: Optional[str] = None
    message: str = ""

    @staticmethod
    def success(action: str, target_name: str) -> DecisionValidation:
        """Create a validation success result."""
        return DecisionValidation(valid=True, action=action, target_name=target_name)

    @staticmethod
    def fail(error_code: str, message: str) -> DecisionValidation:
        """Create a validation failure result."""
        return DecisionValidation(valid=False, error_code=error_code, message=message)


def normalize_action(raw: Optional[str]) -> str:
    """Trim and lower-case an action label; None becomes ''."""
    return (raw or "").strip().lower()


def validate_decision(outcome: Optional[DecisionOutcome]) -> DecisionValidation:
    """
    Check a client outcome before it can reach the command assembler.

    Never raises; every rejection routes the caller to the fallback policy.
    """
    if outcome is None:
        return DecisionValidation.fail("UNAVAILABLE", "No decision was produced")

    if isinstance(outcome, DecisionUnavailable):
        return DecisionValidation.fail(
            "UNAVAILABLE", f"{outcome.error_code}: {outcome.message}"
        )

    action = normalize_action(outcome.action)
    if not action:
        return DecisionValidation.fail("MISSING_ACTION", "Decision has no action")

    target_name = (outcome.target or "").strip()
    if not target_name:
        return DecisionValidation.fail("MISSING_TARGET", "Decision has no target")

    if action not in VALID_ACTIONS:
        return DecisionValidation.fail(
            "UNKNOWN_ACTION",
            f"Unrecognized action '{outcome.action}' (expected one of {', '.join(sorted(VALID_ACTIONS))})",
        )

    return DecisionValidation.success(action, target_name)
