"""
Decision client: one prompt in, one Decision (or DecisionUnavailable) out.

The model is driven through pydantic_ai with `Decision` as the structured
output type, so deserialization and field checks happen in one place. Any
failure of the remote call or of the reply shape is turned into a
DecisionUnavailable; nothing raises past `DecisionClient.decide`.
"""

from __future__ import annotations

from typing import Optional, Union

import httpx
from pydantic import ValidationError
from pydantic_ai import Agent, ModelSettings
from pydantic_ai.exceptions import UnexpectedModelBehavior
from pydantic_ai.models import Model

from infra.logger import get_logger
from .decision import Decision, DecisionOutcome, DecisionUnavailable
from .prompts.response import SYSTEM_INSTRUCTIONS

log = get_logger(__name__)


def classify_failure(exc: BaseException) -> DecisionUnavailable:
    """Map an exception from the model layer to a DecisionUnavailable."""
    # Task-group failures arrive wrapped; classify the first real cause
    nested = getattr(exc, "exceptions", None)
    if nested:
        exc = nested[0]
    # Provider SDKs raise their own timeout types (e.g. openai.APITimeoutError)
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)) or "timeout" in type(exc).__name__.lower():
        code = "TIMEOUT"
    elif isinstance(exc, (UnexpectedModelBehavior, ValidationError, ValueError)):
        code = "INVALID_REPLY"
    else:
        code = "TRANSPORT_ERROR"
    message = str(exc).strip() or exc.__class__.__name__
    return DecisionUnavailable(error_code=code, message=message)


class DecisionClient:
    """
    Thin wrapper around a pydantic_ai Agent whose output type is Decision.

    No retries are performed here: a reply that does not validate is
    reported as unavailable on the first attempt. Retrying is the battle
    loop's call.
    """

    def __init__(
        self,
        model: Union[Model, str],
        *,
        name: str = "LLMAgent",
        timeout: float = 30.0,
        temperature: float = 0.0,
    ):
        """
        Args:
            model: pydantic_ai model instance or name (e.g. "openrouter:x-ai/grok-4.1-fast")
            name: Agent name used as the log prefix
            timeout: Seconds before the request is abandoned
            temperature: Sampling temperature
        """
        self.name = name
        self.timeout = timeout
        # Named models are resolved on first use so a missing API key
        # surfaces as an unavailable decision, not a constructor error.
        self._agent: Agent[None, Decision] = Agent(
            model,
            output_type=Decision,
            instructions=SYSTEM_INSTRUCTIONS,
            model_settings=ModelSettings(temperature=temperature, timeout=timeout),
            retries=0,
            defer_model_check=True,
        )

    def decide(self, prompt: str) -> DecisionOutcome:
        """
        Ask the model for a decision.

        Returns:
            Decision on success, DecisionUnavailable on any failure
        """
        try:
            result = self._agent.run_sync(prompt)
        except Exception as exc:
            outcome = classify_failure(exc)
            log.warning(
                "[%s] Model call failed (%s): %s; falling back to rule-based attack",
                self.name,
                outcome.error_code,
                outcome.message,
            )
            return outcome

        decision: Optional[Decision] = result.output
        if decision is None:
            outcome = DecisionUnavailable("INVALID_REPLY", "Model returned no decision")
            log.warning("[%s] %s; falling back to rule-based attack", self.name, outcome.message)
            return outcome
        return decision
