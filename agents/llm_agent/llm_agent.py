from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from pydantic_ai.models import Model

from env.core.actions import Command
from env.entities.character import Character
from env.mechanics.combat import DamageEstimator, estimate_damage
from env.world.game_state import GameState
from infra.config import read_setting
from infra.logger import get_logger

from ..base_agent import BaseAgent
from ..registry import register_agent
from ..rule_based_agent import fallback_command
from ..targeting import is_known_name, resolve_target
from .assembler import assemble_command, candidate_pool
from .client import DecisionClient
from .decision import Decision, DecisionValidation, validate_decision
from .prompt_formatter import PromptConfig, PromptFormatter
from .snapshot import BattleContext

log = get_logger(__name__)


@register_agent("llm")
class LLMAgent(BaseAgent):
    """
    Agent that asks a language model for each command.

    Pipeline per call:
        snapshot -> prompt -> model decision -> validation
        -> target resolution -> command
    Any failure before target resolution falls back to attacking the
    weakest enemy, so a command always comes back.

    The agent holds configuration only; every call builds its own snapshot,
    prompt and metadata, so one instance may serve several characters.
    """

    def __init__(
        self,
        name: str = "LLMAgent",
        model: Union[Model, str, None] = None,
        *,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        heal_amount: Optional[int] = None,
        damage_estimator: DamageEstimator = estimate_damage,
        client: Optional[DecisionClient] = None,
        **_: Any,
    ):
        """
        Args:
            name: Agent name, used as the log prefix
            model: pydantic_ai model or model name (default: BATTLE_AGENT_MODEL)
            timeout: Request timeout in seconds (default: BATTLE_AGENT_TIMEOUT)
            temperature: Sampling temperature (default: BATTLE_AGENT_TEMPERATURE)
            heal_amount: Fixed heal restore amount (default: BATTLE_AGENT_HEAL_AMOUNT)
            damage_estimator: Engine estimate shown in the prompt's attack line
            client: Pre-built DecisionClient; overrides model/timeout/temperature
        """
        super().__init__(name)

        self.heal_amount = read_setting("heal_amount", heal_amount)
        if self.heal_amount < 0:
            raise ValueError(f"heal_amount must be non-negative, got {self.heal_amount}")

        # Environment values are read only for arguments the caller left unset
        if client is None:
            client = DecisionClient(
                read_setting("model", model),
                name=self.name,
                timeout=read_setting("timeout", timeout),
                temperature=read_setting("temperature", temperature),
            )
        self.client = client
        self.prompt_formatter = PromptFormatter()
        self.prompt_config = PromptConfig(
            heal_amount=self.heal_amount,
            damage_estimator=damage_estimator,
        )

    # --------------------------------------------------------

    def decide(
        self,
        character: Character,
        allies: Sequence[Character],
        enemies: Sequence[Character],
        game_state: GameState,
    ) -> Tuple[Command, Dict[str, Any]]:
        context = BattleContext.capture(character, allies, enemies, game_state)

        # -------- PROMPT --------
        prompt, prompt_payload = self.prompt_formatter.build_prompt(
            context=context,
            config=self.prompt_config,
        )

        # -------- MODEL --------
        outcome = self.client.decide(prompt)
        validation = validate_decision(outcome)

        if validation.valid and not candidate_pool(validation.action, allies, enemies):
            validation = DecisionValidation.fail(
                "NO_CANDIDATES", f"No characters to {validation.action}"
            )

        metadata: Dict[str, Any] = {
            "policy": "llm",
            "prompt": prompt,
            "prompt_payload": prompt_payload,
            "decision": outcome.model_dump() if isinstance(outcome, Decision) else None,
            "unavailable": None if isinstance(outcome, Decision) else asdict(outcome),
            "validation": asdict(validation),
            "reasoning": outcome.reasoning if isinstance(outcome, Decision) else None,
        }

        # -------- FALLBACK --------
        if not validation.valid:
            if validation.error_code != "UNAVAILABLE":
                # Transport/parse failures were already reported by the client
                log.warning(
                    "[%s] Rejected decision for %s (%s): %s; falling back to rule-based attack",
                    self.name,
                    character.name,
                    validation.error_code,
                    validation.message,
                )
            command = fallback_command(character, enemies)
            metadata.update(fallback_used=True, target_matched=None, command=command.to_dict())
            return command, metadata

        # -------- COMMAND --------
        pool = candidate_pool(validation.action, allies, enemies)
        target_matched = is_known_name(validation.target_name, pool)
        target = resolve_target(validation.target_name, pool)
        if not target_matched:
            log.info(
                "[%s] Unknown target '%s' for %s; using first candidate %s",
                self.name,
                validation.target_name,
                validation.action,
                target.name,
            )

        command = assemble_command(validation.action, target, character, self.heal_amount)
        log.info("[%s] Reasoning: %s", self.name, metadata["reasoning"])
        log.info("[%s] %s chooses %s", self.name, character.name, command)

        metadata.update(fallback_used=False, target_matched=target_matched, command=command.to_dict())
        return command, metadata
