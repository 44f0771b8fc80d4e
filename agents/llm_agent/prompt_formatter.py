"""
Helpers for shaping a battle snapshot into an LLM-friendly prompt.

Usage sketch (inside an agent):

    formatter = PromptFormatter()
    prompt, payload = formatter.build_prompt(
        context=BattleContext.capture(character, allies, enemies, game_state),
        config=PromptConfig(heal_amount=30),
    )

`payload` is a structured dictionary with every value the prompt shows;
`prompt` is the human-readable string assembled from that payload. Both are
pure functions of their inputs: the same battle always yields the same text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from env.mechanics.combat import DamageEstimator, estimate_damage
from ..targeting import weakest
from .prompts.guidance import guidance_for
from .prompts.response import RESPONSE_FORMAT
from .snapshot import BattleContext, CharacterSnapshot


@dataclass
class PromptConfig:
    """
    Values the prompt advertises that come from the engine, not the snapshot.
    """

    heal_amount: int = 30
    damage_estimator: DamageEstimator = field(default=estimate_damage)


class PromptFormatter:
    """
    Convert a BattleContext into a structured payload and readable prompt.

    Section order is fixed: role, status, allies, enemies, actions,
    guidance, valid names, response format.
    """

    def build_prompt(
        self,
        *,
        context: BattleContext,
        config: Optional[PromptConfig] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        """
        Build a string prompt plus structured payload for one decision.
        """
        cfg = config or PromptConfig()
        me = context.character

        payload: Dict[str, Any] = {
            "self": self._summarize(me),
            "round_number": context.round_number,
            "turn_number": context.turn_number,
            "allies": [self._summarize(c) for c in context.allies],
            "enemies": [self._summarize(c) for c in context.enemies],
            "actions": self._actions(me, context.enemies, cfg),
            "guidance": list(guidance_for(me.type)),
            "valid_enemy_names": [c.name for c in context.enemies],
            "valid_ally_names": [c.name for c in context.allies],
        }

        prompt = self._format_prompt(payload)
        return prompt, payload

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _summarize(self, character: CharacterSnapshot) -> Dict[str, Any]:
        stats = character.stats
        return {
            "name": character.name,
            "type": character.type.name,
            "health": stats.health,
            "max_health": stats.max_health,
            "health_percent": stats.health_percent,
            "mana": stats.mana,
            "max_mana": stats.max_mana,
            "attack_power": stats.attack_power,
            "defense": stats.defense,
        }

    def _actions(
        self,
        me: CharacterSnapshot,
        enemies: Sequence[CharacterSnapshot],
        cfg: PromptConfig,
    ) -> Dict[str, Any]:
        attack: Dict[str, Any] = {"estimated_damage": None, "against": None}
        if enemies:
            target = weakest(enemies)
            attack = {
                "estimated_damage": cfg.damage_estimator(me, target),
                "against": target.name,
            }
        return {
            "attack": attack,
            "heal": {"amount": cfg.heal_amount},
        }

    @staticmethod
    def _roster_line(entry: Dict[str, Any]) -> str:
        return (
            f"  - {entry['name']} ({entry['type']}): "
            f"{entry['health']}/{entry['max_health']} HP ({entry['health_percent']}%), "
            f"{entry['attack_power']} ATK, {entry['defense']} DEF"
        )

    def _roster(self, entries: List[Dict[str, Any]]) -> List[str]:
        if not entries:
            return ["  - (none)"]
        return [self._roster_line(e) for e in entries]

    def _format_prompt(self, payload: Dict[str, Any]) -> str:
        me = payload["self"]
        attack = payload["actions"]["attack"]
        heal = payload["actions"]["heal"]

        lines: List[str] = [
            f"You are {me['name']}, a {me['type']} in a tactical RPG battle.",
            "",
            "YOUR STATUS:",
            f"- HP: {me['health']}/{me['max_health']} ({me['health_percent']}%)",
            f"- Mana: {me['mana']}/{me['max_mana']}",
            f"- Attack Power: {me['attack_power']}",
            f"- Defense: {me['defense']}",
            f"- Current Round: {payload['round_number']}, Turn: {payload['turn_number']}",
            "",
            "YOUR TEAM (ALLIES):",
            *self._roster(payload["allies"]),
            "",
            "ENEMIES:",
            *self._roster(payload["enemies"]),
            "",
            "AVAILABLE ACTIONS:",
        ]

        if attack["estimated_damage"] is None:
            lines.append("1. attack <enemy_name> - No enemies to attack")
        else:
            lines.append(
                f"1. attack <enemy_name> - Estimated damage: ~{attack['estimated_damage']} "
                f"(against {attack['against']}, the weakest enemy)"
            )
        lines.append(f"2. heal <ally_name> - Restores {heal['amount']} HP to an ally")
        lines.append("")

        lines.append("STRATEGIC GUIDANCE:")
        lines.extend(f"- {tip}" for tip in payload["guidance"])
        lines.append("")

        lines.append(f"Valid enemy names: {', '.join(payload['valid_enemy_names'])}")
        lines.append(f"Valid ally names: {', '.join(payload['valid_ally_names'])}")
        lines.append("")

        lines.append(RESPONSE_FORMAT)
        return "\n".join(lines)
