"""
LLM-driven agent and the pieces of its decision pipeline.
"""

from .client import DecisionClient
from .decision import Decision, DecisionUnavailable, DecisionValidation, validate_decision
from .llm_agent import LLMAgent
from .prompt_formatter import PromptConfig, PromptFormatter
from .snapshot import BattleContext, CharacterSnapshot

__all__ = [
    "BattleContext",
    "CharacterSnapshot",
    "Decision",
    "DecisionClient",
    "DecisionUnavailable",
    "DecisionValidation",
    "LLMAgent",
    "PromptConfig",
    "PromptFormatter",
    "validate_decision",
]
