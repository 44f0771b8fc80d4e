"""
Agent interface and implementations for the battle engine.

This module provides:
- BaseAgent: Abstract interface for all agents
- LLMAgent: Language-model driven agent with rule-based fallback
- RuleBasedAgent: Always attacks the weakest enemy
- RandomAgent: Attacks a random enemy, for baselines
"""

from .base_agent import BaseAgent
from .factory import create_agent_from_spec
from .llm_agent import LLMAgent
from .random_agent import RandomAgent
from .registry import AGENT_REGISTRY, register_agent, resolve_agent_class
from .rule_based_agent import RuleBasedAgent, fallback_command
from .spec import AgentSpec

__all__ = [
    "AGENT_REGISTRY",
    "AgentSpec",
    "BaseAgent",
    "LLMAgent",
    "RandomAgent",
    "RuleBasedAgent",
    "create_agent_from_spec",
    "fallback_command",
    "register_agent",
    "resolve_agent_class",
]
