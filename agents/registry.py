"""
Lookup table from agent type keys to agent classes.

Built-in keys are "llm", "rule_based" and "random"; they are registered when
the `agents` package is imported. Keys are matched case-insensitively so an
HTTP caller may send "LLM" or "Rule_Based".
"""

from __future__ import annotations

import importlib
from typing import Callable, Dict, Type, TypeVar

from .base_agent import BaseAgent

AGENT_REGISTRY: Dict[str, Type[BaseAgent]] = {}
AgentType = TypeVar("AgentType", bound=Type[BaseAgent])


def _normalize_key(key: str) -> str:
    return key.strip().lower()


def register_agent(key: str, cls: AgentType | None = None) -> AgentType | Callable[[AgentType], AgentType]:
    """
    Register an agent class under `key`.

    Used as `@register_agent("rule_based")` on the class, or called directly
    with the class as the second argument.

    Raises:
        ValueError: If `key` is blank or already names a different class
    """
    normalized = _normalize_key(key)
    if not normalized:
        raise ValueError("Agent key must be a non-blank string")

    def decorator(target_cls: AgentType) -> AgentType:
        existing = AGENT_REGISTRY.get(normalized)
        if existing is not None and existing is not target_cls:
            raise ValueError(
                f"Agent key '{normalized}' is already taken by {existing.__name__}"
            )
        AGENT_REGISTRY[normalized] = target_cls
        return target_cls

    if cls is None:
        return decorator
    return decorator(cls)


def resolve_agent_class(type_ref: str) -> Type[BaseAgent]:
    """
    Find the agent class for a registry key or a dotted "module.Class" path.

    Raises:
        ValueError: Unknown key without a module path
        TypeError: The imported object is not a BaseAgent subclass
    """
    key = _normalize_key(type_ref)
    if key in AGENT_REGISTRY:
        return AGENT_REGISTRY[key]

    if "." not in type_ref:
        known = ", ".join(sorted(AGENT_REGISTRY)) or "none"
        raise ValueError(f"Unknown agent type '{type_ref}' (registered: {known})")

    module_name, class_name = type_ref.strip().rsplit(".", 1)
    cls = getattr(importlib.import_module(module_name), class_name)
    if not isinstance(cls, type) or not issubclass(cls, BaseAgent):
        raise TypeError(f"{type_ref} is not a BaseAgent subclass")
    return cls
