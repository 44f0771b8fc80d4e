"""
Agent configuration loaded from the environment.

Values come from process environment variables, optionally seeded from a
`.env` file at the project root via python-dotenv. Every field can still be
overridden explicitly when constructing an agent.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from .paths import ENV_FILE

DEFAULT_MODEL = "openrouter:x-ai/grok-4.1-fast"
DEFAULT_TIMEOUT = 30.0
DEFAULT_TEMPERATURE = 0.0
DEFAULT_HEAL_AMOUNT = 30


@dataclass(frozen=True)
class AgentSettings:
    """
    Tunable knobs for the LLM agent and its runtime.

    model: pydantic_ai model name, e.g. "openrouter:x-ai/grok-4.1-fast"
    timeout: seconds before a model request is abandoned
    temperature: sampling temperature sent with every request
    heal_amount: fixed health restored by a heal command
    log_level / log_json / log_file: passed to infra.logger.configure_logging
    """

    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    temperature: float = DEFAULT_TEMPERATURE
    heal_amount: int = DEFAULT_HEAL_AMOUNT
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[str] = None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_heal_amount() -> int:
    heal_amount = _env_int("BATTLE_AGENT_HEAL_AMOUNT", DEFAULT_HEAL_AMOUNT)
    if heal_amount < 0:
        raise ValueError(f"BATTLE_AGENT_HEAL_AMOUNT must be non-negative, got {heal_amount}")
    return heal_amount


# One reader per AgentSettings field; each parses only its own variable.
_READERS: Dict[str, Callable[[], Any]] = {
    "model": lambda: os.getenv("BATTLE_AGENT_MODEL") or DEFAULT_MODEL,
    "timeout": lambda: _env_float("BATTLE_AGENT_TIMEOUT", DEFAULT_TIMEOUT),
    "temperature": lambda: _env_float("BATTLE_AGENT_TEMPERATURE", DEFAULT_TEMPERATURE),
    "heal_amount": _env_heal_amount,
    "log_level": lambda: os.getenv("BATTLE_AGENT_LOG_LEVEL") or "INFO",
    "log_json": lambda: _env_bool("BATTLE_AGENT_LOG_JSON", False),
    "log_file": lambda: os.getenv("BATTLE_AGENT_LOG_FILE") or None,
}


def read_setting(field: str, override: Any = None, env_file: Optional[str] = None) -> Any:
    """
    Return `override` when given, otherwise the single setting `field`.

    Only the requested variable is parsed, so a malformed value elsewhere in
    the environment does not affect callers that never need it.

    Raises:
        KeyError: If `field` is not an AgentSettings field
        ValueError: If the variable is set but cannot be parsed
    """
    if override is not None:
        return override
    reader = _READERS[field]
    load_dotenv(env_file or ENV_FILE)
    return reader()


def load_settings(env_file: Optional[str] = None) -> AgentSettings:
    """
    Build AgentSettings from the environment.

    Existing environment variables win over values in the .env file.

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    load_dotenv(env_file or ENV_FILE)
    return AgentSettings(**{field: reader() for field, reader in _READERS.items()})
