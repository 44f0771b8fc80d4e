from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class AgentSpec:
    """
    Serializable description of an agent.

    This is intended for configuration files and HTTP payloads so that
    agents can be instantiated dynamically by a factory/registry.
    """
    type: str
    name: Optional[str] = None
    init_params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "type": self.type,
            "name": self.name,
            "init_params": self.init_params,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AgentSpec":
        """Construct from a dict (e.g., loaded from JSON)."""
        type_raw = data.get("type")
        if not type_raw:
            raise ValueError("AgentSpec requires 'type'")
        return cls(
            type=str(type_raw),
            name=data.get("name"),
            init_params=data.get("init_params", {}) or {},
        )
