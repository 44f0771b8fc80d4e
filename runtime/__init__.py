from .logfire_config import configure_logfire

__all__ = ["configure_logfire"]
