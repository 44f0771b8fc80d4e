from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR, ENV_FILE
from .logger import configure_logging, get_logger
from .config import AgentSettings, load_settings, read_setting

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "ENV_FILE",
    "configure_logging",
    "get_logger",
    "AgentSettings",
    "load_settings",
    "read_setting",
]
