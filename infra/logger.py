"""
Process-wide logging setup for agents, the example script and the API.

Agent modules only call get_logger(__name__); entrypoints call
configure_logging() once with values from infra.config.AgentSettings.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Union

from .paths import LOG_DIR

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)

# HTTP clients under the model providers log one INFO line per request
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def resolve_logfile(logfile: str | Path | None) -> Path | None:
    """Relative log file names land in LOG_DIR; None means no file output."""
    if logfile is None or str(logfile).strip() == "":
        return None
    path = Path(logfile)
    return path if path.is_absolute() else LOG_DIR / path


def configure_logging(
    level: Union[str, int] = "INFO",
    *,
    json: bool = False,
    logfile: str | Path | None = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Replace the root handlers with a stdout handler and an optional file.

    Args:
        level: Level name (any case) or int for the root logger
        json: One JSON object per line instead of the plain format
        logfile: Append target; relative names are placed under LOG_DIR
        quiet: Logger names capped at WARNING so model traffic stays readable
    """
    formatter = logging.Formatter(JSON_FORMAT if json else DEFAULT_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    log_path = resolve_logfile(logfile)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in handlers:
        root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
