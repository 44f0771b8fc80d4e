"""Optional logfire tracing for model calls."""

from __future__ import annotations

import os

import logfire

_configured = False


def configure_logfire() -> None:
    """
    Configure logfire once per process and instrument pydantic_ai.

    Spans are only shipped when LOGFIRE_TOKEN is set; without it this is a
    local no-op apart from the instrumentation hooks.
    """
    global _configured
    if _configured:
        return

    logfire.configure(
        send_to_logfire="if-token-present",
        environment=os.getenv("LOGFIRE_ENVIRONMENT", "development"),
        console=False,
    )
    logfire.instrument_pydantic_ai()
    _configured = True
