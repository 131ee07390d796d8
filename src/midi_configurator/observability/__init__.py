"""Observability for the checkout backend: structured logging with request context."""

from midi_configurator.observability.logging import (
    setup_logging,
    LogContext,
    RequestContextFilter,
)

__all__ = [
    "setup_logging",
    "LogContext",
    "RequestContextFilter",
]
