"""Tracing and logging for the compliance core."""

from .logger import ConfigTracer, get_tracer, log_config_event, setup_tracing

__all__ = [
    "ConfigTracer",
    "get_tracer",
    "log_config_event",
    "setup_tracing",
]
