"""Tracing and logging for the compliance core."""

import logging
import sys
from collections import deque
from datetime import datetime
from typing import Any


class ConfigTracer:
    """Tracer for registry construction, fallbacks and scoring events."""

    def __init__(self, name: str = "eatsafe", max_events: int = 1000):
        self.logger = logging.getLogger(name)
        self._setup_handler()
        self.events: deque[dict[str, Any]] = deque(maxlen=max_events)

    def _setup_handler(self) -> None:
        """Setup console handler with formatting."""
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
                datefmt="%H:%M:%S",
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def log(
        self,
        event_type: str,
        component: str,
        message: str,
        data: dict[str, Any] | None = None,
        level: int = logging.INFO,
    ) -> None:
        """Log a component event.

        Args:
            event_type: Type of event (e.g., "derive", "fallback", "score").
            component: Name of the emitting component.
            message: Human-readable message.
            data: Optional additional data.
            level: Logging level for the console record.
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "component": component,
            "message": message,
            "data": data or {},
        }
        self.events.append(event)

        log_msg = f"[{component}] {event_type}: {message}"
        if data:
            log_msg += f" | {data}"
        self.logger.log(level, log_msg)

    def get_events(self, component: str | None = None) -> list[dict[str, Any]]:
        """Get logged events, optionally filtered by component."""
        if component:
            return [e for e in self.events if e["component"] == component]
        return list(self.events)

    def clear(self) -> None:
        """Clear all logged events."""
        self.events.clear()


# Global tracer instance
_tracer: ConfigTracer | None = None


def setup_tracing(log_level: str = "INFO") -> ConfigTracer:
    """Setup global tracing.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The configured ConfigTracer instance.
    """
    global _tracer
    _tracer = ConfigTracer()
    _tracer.logger.setLevel(getattr(logging, log_level.upper()))
    return _tracer


def get_tracer() -> ConfigTracer:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = ConfigTracer()
    return _tracer


def log_config_event(
    event_type: str,
    component: str,
    message: str,
    data: dict[str, Any] | None = None,
    level: int = logging.INFO,
) -> None:
    """Log a component event using the global tracer.

    Args:
        event_type: Type of event.
        component: Name of the component.
        message: Human-readable message.
        data: Optional additional data.
        level: Logging level for the console record.
    """
    get_tracer().log(event_type, component, message, data, level)
