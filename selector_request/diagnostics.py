"""Injectable diagnostics channel for malformed targets and failed resolutions."""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Diagnostics(Protocol):
    """Receives warnings and errors raised while parsing targets."""

    def warn(self, message: str, context: Mapping[str, Any]) -> None:
        """Report a recoverable problem with the input."""

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        """Report a failure that was degraded to a fallback value."""


def format_context(context: Mapping[str, Any]) -> str:
    """Render context as space separated key=value pairs."""
    return " ".join(f"{key}={value!r}" for key, value in context.items())


class LoggingDiagnostics:
    """Writes diagnostics to a standard library logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Initialize with an optional logger, defaulting to this module's."""
        self.log = log or logger

    def warn(self, message: str, context: Mapping[str, Any]) -> None:
        """Log a warning with its context."""
        self.log.warning("%s (%s)", message, format_context(context))

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        """Log an error with its context."""
        self.log.error("%s (%s)", message, format_context(context))


class RecordingDiagnostics:
    """Collects diagnostics in memory instead of logging them."""

    def __init__(self) -> None:
        """Initialize an empty record list."""
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def warn(self, message: str, context: Mapping[str, Any]) -> None:
        """Record a warning."""
        self.records.append(("warning", message, dict(context)))

    def error(self, message: str, context: Mapping[str, Any]) -> None:
        """Record an error."""
        self.records.append(("error", message, dict(context)))

    @property
    def warnings(self) -> list[tuple[str, dict[str, Any]]]:
        """Return recorded warnings as (message, context) pairs."""
        return [(m, c) for level, m, c in self.records if level == "warning"]

    @property
    def errors(self) -> list[tuple[str, dict[str, Any]]]:
        """Return recorded errors as (message, context) pairs."""
        return [(m, c) for level, m, c in self.records if level == "error"]


def default_diagnostics(diagnostics: Diagnostics | None) -> Diagnostics:
    """Return the given diagnostics or a logging-backed default."""
    if diagnostics is None:
        return LoggingDiagnostics()
    return diagnostics
