"""
Diagnostics Channel
===================

Non-fatal notices raised while evaluating expressions.

Design:
- Diagnostics (abstract): single warn(message) capability
- LoggerDiagnostics: forwards to a StructuredLogger
- Injected into expression nodes, never a global sink
"""

from abc import ABC, abstractmethod
from typing import Optional

from .logging import LogEvent, StructuredLogger, create_logger


class Diagnostics(ABC):
    """Receiver for non-fatal evaluation notices."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Report a non-fatal condition."""


class LoggerDiagnostics(Diagnostics):
    """
    Diagnostics backed by the structured logger.

    Example:
        >>> diagnostics = LoggerDiagnostics(create_logger("within"))
        >>> diagnostics.warn("only Point geometry supported")
    """

    def __init__(
        self,
        logger: Optional[StructuredLogger] = None,
        event: LogEvent = LogEvent.WITHIN_UNSUPPORTED_GEOMETRY
    ):
        self.logger = logger or create_logger("within")
        self.event = event

    def warn(self, message: str) -> None:
        self.logger.warning(event=self.event, message=message)
