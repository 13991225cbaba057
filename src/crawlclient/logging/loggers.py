"""
Logger wrapper with correlation IDs and structured context.

ClientLogger is the default diagnostic sink handed to the HTTP client.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class ClientLogger:
    """Logger with a correlation ID and persistent structured context."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, msg: str, **kwargs):
        """Internal logging method with correlation ID and context."""
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = self.extra_context.copy()
        context.update(kwargs)
        if context:
            extra["extra_context"] = context

        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def with_context(self, **kwargs) -> "ClientLogger":
        """Create a copy of this logger with additional context."""
        new_logger = ClientLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = self.extra_context.copy()
        new_logger.extra_context.update(kwargs)
        return new_logger


def get_logger(name: str, correlation_id: Optional[str] = None) -> ClientLogger:
    """Get a ClientLogger instance."""
    return ClientLogger(name, correlation_id)
