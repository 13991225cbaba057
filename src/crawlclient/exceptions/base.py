"""
Base exception for crawlclient.

Every package error carries optional guidance for the person running the
crawler (help text, a suggested action) next to fields meant for logs (an
error code, key/value context, technical details and a short error ID).
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ExceptionContext:
    """Optional details attached to a CrawlClientError."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    user_action: Optional[str] = None
    technical_details: Optional[str] = None


class CrawlClientError(Exception):
    """Base exception for all crawlclient errors.

    ``correlation_id`` is a short random ID printed by the CLI and included
    in the structured log entry, so a report can be matched to its log line.
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        details = context or ExceptionContext()
        self.message = message
        self.help_text = details.help_text
        self.error_code = details.error_code
        self.context = dict(details.context)
        self.user_action = details.user_action
        self.technical_details = details.technical_details
        self.correlation_id = uuid.uuid4().hex[:8]
        super().__init__(message)

    def __str__(self) -> str:
        sections: List[str] = [self.message]
        if self.help_text:
            sections.append(f"Help: {self.help_text}")
        if self.user_action:
            sections.append(f"Action: {self.user_action}")

        pairs = [f"{key}: {value}" for key, value in self.context.items() if value is not None]
        if pairs:
            sections.append(f"Context: {', '.join(pairs)}")

        sections.append(f"Error ID: {self.correlation_id}")
        return "\n\n".join(sections)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form of the error, logged by the CLI error handler."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "context": dict(self.context),
            "technical_details": self.technical_details,
        }

    def add_context(self, **kwargs: Any) -> "CrawlClientError":
        """Attach more key/value context; returns self so it can be raised inline."""
        self.context.update(kwargs)
        return self
