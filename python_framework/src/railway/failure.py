"""
Failure track payload — an error code plus a human-readable message.

A FailureDescription travels along the failure track of a Result. It keeps
the originating exception (when there is one) so the composition root can
log the full chain without the business code ever touching try/except.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique


@unique
class ErrorCode(Enum):
    """
    Coarse classification of a failure.

    Client-side codes describe bad input; server-side codes describe the
    environment the code runs in.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input could not be read or violates a documented constraint."""

    NOT_FOUND = "NOT_FOUND"
    """A referenced file or object does not exist."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """Settings are missing or inconsistent."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Unexpected failure of a library or the filesystem."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Anything not classified above."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor.

    >>> desc = FailureDescription(ErrorCode.VALIDATION_ERROR, "subject is empty")
    >>> desc.code
    <ErrorCode.VALIDATION_ERROR: 'VALIDATION_ERROR'>
    """

    code: ErrorCode
    message: str
    exception: BaseException | None = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def full_stack_trace(self) -> str:
        """Message followed by the formatted exception chain, if any."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__)
        )
        return f"{self.message}\n{tb}"
