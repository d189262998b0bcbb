"""Exception hierarchy for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from .types import ErrorCategory

__all__ = (
    'ContactServiceError',
    'ContactValidationError',
    'StoreError',
    'StoreCorruptionError',
    'StoreWriteError',
    'NotificationError',
    'NotificationTimeoutError',
)


class ContactServiceError(Exception):
    """Base exception for all contact backend errors.

    All exceptions in the system inherit from this class, enabling
    catch-all handling at application boundaries.

    Attributes:
        context: Additional context for debugging.
        category: Error taxonomy bucket used in log records.
    """

    category: ErrorCategory

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)


# =============================================================================
# Validation Exceptions
# =============================================================================
class ContactValidationError(ContactServiceError):
    """Raised when contact form input is rejected.

    The message is shown to the client verbatim.
    """

    category = 'validation'

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, context={'field': field})


# =============================================================================
# Storage Exceptions
# =============================================================================
class StoreError(ContactServiceError):
    """Base exception for submission store errors."""


class StoreCorruptionError(StoreError):
    """Raised when the persisted log cannot be read back as a sequence."""

    category = 'storage_corruption'

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Submission log {path} is corrupt: {reason}', context={'path': str(path)})


class StoreWriteError(StoreError):
    """Raised when the log document cannot be written."""

    category = 'storage_write'

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f'Failed to write {path}: {message}', context={'path': str(path)})


# =============================================================================
# Notification Exceptions
# =============================================================================
class NotificationError(ContactServiceError):
    """Raised when a submission notification cannot be delivered."""

    category = 'notification'

    def __init__(self, transport: str, message: str, *, cause: Exception | None = None) -> None:
        self.transport = transport
        self.cause = cause
        ctx: dict[str, Any] = {'transport': transport}
        if cause is not None:
            ctx['cause_type'] = type(cause).__name__
        super().__init__(f'[{transport}] {message}', context=ctx)


class NotificationTimeoutError(NotificationError):
    """Raised when notification delivery exceeds its time bound."""

    def __init__(self, transport: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(transport, f'Delivery timed out after {timeout_seconds:.1f}s')
        self.context['timeout_seconds'] = timeout_seconds
