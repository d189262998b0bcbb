"""Protocol definitions for storage backings and notifiers.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Submission

__all__ = ("SubmissionStore", "Notifier")


@runtime_checkable
class SubmissionStore(Protocol):
    """Protocol for submission log backings.

    A store owns read-modify-write access to the ordered submission log.
    Implementations must never surface a corrupt or unreadable log to
    callers: they recover by resetting to an empty log and logging a
    warning.

    Example Implementation:
        >>> class ListStore:
        ...     def append(self, record: Submission) -> int:
        ...         self._records.append(record)
        ...         return len(self._records)
    """

    @abstractmethod
    def ensure(self) -> None:
        """Create the backing structure and an empty log if missing.

        Idempotent. Never overwrites an existing log.
        """
        ...

    @abstractmethod
    def read_all(self) -> list[Submission]:
        """Return every persisted submission in arrival order."""
        ...

    @abstractmethod
    def append(self, record: Submission) -> int:
        """Append one record and return the new total.

        Args:
            record: Accepted submission to persist.

        Returns:
            Length of the log after the append.

        Raises:
            StoreWriteError: If the log cannot be written.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of persisted submissions."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Protocol for submission notifiers.

    Notifiers are invoked after a submission is persisted. Callers treat
    delivery as best-effort.
    """

    @property
    @abstractmethod
    def transport_name(self) -> str:
        """Identifier of the delivery transport."""
        ...

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether the notifier will attempt delivery."""
        ...

    @abstractmethod
    async def notify(self, record: Submission) -> None:
        """Deliver a notification for a persisted submission.

        Raises:
            NotificationError: If delivery fails.
        """
        ...
