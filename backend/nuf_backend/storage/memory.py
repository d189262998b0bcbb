"""In-memory backing for the submission log.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.models import Submission

__all__ = ("InMemorySubmissionStore",)


class InMemorySubmissionStore:
    """Simple process-local submission log.

    Holds records in a list for the lifetime of the process. Useful for
    tests and for embedding the service without touching the filesystem.
    """

    def __init__(self, records: list[Submission] | None = None) -> None:
        self._records: list[Submission] = list(records or [])
        self._lock = threading.Lock()

    def ensure(self) -> None:
        """Nothing to create for an in-memory log."""

    def read_all(self) -> list[Submission]:
        """Return a copy of the log in arrival order."""
        with self._lock:
            return list(self._records)

    def append(self, record: Submission) -> int:
        """Append one record and return the new total."""
        with self._lock:
            self._records.append(record)
            return len(self._records)

    def count(self) -> int:
        """Return the number of stored submissions."""
        with self._lock:
            return len(self._records)
