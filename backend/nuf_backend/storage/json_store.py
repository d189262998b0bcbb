"""JSON document backing for the submission log.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import json
import os
import tempfile
import threading
from pathlib import Path

# Third-party (alphabetical)
import logfire
from pydantic import TypeAdapter, ValidationError

# Local imports (core first, then alphabetical)
from ..core.constants import EMPTY_LOG_DOCUMENT, JSON_INDENT
from ..core.exceptions import StoreCorruptionError, StoreWriteError
from ..core.models import Submission
from ..infra.logging import get_logger

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("JsonSubmissionStore",)

# =============================================================================
# Section 3: Constants
# =============================================================================
_SUBMISSION_LIST = TypeAdapter(list[Submission])

logger = get_logger("storage.json")


# =============================================================================
# Section 11: Classes
# =============================================================================
class JsonSubmissionStore:
    """Submission log persisted as a single JSON array document.

    Every append reads the whole document, adds one record, and atomically
    replaces the file. Appends within one process are serialized by a lock,
    so overlapping requests cannot drop each other's records.

    A document that cannot be read back as a list of submissions is
    treated as corrupt: the store logs a warning, rewrites it as ``[]``
    and carries on with an empty log.
    """

    def __init__(self, path: Path) -> None:
        self._path = path.expanduser()
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        """Location of the log document."""
        return self._path

    def ensure(self) -> None:
        """Create the parent directory and an empty log if they are missing."""
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                if not self._path.exists():
                    self._write_text(EMPTY_LOG_DOCUMENT)
                    logger.info("submission_log_created", path=str(self._path))
            except OSError as exc:
                raise StoreWriteError(self._path, str(exc)) from exc

    def read_all(self) -> list[Submission]:
        """Return every persisted submission in arrival order."""
        with self._lock:
            self.ensure()
            try:
                return self._load()
            except StoreCorruptionError as exc:
                logger.warn(
                    "submission_log_corrupt",
                    path=str(self._path),
                    reason=exc.reason,
                )
                self._write_text(EMPTY_LOG_DOCUMENT)
                return []

    def append(self, record: Submission) -> int:
        """Append one record and return the new total."""
        with self._lock:
            entries = self.read_all()
            entries.append(record)
            with logfire.span("submission_log.write", path=str(self._path), count=len(entries)):
                self._write_text(_dump(entries))
            return len(entries)

    def count(self) -> int:
        """Return the number of persisted submissions."""
        return len(self.read_all())

    def _load(self) -> list[Submission]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreCorruptionError(self._path, f"unreadable: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreCorruptionError(self._path, f"invalid JSON: {exc.msg}") from exc

        if not isinstance(data, list):
            raise StoreCorruptionError(self._path, f"expected a JSON array, got {type(data).__name__}")

        try:
            return _SUBMISSION_LIST.validate_python(data)
        except ValidationError as exc:
            raise StoreCorruptionError(self._path, f"{exc.error_count()} invalid record field(s)") from exc

    def _write_text(self, content: str) -> None:
        """Replace the document atomically.

        Content goes to a temporary file in the same directory which is
        then renamed over the target, so readers never see a partial write.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
        except OSError as exc:
            raise StoreWriteError(self._path, str(exc)) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self._path)
        except OSError as exc:
            Path(tmp_path).unlink(missing_ok=True)
            raise StoreWriteError(self._path, str(exc)) from exc


# =============================================================================
# Section 12: Functions
# =============================================================================
def _dump(entries: list[Submission]) -> str:
    return json.dumps([entry.to_document() for entry in entries], indent=JSON_INDENT, ensure_ascii=False)
