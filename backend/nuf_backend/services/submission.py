"""Submission service for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import asyncio
from typing import TYPE_CHECKING, Self

# Local imports (core first, then alphabetical)
from ..core.constants import NOTIFY_TIMEOUT_SECONDS
from ..core.exceptions import ContactValidationError, NotificationError, NotificationTimeoutError
from ..core.models import Metrics, SubmissionAccepted, SubmissionOutcome, SubmissionRejected
from ..core.validation import validate_contact
from ..infra.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from ..core.models import Submission
    from ..core.protocols import Notifier, SubmissionStore
    from ..core.types import RawContactInput

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("SubmissionService",)

logger = get_logger("services.submission")


# =============================================================================
# Section 11: Classes
# =============================================================================
class SubmissionService:
    """Accept or reject contact submissions and report metrics.

    Each submission is validated, appended to the store, and then handed
    to the notifier in a background task. Notification never affects the
    outcome returned to the caller.

    Store calls run in a worker thread so file I/O does not block the
    event loop.

    Example:
        >>> async with SubmissionService(store, notifier, goal=500) as service:
        ...     outcome = await service.submit({'name': 'Ada', ...})
    """

    def __init__(
        self,
        store: SubmissionStore,
        notifier: Notifier,
        *,
        goal: int = 0,
        notify_timeout_seconds: float = NOTIFY_TIMEOUT_SECONDS,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._goal = goal
        self._notify_timeout_seconds = notify_timeout_seconds
        self._pending: set[asyncio.Task[None]] = set()

    async def __aenter__(self) -> Self:
        await asyncio.to_thread(self._store.ensure)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def goal(self) -> int:
        """Configured campaign target."""
        return self._goal

    @property
    def pending_notifications(self) -> int:
        """Number of notification tasks still running."""
        return sum(1 for task in self._pending if not task.done())

    async def submit(self, raw: RawContactInput | None) -> SubmissionOutcome:
        """Validate and persist one submission.

        Args:
            raw: Request body fields.

        Returns:
            ``SubmissionAccepted`` with the stored record and post-append
            metrics, or ``SubmissionRejected`` with the validation message.
        """
        try:
            fields = validate_contact(raw)
        except ContactValidationError as exc:
            logger.info("submission_rejected", field=exc.field)
            return SubmissionRejected(error=str(exc))

        record = fields.stamp()
        count = await asyncio.to_thread(self._store.append, record)
        logger.info("submission_accepted", count=count, has_zip=bool(record.zip))

        self._dispatch_notification(record)
        return SubmissionAccepted(record=record, metrics=Metrics.from_count(count, self._goal))

    async def metrics(self) -> Metrics:
        """Return current metrics derived from the store."""
        count = await asyncio.to_thread(self._store.count)
        return Metrics.from_count(count, self._goal)

    async def drain(self) -> None:
        """Wait for all in-flight notifications to finish."""
        running = [task for task in self._pending if not task.done()]
        while running:
            await asyncio.gather(*running, return_exceptions=True)
            running = [task for task in self._pending if not task.done()]

    async def aclose(self) -> None:
        """Cancel in-flight notifications."""
        for task in list(self._pending):
            task.cancel()
        await self.drain()

    def _dispatch_notification(self, record: Submission) -> None:
        if not self._notifier.enabled:
            return
        task = asyncio.create_task(self._deliver(record))
        self._pending.add(task)
        task.add_done_callback(self._forget)

    def _forget(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)

    async def _deliver(self, record: Submission) -> None:
        transport = self._notifier.transport_name
        try:
            await asyncio.wait_for(self._notifier.notify(record), timeout=self._notify_timeout_seconds)
        except TimeoutError:
            timeout = NotificationTimeoutError(transport, self._notify_timeout_seconds)
            logger.warn("notification_failed", error=str(timeout), **timeout.context)
        except NotificationError as exc:
            logger.warn("notification_failed", error=str(exc), **exc.context)
        except Exception as exc:
            logger.warn("notification_failed", transport=transport, error=str(exc), cause_type=type(exc).__name__)
        else:
            logger.info("notification_sent", transport=transport)
