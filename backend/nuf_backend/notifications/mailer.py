"""Email notification of new submissions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from email.message import EmailMessage
from typing import TYPE_CHECKING, Final

# Third-party (alphabetical)
import aiosmtplib
import logfire

# Local imports (core first, then alphabetical)
from ..core.constants import DEFAULT_NOTIFY_SUBJECT, NOTIFY_TIMEOUT_SECONDS
from ..core.exceptions import NotificationError

if TYPE_CHECKING:
    from ..core.models import Submission
    from ..core.protocols import Notifier
    from ..infra.config import Settings, SmtpConfig

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "SmtpNotifier",
    "DisabledNotifier",
    "build_message",
    "create_notifier",
)

# =============================================================================
# Section 3: Constants
# =============================================================================
TRANSPORT_SMTP: Final[str] = "smtp"
TRANSPORT_DISABLED: Final[str] = "disabled"


# =============================================================================
# Section 11: Classes
# =============================================================================
class SmtpNotifier:
    """Send one plain-text email per submission over SMTP."""

    def __init__(
        self,
        config: SmtpConfig,
        *,
        subject: str = DEFAULT_NOTIFY_SUBJECT,
        timeout_seconds: float = NOTIFY_TIMEOUT_SECONDS,
    ) -> None:
        self._config = config
        self._subject = subject
        self._timeout_seconds = timeout_seconds

    @property
    def transport_name(self) -> str:
        return TRANSPORT_SMTP

    @property
    def enabled(self) -> bool:
        return True

    async def notify(self, record: Submission) -> None:
        """Email the submission to the configured recipient."""
        message = build_message(
            record,
            sender=self._config.user,
            recipient=self._config.notify_to,
            subject=self._subject,
        )
        with logfire.span("notification.smtp.send", host=self._config.host, port=self._config.port):
            try:
                await aiosmtplib.send(
                    message,
                    hostname=self._config.host,
                    port=self._config.port,
                    username=self._config.user,
                    password=self._config.password,
                    use_tls=self._config.use_tls,
                    timeout=self._timeout_seconds,
                )
            except (aiosmtplib.SMTPException, OSError) as exc:
                raise NotificationError(TRANSPORT_SMTP, str(exc) or type(exc).__name__, cause=exc) from exc


class DisabledNotifier:
    """Notifier used when the email transport is not configured."""

    @property
    def transport_name(self) -> str:
        return TRANSPORT_DISABLED

    @property
    def enabled(self) -> bool:
        return False

    async def notify(self, record: Submission) -> None:
        return None


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_message(record: Submission, *, sender: str, recipient: str, subject: str) -> EmailMessage:
    """Render the notification email for a submission."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = subject
    message.set_content(
        f"Name: {record.name}\n"
        f"Email: {record.email}\n"
        f"Phone: {record.phone}\n"
        f"ZIP: {record.zip}\n"
        f"\n"
        f"Message:\n"
        f"{record.message}"
    )
    return message


def create_notifier(settings: Settings) -> Notifier:
    """Build the notifier for the configured transport.

    Returns a disabled notifier unless every SMTP option is present.
    """
    smtp = settings.smtp
    if smtp is None:
        return DisabledNotifier()
    return SmtpNotifier(
        smtp,
        subject=settings.notify_subject,
        timeout_seconds=settings.notify_timeout_seconds,
    )
