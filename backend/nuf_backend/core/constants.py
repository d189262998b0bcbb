"""Module-level constants for the contact backend.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

import re
from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Validation
    'MAX_MESSAGE_LENGTH',
    'ZIP_CODE_PATTERN',
    'CONTACT_FIELDS',
    'REQUIRED_FIELDS',
    # Validation messages
    'ERROR_REQUIRED_FIELDS',
    'ERROR_INVALID_ZIP',
    'ERROR_MESSAGE_TOO_LONG',
    # Responses
    'SUBMISSION_RECORDED_MESSAGE',
    'HEALTH_STATUS_OK',
    # Server
    'DEFAULT_PORT',
    'DEFAULT_HOST',
    # Storage
    'DEFAULT_DATA_DIR',
    'DEFAULT_SUBMISSIONS_FILE',
    'EMPTY_LOG_DOCUMENT',
    'JSON_INDENT',
    # Notification
    'DEFAULT_NOTIFY_SUBJECT',
    'NOTIFY_TIMEOUT_SECONDS',
    'SMTP_IMPLICIT_TLS_PORT',
]

# =============================================================================
# Section 2: Validation Constants
# =============================================================================
MAX_MESSAGE_LENGTH: Final[int] = 5000
# ASCII only; \d would also accept other Unicode decimal digits
ZIP_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r'[0-9]{5}')

CONTACT_FIELDS: Final[tuple[str, ...]] = (
    'name',
    'email',
    'phone',
    'zip',
    'message',
)
REQUIRED_FIELDS: Final[frozenset[str]] = frozenset({
    'name',
    'email',
    'message',
})

# =============================================================================
# Section 3: Client-Facing Messages
# =============================================================================
ERROR_REQUIRED_FIELDS: Final[str] = 'Name, email, and message are required.'
ERROR_INVALID_ZIP: Final[str] = 'ZIP code must be 5 digits.'
ERROR_MESSAGE_TOO_LONG: Final[str] = 'Message is too long. Please limit to 5,000 characters.'

SUBMISSION_RECORDED_MESSAGE: Final[str] = 'Submission recorded.'
HEALTH_STATUS_OK: Final[str] = 'ok'

# =============================================================================
# Section 4: Server Constants
# =============================================================================
DEFAULT_PORT: Final[int] = 3000
DEFAULT_HOST: Final[str] = '0.0.0.0'

# =============================================================================
# Section 5: Storage Constants
# =============================================================================
DEFAULT_DATA_DIR: Final[str] = 'data'
DEFAULT_SUBMISSIONS_FILE: Final[str] = 'submissions.json'
EMPTY_LOG_DOCUMENT: Final[str] = '[]'
JSON_INDENT: Final[int] = 2

# =============================================================================
# Section 6: Notification Constants
# =============================================================================
DEFAULT_NOTIFY_SUBJECT: Final[str] = 'New Nurses Under Fire contact submission'
NOTIFY_TIMEOUT_SECONDS: Final[float] = 10.0
SMTP_IMPLICIT_TLS_PORT: Final[int] = 465
