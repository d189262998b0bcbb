"""Core domain types for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .exceptions import (
    ContactServiceError,
    ContactValidationError,
    NotificationError,
    NotificationTimeoutError,
    StoreCorruptionError,
    StoreError,
    StoreWriteError,
)
from .models import ContactFields, Metrics, Submission, SubmissionAccepted, SubmissionRejected
from .protocols import Notifier, SubmissionStore
from .validation import validate_contact

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "ContactFields",
    "Submission",
    "Metrics",
    "SubmissionAccepted",
    "SubmissionRejected",
    "SubmissionStore",
    "Notifier",
    "validate_contact",
    "ContactServiceError",
    "ContactValidationError",
    "StoreError",
    "StoreCorruptionError",
    "StoreWriteError",
    "NotificationError",
    "NotificationTimeoutError",
)
