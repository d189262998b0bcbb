"""Submission notifiers.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .mailer import DisabledNotifier, SmtpNotifier, build_message, create_notifier

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("SmtpNotifier", "DisabledNotifier", "build_message", "create_notifier")
