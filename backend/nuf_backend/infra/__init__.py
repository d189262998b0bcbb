"""Infrastructure concerns for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .config import Settings, SmtpConfig, load_settings
from .instrumentation import configure_instrumentation, instrument_app
from .logging import get_logger

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Settings",
    "SmtpConfig",
    "load_settings",
    "configure_instrumentation",
    "instrument_app",
    "get_logger",
)
