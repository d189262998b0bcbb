"""NUF backend package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .api import create_app
from .services import SubmissionService
from .storage import InMemorySubmissionStore, JsonSubmissionStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "create_app",
    "SubmissionService",
    "JsonSubmissionStore",
    "InMemorySubmissionStore",
)
