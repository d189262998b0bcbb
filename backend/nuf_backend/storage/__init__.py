"""Submission log backings.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .json_store import JsonSubmissionStore
from .memory import InMemorySubmissionStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("JsonSubmissionStore", "InMemorySubmissionStore")
