"""Type aliases for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Mapping
from typing import Any, Literal

# Third-party (alphabetical)
from typing_extensions import TypeAliasType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "SubmissionCount",
    "Goal",
    "JsonDict",
    "RawContactInput",
    "ErrorCategory",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
type SubmissionCount = int
type Goal = int

JsonDict = TypeAliasType("JsonDict", dict[str, Any])
RawContactInput = TypeAliasType("RawContactInput", Mapping[str, Any])

ErrorCategory = TypeAliasType(
    "ErrorCategory",
    Literal["validation", "storage_corruption", "storage_write", "notification"],
)
