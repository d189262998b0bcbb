"""Application services."""
from __future__ import annotations

from .submission import SubmissionService

__all__ = [
    'SubmissionService',
]
