"""Core domain models for the contact backend.

These models represent submissions, their normalized input fields, the
derived metrics, and the two outcomes of a submission attempt.

Persisted and outbound models are immutable (frozen=True) to prevent
accidental mutation once a record has been accepted.
"""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .constants import MAX_MESSAGE_LENGTH
from .types import Goal, JsonDict, SubmissionCount

__all__ = [
    # Input
    'ContactFields',
    # Persisted
    'Submission',
    # Outbound
    'Metrics',
    'SubmissionAccepted',
    'SubmissionRejected',
    'SubmissionOutcome',
    # Helpers
    'utc_now',
    'format_timestamp',
]


# =============================================================================
# Helpers
# =============================================================================
def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and ``Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


# =============================================================================
# Input Models
# =============================================================================
class ContactFields(BaseModel):
    """Normalized contact form fields, ready to be timestamped."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ''
    zip: str = ''
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)

    def stamp(self, submitted_at: datetime | None = None) -> Submission:
        """Create a submission record from these fields."""
        return Submission(
            **self.model_dump(),
            submitted_at=submitted_at or utc_now(),
        )


# =============================================================================
# Persisted Models
# =============================================================================
class Submission(BaseModel):
    """A single accepted contact form entry.

    Serialized with camelCase keys (``submittedAt``) so the log document
    stays compatible with existing consumers.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    name: str
    email: str
    phone: str = ''
    zip: str = ''
    message: str
    submitted_at: datetime = Field(
        ...,
        description='UTC acceptance time, assigned once',
    )

    @field_validator('name', 'email', 'phone', 'zip', 'message', mode='before')
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        # Older logs store null where the client sent null
        return '' if value is None else value

    @field_serializer('submitted_at')
    def _serialize_submitted_at(self, value: datetime) -> str:
        return format_timestamp(value)

    def to_document(self) -> JsonDict:
        """Return the JSON-ready mapping written to the log."""
        return self.model_dump(mode='json', by_alias=True)


# =============================================================================
# Outbound Models
# =============================================================================
class Metrics(BaseModel):
    """Aggregate submission metrics.

    ``contactSubmissions`` and ``totalActions`` always carry the same count.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    contact_submissions: int = Field(..., ge=0)
    total_actions: int = Field(..., ge=0)
    goal: int = 0

    @classmethod
    def from_count(cls, count: SubmissionCount, goal: Goal) -> Self:
        """Build metrics from a log length and configured goal."""
        return cls(contact_submissions=count, total_actions=count, goal=goal)

    def to_response(self) -> dict[str, int]:
        """Return the wire representation."""
        return self.model_dump(by_alias=True)


class SubmissionAccepted(BaseModel):
    """Outcome of a submission that was validated and persisted."""

    model_config = ConfigDict(frozen=True)

    record: Submission
    metrics: Metrics

    @property
    def accepted(self) -> bool:
        return True


class SubmissionRejected(BaseModel):
    """Outcome of a submission that failed validation."""

    model_config = ConfigDict(frozen=True)

    error: str

    @property
    def accepted(self) -> bool:
        return False


type SubmissionOutcome = SubmissionAccepted | SubmissionRejected
