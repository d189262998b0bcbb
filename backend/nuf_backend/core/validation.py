"""Contact form validation.

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
from typing import Any

# Local imports (core first, then alphabetical)
from .constants import (
    CONTACT_FIELDS,
    ERROR_INVALID_ZIP,
    ERROR_MESSAGE_TOO_LONG,
    ERROR_REQUIRED_FIELDS,
    MAX_MESSAGE_LENGTH,
    REQUIRED_FIELDS,
    ZIP_CODE_PATTERN,
)
from .exceptions import ContactValidationError
from .models import ContactFields
from .types import RawContactInput

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("validate_contact", "normalize_field")


# =============================================================================
# Section 12: Functions
# =============================================================================
def normalize_field(value: Any) -> str:
    """Coerce a raw field value to trimmed text.

    Strings are trimmed and numbers are converted with ``str``. ``None``,
    booleans, objects and arrays become the empty string.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return ""


def validate_contact(raw: RawContactInput | None) -> ContactFields:
    """Validate raw contact form input.

    Rules are applied in order and the first failing rule is reported.

    Args:
        raw: Request fields as delivered by the HTTP layer. May be ``None``.

    Returns:
        The trimmed, normalized field set.

    Raises:
        ContactValidationError: With the client-facing message of the
            first rule that failed.
    """
    source: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    fields = {name: normalize_field(source.get(name)) for name in CONTACT_FIELDS}

    missing = sorted(name for name in REQUIRED_FIELDS if not fields[name])
    if missing:
        raise ContactValidationError(ERROR_REQUIRED_FIELDS, field=missing[0])

    if fields["zip"] and ZIP_CODE_PATTERN.fullmatch(fields["zip"]) is None:
        raise ContactValidationError(ERROR_INVALID_ZIP, field="zip")

    if len(fields["message"]) > MAX_MESSAGE_LENGTH:
        raise ContactValidationError(ERROR_MESSAGE_TOO_LONG, field="message")

    return ContactFields(**fields)
