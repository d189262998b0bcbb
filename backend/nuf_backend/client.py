"""HTTP client for a running contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

# Third-party (alphabetical)
import httpx

# Local imports (core first, then alphabetical)
from .core.exceptions import ContactValidationError
from .core.models import Metrics

if TYPE_CHECKING:
    from types import TracebackType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("ContactClient", "SubmitResult")

# =============================================================================
# Section 3: Constants
# =============================================================================
DEFAULT_BASE_URL = "http://localhost:3000"


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, slots=True)
class SubmitResult:
    """Server acknowledgement of an accepted submission."""

    message: str
    metrics: Metrics


# =============================================================================
# Section 11: Classes
# =============================================================================
class ContactClient:
    """Async client for the contact API.

    Example:
        >>> async with ContactClient("http://localhost:3000") as client:
        ...     metrics = await client.metrics()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def health(self) -> bool:
        """Return whether the server reports itself healthy."""
        response = await self._http.get("/health")
        return response.status_code == httpx.codes.OK and response.json().get("status") == "ok"

    async def metrics(self) -> Metrics:
        """Fetch current metrics."""
        response = await self._http.get("/api/metrics")
        response.raise_for_status()
        return Metrics.model_validate(response.json())

    async def submit(self, **fields: Any) -> SubmitResult:
        """Post a contact submission.

        Raises:
            ContactValidationError: If the server rejects the input.
            httpx.HTTPStatusError: For any other non-success status.
        """
        response = await self._http.post("/api/contact", json=fields)
        if response.status_code == httpx.codes.BAD_REQUEST:
            raise ContactValidationError(response.json().get("error", "Submission rejected."))
        response.raise_for_status()
        body = response.json()
        return SubmitResult(message=body["message"], metrics=Metrics.model_validate(body["metrics"]))
