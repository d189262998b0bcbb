"""Tests for the HTTP client.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from nuf_backend.api import create_app
from nuf_backend.client import ContactClient, SubmitResult
from nuf_backend.core.constants import ERROR_INVALID_ZIP, SUBMISSION_RECORDED_MESSAGE
from nuf_backend.core.exceptions import ContactValidationError
from nuf_backend.core.models import Metrics

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from nuf_backend.infra.config import Settings

__all__ = ()

pytestmark = pytest.mark.anyio


@pytest.fixture
async def contact_client(settings: Settings) -> AsyncIterator[ContactClient]:
    transport = httpx.ASGITransport(app=create_app(settings))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield ContactClient(http_client=http_client)


def _mock_client(status_code: int, payload: dict) -> ContactClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")
    return ContactClient(http_client=http_client)


class TestContactClient:
    """Tests for ContactClient against the application."""

    async def test_health(self, contact_client: ContactClient) -> None:
        """A running server should report healthy."""
        assert await contact_client.health() is True

    async def test_metrics(self, contact_client: ContactClient) -> None:
        """Metrics should be parsed from the camelCase response."""
        assert await contact_client.metrics() == Metrics(contact_submissions=0, total_actions=0, goal=0)

    async def test_submit(self, contact_client: ContactClient, contact_payload: dict[str, str]) -> None:
        """Accepted submissions should return the server acknowledgement."""
        result = await contact_client.submit(**contact_payload)

        assert result == SubmitResult(
            message=SUBMISSION_RECORDED_MESSAGE,
            metrics=Metrics(contact_submissions=1, total_actions=1, goal=0),
        )

    async def test_submit_rejected(self, contact_client: ContactClient) -> None:
        """Rejections should raise with the server's message."""
        with pytest.raises(ContactValidationError, match=ERROR_INVALID_ZIP):
            await contact_client.submit(name="Ada", email="a@x.org", message="Hi", zip="abc")


class TestContactClientErrors:
    """Tests for unexpected server responses."""

    async def test_unhealthy(self) -> None:
        """Non-ok health responses should report unhealthy."""
        async with _mock_client(503, {"status": "down"}) as client:
            assert await client.health() is False

    async def test_server_error(self) -> None:
        """Server errors should raise HTTPStatusError."""
        async with _mock_client(500, {"error": "boom"}) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.submit(name="Ada", email="a@x.org", message="Hi")

    async def test_closes_owned_client(self) -> None:
        """A client created internally should be closed on exit."""
        client = ContactClient("http://localhost:3000")

        async with client:
            pass

        assert client._http.is_closed
