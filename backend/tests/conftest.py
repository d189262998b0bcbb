"""Shared test fixtures and helpers for the contact backend tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import logfire
import pytest
from fastapi.testclient import TestClient

from nuf_backend.api import create_app
from nuf_backend.core.exceptions import NotificationError
from nuf_backend.infra.config import Settings
from nuf_backend.storage import JsonSubmissionStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from nuf_backend.core.models import Submission


__all__ = (
    "TestEnv",
    "RecordingNotifier",
    "FailingNotifier",
    "HangingNotifier",
)

logfire.configure(send_to_logfire=False, console=False)

# Keep the transport group unset unless a test opts in.
_SMTP_UNSET: dict[str, Any] = {
    "smtp_host": None,
    "smtp_port": None,
    "smtp_user": None,
    "smtp_pass": None,
    "notify_to": None,
}


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


# Notifier doubles


class RecordingNotifier:
    """Notifier that remembers every record it was asked to deliver."""

    transport_name = "recording"
    enabled = True

    def __init__(self) -> None:
        self.delivered: list[Submission] = []

    async def notify(self, record: Submission) -> None:
        self.delivered.append(record)


class FailingNotifier:
    """Notifier whose delivery always fails."""

    transport_name = "failing"
    enabled = True

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or NotificationError("failing", "connection refused")
        self.attempts = 0

    async def notify(self, record: Submission) -> None:
        self.attempts += 1
        raise self.error


class HangingNotifier:
    """Notifier that never finishes on its own."""

    transport_name = "hanging"
    enabled = True

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.cancelled = False

    async def notify(self, record: Submission) -> None:
        self.started.set()
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory for the submission log; not created up front."""
    return tmp_path / "data"


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings isolated from the process environment."""
    return Settings(_env_file=None, data_dir=data_dir, action_goal=0, **_SMTP_UNSET)


@pytest.fixture
def make_settings(data_dir: Path):
    """Factory for settings with overrides."""

    def factory(**overrides: Any) -> Settings:
        values: dict[str, Any] = {"data_dir": data_dir, **_SMTP_UNSET}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return factory


@pytest.fixture
def store(settings: Settings) -> JsonSubmissionStore:
    """JSON store backed by a temporary directory."""
    return JsonSubmissionStore(settings.submissions_path)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Stand-in for a component logger."""
    return MagicMock()


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    """Notifier that records deliveries."""
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    """Notifier that raises NotificationError on every delivery."""
    return FailingNotifier()


@pytest.fixture
def hanging_notifier() -> HangingNotifier:
    """Notifier that blocks until cancelled."""
    return HangingNotifier()


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client for an app with notifications disabled."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def contact_payload() -> dict[str, str]:
    """A valid contact form body."""
    return {
        "name": "Maria Lopez",
        "email": "maria@example.org",
        "phone": "555-0100",
        "zip": "90210",
        "message": "Staffing on our unit is unsafe. Please help.",
    }
