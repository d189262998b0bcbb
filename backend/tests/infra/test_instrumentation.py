"""Tests for logging and instrumentation setup.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from unittest.mock import patch

import logfire
from fastapi import FastAPI

from nuf_backend.infra import configure_instrumentation, get_logger, instrument_app
from nuf_backend.infra.config import Settings

__all__ = ()


class TestConfigureInstrumentation:
    """Tests for configure_instrumentation."""

    def test_passes_environment(self, make_settings) -> None:
        """The deployment environment should be forwarded to logfire."""
        settings: Settings = make_settings(environment="production")

        with patch("nuf_backend.infra.instrumentation.logfire.configure") as configure:
            configure_instrumentation(settings, send_to_logfire=False)

        configure.assert_called_once_with(
            service_name="nuf-backend",
            environment="production",
            send_to_logfire=False,
        )

    def test_instrument_app(self) -> None:
        """Applications should be handed to the FastAPI integration."""
        app = FastAPI()

        with patch("nuf_backend.infra.instrumentation.logfire.instrument_fastapi") as instrument:
            instrument_app(app)

        instrument.assert_called_once_with(app)


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_logfire_instance(self) -> None:
        """Component loggers should be logfire instances."""
        assert isinstance(get_logger("storage.json"), logfire.Logfire)

    def test_tags_component(self) -> None:
        """The component name should be applied as a tag."""
        with patch("nuf_backend.infra.logging.logfire.with_settings") as with_settings:
            get_logger("api")

        with_settings.assert_called_once_with(tags=["component:api"])
