"""Centralized instrumentation for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING, Literal

# Third-party (alphabetical)
import logfire

if TYPE_CHECKING:
    from fastapi import FastAPI

    from .config import Settings

__all__ = ("configure_instrumentation", "instrument_app")


def configure_instrumentation(
    settings: Settings,
    *,
    service_name: str = "nuf-backend",
    send_to_logfire: bool | Literal["if-token-present"] | None = "if-token-present",
) -> None:
    """Configure global instrumentation settings.

    This function should be called once at process startup, before the
    application is created.

    Args:
        settings: Runtime settings providing the deployment environment.
        service_name: Name of the service for tracing.
        send_to_logfire: Whether to send telemetry to Logfire.
    """
    logfire.configure(
        service_name=service_name,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_app(app: FastAPI) -> None:
    """Trace every request handled by the application."""
    logfire.instrument_fastapi(app)
