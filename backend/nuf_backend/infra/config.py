"""Configuration management for the contact backend.

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
from pathlib import Path

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from ..core.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_HOST,
    DEFAULT_NOTIFY_SUBJECT,
    DEFAULT_PORT,
    DEFAULT_SUBMISSIONS_FILE,
    NOTIFY_TIMEOUT_SECONDS,
    SMTP_IMPLICIT_TLS_PORT,
)
from .logging import get_logger

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Settings", "SmtpConfig", "load_settings")

logger = get_logger("infra.config")


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, slots=True)
class SmtpConfig:
    """Complete SMTP transport configuration."""

    host: str
    port: int
    user: str
    password: str
    notify_to: str

    @property
    def use_tls(self) -> bool:
        """Whether the connection uses implicit TLS."""
        return self.port == SMTP_IMPLICIT_TLS_PORT


# =============================================================================
# Section 11: Classes
# =============================================================================
class Settings(BaseSettings):
    """Runtime configuration, read once from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_ignore_empty=True,
        validate_default=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    # Server
    host: str = Field(default=DEFAULT_HOST, description="Listen address")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, description="Listen port")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
    environment: str = Field(default="development", description="Deployment environment tag")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    static_dir: Path | None = Field(default=None, description="Directory of static files served from /")

    # Metrics
    action_goal: int = Field(default=0, description="Campaign target echoed as goal")

    # Storage
    data_dir: Path = Field(default=Path(DEFAULT_DATA_DIR), description="Directory holding the submission log")
    submissions_file: str = Field(default=DEFAULT_SUBMISSIONS_FILE, description="Submission log file name")

    # Notification
    smtp_host: str | None = None
    # Raw text; parsed and range-checked by `smtp`
    smtp_port: str | None = None
    smtp_user: str | None = None
    smtp_pass: str | None = None
    notify_to: str | None = None
    notify_subject: str = Field(default=DEFAULT_NOTIFY_SUBJECT, description="Notification email subject")
    notify_timeout_seconds: float = Field(
        default=NOTIFY_TIMEOUT_SECONDS,
        gt=0,
        description="Upper bound on a single notification delivery",
    )

    @property
    def submissions_path(self) -> Path:
        """Full path of the submission log document."""
        return self.data_dir / self.submissions_file

    @property
    def smtp(self) -> SmtpConfig | None:
        """SMTP transport settings.

        ``None`` unless all five options are set. An unusable port is
        logged as a warning and also disables the transport.
        """
        if not (self.smtp_host and self.smtp_port and self.smtp_user and self.smtp_pass and self.notify_to):
            return None
        port = _parse_port(self.smtp_port)
        if port is None:
            logger.warn("smtp_port_invalid", value=self.smtp_port)
            return None
        return SmtpConfig(
            host=self.smtp_host,
            port=port,
            user=self.smtp_user,
            password=self.smtp_pass,
            notify_to=self.notify_to,
        )


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings() -> Settings:
    """Load settings from environment."""
    return Settings()


def _parse_port(value: str) -> int | None:
    try:
        port = int(value.strip())
    except ValueError:
        return None
    return port if 1 <= port <= 65535 else None
