"""Tests for the command-line entry point.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from nuf_backend import __main__ as cli
from nuf_backend import __version__
from nuf_backend.client import SubmitResult
from nuf_backend.core.exceptions import ContactValidationError
from nuf_backend.core.models import Metrics

__all__ = ()


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> Console:
    recording = Console(record=True, width=100)
    monkeypatch.setattr(cli, "console", recording)
    return recording


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults_to_serve(self) -> None:
        """No subcommand should select the server."""
        assert cli.build_parser().parse_args([]).command is None

    def test_submit_arguments(self) -> None:
        """Submit should collect the contact fields."""
        args = cli.build_parser().parse_args(
            ["submit", "--name", "Ada", "--email", "a@x.org", "--message", "Hi", "--zip", "90210"]
        )

        assert args.command == "submit"
        assert (args.name, args.email, args.message, args.phone, args.zip) == ("Ada", "a@x.org", "Hi", "", "90210")
        assert args.url == "http://localhost:3000"

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version should print the package version and exit."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestRenderMetrics:
    """Tests for the metrics table."""

    def test_rows(self, console: Console) -> None:
        """Each metric should be rendered."""
        console.print(cli.render_metrics(Metrics.from_count(12, 500)))

        output = console.export_text()
        assert "Contact submissions" in output
        assert "12" in output
        assert "500" in output


class TestMain:
    """Tests for command dispatch."""

    def test_serve_by_default(self) -> None:
        """Running without a subcommand should start the server."""
        with patch.object(cli, "serve") as serve:
            assert cli.main([]) == 0

        serve.assert_called_once_with()

    def test_metrics(self, console: Console) -> None:
        """The metrics command should print the server's metrics."""
        with patch.object(cli.ContactClient, "metrics", AsyncMock(return_value=Metrics.from_count(3, 10))):
            assert cli.main(["metrics", "--url", "http://example.test"]) == 0

        assert "Campaign Metrics" in console.export_text()

    def test_submit_accepted(self, console: Console) -> None:
        """An accepted submission should exit zero."""
        result = SubmitResult(message="Submission recorded.", metrics=Metrics.from_count(1, 0))

        with patch.object(cli.ContactClient, "submit", AsyncMock(return_value=result)) as submit:
            code = cli.main(["submit", "--name", "Ada", "--email", "a@x.org", "--message", "Hi"])

        assert code == 0
        submit.assert_awaited_once_with(name="Ada", email="a@x.org", phone="", zip="", message="Hi")
        assert "Submission recorded." in console.export_text()

    def test_submit_rejected(self, console: Console) -> None:
        """A rejected submission should exit non-zero with the reason."""
        error = ContactValidationError("ZIP code must be 5 digits.")

        with patch.object(cli.ContactClient, "submit", AsyncMock(side_effect=error)):
            code = cli.main(["submit", "--name", "Ada", "--email", "a@x.org", "--message", "Hi", "--zip", "1"])

        assert code == 1
        assert "ZIP code must be 5 digits." in console.export_text()
