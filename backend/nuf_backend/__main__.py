"""Command-line entry point for the contact backend.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import argparse
import asyncio
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import uvicorn
from rich.console import Console
from rich.table import Table

# Local imports (core first, then alphabetical)
from . import __version__
from .api import create_app
from .client import DEFAULT_BASE_URL, ContactClient
from .core.exceptions import ContactValidationError
from .infra import configure_instrumentation, instrument_app, load_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import FastAPI

    from .core.models import Metrics

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("main", "build_app")

console = Console()


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_app() -> FastAPI:
    """Application factory used by uvicorn.

    Configures instrumentation once per server process.
    """
    settings = load_settings()
    configure_instrumentation(settings)
    app = create_app(settings)
    instrument_app(app)
    return app


def serve() -> None:
    """Run the API server."""
    settings = load_settings()
    uvicorn.run(
        "nuf_backend.__main__:build_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


def render_metrics(metrics: Metrics) -> Table:
    """Render metrics as a table."""
    table = Table(title="Campaign Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Contact submissions", str(metrics.contact_submissions))
    table.add_row("Total actions", str(metrics.total_actions))
    table.add_row("Goal", str(metrics.goal))
    return table


async def _show_metrics(base_url: str) -> int:
    async with ContactClient(base_url) as client:
        metrics = await client.metrics()
    console.print(render_metrics(metrics))
    return 0


async def _submit(base_url: str, fields: dict[str, str]) -> int:
    async with ContactClient(base_url) as client:
        try:
            result = await client.submit(**fields)
        except ContactValidationError as exc:
            console.print(f"[red]Rejected:[/red] {exc}")
            return 1
    console.print(f"[green]{result.message}[/green]")
    console.print(render_metrics(result.metrics))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(prog="nuf-backend", description="Contact form backend")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Run the API server (default)")

    metrics_parser = subparsers.add_parser("metrics", help="Show metrics from a running server")
    metrics_parser.add_argument("--url", default=DEFAULT_BASE_URL, help="Server base URL")

    submit_parser = subparsers.add_parser("submit", help="Send a contact submission to a running server")
    submit_parser.add_argument("--url", default=DEFAULT_BASE_URL, help="Server base URL")
    submit_parser.add_argument("--name", required=True)
    submit_parser.add_argument("--email", required=True)
    submit_parser.add_argument("--message", required=True)
    submit_parser.add_argument("--phone", default="")
    submit_parser.add_argument("--zip", default="")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and dispatch the selected command."""
    args = build_parser().parse_args(argv)

    if args.command == "metrics":
        return asyncio.run(_show_metrics(args.url))
    if args.command == "submit":
        fields = {key: getattr(args, key) for key in ("name", "email", "phone", "zip", "message")}
        return asyncio.run(_submit(args.url, fields))

    serve()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
