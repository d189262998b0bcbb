"""FastAPI application for the contact form API.

Provides the submission, metrics and health endpoints, and optionally
serves the static campaign site.
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .._version import __version__
from ..core.constants import HEALTH_STATUS_OK, SUBMISSION_RECORDED_MESSAGE
from ..core.models import SubmissionRejected
from ..core.protocols import Notifier, SubmissionStore
from ..core.types import JsonDict
from ..infra.config import Settings, load_settings
from ..infra.logging import get_logger
from ..notifications import create_notifier
from ..services.submission import SubmissionService
from ..storage import JsonSubmissionStore

__all__ = ['create_app']

logger = get_logger('api')


def create_app(
    settings: Settings | None = None,
    *,
    store: SubmissionStore | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Runtime settings. Loaded from the environment when omitted.
        store: Submission log backing. Defaults to the JSON document at
            ``settings.submissions_path``.
        notifier: Submission notifier. Defaults to the configured transport.
    """
    settings = settings or load_settings()
    if store is None:
        store = JsonSubmissionStore(settings.submissions_path)
    if notifier is None:
        notifier = create_notifier(settings)
    service = SubmissionService(
        store,
        notifier,
        goal=settings.action_goal,
        notify_timeout_seconds=settings.notify_timeout_seconds,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        async with service:
            logger.info('backend_listening', port=settings.port)
            yield

    app = FastAPI(
        title='NUF Backend',
        description='Contact form submissions and campaign metrics',
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {'status': HEALTH_STATUS_OK}

    @app.get('/api/metrics')
    async def get_metrics() -> dict[str, int]:
        """Current submission count and campaign goal."""
        metrics = await service.metrics()
        return metrics.to_response()

    @app.post('/api/contact')
    async def submit_contact(request: Request) -> JSONResponse:
        """Record a contact form submission."""
        outcome = await service.submit(await _read_json_object(request))

        if isinstance(outcome, SubmissionRejected):
            return JSONResponse(
                {'error': outcome.error},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        return JSONResponse(
            {
                'message': SUBMISSION_RECORDED_MESSAGE,
                'metrics': outcome.metrics.to_response(),
            },
            status_code=status.HTTP_201_CREATED,
        )

    # Mounted last so the API routes above take precedence
    if settings.static_dir is not None:
        app.mount('/', StaticFiles(directory=settings.static_dir, html=True), name='static')

    return app


async def _read_json_object(request: Request) -> JsonDict:
    """Return the JSON body as a dict; anything else counts as empty."""
    try:
        body = await request.json()
    except ValueError:
        logger.debug('contact_body_unparseable')
        return {}
    return body if isinstance(body, dict) else {}
