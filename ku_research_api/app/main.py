"""
Main entrypoint for the Ku Research API.

This module assembles the FastAPI application, sets up logging, builds
the paper store and membership index, and prepares (but does not run)
the registration handshake with the Super App directory.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn ku_research_api.app.main:app

Running through uvicorn directly serves requests but skips directory
registration; use ``run.py`` to serve and register.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import papers
from .api.v1.router import router as v1_router
from .clients.super_app import SuperAppClient
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.membership import MembershipIndex
from .core.sample_data import seed_sample_papers
from .core.store import PaperStore
from .services.paper_service import PaperService
from .services.registration_service import DirectoryClient, RegistrationHandshake

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    directory_client: Optional[DirectoryClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    directory_client : Optional[DirectoryClient]
        Client used for the registration handshake.  Defaults to a
        :class:`SuperAppClient` pointed at ``SUPER_APP_URL``.

    Returns
    -------
    FastAPI
        A configured application.  The paper service is available as
        ``app.state.paper_service`` and the handshake as
        ``app.state.registration``.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Incoming request to: %s %s", request.method, request.url.path)
        return await call_next(request)

    store = PaperStore()
    if app_settings.seed_sample_papers:
        seed_sample_papers(store, app_settings.sample_owner_id)
    memberships = MembershipIndex.from_settings(app_settings)
    logger.info("Loaded %r", memberships)
    app.state.paper_service = PaperService(store, memberships)

    if directory_client is None:
        directory_client = SuperAppClient(
            base_url=app_settings.super_app_url,
            api_key=app_settings.super_app_key,
            timeout=app_settings.registration_timeout,
        )
    app.state.registration = RegistrationHandshake(
        directory_client,
        service_name=app_settings.project_name,
        capabilities=papers.CAPABILITIES,
        callback_url=app_settings.service_url,
        max_attempts=app_settings.registration_max_attempts,
        retry_interval=app_settings.registration_retry_interval,
    )

    # The directory invokes capabilities relative to the callback URL,
    # so the paper routes are served both at the root and under /api/v1.
    app.include_router(papers.router, tags=["papers"])
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
