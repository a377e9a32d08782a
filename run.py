"""Entry point that serves the Ku Research API and registers it with the Super App.

The API is served by uvicorn.  Once the server is listening, the
service registers itself with the Super App directory in the
background.  Registration failures are logged and otherwise ignored:
the API keeps serving either way.  On shutdown a handshake still in
progress stops at its next pause between attempts, so exit can wait for
at most one directory request and one retry interval.

Configuration (listening address, directory URL, shared key,
memberships, ...) is read from environment variables; see
``ku_research_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ku_research_api.app.core.config import settings
from ku_research_api.app.main import app
from ku_research_api.app.services.registration_service import register_when_listening


async def main() -> None:
    """Serve the API and, if enabled, run the registration handshake alongside it."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    serve_task = asyncio.create_task(server.serve())
    if settings.registration_enabled:
        registration_task = asyncio.create_task(register_when_listening(server, app.state.registration))
        registration_task.add_done_callback(_log_registration_outcome)
    else:
        logging.info("Super App registration disabled")
    await serve_task


def _log_registration_outcome(task: "asyncio.Task") -> None:
    if task.cancelled():
        return
    if exception := task.exception():
        logging.error("Registration task crashed", exc_info=exception)
    else:
        logging.info("Registration finished in state %s", task.result().value)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
