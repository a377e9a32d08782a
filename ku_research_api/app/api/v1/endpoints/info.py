"""
Service information endpoints.

``/health`` reports liveness and the number of stored papers.
``/registration`` exposes the state of the startup registration with
the Super App directory, which is useful when diagnosing why the
service does not show up there.  Both are read‑only.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    return {"status": "ok", "papers": len(request.app.state.paper_service.store)}


@router.get("/registration")
async def registration_status(request: Request) -> Dict[str, Any]:
    """Return the handshake state, attempt count and last error, if any."""
    return request.app.state.registration.status()
