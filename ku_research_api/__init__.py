"""
Top‑level package for the Ku Research API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``ku_research_api.app.main:app``.
"""

__all__ = []
