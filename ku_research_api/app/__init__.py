"""
Application package initializer.

The API is organised into configuration and stores (``core``),
business logic (``services``), payload schemas (``schemas``), outbound
clients (``clients``) and versioned routes (``api``).
"""

from .main import app  # noqa: F401
