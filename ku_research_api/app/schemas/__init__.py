"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies as well as the
immutable ``Paper`` record kept by the in‑memory store.
"""
