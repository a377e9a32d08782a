"""Configuration, logging and the in‑memory stores shared by the services."""
