"""
Service layer abstraction.

Each service encapsulates business logic for a domain: access‑filtered
paper queries, visibility rules and the startup registration with the
Super App directory.  API handlers only talk to services.
"""
