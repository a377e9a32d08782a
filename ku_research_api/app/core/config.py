"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started locally without any setup.  Values are read
once at process start and never re-read.

Membership relations are seeded from two variables:

``SITE_MEMBERS``
    Comma‑separated subject ids belonging to the site, e.g. ``"2,5,9"``.

``WORKSPACE_MEMBERS``
    Comma‑separated ``workspace:subject`` pairs, e.g. ``"7:2,7:4,8:2"``.
"""

import os
from dataclasses import dataclass
from typing import FrozenSet, Tuple


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def parse_site_members(raw: str) -> FrozenSet[int]:
    """Parse a comma‑separated list of subject ids.

    Empty items are ignored.  Raises ``ValueError`` for items that are
    not integers so that misconfiguration fails at startup.
    """
    members = set()
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        members.add(int(item))
    return frozenset(members)


def parse_workspace_members(raw: str) -> FrozenSet[Tuple[int, int]]:
    """Parse ``workspace:subject`` pairs separated by commas."""
    pairs = set()
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        workspace, sep, subject = item.partition(":")
        if not sep:
            raise ValueError(f"Invalid workspace membership {item!r}, expected 'workspace:subject'")
        pairs.add((int(workspace), int(subject)))
    return frozenset(pairs)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ku Research")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8083"))

    # Address the directory uses to reach this service.  It must be
    # reachable from the directory, so ``HOST`` (often 0.0.0.0) is not
    # a suitable default.
    service_url: str = os.getenv("SERVICE_URL", "http://localhost:8083")

    # External service directory (the "Super App") and the pre‑shared
    # key used to authenticate registration calls.
    super_app_url: str = os.getenv("SUPER_APP_URL", "http://localhost:8080")
    super_app_key: str = os.getenv("SUPER_APP_KEY", "super-secret-key")

    registration_enabled: bool = _env_bool("REGISTRATION_ENABLED", "true")
    registration_max_attempts: int = int(os.getenv("REGISTRATION_MAX_ATTEMPTS", "5"))
    registration_retry_interval: float = float(os.getenv("REGISTRATION_RETRY_INTERVAL", "2"))
    registration_timeout: float = float(os.getenv("REGISTRATION_TIMEOUT", "5"))

    site_members: str = os.getenv("SITE_MEMBERS", "")
    workspace_members: str = os.getenv("WORKSPACE_MEMBERS", "")

    seed_sample_papers: bool = _env_bool("SEED_SAMPLE_PAPERS", "true")
    sample_owner_id: int = int(os.getenv("SAMPLE_OWNER_ID", "0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
