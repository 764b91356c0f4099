"""
Wiring of the identity store used by the web app.

Why:
    Routes share one `AuthService` instance. Building it here (latency scale,
    demo seed, change logging) keeps `main` thin and lets tests swap in a fresh
    store via `set_auth()` without touching module internals.
"""
from __future__ import annotations

import logging
from typing import Optional

from identity_access.seed import seed_demo_data
from identity_access.service import AuthService, SimulatedLatency

from web import config

logger = logging.getLogger("edtech.web")

_AUTH: Optional[AuthService] = None
_REVISION = 0


def _on_change(service: AuthService) -> None:
    global _REVISION
    _REVISION += 1
    current = service.current_identity
    logger.debug(
        "store changed (revision=%d, session=%s, users=%d, notifications=%d)",
        _REVISION,
        current.uid if current else None,
        len(service.list_all()),
        len(service.notifications),
    )


def build_default_auth() -> AuthService:
    """Build the store from environment settings.

    Behavior:
        - Simulated delays are scaled by EDTECH_LATENCY_SCALE.
        - Demo accounts/notifications are installed unless EDTECH_SEED_DEMO_DATA=false.
        - A change observer logs each mutation and bumps `revision()`.
    """
    service = AuthService(latency=SimulatedLatency().scaled(config.latency_scale()))
    if config.seed_demo_data_enabled():
        seed_demo_data(service)
        logger.info("Identity store seeded with demo data")
    service.subscribe(_on_change)
    return service


def get_auth() -> AuthService:
    global _AUTH
    if _AUTH is None:
        _AUTH = build_default_auth()
    return _AUTH


def set_auth(service: Optional[AuthService]) -> None:
    """Replace the shared store (tests); None rebuilds lazily from the environment."""
    global _AUTH
    _AUTH = service


def revision() -> int:
    """Number of store mutations observed since process start."""
    return _REVISION


__all__ = ["build_default_auth", "get_auth", "set_auth", "revision"]
