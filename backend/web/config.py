"""
Configuration and startup checks for the portal.

Why: The identity store is a demonstration mock (no password verification, no
persistence). This module reads the few environment settings the app has and
refuses to start in production-like environments, where a mock must never run.

Permissions: The caller needs no special privileges. Functions only read
environment variables and raise `SystemExit` on fatal misconfiguration.
"""
from __future__ import annotations

import math
import os
import sys

_TRUE = ("1", "true", "yes", "on")


def current_environment() -> str:
    return (os.getenv("EDTECH_ENV", "dev") or "dev").strip().lower()


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def _flag(name: str, default: str) -> bool:
    return (os.getenv(name, default) or "").strip().lower() in _TRUE


def should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via EDTECH_ENABLE_DOTENV (default true outside pytest).
    """
    if "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    return _flag("EDTECH_ENABLE_DOTENV", "true")


def seed_demo_data_enabled() -> bool:
    return _flag("EDTECH_SEED_DEMO_DATA", "true")


def latency_scale() -> float:
    """Multiplier applied to the simulated operation delays (0 disables them)."""
    raw = (os.getenv("EDTECH_LATENCY_SCALE", "1.0") or "1.0").strip()
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"EDTECH_LATENCY_SCALE must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"EDTECH_LATENCY_SCALE must be finite, got {raw!r}")
    if value < 0:
        raise ValueError("EDTECH_LATENCY_SCALE must not be negative")
    return value


def trust_proxy() -> bool:
    return _flag("EDTECH_TRUST_PROXY", "false")


def ensure_secure_config_on_startup() -> None:
    """Fail fast when the mock identity store would run in production/staging."""
    env = current_environment()
    if not _is_prod_like(env):
        return  # dev/test remain permissive
    raise SystemExit(
        f"Refusing to start: EDTECH_ENV={env} but the identity store is a demonstration mock "
        "without password verification or persistence."
    )
