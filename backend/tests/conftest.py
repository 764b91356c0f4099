"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend and give every test a fresh,
delay-free identity store so state never leaks between cases.
"""
import sys
from pathlib import Path

import pytest

# Ensure `identity_access` and `web` are importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[2]
BACKEND_DIR = REPO_ROOT / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from identity_access.service import AuthService, SimulatedLatency  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def auth() -> AuthService:
    """Empty store without simulated latency."""
    return AuthService(latency=SimulatedLatency.none())


@pytest.fixture(autouse=True)
def _reset_web_store(monkeypatch: pytest.MonkeyPatch):
    """Rebuild the web app's shared store per test from a clean environment.

    Behavior:
        - Simulated delays disabled (EDTECH_LATENCY_SCALE=0).
        - Demo seed enabled; environment toggles from other tests cleared.
        - The shared store is dropped before and after each test.
    """
    monkeypatch.setenv("EDTECH_LATENCY_SCALE", "0")
    for var in ("EDTECH_ENV", "EDTECH_SEED_DEMO_DATA", "EDTECH_TRUST_PROXY"):
        monkeypatch.delenv(var, raising=False)
    from web import store_wiring

    store_wiring.set_auth(None)
    yield
    store_wiring.set_auth(None)
