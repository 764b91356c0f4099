"""
Shared web security helpers for form routes.

Contains the same-origin check applied to every browser form POST that
mutates the identity store (sign-in, registration, deletion, broadcast).
"""
from __future__ import annotations

from urllib.parse import urlparse

from fastapi import Request

from web import config


def _parse_origin(url: str) -> tuple[str, str, int]:
    p = urlparse(url)
    if not p.scheme or not p.hostname:
        raise ValueError("invalid_origin")
    scheme = p.scheme.lower()
    host = p.hostname.lower()
    port = p.port if p.port is not None else (443 if scheme == "https" else 80)
    return scheme, host, int(port)


def _parse_server(req: Request) -> tuple[str, str, int]:
    if config.trust_proxy():
        xf_proto = (req.headers.get("x-forwarded-proto") or req.url.scheme or "").split(",")[0].strip()
        xf_host = (req.headers.get("x-forwarded-host") or req.headers.get("host") or "").split(",")[0].strip()
        scheme = (xf_proto or req.url.scheme or "http").lower()
        if ":" in xf_host:
            host_only, port_str = xf_host.rsplit(":", 1)
            try:
                port = int(port_str)
            except ValueError:
                port = 443 if scheme == "https" else 80
            return scheme, host_only.lower(), port
        host = (xf_host or (req.url.hostname or "")).lower()
        return scheme, host, 443 if scheme == "https" else 80

    scheme = (req.url.scheme or "http").lower()
    host = (req.url.hostname or "").lower()
    port = int(req.url.port) if req.url.port else (443 if scheme == "https" else 80)
    return scheme, host, port


def is_same_origin(request: Request) -> bool:
    """Verify same-origin using Origin or Referer headers.

    Behavior:
    - If Origin is present, require exact scheme/host/port match with server.
    - Else if Referer is present, validate its origin similarly.
    - Else (no headers): allow to not break non-browser clients.
    Proxy awareness: Only trust X-Forwarded-* when EDTECH_TRUST_PROXY=true.
    """
    try:
        server = _parse_server(request)
        origin_val = request.headers.get("origin")
        if origin_val:
            return _parse_origin(origin_val) == server
        referer_val = request.headers.get("referer")
        if referer_val:
            return _parse_origin(referer_val) == server
        return True
    except ValueError:
        return False
