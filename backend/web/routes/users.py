"""
Users (Directory) routes: account listing, search and deletion.

Why:
    Admins manage the full directory; teachers look up accounts by role and
    name. The signed-in account reads its own entry via `/api/me`.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from identity_access import directory
from identity_access.domain import ALLOWED_ROLES, Identity, Role
from web.routes.security import is_same_origin
from web.store_wiring import get_auth

users_router = APIRouter(tags=["Users"])
logger = logging.getLogger("edtech.web.users")


def _private_no_store() -> dict:
    return {"Cache-Control": "private, no-store"}


def _is_teacher_or_admin(user: Identity | None) -> bool:
    return user is not None and user.role in (Role.TEACHER, Role.ADMIN)


def _guard(*, admin_only: bool) -> JSONResponse | None:
    user = get_auth().current_identity
    if user is None:
        return JSONResponse({"error": "unauthenticated"}, status_code=401, headers=_private_no_store())
    allowed = user.role is Role.ADMIN if admin_only else _is_teacher_or_admin(user)
    if not allowed:
        return JSONResponse({"error": "forbidden"}, status_code=403, headers=_private_no_store())
    return None


@users_router.get("/api/me")
async def me(request: Request):
    """Return the signed-in account or 401."""
    user = get_auth().current_identity
    if user is None:
        return JSONResponse({"error": "unauthenticated"}, status_code=401, headers=_private_no_store())
    return JSONResponse(user.to_dict(), headers=_private_no_store())


@users_router.get("/api/users")
async def users_all(request: Request):
    """Every directory entry, unfiltered; admins only."""
    denied = _guard(admin_only=True)
    if denied:
        return denied
    return JSONResponse([i.to_dict() for i in get_auth().list_all()], headers=_private_no_store())


@users_router.get("/api/users/list")
async def users_list(request: Request, role: str, limit: int = 50, offset: int = 0):
    """List accounts by role (teachers/admins only).

    Validation:
        - `role` in ALLOWED_ROLES (student, teacher, admin)
        - `limit` clamped to 1..200, `offset` to >= 0
    """
    denied = _guard(admin_only=False)
    if denied:
        return denied
    if role not in ALLOWED_ROLES:
        return JSONResponse({"error": "bad_request", "detail": "invalid_role"}, status_code=400, headers=_private_no_store())
    limit = max(1, min(200, int(limit or 50)))
    offset = max(0, int(offset or 0))
    results = directory.list_identities_by_role(get_auth(), role=role, limit=limit, offset=offset)
    return JSONResponse(results, headers=_private_no_store())


@users_router.get("/api/users/search")
async def users_search(request: Request, q: str, role: str, limit: int = 20):
    """Search accounts by display name (teachers/admins only).

    Validation:
        - `q` min length 2
        - `role` in ALLOWED_ROLES
        - `limit` in 1..50
    """
    denied = _guard(admin_only=False)
    if denied:
        return denied
    q = (q or "").strip()
    if len(q) < 2:
        return JSONResponse({"error": "bad_request", "detail": "q_too_short"}, status_code=400, headers=_private_no_store())
    if role not in ALLOWED_ROLES:
        return JSONResponse({"error": "bad_request", "detail": "invalid_role"}, status_code=400, headers=_private_no_store())
    limit = max(1, min(50, int(limit or 20)))
    results = directory.search_identities_by_name(get_auth(), role=role, q=q, limit=limit)
    return JSONResponse(results, headers=_private_no_store())


@users_router.delete("/api/users/{email:path}")
async def users_delete(request: Request, email: str):
    """Delete an account by email (admins only). Idempotent (204 when absent)."""
    denied = _guard(admin_only=True)
    if denied:
        return denied
    await get_auth().delete_by_email(email)
    return Response(status_code=204, headers=_private_no_store())


@users_router.post("/admin/users/{email:path}/delete")
async def users_delete_form(request: Request, email: str):
    """Form variant used by the admin panel (PRG back to /admin).

    Deleting the signed-in admin's own account ends the session; the redirect
    then lands on the login page.
    """
    if not is_same_origin(request):
        return Response(status_code=403, headers=_private_no_store())
    user = get_auth().current_identity
    if user is None or user.role is not Role.ADMIN:
        logger.warning("Delete form used without admin role (uid=%s)", user.uid if user else None)
        return RedirectResponse(url="/", status_code=303)
    await get_auth().delete_by_email(email)
    if get_auth().current_identity is None:
        return RedirectResponse(url="/login", status_code=303, headers=_private_no_store())
    return RedirectResponse(url="/admin?flash=deleted", status_code=303, headers=_private_no_store())
