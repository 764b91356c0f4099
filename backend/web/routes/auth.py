"""
Authentication form routes (router-only module).

Why:
    Keep sign-in, registration and sign-out in a dedicated router. Each route
    applies the form-level input policy, calls the identity store and follows
    Post/Redirect/Get on success. Store failures are re-rendered as the same
    form with the store's message and status 400.

Notes:
    The store's session is the session of this demo server's single
    interactive user; there are no cookies.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from identity_access.domain import USER_SELECTABLE_ROLES, Role
from identity_access.results import AuthError
from web.components import Layout, LoginForm, RegisterForm
from web.routes.security import is_same_origin
from web.store_wiring import get_auth

auth_router = APIRouter(tags=["Auth"])  # explicit paths, no prefix
logger = logging.getLogger("edtech.web.auth")

MISSING_CREDENTIALS = "Please provide email & password"
MISSING_FIELDS = "All fields required"


def _no_store() -> dict:
    return {"Cache-Control": "private, no-store"}


def _forbidden(request: Request) -> Response:
    logger.warning("Rejected cross-origin form post to %s", request.url.path)
    return Response(status_code=403, headers=_no_store())


def render_login(*, email: str = "", error: str | None = None, status_code: int = 200, flash: str | None = None) -> HTMLResponse:
    page = Layout("Login", LoginForm(email=email, error=error).render(), None, flash=flash, current_path="/login")
    return HTMLResponse(page.render(), status_code=status_code, headers=_no_store())


def render_register(*, values: dict | None = None, error: str | None = None, status_code: int = 200) -> HTMLResponse:
    page = Layout("Create Account", RegisterForm(error=error, values=values).render(), None, current_path="/register")
    return HTMLResponse(page.render(), status_code=status_code, headers=_no_store())


@auth_router.post("/auth/login")
async def auth_login(request: Request):
    """Sign in with email and password.

    Behavior:
        - Both fields must be non-empty after trimming (form policy).
        - Unknown email → 400 login page with "No user found for that email.".
        - Success → 303 to `/`.
    """
    if not is_same_origin(request):
        return _forbidden(request)
    form = await request.form()
    email = str(form.get("email") or "").strip()
    password = str(form.get("password") or "").strip()
    if not email or not password:
        return render_login(email=email, error=MISSING_CREDENTIALS, status_code=400)
    result = await get_auth().sign_in(email, password)
    if not result.ok:
        return render_login(email=email, error=result.error.message, status_code=400)
    return RedirectResponse(url="/", status_code=303, headers=_no_store())


@auth_router.post("/auth/register")
async def auth_register(request: Request):
    """Register a new account and sign it in.

    Behavior:
        - name, email, password and phone are required (form policy).
        - Only self-selectable roles (student, teacher) are accepted here.
        - Store failures (duplicate email, weak password, invalid role) →
          400 register page with the store's message; fields are kept
          except the password.
        - Success → 303 to `/?flash=registered`.
    """
    if not is_same_origin(request):
        return _forbidden(request)
    form = await request.form()
    values = {
        "name": str(form.get("name") or "").strip(),
        "email": str(form.get("email") or "").strip(),
        "phone": str(form.get("phone") or "").strip(),
        "role": str(form.get("role") or Role.STUDENT.value).strip(),
    }
    password = str(form.get("password") or "").strip()
    if not (values["name"] and values["email"] and password and values["phone"]):
        return render_register(values=values, error=MISSING_FIELDS, status_code=400)
    parsed_role = Role.parse(values["role"])
    if parsed_role is not None and parsed_role not in USER_SELECTABLE_ROLES:
        # Admin accounts are not self-service; the store itself still accepts them.
        logger.warning("Rejected self-registration with role %r", values["role"])
        return render_register(values=values, error=AuthError.INVALID_ROLE.message, status_code=400)
    result = await get_auth().register(
        values["email"],
        password,
        values["name"],
        values["role"],
        phone_number=values["phone"],
    )
    if not result.ok:
        return render_register(values=values, error=result.error.message, status_code=400)
    return RedirectResponse(url="/?flash=registered", status_code=303, headers=_no_store())


@auth_router.post("/auth/federated")
async def auth_federated(request: Request):
    """Federated sign-in stub ("Sign in with Google"); new accounts get role student."""
    if not is_same_origin(request):
        return _forbidden(request)
    await get_auth().sign_in_federated(Role.STUDENT)
    return RedirectResponse(url="/", status_code=303, headers=_no_store())


@auth_router.post("/auth/logout")
async def auth_logout(request: Request):
    """Sign out and return to the login page."""
    if not is_same_origin(request):
        return _forbidden(request)
    await get_auth().sign_out()
    return RedirectResponse(url="/login?flash=signed_out", status_code=303, headers=_no_store())
