"EdTech Portal"
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from identity_access.domain import Identity, Role
from web import config
from web.components import Layout, PAGE_TITLES
from web.components.pages import (
    AdminPage,
    ClassesPage,
    CoursesPage,
    DashboardPage,
    NotificationsPage,
    ProfilePage,
    SettingsPage,
)
from web.routes.auth import auth_router, render_login, render_register
from web.routes.notifications import notifications_router, targets_for
from web.routes.users import users_router
from web.store_wiring import get_auth, revision

if config.should_load_dotenv():
    load_dotenv()

# Refuse to run the mock identity store in production-like environments.
config.ensure_secure_config_on_startup()

logger = logging.getLogger("edtech.web")

app = FastAPI(title="EdTech Portal", description="Role-based learning portal (demo)", version="1.0.0")

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(notifications_router)

# Flash messages are selected by code so no user input is reflected.
FLASH_MESSAGES = {
    "registered": "Registered successfully!",
    "signed_out": "You have been signed out.",
    "sent": "Notification sent successfully!",
    "send_invalid": "Please enter a message and select a target.",
    "deleted": "User deleted successfully.",
}


def _flash(request: Request) -> Optional[str]:
    return FLASH_MESSAGES.get(request.query_params.get("flash") or "")


def _no_store() -> dict:
    return {"Cache-Control": "private, no-store"}


def _page(request: Request, user: Identity, content: str) -> HTMLResponse:
    path = request.url.path
    layout = Layout(PAGE_TITLES.get(path, "EdTech Portal"), content, user, flash=_flash(request), current_path=path)
    return HTMLResponse(layout.render(), headers=_no_store())


def _viewer(required: Optional[Role] = None):
    """Return (user, None) or (None, redirect) for a page that needs a session.

    Anonymous viewers go to /login; viewers without the required role go home.
    """
    user = get_auth().current_identity
    if user is None:
        return None, RedirectResponse(url="/login", status_code=303)
    if required is not None and user.role is not required:
        logger.debug("%s denied %s page", user.uid, required.value)
        return None, RedirectResponse(url="/", status_code=303)
    return user, None


# --- Public pages ---------------------------------------------------------------

@app.get("/health")
async def health():
    return JSONResponse({"status": "ok", "revision": revision()}, headers=_no_store())


@app.get("/login")
async def login_page(request: Request):
    if get_auth().current_identity is not None:
        return RedirectResponse(url="/", status_code=303)
    return render_login(flash=_flash(request))


@app.get("/register")
async def register_page(request: Request):
    if get_auth().current_identity is not None:
        return RedirectResponse(url="/", status_code=303)
    return render_register()


# --- Pages for every signed-in account ------------------------------------------

@app.get("/")
async def dashboard(request: Request):
    user, redirect = _viewer()
    if redirect:
        return redirect
    unread = len(get_auth().notifications_for(user))
    return _page(request, user, DashboardPage(user, unread_count=unread).render())


@app.get("/profile")
async def profile(request: Request):
    user, redirect = _viewer()
    if redirect:
        return redirect
    return _page(request, user, ProfilePage(user).render())


@app.get("/settings")
async def settings(request: Request):
    user, redirect = _viewer()
    if redirect:
        return redirect
    return _page(request, user, SettingsPage().render())


# --- Role-specific pages --------------------------------------------------------

@app.get("/courses")
async def student_courses(request: Request):
    user, redirect = _viewer(Role.STUDENT)
    if redirect:
        return redirect
    return _page(request, user, CoursesPage().render())


@app.get("/notifications")
async def student_notifications(request: Request):
    user, redirect = _viewer(Role.STUDENT)
    if redirect:
        return redirect
    items = get_auth().notifications_for(user)
    now = datetime.now(timezone.utc)
    return _page(request, user, NotificationsPage(items, now=now).render())


@app.get("/classes")
async def teacher_classes(request: Request):
    user, redirect = _viewer(Role.TEACHER)
    if redirect:
        return redirect
    return _page(request, user, ClassesPage(targets_for(user.role)).render())


@app.get("/admin")
async def admin_panel(request: Request):
    user, redirect = _viewer(Role.ADMIN)
    if redirect:
        return redirect
    auth = get_auth()
    content = AdminPage(
        auth.list_all(),
        notification_count=len(auth.notifications),
        targets=targets_for(user.role),
    ).render()
    return _page(request, user, content)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "web.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
