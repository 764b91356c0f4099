"""
Notification routes: inbox API, broadcast API and the send-notification form.

Why:
    Teachers and admins broadcast messages to a role (or everyone); every
    account reads the messages addressed to its role. The store does not
    validate message content, so the non-empty-message rule lives here.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Request
from pydantic import BaseModel
from fastapi.responses import JSONResponse, RedirectResponse, Response

from identity_access.domain import Identity, NotificationTarget, Role
from web.routes.security import is_same_origin
from web.store_wiring import get_auth

notifications_router = APIRouter(tags=["Notifications"])
logger = logging.getLogger("edtech.web.notifications")

# Audiences each sender role may address, in the order the form offers them.
SENDER_TARGETS: Dict[Role, List[NotificationTarget]] = {
    Role.TEACHER: [NotificationTarget.STUDENT, NotificationTarget.ALL],
    Role.ADMIN: [
        NotificationTarget.ALL,
        NotificationTarget.STUDENT,
        NotificationTarget.TEACHER,
        NotificationTarget.ADMIN,
    ],
}

SENDER_PAGES: Dict[Role, str] = {Role.TEACHER: "/classes", Role.ADMIN: "/admin"}


class NotificationCreate(BaseModel):
    message: str = ""
    target: str = ""


def targets_for(role: Role) -> List[NotificationTarget]:
    return list(SENDER_TARGETS.get(role, []))


def _private_no_store() -> dict:
    return {"Cache-Control": "private, no-store"}


def _error(error: str, status_code: int, detail: str | None = None) -> JSONResponse:
    body = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(body, status_code=status_code, headers=_private_no_store())


def _parse_target(sender: Identity, raw: object) -> NotificationTarget | None:
    try:
        target = NotificationTarget.coerce(raw)
    except ValueError:
        return None
    return target if target in targets_for(sender.role) else None


@notifications_router.get("/api/notifications")
async def notifications_inbox(request: Request):
    """List notifications addressed to the signed-in account, newest first.

    Permissions:
        Any signed-in account.
    """
    user = get_auth().current_identity
    if user is None:
        return _error("unauthenticated", 401)
    items = [n.to_dict() for n in get_auth().notifications_for(user)]
    return JSONResponse(items, headers=_private_no_store())


@notifications_router.post("/api/notifications")
async def notifications_broadcast(request: Request, payload: NotificationCreate):
    """Broadcast a notification as the signed-in teacher/admin.

    Validation:
        - JSON body with `message` (non-empty after trimming) and `target`;
          a body that is not such an object is rejected by FastAPI with 422.
        - `target` must be one of the audiences allowed for the sender's role.

    Permissions:
        Caller must have role `teacher` or `admin`.
    """
    auth = get_auth()
    user = auth.current_identity
    if user is None:
        return _error("unauthenticated", 401)
    if user.role not in SENDER_TARGETS:
        return _error("forbidden", 403)
    message = payload.message.strip()
    if not message:
        return _error("bad_request", 400, "invalid_message")
    target = _parse_target(user, payload.target)
    if target is None:
        return _error("bad_request", 400, "invalid_target")
    notification = await auth.broadcast_notification(user.display_name, message, target)
    return JSONResponse(notification.to_dict(), status_code=201, headers=_private_no_store())


@notifications_router.post("/notifications/send")
async def notifications_send_form(request: Request):
    """Form variant of the broadcast used by the teacher and admin pages (PRG).

    Behavior:
        - Empty message or disallowed target → back to the sender page with
          an error flash; nothing is stored.
        - Success → 303 to the sender page with a success flash.
    """
    if not is_same_origin(request):
        return Response(status_code=403, headers=_private_no_store())
    auth = get_auth()
    user = auth.current_identity
    if user is None:
        return RedirectResponse(url="/login", status_code=303)
    if user.role not in SENDER_TARGETS:
        return RedirectResponse(url="/", status_code=303)
    back = SENDER_PAGES[user.role]
    form = await request.form()
    message = str(form.get("message") or "").strip()
    target = _parse_target(user, form.get("target"))
    if not message or target is None:
        logger.info("Rejected notification form from %s (empty_message=%s)", user.uid, not message)
        return RedirectResponse(url=f"{back}?flash=send_invalid", status_code=303, headers=_private_no_store())
    await auth.broadcast_notification(user.display_name, message, target)
    return RedirectResponse(url=f"{back}?flash=sent", status_code=303, headers=_private_no_store())
