"""
Directory helpers for the presentation layer.

Why:
    Teachers and admins browse accounts by role and by name fragment, and
    pages show avatars and "2 hours ago" style timestamps. These helpers sit on
    top of `AuthService.list_all()`, which itself stays unfiltered.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
import re

from identity_access.domain import ALLOWED_ROLES, Identity
from identity_access.service import AuthService


_splitter = re.compile(r"[^A-Za-z0-9]+")


def humanize_identifier(s: str) -> str:
    """Turn an email/username into a human display name.

    Rules:
    - For emails, use the part before '@'.
    - Split on non-alphanumeric separators (._- etc.).
    - Title-case each token and join with a single space.
    """
    if not s:
        return ""
    s = str(s)
    if "@" in s:
        s = s.split("@", 1)[0]
    parts = [p for p in _splitter.split(s) if p]
    if not parts:
        return ""
    return " ".join(p[:1].upper() + p[1:].lower() for p in parts)


def display_name_of(identity: Identity) -> str:
    name = (identity.display_name or "").strip()
    if name:
        return name
    return humanize_identifier(identity.email) or "Unknown"


def avatar_initial(identity: Identity) -> str:
    return display_name_of(identity)[:1].upper()


def _sorted_by_name(identities: List[Identity]) -> List[Identity]:
    return sorted(identities, key=lambda i: (display_name_of(i).lower(), i.email))


def list_identities_by_role(service: AuthService, *, role: str, limit: int, offset: int) -> List[dict]:
    """List accounts for a given role, ordered by display name.

    Returns: list of { uid, name } with pagination.
    """
    if role not in ALLOWED_ROLES:
        raise ValueError("invalid role")
    matches = [i for i in service.list_all() if i.role.value == role]
    page = _sorted_by_name(matches)[max(0, offset): max(0, offset) + max(0, limit)]
    return [{"uid": i.uid, "name": display_name_of(i)} for i in page]


def search_identities_by_name(service: AuthService, *, role: str, q: str, limit: int) -> List[dict]:
    """Search accounts by role and display name (or email) fragment."""
    if role not in ALLOWED_ROLES:
        raise ValueError("invalid role")
    ql = (q or "").strip().lower()
    results: List[dict] = []
    for i in _sorted_by_name([i for i in service.list_all() if i.role.value == role]):
        name = display_name_of(i)
        if ql in name.lower() or ql in i.email.lower():
            results.append({"uid": i.uid, "name": name})
        if len(results) >= limit:
            break
    return results


def format_relative_time(ts: datetime, now: Optional[datetime] = None) -> str:
    """Render the age of a timestamp the way notification lists show it."""
    current = now or datetime.now(timezone.utc)
    diff = current - ts
    if diff.days > 0:
        return f"{diff.days} days ago"
    hours = diff.seconds // 3600
    if diff.days == 0 and hours > 0:
        return f"{hours} hours ago"
    minutes = diff.seconds // 60
    if diff.days == 0 and minutes > 0:
        return f"{minutes} minutes ago"
    return "just now"


__all__ = [
    "humanize_identifier",
    "display_name_of",
    "avatar_initial",
    "list_identities_by_role",
    "search_identities_by_name",
    "format_relative_time",
]
