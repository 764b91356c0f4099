"""
Role-based pages: navigation tabs per role, guards and page content.
"""
from __future__ import annotations

import pytest
import httpx
from httpx import ASGITransport

from web import main


pytestmark = pytest.mark.anyio("asyncio")


async def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test")


async def _login(c: httpx.AsyncClient, email: str) -> None:
    r = await c.post("/auth/login", data={"email": email, "password": "x"})
    assert r.status_code == 303


@pytest.mark.anyio
async def test_health_is_public():
    async with (await _client()) as c:
        r = await c.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


@pytest.mark.anyio
@pytest.mark.parametrize("path", ["/", "/profile", "/settings", "/courses", "/notifications", "/classes", "/admin"])
async def test_anonymous_visitor_is_redirected_to_login(path: str):
    async with (await _client()) as c:
        r = await c.get(path)
    assert r.status_code == 303
    assert r.headers["location"] == "/login"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "email, present, absent",
    [
        ("test@example.com", ["/courses", "/notifications"], ["/classes", "/admin"]),
        ("teacher@example.com", ["/classes"], ["/courses", "/notifications", "/admin"]),
        ("admin@example.com", ["/admin"], ["/courses", "/notifications", "/classes"]),
    ],
)
async def test_navigation_tabs_depend_on_role(email: str, present: list, absent: list):
    async with (await _client()) as c:
        await _login(c, email)
        r = await c.get("/")
    assert r.status_code == 200
    for href in ["/", "/profile", "/settings"] + present:
        assert f'href="{href}"' in r.text
    for href in absent:
        assert f'href="{href}"' not in r.text
    assert 'action="/auth/logout"' in r.text


@pytest.mark.anyio
@pytest.mark.parametrize(
    "email, forbidden",
    [
        ("test@example.com", ["/classes", "/admin"]),
        ("teacher@example.com", ["/courses", "/notifications", "/admin"]),
        ("admin@example.com", ["/courses", "/classes"]),
    ],
)
async def test_other_roles_pages_redirect_home(email: str, forbidden: list):
    async with (await _client()) as c:
        await _login(c, email)
        for path in forbidden:
            r = await c.get(path)
            assert r.status_code == 303, path
            assert r.headers["location"] == "/"


@pytest.mark.anyio
async def test_dashboard_shows_welcome_role_and_unread_count():
    async with (await _client()) as c:
        await _login(c, "teacher@example.com")
        r = await c.get("/")
    assert "Welcome, Teacher Name!" in r.text
    assert "Your role: Teacher" in r.text
    # Seeded log holds two notifications addressed to everyone.
    assert "Notifications for you: 2" in r.text
    assert 'aria-current="page"' in r.text


@pytest.mark.anyio
async def test_profile_shows_directory_entry():
    async with (await _client()) as c:
        await _login(c, "test@example.com")
        r = await c.get("/profile")
    assert r.status_code == 200
    for text in ("Test Student", "test@example.com", "mock-uid-1", "111-222-3333", "Active"):
        assert text in r.text


@pytest.mark.anyio
async def test_student_notifications_page_lists_newest_first():
    async with (await _client()) as c:
        await _login(c, "test@example.com")
        r = await c.get("/notifications")
    assert r.status_code == 200
    body = r.text
    assert body.index("notification-n-3") < body.index("notification-n-2") < body.index("notification-n-1")
    assert "2 hours ago" in body
    assert "2 days ago" in body


@pytest.mark.anyio
async def test_student_notifications_empty_state(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EDTECH_SEED_DEMO_DATA", "false")
    async with (await _client()) as c:
        await c.post(
            "/auth/register",
            data={"name": "S", "email": "s@example.com", "password": "secret1", "phone": "1", "role": "student"},
        )
        r = await c.get("/notifications")
    assert r.status_code == 200
    assert "No new notifications" in r.text


@pytest.mark.anyio
async def test_courses_and_settings_pages_render():
    async with (await _client()) as c:
        await _login(c, "test@example.com")
        courses = await c.get("/courses")
        settings = await c.get("/settings")
    assert "Enrolled Courses" in courses.text
    assert "Introduction to Programming" in courses.text
    assert "1.0.0" in settings.text


@pytest.mark.anyio
async def test_teacher_classes_page_offers_student_and_all_targets():
    async with (await _client()) as c:
        await _login(c, "teacher@example.com")
        r = await c.get("/classes")
    assert r.status_code == 200
    assert "Send New Notification" in r.text
    assert '<option value="student" selected>' in r.text
    assert 'value="all"' in r.text
    assert 'value="teacher"' not in r.text


@pytest.mark.anyio
async def test_admin_panel_lists_users_and_statistics():
    async with (await _client()) as c:
        await _login(c, "admin@example.com")
        r = await c.get("/admin")
    assert r.status_code == 200
    assert "All Registered Users" in r.text
    assert '<dd class="stat-total-users">3</dd>' in r.text
    assert '<dd class="stat-notifications">3</dd>' in r.text
    assert 'action="/admin/users/teacher%40example.com/delete"' in r.text
