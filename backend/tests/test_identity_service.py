"""
Session & directory store behavior: registration, sign-in, federated stub,
sign-out, deletion and role-filtered notifications.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from identity_access.domain import FEDERATED_EMAIL, NotificationTarget, Role
from identity_access.results import AuthError
from identity_access.service import AuthService, SimulatedLatency


pytestmark = pytest.mark.anyio


async def test_register_adds_exactly_one_entry_and_opens_session(auth: AuthService):
    before = len(auth.list_all())

    result = await auth.register("a@x.com", "secret1", "Ada", "teacher", phone_number="123")

    assert result.ok
    identity = result.value
    assert len(auth.list_all()) == before + 1
    assert identity.role is Role.TEACHER
    assert identity.display_name == "Ada"
    assert identity.phone_number == "123"
    assert auth.current_identity == identity


async def test_register_assigns_sequential_uids(auth: AuthService):
    first = (await auth.register("a@x.com", "secret1", "A", "student")).value
    second = (await auth.register("b@x.com", "secret1", "B", "student")).value
    assert first.uid == "mock-uid-1"
    assert second.uid == "mock-uid-2"


async def test_register_duplicate_email_fails_without_changing_directory(auth: AuthService):
    await auth.register("a@x.com", "secret1", "A", "student")
    size = len(auth.list_all())

    result = await auth.register("a@x.com", "another1", "Other", "teacher")

    assert not result.ok
    assert result.error is AuthError.DUPLICATE_EMAIL
    assert len(auth.list_all()) == size
    assert auth.get("a@x.com").display_name == "A"


async def test_register_password_length_boundary(auth: AuthService):
    short = await auth.register("short@x.com", "12345", "S", "student")
    assert short.error is AuthError.WEAK_PASSWORD
    assert auth.get("short@x.com") is None

    exact = await auth.register("exact@x.com", "123456", "E", "student")
    assert exact.ok


async def test_register_rejects_unknown_role_and_accepts_all_known_roles(auth: AuthService):
    guest = await auth.register("g@x.com", "secret1", "G", "guest")
    assert guest.error is AuthError.INVALID_ROLE
    assert auth.list_all() == []

    for role in ("student", "teacher", "admin"):
        result = await auth.register(f"{role}@x.com", "secret1", role, role)
        assert result.ok
        assert result.value.role.value == role


async def test_register_checks_preconditions_in_order(auth: AuthService):
    await auth.register("a@x.com", "secret1", "A", "student")
    # Duplicate email wins over weak password and invalid role.
    assert (await auth.register("a@x.com", "123", "A", "guest")).error is AuthError.DUPLICATE_EMAIL
    # Weak password wins over invalid role.
    assert (await auth.register("b@x.com", "123", "B", "guest")).error is AuthError.WEAK_PASSWORD


async def test_failed_register_keeps_previous_session(auth: AuthService):
    await auth.register("a@x.com", "secret1", "A", "student")
    session = auth.current_identity
    await auth.register("b@x.com", "123", "B", "student")
    assert auth.current_identity == session


async def test_sign_in_unknown_email_fails(auth: AuthService):
    result = await auth.sign_in("nobody@x.com", "whatever")
    assert result.error is AuthError.UNKNOWN_EMAIL
    assert auth.current_identity is None


async def test_sign_in_accepts_any_password_for_registered_email(auth: AuthService):
    registered = (await auth.register("a@x.com", "secret1", "A", "student")).value
    await auth.sign_out()

    result = await auth.sign_in("a@x.com", "not-the-password")

    assert result.ok
    assert result.value == registered
    assert auth.current_identity == registered


async def test_federated_sign_in_is_idempotent(auth: AuthService):
    first = await auth.sign_in_federated(Role.TEACHER)
    assert auth.current_identity == first.value
    await auth.sign_out()

    second = await auth.sign_in_federated(Role.STUDENT)

    assert first.value.uid == second.value.uid
    assert first.value.email == second.value.email == FEDERATED_EMAIL
    # The role chosen on first use sticks.
    assert second.value.role is Role.TEACHER
    assert auth.current_identity == second.value
    assert len(auth.list_all()) == 1


async def test_federated_sign_in_accepts_role_string(auth: AuthService):
    result = await auth.sign_in_federated("teacher")

    assert result.ok
    assert result.value.role is Role.TEACHER
    assert auth.current_identity == result.value
    assert auth.notifications_for(result.value) == []


async def test_federated_sign_in_rejects_unknown_role_without_side_effects(auth: AuthService):
    with pytest.raises(ValueError):
        await auth.sign_in_federated("guest")
    assert auth.get(FEDERATED_EMAIL) is None
    assert auth.current_identity is None


async def test_federated_identity_has_no_phone_and_fixed_name(auth: AuthService):
    identity = (await auth.sign_in_federated()).value
    assert identity.phone_number is None
    assert identity.display_name == "Google Mock User"
    assert identity.role is Role.STUDENT


async def test_sign_out_clears_session_unconditionally(auth: AuthService):
    await auth.sign_out()
    assert auth.current_identity is None
    await auth.register("a@x.com", "secret1", "A", "student")
    await auth.sign_out()
    assert auth.current_identity is None


async def test_delete_current_identity_clears_session(auth: AuthService):
    await auth.register("a@x.com", "secret1", "A", "student")
    await auth.delete_by_email("a@x.com")
    assert auth.current_identity is None
    assert auth.get("a@x.com") is None


async def test_delete_other_identity_keeps_session(auth: AuthService):
    await auth.register("other@x.com", "secret1", "O", "student")
    me = (await auth.register("me@x.com", "secret1", "M", "admin")).value

    await auth.delete_by_email("other@x.com")

    assert auth.current_identity == me
    assert [i.email for i in auth.list_all()] == ["me@x.com"]


async def test_delete_is_idempotent(auth: AuthService):
    await auth.register("a@x.com", "secret1", "A", "student")
    await auth.delete_by_email("missing@x.com")
    await auth.delete_by_email("missing@x.com")
    assert len(auth.list_all()) == 1


async def test_uids_are_not_reused_after_delete(auth: AuthService):
    first = (await auth.register("a@x.com", "secret1", "A", "student")).value
    await auth.delete_by_email("a@x.com")
    again = (await auth.register("a@x.com", "secret1", "A", "student")).value
    assert again.uid != first.uid


async def test_broadcast_to_all_reaches_every_role(auth: AuthService):
    student = (await auth.register("s@x.com", "secret1", "S", "student")).value
    teacher = (await auth.register("t@x.com", "secret1", "T", "teacher")).value
    admin = (await auth.register("ad@x.com", "secret1", "Ad", "admin")).value

    sent = await auth.broadcast_notification("Admin", "hello", "all")

    for identity in (student, teacher, admin):
        assert sent in auth.notifications_for(identity)


async def test_broadcast_to_teacher_is_hidden_from_students(auth: AuthService):
    student = (await auth.register("s@x.com", "secret1", "S", "student")).value
    teacher = (await auth.register("t@x.com", "secret1", "T", "teacher")).value

    sent = await auth.broadcast_notification("Admin", "staff meeting", NotificationTarget.TEACHER)

    assert sent not in auth.notifications_for(student)
    assert sent in auth.notifications_for(teacher)


async def test_notifications_are_newest_first(auth: AuthService):
    student = (await auth.register("s@x.com", "secret1", "S", "student")).value
    a = await auth.broadcast_notification("T", "A", "student")
    b = await auth.broadcast_notification("T", "B", "all")
    c = await auth.broadcast_notification("T", "C", "student")

    assert auth.notifications_for(student) == [c, b, a]
    assert [n.id for n in auth.notifications] == ["n-3", "n-2", "n-1"]


async def test_broadcast_accepts_empty_message_and_unknown_sender(auth: AuthService):
    sent = await auth.broadcast_notification("Nobody In Directory", "", "all")
    assert sent.message == ""
    assert sent.sender_name == "Nobody In Directory"


async def test_broadcast_rejects_unknown_target(auth: AuthService):
    with pytest.raises(ValueError):
        await auth.broadcast_notification("A", "m", "parents")
    assert auth.notifications == ()


async def test_broadcast_uses_clock_for_timestamp():
    fixed = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    service = AuthService(latency=SimulatedLatency.none(), clock=lambda: fixed)
    sent = await service.broadcast_notification("A", "m", "all")
    assert sent.timestamp == fixed


async def test_notifications_for_does_not_mutate(auth: AuthService):
    student = (await auth.register("s@x.com", "secret1", "S", "student")).value
    await auth.broadcast_notification("T", "A", "teacher")
    before = auth.notifications
    auth.notifications_for(student).append("junk")
    assert auth.notifications == before


async def test_scenario_register_sign_out_sign_in_delete(auth: AuthService):
    registered = await auth.register("a@x.com", "secret1", "A", "student")
    assert registered.ok
    assert auth.current_identity == registered.value

    await auth.sign_out()
    assert auth.current_identity is None

    signed_in = await auth.sign_in("a@x.com", "anything")
    assert signed_in.ok
    assert auth.current_identity == registered.value

    await auth.sign_out()
    await auth.delete_by_email("a@x.com")
    assert all(i.email != "a@x.com" for i in auth.list_all())


def test_simulated_latency_defaults_and_scaling():
    latency = SimulatedLatency()
    assert latency.register == 0.5
    assert latency.sign_out == 0.3
    assert latency.broadcast == 0.4
    assert latency.scaled(0).register == 0
    assert latency.scaled(2).sign_in == pytest.approx(1.0)
    with pytest.raises(ValueError):
        latency.scaled(-1)
    with pytest.raises(ValueError):
        latency.scaled(float("inf"))


def test_unwrap_raises_on_failure_code():
    from identity_access.results import Result

    assert Result.success(3).unwrap() == 3
    with pytest.raises(ValueError, match="unknown_email"):
        Result.failure(AuthError.UNKNOWN_EMAIL).unwrap()


def test_seeded_timestamps_are_relative_to_now():
    from identity_access.seed import demo_notifications

    now = datetime(2024, 1, 10, tzinfo=timezone.utc)
    items = demo_notifications(now)
    assert items[0].timestamp == now - timedelta(hours=2)
    assert items[-1].timestamp == now - timedelta(days=2)
