import pytest

from datetime import datetime, timezone

from identity_access.domain import (
    ALLOWED_ROLES,
    USER_SELECTABLE_ROLES,
    Identity,
    Notification,
    NotificationTarget,
    Role,
)
from identity_access.results import AuthError, Result
from identity_access.stores import InMemoryDirectoryBackend


def test_role_parse_accepts_members_and_values():
    assert Role.parse("teacher") is Role.TEACHER
    assert Role.parse(Role.ADMIN) is Role.ADMIN
    assert Role.parse("guest") is None
    assert Role.parse("") is None
    assert Role.parse(None) is None


def test_allowed_and_selectable_roles():
    assert ALLOWED_ROLES == {"student", "teacher", "admin"}
    assert Role.ADMIN not in USER_SELECTABLE_ROLES
    assert Role.STUDENT.label == "Student"


def test_notification_target_coerce_and_labels():
    assert NotificationTarget.coerce("all") is NotificationTarget.ALL
    assert NotificationTarget.coerce(Role.STUDENT) is NotificationTarget.STUDENT
    with pytest.raises(ValueError):
        NotificationTarget.coerce("everyone")
    assert NotificationTarget.ALL.label == "All Users"
    assert NotificationTarget.TEACHER.label == "Teachers"


def test_notification_target_includes():
    assert NotificationTarget.ALL.includes(Role.ADMIN)
    assert NotificationTarget.STUDENT.includes(Role.STUDENT)
    assert not NotificationTarget.STUDENT.includes(Role.TEACHER)


def test_auth_error_codes_and_messages():
    assert AuthError.DUPLICATE_EMAIL.code == "duplicate_email"
    assert AuthError.WEAK_PASSWORD.message == "Password should be at least 6 characters."
    assert AuthError.INVALID_ROLE.message == "Invalid role specified."
    assert AuthError.UNKNOWN_EMAIL.message == "No user found for that email."


def test_result_success_and_failure():
    ok = Result.success("v")
    assert ok.ok and ok.value == "v" and ok.error is None
    failed = Result.failure(AuthError.DUPLICATE_EMAIL)
    assert not failed.ok and failed.value is None


def test_to_dict_serializes_enums_and_timestamps():
    ident = Identity(uid="u1", email="a@x.com", display_name="A", role=Role.TEACHER)
    assert ident.to_dict() == {
        "uid": "u1",
        "email": "a@x.com",
        "display_name": "A",
        "role": "teacher",
        "phone_number": None,
    }
    ts = datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)
    note = Notification(id="n-1", sender_name="S", message="m", timestamp=ts, target=NotificationTarget.ALL)
    assert note.to_dict()["timestamp"] == "2024-01-01T08:30:00+00:00"
    assert note.to_dict()["target"] == "all"


def test_in_memory_backend_crud():
    backend = InMemoryDirectoryBackend()
    ident = Identity(uid="u1", email="a@x.com", display_name="A", role=Role.STUDENT)
    backend.upsert(ident)
    assert backend.get("a@x.com") == ident
    assert len(backend) == 1
    assert backend.delete("a@x.com") == ident
    assert backend.delete("a@x.com") is None
    assert backend.load_all() == []
