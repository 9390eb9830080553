from types import SimpleNamespace

from core.identity import (
    SessionIdentity,
    StaticIdentity,
    get_role,
    is_admin,
    is_admin_or_manager,
    load_session_user,
)
from models.user import User


class FakePageSession:
    def __init__(self, values=None):
        self.values = dict(values or {})

    def contains_key(self, key):
        return key in self.values

    def get(self, key):
        return self.values.get(key)


def test_session_identity_reads_page_session():
    user = {"id": 1, "email": "a@b.c", "full_name": "A", "role": "customer"}
    page = SimpleNamespace(session=FakePageSession({"user": user}))

    assert SessionIdentity(page).current_user() == user
    assert SessionIdentity(SimpleNamespace(session=FakePageSession())).current_user() is None


def test_static_identity():
    assert StaticIdentity().current_user() is None
    assert StaticIdentity({"id": 5}).current_user() == {"id": 5}


def test_role_helpers():
    assert is_admin({"role": "admin"})
    assert not is_admin({"role": "manager"})
    assert is_admin_or_manager({"role": "manager"})
    assert not is_admin_or_manager({"role": "staff"})
    assert not is_admin_or_manager(None)
    assert get_role({"role": "superuser"}) is None


def test_load_session_user(db):
    db.add(User(full_name="Kitchen Manager", email="manager@catering.local", role="manager"))
    db.commit()

    user = load_session_user(db, "manager@catering.local")

    assert user["email"] == "manager@catering.local"
    assert user["role"] == "manager"
    assert user["id"] is not None
    assert load_session_user(db, "nobody@catering.local") is None
