# core/identity.py
"""
Who is using the app right now.

Sign-in itself is handled by the auth provider; by the time a view runs the
signed-in user is a plain dict in the Flet page session:
{"id", "email", "full_name", "role"}.
"""
from sqlalchemy.orm import Session
from models.user import User

ROLES = ["admin", "manager", "staff", "customer"]


class IdentityProvider:
    def current_user(self):
        raise NotImplementedError


class SessionIdentity(IdentityProvider):
    """Reads the signed-in user from a Flet page session."""

    def __init__(self, page):
        self.page = page

    def current_user(self):
        if not self.page.session.contains_key("user"):
            return None
        return self.page.session.get("user")


class StaticIdentity(IdentityProvider):
    """Fixed user, for tests and scripted runs."""

    def __init__(self, user=None):
        self.user = user

    def current_user(self):
        return self.user


def get_role(user_data) -> str:
    if not user_data:
        return None
    role = user_data.get("role")
    return role if role in ROLES else None


def is_admin(user_data) -> bool:
    return get_role(user_data) == "admin"


def is_admin_or_manager(user_data) -> bool:
    return get_role(user_data) in ("admin", "manager")


def user_to_session(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "role": user.role,
    }


def load_session_user(db: Session, email: str):
    """Look up an identity record by email and shape it for the page session"""
    user = db.query(User).filter(User.email == email).first()
    return user_to_session(user) if user else None
