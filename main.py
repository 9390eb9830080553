import flet as ft

# Import all models FIRST to ensure SQLAlchemy relationships are registered
from models.user import User
from models.menu_item import MenuItem
from models.customer import Customer
from models.order import Order, OrderItem
from models.admin_charges import AdminCharges
from models.audit_log import AuditLog

from core.config import APP_NAME, DEV_USER_EMAIL
from core.db import SessionLocal
from core.identity import load_session_user

# Import views
from ui.book_catering_view import book_catering_view
from ui.settings_view import settings_view
from ui.ui_constants import ACCENT


def auth_required_view(page: ft.Page):
    """Landing screen when nobody is signed in; sign-in happens with the auth provider."""
    page.clean()
    page.add(
        ft.Container(
            content=ft.Column([
                ft.Icon(ft.Icons.LOCK_OUTLINE, size=80, color="grey"),
                ft.Text("Sign in required", size=28, weight="bold", color="black"),
                ft.Text("Please sign in to book catering for your event.", size=14, color="grey700"),
                ft.ElevatedButton(
                    "Try again",
                    on_click=lambda e: page.go("/book"),
                    style=ft.ButtonStyle(bgcolor=ACCENT, color="white"),
                    width=160,
                    height=40
                )
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10),
            padding=40,
            alignment=ft.alignment.center,
            expand=True
        )
    )
    page.update()


def sign_in_dev_user(page: ft.Page):
    """Local runs: load DEV_USER_EMAIL from the users table into the session."""
    if not DEV_USER_EMAIL or page.session.get("user"):
        return
    db = SessionLocal()
    try:
        user = load_session_user(db, DEV_USER_EMAIL)
    finally:
        db.close()
    if user:
        page.session.set("user", user)
        print(f"✅ Dev user signed in: {user['email']} ({user['role']})")
    else:
        print(f"⚠️ DEV_USER_EMAIL {DEV_USER_EMAIL} not found - run init_db.py first")


def main(page: ft.Page):
    page.window.width = 400
    page.window.height = 760
    page.padding = 0
    page.spacing = 0

    page.title = APP_NAME
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.vertical_alignment = ft.MainAxisAlignment.START

    if not page.session.contains_key("user"):
        page.session.set("user", None)
    sign_in_dev_user(page)

    def route_change(e):
        path = page.route.split("?")[0]
        page.clean()

        if path in ("/", "/book"):
            book_catering_view(page)
        elif path == "/settings":
            settings_view(page)
        elif path == "/auth":
            auth_required_view(page)
        else:
            page.go("/book")

    page.on_route_change = route_change
    page.go("/book")

if __name__ == "__main__":
    ft.app(target=main)
