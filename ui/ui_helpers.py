# ui/ui_helpers.py
import flet as ft
from typing import Optional
from ui.ui_constants import CURRENCY_SYMBOL

_loading_ctrl: Optional[ft.AlertDialog] = None

def format_currency(amount) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"

def show_loading(page: ft.Page, text: str = "Please wait..."):
    """Show a small modal loading indicator."""
    global _loading_ctrl
    _loading_ctrl = ft.AlertDialog(
        modal=True,
        content=ft.Row([ft.ProgressRing(), ft.Text(text)], alignment=ft.MainAxisAlignment.CENTER),
        actions=[]
    )
    page.open(_loading_ctrl)

def hide_loading(page: ft.Page):
    """Hide loading indicator."""
    global _loading_ctrl
    if _loading_ctrl:
        page.close(_loading_ctrl)
        _loading_ctrl = None

def show_notice(page: ft.Page, message: str, level: str = "info"):
    """Snack bar notice; level is info, success or error."""
    colors = {"success": "green700", "error": "red700", "info": "grey800"}
    page.open(ft.SnackBar(
        content=ft.Text(message, color="white", weight="bold"),
        bgcolor=colors.get(level, "grey800"),
        duration=2500
    ))

def error_text(message: Optional[str]):
    """Inline field error; empty container when there is nothing to show."""
    if not message:
        return ft.Container()
    return ft.Row([
        ft.Icon(ft.Icons.ERROR_OUTLINE, size=14, color="red"),
        ft.Text(message, size=12, color="red"),
    ], spacing=4)

def section_card(content, padding=16):
    return ft.Container(
        content=content,
        bgcolor="white",
        border_radius=12,
        padding=padding,
        margin=ft.margin.symmetric(vertical=8, horizontal=16),
        shadow=ft.BoxShadow(blur_radius=8, color="grey200")
    )
