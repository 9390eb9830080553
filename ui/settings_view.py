"""
Admin Settings - catering charges applied to every booking
"""
import flet as ft
from core.db import SessionLocal
from core.charges_service import (
    CHARGE_FIELDS, CHARGE_LABELS, load_charge_settings, parse_charge_form, update_admin_charges
)
from core.identity import is_admin, is_admin_or_manager
from core.pricing_service import (
    ChargeConfig, DEFAULT_CHARGES, SAMPLE_FOOD_COST, SAMPLE_GUEST_COUNT, calculate_sample_breakdown
)
from ui.ui_constants import PRIMARY, BREAKPOINT, MOBILE_WIDTH
from ui.ui_helpers import format_currency, show_notice, section_card

CHARGE_HINTS = {
    "delivery_charge": "Fixed delivery charge applied to all orders",
    "vessel_charge": "Fixed charge for serving vessels",
    "staff_charge_per_person": "Charge for each serving staff member",
    "guests_per_staff": "One staff member is assigned per this many guests",
    "service_charge_percent": "Percentage of the food cost",
}


def settings_view(page: ft.Page):
    """
    Settings view for the charge rate sheet.

    Admins and managers can see it; only admins can save.
    """
    db = SessionLocal()
    page.title = "Admin Settings"

    user_data = page.session.get("user")
    if not is_admin_or_manager(user_data):
        show_notice(page, "Access denied. Admins only.", "error")
        page.go("/book")
        return

    can_edit = is_admin(user_data)
    charges, load_error = load_charge_settings(db)
    if load_error:
        show_notice(page, load_error, "error")

    fields = {}
    for field in CHARGE_FIELDS:
        value = getattr(charges, field)
        fields[field] = ft.TextField(
            label=CHARGE_LABELS[field],
            helper_text=CHARGE_HINTS[field],
            value=str(int(value)) if field == "guests_per_staff" else f"{float(value):g}",
            keyboard_type=ft.KeyboardType.NUMBER,
            read_only=not can_edit,
            on_change=lambda e: update_preview(),
            width=320
        )

    message = ft.Text("", color="red")
    preview_rows = ft.Column(spacing=6)

    def preview_row(label, amount, bold=False):
        return ft.Row([
            ft.Text(label, size=13, color="black", weight="bold" if bold else None),
            ft.Text(format_currency(amount), size=13, color=PRIMARY if bold else "black", weight="bold" if bold else None),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    def build_preview(rates):
        cost = calculate_sample_breakdown(rates)
        preview_rows.controls = [
            preview_row("Food cost", cost.food_cost),
            preview_row("Delivery charge", cost.delivery_charge),
            preview_row("Vessel charge", cost.vessel_charge),
            preview_row(f"Staff charges ({cost.staff_count} staff x {format_currency(rates.staff_charge_per_person)})", cost.staff_charges),
            preview_row(f"Service charge ({rates.service_charge_percent:g}%)", cost.service_charges),
            ft.Divider(height=1, color="grey300"),
            preview_row("Total", cost.total_amount, bold=True),
        ]

    def update_preview():
        # Half-typed values keep the last valid preview
        values, error = parse_charge_form({field: tf.value for field, tf in fields.items()})
        if error:
            return
        try:
            rates = ChargeConfig(**values)
        except ValueError:
            return
        build_preview(rates)
        page.update()

    try:
        build_preview(charges if isinstance(charges, ChargeConfig) else ChargeConfig.from_row(charges))
    except ValueError:
        build_preview(DEFAULT_CHARGES)

    def save_charges(e):
        values, error = parse_charge_form({field: tf.value for field, tf in fields.items()})
        if error:
            message.value = f"❌ {error}"
            page.update()
            return

        ok, result = update_admin_charges(db, user_data, values)
        if ok:
            message.value = ""
            show_notice(page, result, "success")
        else:
            message.value = f"❌ {result}"
        page.update()

    warning = section_card(ft.Text(
        "⚠️ You don't have admin permissions to edit these settings. Contact an administrator.",
        color="red", weight="bold"
    )) if not can_edit else ft.Container()

    is_desktop = page.window.width > BREAKPOINT

    page.clean()
    page.add(
        ft.Container(
            content=ft.Column([
                ft.Container(
                    content=ft.Row([
                        ft.IconButton(icon=ft.Icons.ARROW_BACK, icon_color="black", on_click=lambda e: page.go("/book")),
                        ft.Text("Admin Settings", size=20, weight="bold", color="black"),
                    ]),
                    padding=ft.padding.only(top=15, left=5, right=15, bottom=8),
                    bgcolor="white"
                ),
                ft.Divider(height=1, color="grey300", thickness=1),
                ft.Text("Manage catering charges applied to all customer orders", size=13, color="grey700"),
                warning,
                section_card(ft.Column([*fields.values(), message], spacing=12)),
                section_card(ft.Column([
                    ft.Text("Charges preview", size=16, weight="bold", color="black"),
                    ft.Text(
                        f"Example calculation for {SAMPLE_GUEST_COUNT} guests with {format_currency(SAMPLE_FOOD_COST)} food cost",
                        size=12, color="grey700"
                    ),
                    preview_rows,
                ], spacing=8)),
                ft.Container(
                    content=ft.ElevatedButton(
                        "Save charges",
                        icon=ft.Icons.SAVE,
                        on_click=save_charges,
                        disabled=not can_edit,
                        style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                        width=320,
                        height=45
                    ),
                    padding=ft.padding.symmetric(horizontal=16, vertical=12)
                ),
            ], scroll=ft.ScrollMode.AUTO, expand=True, spacing=4),
            width=page.window.width if is_desktop else MOBILE_WIDTH,
            expand=True,
            bgcolor="grey100"
        )
    )
    page.update()
