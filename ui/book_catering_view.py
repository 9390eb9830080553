import flet as ft
from datetime import datetime, date

from core.booking_session import BookingSession, STEPS, STEP_LABELS
from core.booking_store import SqlBookingStore
from core.config import MIN_GUEST_COUNT
from core.identity import SessionIdentity, is_admin_or_manager
from core.menu_service import FOOD_TYPES, get_food_type_label, normalize_food_type
from core.schedule_service import TIME_SLOTS
from ui.ui_constants import ACCENT, PRIMARY, FOOD_TYPE_COLORS, MOBILE_WIDTH, BREAKPOINT
from ui.ui_helpers import (
    format_currency, show_loading, hide_loading, show_notice, error_text, section_card
)


def book_catering_view(page: ft.Page, store=None, identity=None):
    page.title = "Book Catering"

    identity = identity or SessionIdentity(page)
    user_data = identity.current_user()
    if not user_data:
        show_notice(page, "Please log in to book catering.", "error")
        page.go("/auth?redirect=/book")
        return

    store = store or SqlBookingStore(actor_email=user_data.get("email"))
    session = BookingSession(store)
    ui_state = {"food_type": "veg"}
    breakdown_holder = ft.Container()
    content_container = ft.Container(expand=True)

    def flush_notice():
        notice = session.pop_notice()
        if notice:
            level, message = notice
            show_notice(page, message, level)

    def refresh():
        render_step()
        flush_notice()
        page.update()

    # ===================== STEP INDICATOR =====================

    def step_indicator():
        current = session.step_number()
        chips = []
        for number, step in enumerate(STEPS, start=1):
            done = number < current
            active = number == current
            chips.append(ft.Column([
                ft.Container(
                    content=ft.Icon(ft.Icons.CHECK, size=14, color="white") if done
                    else ft.Text(str(number), color="white" if active else "grey700", size=12, weight="bold"),
                    width=28,
                    height=28,
                    border_radius=14,
                    alignment=ft.alignment.center,
                    bgcolor="green" if done else PRIMARY if active else "grey300"
                ),
                ft.Text(STEP_LABELS[step], size=9, color="black" if active else "grey700", text_align=ft.TextAlign.CENTER)
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=2, width=80))
        return ft.Container(
            content=ft.Row(chips, alignment=ft.MainAxisAlignment.SPACE_AROUND),
            padding=ft.padding.symmetric(vertical=10)
        )

    # ===================== NAVIGATION =====================

    def next_step(e=None):
        session.go_to_next_step()
        refresh()

    def prev_step(e=None):
        session.go_to_prev_step()
        refresh()

    async def submit_order(e):
        e.control.disabled = True
        show_loading(page, "Placing your order...")
        try:
            await session.submit_order()
        finally:
            hide_loading(page)
            e.control.disabled = False
        refresh()

    def start_over(e=None):
        session.reset_order()
        refresh()

    def nav_buttons(primary_label, on_primary, show_back=True):
        return ft.Container(
            content=ft.Row([
                ft.OutlinedButton("Back", icon=ft.Icons.ARROW_BACK, on_click=prev_step) if show_back else ft.Container(),
                ft.ElevatedButton(
                    primary_label,
                    icon=ft.Icons.ARROW_FORWARD,
                    on_click=on_primary,
                    disabled=session.is_submitting,
                    style=ft.ButtonStyle(bgcolor=ACCENT, color="white"),
                    height=45
                ),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            padding=ft.padding.symmetric(horizontal=16, vertical=12)
        )

    # ===================== STEP 1: DATE & TIME =====================

    def on_date_picked(e):
        picked = e.control.value
        session.select_date(picked.date() if isinstance(picked, datetime) else picked)
        refresh()

    def on_time_picked(e):
        session.select_time(e.control.value)
        refresh()

    def render_date_step():
        date_picker = ft.DatePicker(
            first_date=datetime.combine(date.today(), datetime.min.time()),
            on_change=on_date_picked
        )
        date_label = session.event_date.strftime("%A, %d %B %Y") if session.event_date else "Pick a date"

        return ft.Column([
            section_card(ft.Column([
                ft.Text("When is your event?", size=16, weight="bold", color="black"),
                ft.OutlinedButton(
                    date_label,
                    icon=ft.Icons.CALENDAR_MONTH,
                    on_click=lambda e: page.open(date_picker),
                    width=300
                ),
                error_text(session.errors.get("date")),
                ft.Dropdown(
                    label="Event time",
                    value=session.event_time or None,
                    options=[ft.dropdown.Option(slot) for slot in TIME_SLOTS],
                    on_change=on_time_picked,
                    width=300
                ),
                error_text(session.errors.get("time")),
            ], spacing=8)),
            nav_buttons("Continue", next_step, show_back=False),
        ], scroll=ft.ScrollMode.AUTO, expand=True)

    # ===================== STEP 2: MENU & GUESTS =====================

    def on_add(item):
        session.add_item(item)
        refresh()

    def on_remove(item_id):
        session.remove_item(item_id)
        refresh()

    def on_guest_typed(e):
        # Only the breakdown changes; rebuilding the step would drop field focus
        session.set_guest_count(e.control.value)
        breakdown_holder.content = breakdown_card()
        page.update()

    def on_guest_count(e):
        session.set_guest_count(e.control.value)
        refresh()

    def on_tab_change(e):
        ui_state["food_type"] = FOOD_TYPES[e.control.selected_index]
        refresh()

    def menu_item_card(item):
        quantity = session.cart.quantity_of(item.id)
        food_type = normalize_food_type(item.food_type)
        if quantity > 0:
            controls = ft.Row([
                ft.IconButton(icon=ft.Icons.REMOVE, icon_size=16, tooltip="Decrease", on_click=lambda e, i=item: on_remove(i.id)),
                ft.Text(str(quantity), size=14, weight="bold"),
                ft.IconButton(icon=ft.Icons.ADD, icon_size=16, tooltip="Increase", on_click=lambda e, i=item: on_add(i)),
            ], spacing=2)
        else:
            controls = ft.OutlinedButton("Add", icon=ft.Icons.ADD, on_click=lambda e, i=item: on_add(i))

        return ft.Card(
            content=ft.Container(
                padding=10,
                content=ft.Row([
                    ft.Column([
                        ft.Row([
                            ft.Text(item.name, weight="bold", size=14, color="black"),
                            ft.Container(
                                content=ft.Text(get_food_type_label(food_type), size=10, color="white"),
                                bgcolor=FOOD_TYPE_COLORS.get(food_type, "grey"),
                                padding=ft.padding.symmetric(horizontal=6, vertical=2),
                                border_radius=6
                            ),
                        ], spacing=6),
                        ft.Text(item.description or "", size=11, color="grey700") if item.description else ft.Container(),
                        ft.Text(f"{format_currency(item.price)} per plate", color="green", size=13, weight="bold"),
                    ], spacing=3, expand=True),
                    controls,
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                bgcolor="white",
                border_radius=12
            )
        )

    def breakdown_card():
        cost = session.breakdown()
        guests = session.guest_count_value()

        def row(label, amount, bold=False):
            return ft.Row([
                ft.Text(label, size=13, color="black", weight="bold" if bold else None),
                ft.Text(format_currency(amount), size=13, color="black", weight="bold" if bold else None),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

        rows = [
            ft.Row([
                ft.Icon(ft.Icons.RECEIPT_LONG_OUTLINED, size=20, color="grey700"),
                ft.Text("Cost breakdown", size=16, weight="bold", color="black"),
            ], spacing=8),
        ]
        for line in session.cart.lines():
            rows.append(ft.Text(
                f"{line.quantity} x {line.item.name} x {guests} guests",
                size=12, color="grey700"
            ))
        rows += [
            row("Food cost", cost.food_cost),
            row("Vessel charge", cost.vessel_charge),
            row("Delivery charge", cost.delivery_charge),
            row(f"Staff ({cost.staff_count} x {format_currency(session.charges.staff_charge_per_person)})", cost.staff_charges),
            row(f"Service charge ({session.charges.service_charge_percent:g}%)", cost.service_charges),
            ft.Divider(height=1, color="grey300"),
            row("Total", cost.total_amount, bold=True),
        ]
        if session.charges_loading:
            rows.append(ft.Text("Loading current charges...", size=11, color="grey", italic=True))
        return section_card(ft.Column(rows, spacing=6))

    def render_menu_step():
        breakdown_holder.content = breakdown_card()
        items = session.items_of_type(ui_state["food_type"])
        items_column = ft.Column([menu_item_card(item) for item in items], spacing=4)
        if not items:
            items_column.controls.append(ft.Container(
                content=ft.Text("No items in this category yet.", size=14, color="grey", italic=True),
                padding=20,
                alignment=ft.alignment.center
            ))

        return ft.Column([
            section_card(ft.Column([
                ft.TextField(
                    label="Number of guests",
                    hint_text=f"Minimum {MIN_GUEST_COUNT}",
                    value=session.guest_count,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_change=on_guest_typed,
                    on_blur=on_guest_count,
                    on_submit=on_guest_count,
                    prefix_icon=ft.Icons.PEOPLE,
                    width=300
                ),
                error_text(session.errors.get("guestCount")),
            ], spacing=6)),
            ft.Tabs(
                selected_index=FOOD_TYPES.index(ui_state["food_type"]),
                on_change=on_tab_change,
                tabs=[ft.Tab(text=get_food_type_label(t)) for t in FOOD_TYPES],
                label_color=PRIMARY,
                unselected_label_color="black",
                indicator_color=PRIMARY,
            ),
            ft.Container(content=items_column, padding=ft.padding.symmetric(horizontal=10)),
            ft.Container(content=error_text(session.errors.get("cart")), padding=ft.padding.only(left=16)),
            breakdown_holder,
            nav_buttons("Continue", next_step),
        ], scroll=ft.ScrollMode.AUTO, expand=True)

    # ===================== STEP 3: CUSTOMER DETAILS =====================

    def on_field(field):
        def handler(e):
            session.set_customer_field(field, e.control.value)
        return handler

    def render_details_step():
        fields = []
        for field, label, keyboard, multiline in [
            ("name", "Full name", ft.KeyboardType.NAME, False),
            ("phone", "Phone number", ft.KeyboardType.PHONE, False),
            ("email", "Email", ft.KeyboardType.EMAIL, False),
            ("address", "Event address", ft.KeyboardType.STREET_ADDRESS, True),
        ]:
            fields.append(ft.TextField(
                label=label,
                value=getattr(session.customer, field),
                keyboard_type=keyboard,
                multiline=multiline,
                on_change=on_field(field),
                error_text=session.errors.get(field),
                width=340
            ))

        cost = session.breakdown()
        return ft.Column([
            section_card(ft.Column([
                ft.Text("Your details", size=16, weight="bold", color="black"),
                *fields,
            ], spacing=10)),
            section_card(ft.Column([
                ft.Text("Booking summary", size=16, weight="bold", color="black"),
                ft.Text(f"{session.event_date:%d %b %Y} at {session.event_time}" if session.event_date else "", size=13),
                ft.Text(f"{session.guest_count_value()} guests, {session.cart.total_line_count()} plates per guest", size=13),
                ft.Row([
                    ft.Text("Total", size=16, weight="bold", color="black"),
                    ft.Text(format_currency(cost.total_amount), size=18, weight="bold", color="black"),
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            ], spacing=6)),
            nav_buttons("Place order", submit_order),
        ], scroll=ft.ScrollMode.AUTO, expand=True)

    # ===================== STEP 4: CONFIRMATION =====================

    def render_confirm_step():
        cost = session.breakdown()
        return ft.Column([
            section_card(ft.Column([
                ft.Icon(ft.Icons.CHECK_CIRCLE, size=72, color="green"),
                ft.Text("Booking received!", size=24, weight="bold", color="black"),
                ft.Text(f"Order #{session.order_id} is pending confirmation.", size=14, color="grey700"),
                ft.Text(f"{session.event_date:%d %b %Y} at {session.event_time}", size=14),
                ft.Text(f"{session.guest_count_value()} guests", size=14),
                ft.Text(f"Total: {format_currency(cost.total_amount)}", size=18, weight="bold"),
                ft.ElevatedButton(
                    "Book another event",
                    on_click=start_over,
                    style=ft.ButtonStyle(bgcolor=ACCENT, color="white"),
                    width=250,
                    height=45
                ),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10), padding=30),
        ], scroll=ft.ScrollMode.AUTO, expand=True)

    # ===================== RENDER =====================

    renderers = {
        "date": render_date_step,
        "menu": render_menu_step,
        "details": render_details_step,
        "confirm": render_confirm_step,
    }

    def render_step():
        content_container.content = ft.Column([
            step_indicator(),
            ft.Divider(height=1, color="grey300", thickness=1),
            ft.Container(content=renderers[session.current_step](), expand=True, bgcolor="grey100"),
        ], expand=True, spacing=0)

    async def load_booking_data():
        await session.load()
        refresh()

    def on_disconnect(e):
        session.close()

    page.on_disconnect = on_disconnect

    page.clean()
    page.add(
        ft.Container(
            content=ft.Column([
                ft.Container(
                    content=ft.Row([
                        ft.Text("Book Catering", size=20, weight="bold", color="black"),
                        ft.IconButton(icon=ft.Icons.SETTINGS, icon_color="black", tooltip="Settings",
                                      on_click=lambda e: page.go("/settings"),
                                      visible=is_admin_or_manager(user_data)),
                    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                    padding=ft.padding.only(top=15, left=15, right=15, bottom=8),
                    bgcolor="white"
                ),
                content_container,
            ], expand=True, spacing=0),
            width=MOBILE_WIDTH if page.window.width <= BREAKPOINT else None,
            expand=True,
            padding=0,
            bgcolor="white"
        )
    )
    render_step()
    page.update()
    page.run_task(load_booking_data)
    return session
