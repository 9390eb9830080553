# core/booking_session.py
"""
Booking flow state for one customer visit.

A BookingSession owns everything the customer has entered so far (date,
time slot, cart, guest count, contact details) plus the current step and
the current validation errors. Views read from it and call its methods;
they never keep their own copy of the booking.

Steps run strictly in order:

    date -> menu -> details -> confirm

Moving forward re-validates the current step. The only way into `confirm`
is a successful submit_order(); reset_order() starts over from `date`.
"""
import asyncio
from dataclasses import dataclass

from core.booking_store import call_with_timeout
from core.booking_validation import (
    guest_count_value,
    validate_date_step,
    validate_menu_step,
    validate_details_step,
)
from core.cart_service import BookingCart
from core.menu_service import filter_items_by_type
from core.order_service import ORDER_FAILED_MESSAGE, place_catering_order
from core.pricing_service import DEFAULT_CHARGES, calculate_breakdown

STEPS = ["date", "menu", "details", "confirm"]

STEP_LABELS = {
    "date": "Select Date & Time",
    "menu": "Choose Food",
    "details": "Your Details",
    "confirm": "Confirmation",
}


@dataclass
class CustomerDetails:
    name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""


class BookingSession:
    def __init__(self, store, timeout: float = None):
        self.store = store
        self.timeout = timeout

        # Backend data, loaded once per session
        self.menu_items = []
        self.charges = DEFAULT_CHARGES
        self.charges_loading = False

        self.is_submitting = False
        self.notice = None
        self._pending = set()
        self._reset_inputs()

    def _reset_inputs(self):
        self.current_step = "date"
        self.event_date = None
        self.event_time = ""
        self.cart = BookingCart()
        self.guest_count = ""
        self.customer = CustomerDetails()
        self.errors = {}
        self.order_id = None

    # ===================== BACKEND CALLS =====================

    async def _call(self, make_call, timeout: float = None):
        """Run one store call; returns (True, result) or (False, exception)."""
        if timeout is None:
            timeout = self.timeout
        task = asyncio.ensure_future(call_with_timeout(make_call(), timeout))
        self._pending.add(task)
        try:
            return True, await task
        except asyncio.CancelledError:
            raise
        except Exception as e:
            return False, e
        finally:
            self._pending.discard(task)

    async def load(self):
        await asyncio.gather(self.load_menu_items(), self.load_charges())

    async def load_menu_items(self):
        ok, result = await self._call(self.store.fetch_available_menu_items)
        if ok:
            self.menu_items = list(result or [])
        else:
            print("Error fetching menu items:", repr(result))
            self.menu_items = []
            self.notice = ("error", "Failed to load menu items")
        return ok

    async def load_charges(self):
        """Use the admin rate sheet when available, the defaults otherwise."""
        self.charges_loading = True
        try:
            ok, result = await self._call(self.store.fetch_charge_config)
            if not ok:
                print("Error fetching charges:", repr(result))
            elif result is not None:
                self.charges = result
        finally:
            self.charges_loading = False
        return self.charges

    def close(self):
        """Abandon the session, cancelling any call still in flight."""
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

    # ===================== INPUT =====================

    def select_date(self, event_date):
        self.event_date = event_date

    def select_time(self, slot: str):
        self.event_time = slot or ""

    def set_guest_count(self, raw: str):
        self.guest_count = raw or ""

    def set_customer_field(self, field: str, value: str):
        if field not in ("name", "phone", "email", "address"):
            raise ValueError(f"Unknown customer field: {field}")
        setattr(self.customer, field, value or "")

    def add_item(self, item):
        return self.cart.add_item(item)

    def remove_item(self, item_id):
        self.cart.remove_item(item_id)

    def items_of_type(self, food_type: str):
        return filter_items_by_type(self.menu_items, food_type)

    # ===================== PRICING =====================

    def guest_count_value(self) -> int:
        return guest_count_value(self.guest_count)

    def breakdown(self):
        return calculate_breakdown(self.cart, self.guest_count_value(), self.charges)

    # ===================== STEPS =====================

    def validate_step(self, step: str) -> bool:
        """Recompute the error map for `step` from scratch."""
        if step == "date":
            errors = validate_date_step(self.event_date, self.event_time)
        elif step == "menu":
            errors = validate_menu_step(self.cart, self.guest_count)
        elif step == "details":
            errors = validate_details_step(self.customer)
        else:
            errors = {}
        self.errors = errors
        return not errors

    def go_to_next_step(self) -> bool:
        """Advance one step if the current one is valid. Never enters `confirm`."""
        if self.current_step == "confirm":
            return False
        if not self.validate_step(self.current_step):
            self.notice = ("error", "Please fix the errors before continuing")
            return False
        if self.current_step == "details":
            # Only a successful submission moves on from here
            return False
        self.current_step = STEPS[STEPS.index(self.current_step) + 1]
        return True

    def go_to_prev_step(self) -> bool:
        if self.current_step in ("date", "confirm"):
            return False
        self.current_step = STEPS[STEPS.index(self.current_step) - 1]
        return True

    def step_number(self) -> int:
        return STEPS.index(self.current_step) + 1

    async def submit_order(self):
        """
        Place the order from the details step.

        Returns:
            (True, order_id) and moves to `confirm` on success;
            (False, message) and stays on `details` otherwise.
        """
        if self.current_step != "details":
            return False, "Complete the previous steps first."
        if self.is_submitting:
            return False, "Your order is already being placed."
        if not self.validate_step("details"):
            return False, "Please fix the errors before continuing"

        self.is_submitting = True
        try:
            ok, result = await self._call(lambda: place_catering_order(
                self.store,
                customer=self.customer,
                event_date=self.event_date,
                event_time=self.event_time,
                cart=self.cart,
                guest_count=self.guest_count_value(),
                charges=self.charges,
            ), timeout=0)  # writes run to completion, see place_catering_order
        finally:
            self.is_submitting = False

        if ok:
            ok, result = result
        else:
            print("Order error:", repr(result))
            result = ORDER_FAILED_MESSAGE

        if not ok:
            self.notice = ("error", result)
            return False, result

        self.order_id = result
        self.current_step = "confirm"
        self.notice = ("success", "Order placed successfully!")
        return True, result

    def reset_order(self):
        """Forget everything entered and start again from date selection."""
        self._reset_inputs()

    def pop_notice(self):
        notice, self.notice = self.notice, None
        return notice
