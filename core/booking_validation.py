# core/booking_validation.py
"""
Per-step checks for the booking flow.

Each validator returns a dict of field -> message covering every problem
found, so the form can flag all of them at once.
"""
import re

from core.config import MIN_GUEST_COUNT

_DIGITS = re.compile(r"[0-9]+")
_PHONE = re.compile(r"[0-9]{10}")
_EMAIL = re.compile(r"\S+@\S+\.\S+")


def is_numeric(value: str) -> bool:
    return bool(value) and _DIGITS.fullmatch(value) is not None


def is_valid_phone(phone: str) -> bool:
    return _PHONE.fullmatch(phone or "") is not None


def is_valid_email(email_str: str) -> bool:
    """Loose x@y.z shape check"""
    return _EMAIL.search(email_str or "") is not None


def guest_count_value(raw: str) -> int:
    """Multiplier for live pricing: the number when the field is all digits, else 0."""
    return int(raw) if is_numeric(raw) else 0


def validate_date_step(event_date, event_time: str) -> dict:
    errors = {}
    if not event_date:
        errors["date"] = "Please select event date"
    if not event_time:
        errors["time"] = "Please select event time"
    return errors


def validate_menu_step(cart, guest_count: str) -> dict:
    errors = {}
    if cart.is_empty():
        errors["cart"] = "Please select at least one menu item"
    if not guest_count:
        errors["guestCount"] = "Guest count is required"
    elif not is_numeric(guest_count):
        errors["guestCount"] = "Guest count must be numeric only"
    elif int(guest_count) < MIN_GUEST_COUNT:
        errors["guestCount"] = f"Minimum {MIN_GUEST_COUNT} guests required"
    return errors


def validate_details_step(customer) -> dict:
    errors = {}
    if not customer.name:
        errors["name"] = "Name is required"
    elif len(customer.name) < 3:
        errors["name"] = "Name must be at least 3 characters"

    if not customer.phone:
        errors["phone"] = "Phone number is required"
    elif not is_valid_phone(customer.phone):
        errors["phone"] = "Please enter a valid 10-digit phone number"

    if not customer.email:
        errors["email"] = "Email is required"
    elif not is_valid_email(customer.email):
        errors["email"] = "Please enter a valid email address"

    if not customer.address:
        errors["address"] = "Event address is required"
    return errors
