from datetime import date

import pytest

from core.booking_session import CustomerDetails
from core.booking_validation import (
    guest_count_value,
    is_valid_email,
    is_valid_phone,
    validate_date_step,
    validate_details_step,
    validate_menu_step,
)
from core.cart_service import BookingCart
from conftest import make_item


def filled_cart():
    cart = BookingCart()
    cart.add_item(make_item(1, 100))
    return cart


def test_date_step_reports_both_missing_fields():
    assert validate_date_step(None, "") == {
        "date": "Please select event date",
        "time": "Please select event time",
    }
    assert validate_date_step(date(2026, 12, 1), "10:00 AM") == {}


def test_menu_step_reports_cart_and_guest_count_together():
    errors = validate_menu_step(BookingCart(), "")

    assert errors == {
        "cart": "Please select at least one menu item",
        "guestCount": "Guest count is required",
    }


@pytest.mark.parametrize("raw, message", [
    ("50abc", "Guest count must be numeric only"),
    ("5 0", "Guest count must be numeric only"),
    ("-60", "Guest count must be numeric only"),
    ("60.0", "Guest count must be numeric only"),
    ("49", "Minimum 50 guests required"),
    ("0", "Minimum 50 guests required"),
])
def test_menu_step_guest_count_rules(raw, message):
    assert validate_menu_step(filled_cart(), raw) == {"guestCount": message}


@pytest.mark.parametrize("raw", ["50", "051", "1200"])
def test_menu_step_accepts_fifty_or_more(raw):
    assert validate_menu_step(filled_cart(), raw) == {}


def test_details_step_reports_every_missing_field():
    errors = validate_details_step(CustomerDetails())

    assert errors == {
        "name": "Name is required",
        "phone": "Phone number is required",
        "email": "Email is required",
        "address": "Event address is required",
    }


def test_details_step_reports_every_malformed_field():
    customer = CustomerDetails(name="Al", phone="12345", email="al@example", address="Hall 3")

    assert validate_details_step(customer) == {
        "name": "Name must be at least 3 characters",
        "phone": "Please enter a valid 10-digit phone number",
        "email": "Please enter a valid email address",
    }


def test_details_step_passes_with_valid_customer():
    customer = CustomerDetails(name="Ana", phone="9876543210", email="ana@example.com", address="Hall 3")
    assert validate_details_step(customer) == {}


@pytest.mark.parametrize("phone, ok", [
    ("9876543210", True),
    ("987654321", False),
    ("98765432100", False),
    ("98765abcde", False),
    ("+919876543", False),
])
def test_phone_must_be_exactly_ten_digits(phone, ok):
    assert is_valid_phone(phone) is ok


@pytest.mark.parametrize("email, ok", [
    ("a@b.c", True),
    ("first.last@catering.co.in", True),
    ("a@b", False),
    ("ab.c", False),
    ("contact: a@b.c", True),  # shape check only needs some x@y.z in the value
    ("", False),
])
def test_email_shape(email, ok):
    assert is_valid_email(email) is ok


def test_guest_count_value_only_trusts_digits():
    assert guest_count_value("75") == 75
    assert guest_count_value("50abc") == 0
    assert guest_count_value("") == 0
