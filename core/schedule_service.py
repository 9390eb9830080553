# core/schedule_service.py
from datetime import date, datetime

TIME_SLOTS = [
    "09:00 AM", "10:00 AM", "11:00 AM", "12:00 PM", "01:00 PM",
    "02:00 PM", "03:00 PM", "04:00 PM", "05:00 PM", "06:00 PM",
    "07:00 PM", "08:00 PM", "09:00 PM",
]


def parse_time_slot(slot: str):
    """
    Convert a 12-hour slot like "01:00 PM" into (hour, minute).

    12 AM is midnight (hour 0), 12 PM stays noon (hour 12), and every other
    PM hour gets 12 added.

    Raises:
        ValueError: if the slot isn't "HH:MM AM" / "HH:MM PM"
    """
    try:
        clock, period = slot.strip().split(" ")
        hours, minutes = (int(part) for part in clock.split(":"))
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time slot: {slot!r}")

    period = period.upper()
    if period not in ("AM", "PM") or not 1 <= hours <= 12 or not 0 <= minutes <= 59:
        raise ValueError(f"Invalid time slot: {slot!r}")

    if period == "PM" and hours != 12:
        hours += 12
    if period == "AM" and hours == 12:
        hours = 0
    return hours, minutes


def combine_event_datetime(event_date: date, slot: str) -> datetime:
    """Merge the picked calendar day with the picked slot"""
    hours, minutes = parse_time_slot(slot)
    return datetime(event_date.year, event_date.month, event_date.day, hours, minutes)
