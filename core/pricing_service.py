# core/pricing_service.py
"""
Cost calculation for catering bookings.

Everything here is a pure function of (cart, guest count, charges) so the
numbers shown on screen and the amount stored on the order always agree.
Guest count floors are enforced by booking validation, not here.
"""
import math
from dataclasses import dataclass

from core.config import (
    DEFAULT_DELIVERY_CHARGE,
    DEFAULT_VESSEL_CHARGE,
    DEFAULT_STAFF_CHARGE_PER_PERSON,
    DEFAULT_GUESTS_PER_STAFF,
    DEFAULT_SERVICE_CHARGE_PERCENT,
)


@dataclass(frozen=True)
class ChargeConfig:
    delivery_charge: float
    vessel_charge: float
    staff_charge_per_person: float
    guests_per_staff: int
    service_charge_percent: float

    def __post_init__(self):
        if self.guests_per_staff <= 0:
            raise ValueError("guests_per_staff must be a positive number")
        for name in ("delivery_charge", "vessel_charge", "staff_charge_per_person"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if not 0 <= self.service_charge_percent <= 100:
            raise ValueError("service_charge_percent must be between 0 and 100")

    @classmethod
    def from_row(cls, row):
        """Build from an admin_charges row (values may come back as Decimal)"""
        return cls(
            delivery_charge=float(row.delivery_charge),
            vessel_charge=float(row.vessel_charge),
            staff_charge_per_person=float(row.staff_charge_per_person),
            guests_per_staff=int(row.guests_per_staff),
            service_charge_percent=float(row.service_charge_percent),
        )


DEFAULT_CHARGES = ChargeConfig(
    delivery_charge=DEFAULT_DELIVERY_CHARGE,
    vessel_charge=DEFAULT_VESSEL_CHARGE,
    staff_charge_per_person=DEFAULT_STAFF_CHARGE_PER_PERSON,
    guests_per_staff=DEFAULT_GUESTS_PER_STAFF,
    service_charge_percent=DEFAULT_SERVICE_CHARGE_PERCENT,
)


@dataclass(frozen=True)
class CostBreakdown:
    food_cost: float
    staff_count: int
    staff_charges: float
    service_charges: int
    vessel_charge: float
    delivery_charge: float
    total_amount: float


def round_half_up(value) -> int:
    """Round to the nearest whole unit, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def calculate_food_cost(cart, guest_count: int):
    """Each cart quantity unit is one plate per guest."""
    return sum(line.item.price * line.quantity * guest_count for line in cart.lines())


def calculate_staff_count(guest_count: int, charges: ChargeConfig) -> int:
    # Integer ceiling division, no float error on large counts
    return -(-guest_count // charges.guests_per_staff)


def calculate_staff_charges(guest_count: int, charges: ChargeConfig):
    return calculate_staff_count(guest_count, charges) * charges.staff_charge_per_person


def calculate_service_charges(food_cost, charges: ChargeConfig) -> int:
    return round_half_up(food_cost * charges.service_charge_percent / 100)


def calculate_total_amount(cart, guest_count: int, charges: ChargeConfig):
    return calculate_breakdown(cart, guest_count, charges).total_amount


def calculate_breakdown(cart, guest_count: int, charges: ChargeConfig) -> CostBreakdown:
    food_cost = calculate_food_cost(cart, guest_count)
    staff_count = calculate_staff_count(guest_count, charges)
    staff_charges = staff_count * charges.staff_charge_per_person
    service_charges = calculate_service_charges(food_cost, charges)

    # Nothing selected yet: show 0, not the flat fees on their own
    if food_cost == 0:
        total = 0
    else:
        total = (
            food_cost
            + charges.vessel_charge
            + charges.delivery_charge
            + staff_charges
            + service_charges
        )

    return CostBreakdown(
        food_cost=food_cost,
        staff_count=staff_count,
        staff_charges=staff_charges,
        service_charges=service_charges,
        vessel_charge=charges.vessel_charge,
        delivery_charge=charges.delivery_charge,
        total_amount=total,
    )


SAMPLE_GUEST_COUNT = 100
SAMPLE_FOOD_COST = 10000


def calculate_sample_breakdown(charges: ChargeConfig, guest_count: int = SAMPLE_GUEST_COUNT,
                               food_cost=SAMPLE_FOOD_COST) -> CostBreakdown:
    """Worked example for the settings screen: fixed food cost and guest count, live rates."""
    staff_count = calculate_staff_count(guest_count, charges)
    staff_charges = staff_count * charges.staff_charge_per_person
    service_charges = calculate_service_charges(food_cost, charges)
    return CostBreakdown(
        food_cost=food_cost,
        staff_count=staff_count,
        staff_charges=staff_charges,
        service_charges=service_charges,
        vessel_charge=charges.vessel_charge,
        delivery_charge=charges.delivery_charge,
        total_amount=food_cost + charges.vessel_charge + charges.delivery_charge + staff_charges + service_charges,
    )
