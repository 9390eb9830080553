import asyncio
from datetime import date
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.db import Base
from core.booking_store import BookingStore
from core.pricing_service import ChargeConfig
# Register every table on Base.metadata
from models.user import User  # noqa: F401
from models.menu_item import MenuItem  # noqa: F401
from models.customer import Customer  # noqa: F401
from models.order import Order, OrderItem  # noqa: F401
from models.admin_charges import AdminCharges  # noqa: F401
from models.audit_log import AuditLog  # noqa: F401


def make_item(item_id, price, name=None, food_type="veg", description=None):
    return SimpleNamespace(
        id=item_id,
        name=name or f"Item {item_id}",
        price=price,
        food_type=food_type,
        description=description,
        is_available=True,
    )


STANDARD_CHARGES = ChargeConfig(
    delivery_charge=3000,
    vessel_charge=5000,
    staff_charge_per_person=800,
    guests_per_staff=50,
    service_charge_percent=5,
)


class FakeBookingStore(BookingStore):
    """In-memory store; name a method in `fail_on` to make it raise."""

    def __init__(self, menu_items=None, charges=None, fail_on=()):
        self.menu_items = list(menu_items or [])
        self.charges = charges
        self.fail_on = set(fail_on)
        self.customers = []
        self.orders = []
        self.order_lines = []

    def _maybe_fail(self, name):
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    async def fetch_available_menu_items(self):
        self._maybe_fail("fetch_available_menu_items")
        return list(self.menu_items)

    async def fetch_charge_config(self):
        self._maybe_fail("fetch_charge_config")
        return self.charges

    async def create_customer(self, details):
        self._maybe_fail("create_customer")
        self.customers.append(details)
        return len(self.customers)

    async def create_order(self, values):
        self._maybe_fail("create_order")
        self.orders.append(values)
        return 100 + len(self.orders)

    async def create_order_lines(self, order_id, lines):
        self._maybe_fail("create_order_lines")
        self.order_lines.append((order_id, lines))


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def item_a():
    return make_item(1, 100, name="Item A")


@pytest.fixture
def fake_store(item_a):
    return FakeBookingStore(
        menu_items=[
            item_a,
            make_item(2, 250, name="Chicken Curry", food_type="non_veg"),
            make_item(3, 400, name="Grand Platter", food_type="platter"),
        ],
        charges=STANDARD_CHARGES,
    )


def fill_valid_booking(session, item, guests="50"):
    """Walk a loaded session up to the details step with valid input."""
    session.select_date(date(2026, 12, 5))
    session.select_time("01:00 PM")
    assert session.go_to_next_step()
    session.add_item(item)
    session.add_item(item)
    session.set_guest_count(guests)
    assert session.go_to_next_step()
    session.set_customer_field("name", "Asha Rao")
    session.set_customer_field("phone", "9876543210")
    session.set_customer_field("email", "asha@example.com")
    session.set_customer_field("address", "12 Lake Road, Pune")


def run(coro):
    return asyncio.run(coro)
