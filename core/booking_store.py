# core/booking_store.py
"""
Backend access for the booking flow.

The booking session only talks to a BookingStore, never to SQLAlchemy
directly. SqlBookingStore is the real implementation; tests swap in an
in-memory one. Every call is async so the UI stays responsive while the
database round trip is in flight.
"""
import asyncio

from core.config import BACKEND_TIMEOUT_SECONDS
from core.db import SessionLocal
from core.logger import log_action
from core.menu_service import get_available_menu_items
from core.charges_service import get_admin_charges
from core.pricing_service import ChargeConfig
from models.customer import Customer
from models.order import Order, OrderItem


class BookingStore:
    async def fetch_available_menu_items(self):
        raise NotImplementedError

    async def fetch_charge_config(self):
        """Return the admin ChargeConfig, or None when no row exists."""
        raise NotImplementedError

    async def create_customer(self, details) -> int:
        raise NotImplementedError

    async def create_order(self, values: dict) -> int:
        raise NotImplementedError

    async def create_order_lines(self, order_id: int, lines: list):
        raise NotImplementedError


async def call_with_timeout(awaitable, timeout: float = None):
    """Await a backend call, giving up after `timeout` seconds (0 = no limit)."""
    if timeout is None:
        timeout = BACKEND_TIMEOUT_SECONDS
    if not timeout:
        return await awaitable
    return await asyncio.wait_for(awaitable, timeout)


class SqlBookingStore(BookingStore):
    """
    BookingStore backed by the SQLAlchemy models.

    Each write commits on its own, one round trip per call, matching how
    the booking flow sequences customer -> order -> order lines.
    """

    def __init__(self, session_factory=SessionLocal, actor_email: str = None):
        self.session_factory = session_factory
        self.actor_email = actor_email

    async def fetch_available_menu_items(self):
        return await asyncio.to_thread(self._fetch_available_menu_items)

    async def fetch_charge_config(self):
        return await asyncio.to_thread(self._fetch_charge_config)

    async def create_customer(self, details) -> int:
        return await asyncio.to_thread(self._create_customer, details)

    async def create_order(self, values: dict) -> int:
        return await asyncio.to_thread(self._create_order, values)

    async def create_order_lines(self, order_id: int, lines: list):
        return await asyncio.to_thread(self._create_order_lines, order_id, lines)

    # ===================== BLOCKING WORK =====================

    def _fetch_available_menu_items(self):
        db = self.session_factory()
        try:
            return get_available_menu_items(db)
        finally:
            db.close()

    def _fetch_charge_config(self):
        db = self.session_factory()
        try:
            row = get_admin_charges(db)
            return ChargeConfig.from_row(row) if row else None
        finally:
            db.close()

    def _create_customer(self, details) -> int:
        db = self.session_factory()
        try:
            customer = Customer(
                name=details.name,
                email=details.email,
                phone=details.phone,
                address=details.address,
            )
            db.add(customer)
            db.commit()
            db.refresh(customer)
            return customer.id
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _create_order(self, values: dict) -> int:
        db = self.session_factory()
        try:
            order = Order(**values)
            db.add(order)
            db.commit()
            db.refresh(order)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

        log_action(
            self.actor_email,
            f"Booked order #{order.id} for {order.guest_count} guests ({order.total_amount:.2f})",
            session_factory=self.session_factory,
        )
        return order.id

    def _create_order_lines(self, order_id: int, lines: list):
        db = self.session_factory()
        try:
            db.add_all([
                OrderItem(
                    order_id=order_id,
                    menu_item_id=line["menu_item_id"],
                    quantity=line["quantity"],
                    price=line["price"],
                )
                for line in lines
            ])
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
