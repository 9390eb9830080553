# core/order_service.py
from core.pricing_service import calculate_total_amount
from core.schedule_service import combine_event_datetime

ORDER_FAILED_MESSAGE = "Failed to place order. Please try again."


def build_order_values(customer_id, customer, event_date, event_time, guest_count, total_amount) -> dict:
    """Order row for a booking; the slot is folded into event_date and repeated in notes."""
    return {
        "customer_id": customer_id,
        "event_date": combine_event_datetime(event_date, event_time),
        "event_name": f"Catering for {customer.name}",
        "event_location": customer.address,
        "guest_count": guest_count,
        "notes": f"Time: {event_time}",
        "total_amount": total_amount,
        "status": "pending",
    }


def build_order_lines(cart, guest_count: int) -> list:
    """Per-guest cart quantities become absolute plate counts here, and only here."""
    return [
        {
            "menu_item_id": line.item.id,
            "quantity": line.quantity * guest_count,
            "price": line.item.price,
        }
        for line in cart.lines()
    ]


async def place_catering_order(store, *, customer, event_date, event_time, cart, guest_count: int,
                               charges):
    """
    Persist a booking: customer, then order, then order lines.

    The three writes are separate calls with no rollback; if a later one
    fails the earlier rows stay behind and a retry creates new ones.
    Writes are awaited without a time limit: the worker thread would commit
    anyway, so giving up early could report a saved order as failed.

    Returns:
        (True, order_id) on success, (False, user-facing message) otherwise
    """
    try:
        customer_id = await store.create_customer(customer)

        total_amount = calculate_total_amount(cart, guest_count, charges)
        values = build_order_values(customer_id, customer, event_date, event_time, guest_count, total_amount)
        order_id = await store.create_order(values)

        await store.create_order_lines(order_id, build_order_lines(cart, guest_count))
    except Exception as e:
        print("Order error:", repr(e))
        return False, ORDER_FAILED_MESSAGE

    return True, order_id
