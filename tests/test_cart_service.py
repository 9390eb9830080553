from core.cart_service import BookingCart
from conftest import make_item


def test_add_item_inserts_then_increments():
    cart = BookingCart()
    item = make_item(1, 100)

    cart.add_item(item)
    assert cart.quantity_of(1) == 1

    cart.add_item(item)
    cart.add_item(item)
    assert cart.quantity_of(1) == 3
    assert len(cart) == 1


def test_remove_item_decrements_and_drops_line_at_zero():
    cart = BookingCart()
    item = make_item(1, 100)
    cart.add_item(item)
    cart.add_item(item)

    cart.remove_item(1)
    assert cart.quantity_of(1) == 1

    cart.remove_item(1)
    assert cart.quantity_of(1) == 0
    assert cart.is_empty()
    assert cart.lines() == []


def test_remove_missing_item_is_noop():
    cart = BookingCart()
    cart.add_item(make_item(1, 100))

    cart.remove_item(99)

    assert cart.quantity_of(1) == 1
    assert len(cart) == 1


def test_adding_n_then_removing_n_leaves_no_line():
    item = make_item(7, 120)
    for n in (1, 2, 5, 12):
        cart = BookingCart()
        for _ in range(n):
            cart.add_item(item)
        for _ in range(n):
            cart.remove_item(item.id)
        assert cart.quantity_of(item.id) == 0
        assert all(line.item_id != item.id for line in cart.lines())


def test_total_line_count_sums_quantities():
    cart = BookingCart()
    a, b = make_item(1, 100), make_item(2, 200)
    cart.add_item(a)
    cart.add_item(a)
    cart.add_item(b)

    assert cart.total_line_count() == 3
    assert len(cart) == 2


def test_lines_keep_insertion_order_and_clear_empties_cart():
    cart = BookingCart()
    for item_id in (3, 1, 2):
        cart.add_item(make_item(item_id, 10))

    assert [line.item_id for line in cart.lines()] == [3, 1, 2]

    cart.clear()
    assert cart.is_empty()
    assert cart.total_line_count() == 0
