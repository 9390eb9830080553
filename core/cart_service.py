from dataclasses import dataclass


@dataclass
class CartLine:
    """One menu item plus how many plates of it each guest gets."""
    item: object
    quantity: int = 1

    @property
    def item_id(self):
        return self.item.id


class BookingCart:
    """In-memory cart for a single booking, keyed by menu item id.

    Quantities are per guest: a quantity of 2 means two plates for every
    guest. Conversion to absolute plate counts happens at order submission.
    """

    def __init__(self):
        self._lines = {}

    def add_item(self, item):
        """Add item to cart or bump its quantity if already there"""
        line = self._lines.get(item.id)
        if line:
            line.quantity += 1
        else:
            self._lines[item.id] = CartLine(item=item, quantity=1)
        return self._lines[item.id]

    def remove_item(self, item_id):
        """Drop one from the quantity; the line goes away when it reaches zero"""
        line = self._lines.get(item_id)
        if not line:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            del self._lines[item_id]

    def quantity_of(self, item_id) -> int:
        line = self._lines.get(item_id)
        return line.quantity if line else 0

    def total_line_count(self) -> int:
        """Sum of per-guest quantities (not plates)"""
        return sum(line.quantity for line in self._lines.values())

    def lines(self):
        return list(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def clear(self):
        self._lines.clear()

    def __len__(self):
        return len(self._lines)
