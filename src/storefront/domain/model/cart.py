"""Cart aggregate — the session's selected items, pending checkout.

The Cart owns its entries. It never owns products: each entry keeps the
product id plus a name/price snapshot taken when the product was first
added, so later catalog changes never rewrite what the customer saw.

Invariants:
- at most one entry per product id (repeat adds merge)
- every entry has ``quantity >= 1``
- an entry's quantity never exceeds the product's stock at the time of
  the last add/update
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from storefront.domain.exceptions import InsufficientStockError, NotInCartError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


class AddOutcome(Enum):
    ADDED = "added"
    UPDATED = "updated"


class UpdateOutcome(Enum):
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass
class CartEntry:
    product_id: int
    product_name: str
    unit_price: Money  # snapshot taken at add time
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class Cart:

    def __init__(self) -> None:
        # Insertion-ordered: display order is the order products were first added.
        self._entries: dict[int, CartEntry] = {}

    # --- Commands -------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> AddOutcome:
        """Add *quantity* units of *product*, merging with an existing entry.

        The stock check happens here, not at checkout, so the caller hears
        about an infeasible quantity immediately. A rejected add leaves the
        cart untouched.
        """
        qty = Quantity(quantity).value
        if not product.has_stock_for(qty):
            raise InsufficientStockError(product.id, requested=qty, available=product.stock)

        existing = self._entries.get(product.id)
        if existing is not None:
            merged = existing.quantity + qty
            if not product.has_stock_for(merged):
                raise InsufficientStockError(
                    product.id, requested=merged, available=product.stock, merge=True
                )
            existing.quantity = merged
            return AddOutcome.UPDATED

        self._entries[product.id] = CartEntry(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.unit_price,
            quantity=qty,
        )
        return AddOutcome.ADDED

    def update_quantity(self, product: Product, new_quantity: int) -> UpdateOutcome:
        """Replace the quantity of *product*'s entry.

        A quantity of zero or less removes the entry instead of failing.
        """
        entry = self._require(product.id)
        if new_quantity <= 0:
            del self._entries[product.id]
            return UpdateOutcome.REMOVED
        if not product.has_stock_for(new_quantity):
            raise InsufficientStockError(
                product.id, requested=new_quantity, available=product.stock
            )
        entry.quantity = new_quantity
        return UpdateOutcome.UPDATED

    def remove(self, product_id: int) -> CartEntry:
        self._require(product_id)
        return self._entries.pop(product_id)

    def clear(self) -> None:
        self._entries.clear()

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: int) -> CartEntry | None:
        return self._entries.get(product_id)

    def list_entries(self) -> tuple[CartEntry, ...]:
        return tuple(replace(entry) for entry in self._entries.values())

    def total_item_count(self) -> int:
        """Units in the cart: entries of 3 and 5 count as 8, not 2."""
        return sum(entry.quantity for entry in self._entries.values())

    def snapshot_total(self) -> Money:
        result = Money.zero()
        for entry in self._entries.values():
            result = result + entry.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> CartEntry:
        entry = self._entries.get(product_id)
        if entry is None:
            raise NotInCartError(product_id)
        return entry
