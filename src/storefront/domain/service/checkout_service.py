"""Domain service: Checkout.

Checkout is the one operation that touches both aggregates: it commits the
cart against the catalog (stock goes down) and then empties the cart.

Cart quantities are trusted: each entry was checked against stock when it
was added or updated, and the Store serialises every operation. The
commit is still all-or-nothing. Phase 1 confirms every decrement can be
applied before Phase 2 applies any of them, so a cart that somehow got
ahead of the catalog fails cleanly instead of half-committing.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import EmptyCartError, InsufficientStockError
from storefront.domain.model.cart import Cart, CartEntry
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Receipt:
    """The final bill: the committed lines and their snapshot-price total."""

    lines: tuple[CartEntry, ...]
    total: Money

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


class CheckoutService:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def checkout(self, cart: Cart) -> Receipt:
        """Commit the cart and return the bill.

        Two phases, so nothing moves unless everything can:
          Phase 1: resolve every entry's product and confirm the
                    decrement fits in its stock.
          Phase 2: decrement stock through the catalog and accumulate
                    the snapshot-price total.
        """
        if cart.is_empty:
            raise EmptyCartError()

        lines = cart.list_entries()

        # Phase 1: resolve and check
        for line in lines:
            product = self._catalog.lookup(line.product_id)
            if not product.has_stock_for(line.quantity):
                raise InsufficientStockError(
                    product.id, requested=line.quantity, available=product.stock
                )

        # Phase 2: commit
        total = Money.zero()
        for line in lines:
            self._catalog.decrement_stock(line.product_id, line.quantity)
            total = total + line.line_total

        cart.clear()
        return Receipt(lines=lines, total=total)
