"""Catalog: the authoritative set of products and their stock.

Products are keyed by id in a plain dict, so lookups are constant time for
any integer id (not just small dense ranges). Dict order is seed order,
which is also the display order.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from storefront.domain.exceptions import DuplicateProductError, ProductNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

SeedRow = tuple[int, str, str | float | int | Decimal, int]


class Catalog:

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[int, Product] = {}
        for product in products:
            if product.id in self._products:
                raise DuplicateProductError(product.id)
            self._products[product.id] = product

    @classmethod
    def from_seed(cls, seed: Iterable[SeedRow]) -> Catalog:
        """Build a catalog from ``(id, name, price, stock)`` rows.

        Duplicate ids are a configuration error, not "last one wins".
        """
        return cls(
            Product(id=pid, name=name, unit_price=Money.of(price), stock=stock)
            for pid, name, price, stock in seed
        )

    # --- Queries --------------------------------------------------------------

    def lookup(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    # --- Commands -------------------------------------------------------------

    def decrement_stock(self, product_id: int, amount: int) -> None:
        """The only stock-mutating operation the catalog exposes."""
        self.lookup(product_id).decrement_stock(amount)
