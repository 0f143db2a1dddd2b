"""Read-only DTOs handed from the use-case handlers to the adapters.

Handlers return these instead of domain objects, so the adapters only ever
see copies and cannot mutate catalog or cart state behind the lock.
Money is carried as Decimal rounded to cents; each adapter formats it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: Decimal
    stock: int


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    unit_price: Decimal  # snapshot
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: Decimal
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class ReceiptDTO:
    """Output of a successful checkout."""

    items: list[CartLineDTO]
    total: Decimal
    item_count: int
