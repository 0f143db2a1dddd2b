"""Product aggregate — a sellable item and its stock level."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``id``, ``name`` and ``unit_price`` never change once the catalog is
    seeded. ``stock`` is the only mutable field and only checkout moves it.

    Invariant: ``stock >= 0``.
    """

    id: int
    name: str
    unit_price: Money
    stock: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError(f"Product {self.id} needs a name")
        if self.stock < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.stock}"
            )

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock

    def decrement_stock(self, amount: int) -> None:
        """Permanently remove *amount* units from stock.

        Raises InsufficientStockError rather than letting stock go below zero.
        """
        if amount <= 0:
            raise ValidationError("Decrement amount must be positive")
        if amount > self.stock:
            raise InsufficientStockError(self.id, requested=amount, available=self.stock)
        self.stock -= amount
