"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.application.store import Store


class ShowCartHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> CartDTO:
        with self._store.transaction() as store:
            return cart_to_dto(store.cart)

    def item_count(self) -> int:
        """Total units across all entries."""
        with self._store.transaction() as store:
            return store.cart.total_item_count()
