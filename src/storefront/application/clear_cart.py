"""Application service: Clear Cart use case. Always succeeds."""

from __future__ import annotations

from storefront.application.store import Store
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class ClearCartHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> int:
        """Empty the cart and return how many entries were dropped."""
        with self._store.transaction() as store:
            dropped = len(store.cart)
            store.cart.clear()

        logger.info("Cart cleared (%s entries dropped)", dropped)
        return dropped
