"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.store import Store
from storefront.domain.exceptions import NotInCartError
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, product_id: int) -> None:
        with self._store.transaction() as store:
            try:
                removed = store.cart.remove(product_id)
            except NotInCartError:
                logger.warning("Remove rejected: product %s not in cart", product_id)
                raise

        logger.info("Removed %s x%s from cart", removed.product_name, removed.quantity)
