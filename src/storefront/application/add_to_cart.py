"""Application service: Add To Cart use case.

Resolves the product in the catalog and lets the Cart aggregate enforce
the stock bound. Lookup and mutation happen under one store transaction.
"""

from __future__ import annotations

from storefront.application.store import Store
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import AddOutcome
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class AddToCartHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, product_id: int, quantity: int) -> AddOutcome:
        with self._store.transaction() as store:
            try:
                product = store.catalog.lookup(product_id)
                outcome = store.cart.add(product, quantity)
            except DomainException as exc:
                logger.warning("Add rejected for product %s (qty %s): %s", product_id, quantity, exc)
                raise
            entry = store.cart.get(product_id)

        logger.info(
            "Cart %s product %s: +%s (now %s)",
            outcome.value, product_id, quantity, entry.quantity if entry else quantity,
        )
        return outcome
