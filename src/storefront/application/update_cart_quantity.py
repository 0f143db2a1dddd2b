"""Application service: Update Cart Quantity use case.

Zero or a negative quantity removes the entry; that is a normal outcome,
not an error.
"""

from __future__ import annotations

from storefront.application.store import Store
from storefront.domain.exceptions import DomainException, NotInCartError
from storefront.domain.model.cart import UpdateOutcome
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class UpdateCartQuantityHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, product_id: int, new_quantity: int) -> UpdateOutcome:
        with self._store.transaction() as store:
            try:
                if store.cart.get(product_id) is None:
                    raise NotInCartError(product_id)
                product = store.catalog.lookup(product_id)
                outcome = store.cart.update_quantity(product, new_quantity)
            except DomainException as exc:
                logger.warning(
                    "Update rejected for product %s (qty %s): %s", product_id, new_quantity, exc
                )
                raise

        logger.info("Cart entry for product %s %s (qty %s)", product_id, outcome.value, new_quantity)
        return outcome
