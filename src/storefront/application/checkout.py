"""Application service: Checkout use case.

Runs the checkout domain service under the store lock, so no add or
update can slip in between reading the cart and committing the stock.
"""

from __future__ import annotations

from storefront.application.dto import ReceiptDTO
from storefront.application.mapping import lines_to_dto
from storefront.application.store import Store
from storefront.domain.exceptions import EmptyCartError
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class CheckoutHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> ReceiptDTO:
        with self._store.transaction() as store:
            try:
                receipt = store.checkout_service().checkout(store.cart)
            except EmptyCartError:
                logger.warning("Checkout rejected: cart is empty")
                raise

        logger.info(
            "Checked out %s units across %s lines, total %s",
            receipt.item_count, len(receipt.lines), receipt.total,
        )
        return ReceiptDTO(
            items=lines_to_dto(receipt.lines),
            total=receipt.total.rounded(),
            item_count=receipt.item_count,
        )
