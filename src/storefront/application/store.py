"""The Store: one object owning the catalog, the cart and their lock.

Catalog and Cart share an invariant (entry quantity <= product stock), so
they are guarded together by a single lock held for a whole use case. One
lock per structure would leave a window between a stock check in ``add``
and the stock decrement in ``checkout``.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Catalog
from storefront.domain.service.checkout_service import CheckoutService


class Store:

    def __init__(self, catalog: Catalog, cart: Cart | None = None) -> None:
        self.catalog = catalog
        self.cart = cart if cart is not None else Cart()
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[Store]:
        """Hold the store lock for the duration of one logical operation."""
        with self._lock:
            yield self

    def checkout_service(self) -> CheckoutService:
        return CheckoutService(self.catalog)
