"""Unit tests for the CheckoutService domain service."""

import pytest

from storefront.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    ProductNotFoundError,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.value_objects import Money
from storefront.domain.service.checkout_service import CheckoutService
from tests.factories import make_catalog


def _filled(catalog: Catalog, *items: tuple[int, int]) -> Cart:
    cart = Cart()
    for pid, qty in items:
        cart.add(catalog.lookup(pid), qty)
    return cart


class TestCheckout:

    def test_totals_decrements_and_clears(self):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 2), (7, 3))

        receipt = CheckoutService(catalog).checkout(cart)

        assert receipt.total == Money.of("2149.95")
        assert receipt.item_count == 5
        assert [line.product_id for line in receipt.lines] == [1, 7]
        assert cart.is_empty
        assert catalog.lookup(1).stock == 3
        assert catalog.lookup(7).stock == 27
        assert catalog.lookup(2).stock == 10

    def test_uses_snapshot_price(self):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 1))
        catalog.lookup(1).unit_price = Money.of("1.00")

        receipt = CheckoutService(catalog).checkout(cart)

        assert receipt.total == Money.of("999.99")

    def test_empty_cart_rejected_without_side_effects(self):
        catalog = make_catalog()
        cart = Cart()

        with pytest.raises(EmptyCartError, match="Cart empty"):
            CheckoutService(catalog).checkout(cart)

        assert [p.stock for p in catalog.list_all()] == [5, 10, 30]

    def test_missing_product_aborts_before_any_decrement(self):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 2), (7, 1))
        other = Catalog.from_seed([(1, "Laptop", "999.99", 5)])

        with pytest.raises(ProductNotFoundError):
            CheckoutService(other).checkout(cart)

        assert other.lookup(1).stock == 5
        assert len(cart) == 2

    def test_buying_exactly_the_stock_empties_it(self):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 5))

        receipt = CheckoutService(catalog).checkout(cart)

        assert receipt.item_count == 5
        assert catalog.lookup(1).stock == 0

    def test_cart_ahead_of_catalog_commits_nothing(self):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 2), (7, 1))
        catalog.lookup(7).stock = 0

        with pytest.raises(InsufficientStockError) as exc_info:
            CheckoutService(catalog).checkout(cart)

        assert exc_info.value.product_id == 7
        assert catalog.lookup(1).stock == 5
        assert catalog.lookup(7).stock == 0
        assert len(cart) == 2

    def test_stock_moves_through_the_catalog(self, monkeypatch):
        catalog = make_catalog()
        cart = _filled(catalog, (1, 2), (7, 3))
        calls = []
        decrement = catalog.decrement_stock

        def recording(product_id, amount):
            calls.append((product_id, amount))
            decrement(product_id, amount)

        monkeypatch.setattr(catalog, "decrement_stock", recording)

        CheckoutService(catalog).checkout(cart)

        assert calls == [(1, 2), (7, 3)]
        assert catalog.lookup(7).stock == 27
