"""Unit tests for the Catalog."""

import pytest

from storefront.domain.exceptions import (
    DuplicateProductError,
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.value_objects import Money
from tests.factories import make_catalog


class TestCatalogSeeding:

    def test_from_seed(self):
        catalog = make_catalog()
        assert len(catalog) == 3
        assert catalog.lookup(1).unit_price == Money.of("999.99")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateProductError, match="Duplicate product id"):
            Catalog.from_seed([(1, "Laptop", "999.99", 5), (1, "Other", "1.00", 1)])

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Catalog.from_seed([(1, "Laptop", "-1", 5)])

    def test_empty_catalog(self):
        assert len(Catalog()) == 0
        assert Catalog().list_all() == ()


class TestCatalogLookup:

    def test_lookup_existing(self):
        assert make_catalog().lookup(7).name == "Mouse"

    def test_lookup_missing_raises(self):
        with pytest.raises(ProductNotFoundError, match="Product not found"):
            make_catalog().lookup(99)

    def test_get_missing_returns_none(self):
        assert make_catalog().get(99) is None

    def test_sparse_and_large_ids(self):
        catalog = Catalog.from_seed([(10**9, "Big", "1", 1), (-4, "Negative", "2", 2)])
        assert catalog.lookup(10**9).name == "Big"
        assert catalog.lookup(-4).name == "Negative"

    def test_contains(self):
        catalog = make_catalog()
        assert 1 in catalog
        assert 99 not in catalog


class TestCatalogListAll:

    def test_seed_order(self):
        assert [p.id for p in make_catalog().list_all()] == [1, 2, 7]

    def test_reiterable(self):
        products = make_catalog().list_all()
        assert list(products) == list(products)


class TestCatalogDecrementStock:

    def test_decrement(self):
        catalog = make_catalog()
        catalog.decrement_stock(1, 2)
        assert catalog.lookup(1).stock == 3

    def test_decrement_beyond_stock_rejected(self):
        catalog = make_catalog()
        with pytest.raises(InsufficientStockError):
            catalog.decrement_stock(1, 6)
        assert catalog.lookup(1).stock == 5

    def test_decrement_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            make_catalog().decrement_stock(99, 1)
