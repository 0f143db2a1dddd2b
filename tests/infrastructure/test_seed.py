"""Tests for the built-in seeds, the JSON seed loader and the bootstrap."""

import json
from pathlib import Path

import pytest

from storefront.domain.exceptions import SeedError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import build_store
from storefront.infrastructure.persistence.seed import JsonSeedLoader, builtin_catalog


def _write(tmp_path, payload) -> Path:
    path = tmp_path / "seed.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return path


class TestBuiltinSeeds:

    def test_web_seed(self):
        catalog = builtin_catalog("web")
        assert len(catalog) == 12
        assert catalog.lookup(1).name == "Laptop"
        assert catalog.lookup(12).unit_price == Money.of("129.99")

    def test_menu_seed(self):
        catalog = builtin_catalog("menu")
        assert [p.id for p in catalog.list_all()] == [101, 102, 103, 104]

    def test_unknown_seed(self):
        with pytest.raises(SeedError, match="Unknown built-in seed"):
            builtin_catalog("nope")


class TestJsonSeedLoader:

    def test_loads_products(self, tmp_path):
        path = _write(tmp_path, [
            {"id": 5, "name": "Lamp", "price": "19.50", "stock": 4},
            {"id": 3, "name": "Desk", "price": 120, "stock": 1},
        ])
        catalog = JsonSeedLoader(path).load()
        assert [p.id for p in catalog.list_all()] == [5, 3]
        assert catalog.lookup(3).unit_price == Money.of("120")

    def test_duplicate_ids_rejected(self, tmp_path):
        path = _write(tmp_path, [
            {"id": 1, "name": "A", "price": "1", "stock": 1},
            {"id": 1, "name": "B", "price": "2", "stock": 2},
        ])
        with pytest.raises(SeedError, match="Duplicate product id"):
            JsonSeedLoader(path).load()

    def test_missing_field(self, tmp_path):
        path = _write(tmp_path, [{"id": 1, "name": "A", "price": "1"}])
        with pytest.raises(SeedError, match="missing 'stock'"):
            JsonSeedLoader(path).load()

    def test_not_an_array(self, tmp_path):
        path = _write(tmp_path, {"id": 1})
        with pytest.raises(SeedError, match="JSON array"):
            JsonSeedLoader(path).load()

    def test_invalid_json(self, tmp_path):
        path = _write(tmp_path, "[")
        with pytest.raises(SeedError, match="not valid JSON"):
            JsonSeedLoader(path).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedError, match="Cannot read"):
            JsonSeedLoader(tmp_path / "absent.json").load()

    @pytest.mark.parametrize("entry", [
        {"id": True, "name": "A", "price": "1", "stock": 1},
        {"id": 1, "name": "A", "price": "1", "stock": False},
        {"id": 1, "name": "A", "price": "1", "stock": 2.5},
    ])
    def test_non_integer_id_or_stock(self, tmp_path, entry):
        path = _write(tmp_path, [entry])
        with pytest.raises(SeedError, match="must be integers"):
            JsonSeedLoader(path).load()

    def test_negative_stock(self, tmp_path):
        path = _write(tmp_path, [{"id": 1, "name": "A", "price": "1", "stock": -1}])
        with pytest.raises(SeedError, match="cannot be negative"):
            JsonSeedLoader(path).load()


class TestBuildStore:

    def test_seed_file_wins(self, tmp_path):
        path = _write(tmp_path, [{"id": 9, "name": "Solo", "price": "1", "stock": 1}])
        store = build_store(seed_file=path, seed="menu")
        assert [p.id for p in store.catalog.list_all()] == [9]
        assert store.cart.is_empty

    def test_builtin(self):
        assert len(build_store(seed="menu").catalog) == 4
