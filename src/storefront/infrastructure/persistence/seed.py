"""Built-in catalog seeds and the JSON seed-file reader.

State is never written back; a seed file is read once at startup.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import DomainException, SeedError
from storefront.domain.model.catalog import Catalog, SeedRow

# The web shop's twelve products (ids line up with the storefront page).
WEB_SEED: tuple[SeedRow, ...] = (
    (1, "Laptop", "999.99", 5),
    (2, "Smartphone", "699.99", 10),
    (3, "Headphones", "199.99", 15),
    (4, "Camera", "799.99", 7),
    (5, "Watch", "299.99", 12),
    (6, "Keyboard", "149.99", 20),
    (7, "Mouse", "49.99", 30),
    (8, "Monitor", "399.99", 6),
    (9, "Tablet", "549.99", 8),
    (10, "Speakers", "179.99", 14),
    (11, "Webcam", "89.99", 25),
    (12, "Microphone", "129.99", 18),
)

# The counter menu's catalog.
MENU_SEED: tuple[SeedRow, ...] = (
    (101, "Laptop", "50000", 5),
    (102, "Phone", "20000", 10),
    (103, "Headphones", "2000", 15),
    (104, "Keyboard", "1500", 20),
)

BUILTIN_SEEDS: dict[str, tuple[SeedRow, ...]] = {
    "web": WEB_SEED,
    "menu": MENU_SEED,
}


class JsonSeedLoader:
    """Reads ``[{"id", "name", "price", "stock"}, ...]`` from a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Catalog:
        try:
            return Catalog.from_seed(self._rows())
        except SeedError:
            raise
        except DomainException as exc:
            raise SeedError(f"Invalid seed file {self._file_path}: {exc}") from exc

    # --- Parsing helpers ------------------------------------------------------

    def _rows(self) -> list[SeedRow]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SeedError(f"Cannot read seed file {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise SeedError(f"Seed file {self._file_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise SeedError(f"Seed file {self._file_path} must contain a JSON array")
        return [self._to_row(i, item) for i, item in enumerate(raw)]

    def _to_row(self, index: int, item: object) -> SeedRow:
        if not isinstance(item, dict):
            raise SeedError(f"Seed entry #{index} must be an object")
        try:
            pid, name, price, stock = item["id"], item["name"], item["price"], item["stock"]
        except KeyError as exc:
            raise SeedError(f"Seed entry #{index} is missing {exc.args[0]!r}") from exc
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (pid, stock)):
            raise SeedError(f"Seed entry #{index}: 'id' and 'stock' must be integers")
        return (pid, str(name), str(price), stock)


def builtin_catalog(name: str = "web") -> Catalog:
    try:
        seed = BUILTIN_SEEDS[name]
    except KeyError:
        raise SeedError(
            f"Unknown built-in seed {name!r} (choose from {', '.join(BUILTIN_SEEDS)})"
        ) from None
    return Catalog.from_seed(seed)
