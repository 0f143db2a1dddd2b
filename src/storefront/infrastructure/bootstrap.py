"""Composition root — builds the one Store the adapters share.

This is the only place that knows where the catalog comes from.
Adapters receive the Store by reference; nothing holds it globally.
"""

from __future__ import annotations

from pathlib import Path

from storefront.application.store import Store
from storefront.utils.log import get_logger
from storefront.infrastructure.persistence.seed import JsonSeedLoader, builtin_catalog

logger = get_logger(__name__)


def build_store(seed_file: Path | None = None, seed: str = "web") -> Store:
    """A seed file, when given, wins over the named built-in seed."""
    if seed_file is not None:
        catalog = JsonSeedLoader(seed_file).load()
        logger.info("Loaded %s products from %s", len(catalog), seed_file)
    else:
        catalog = builtin_catalog(seed)
        logger.info("Loaded %s products from built-in seed %r", len(catalog), seed)
    return Store(catalog)
