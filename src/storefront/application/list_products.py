"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.application.store import Store


class ListProductsHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> list[ProductDTO]:
        with self._store.transaction() as store:
            return [product_to_dto(p) for p in store.catalog.list_all()]
