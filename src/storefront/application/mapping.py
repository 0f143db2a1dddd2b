"""Domain -> DTO mapping shared by the query and command handlers."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import CartDTO, CartLineDTO, ProductDTO
from storefront.domain.model.cart import Cart, CartEntry
from storefront.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.unit_price.rounded(),
        stock=product.stock,
    )


def lines_to_dto(entries: Iterable[CartEntry]) -> list[CartLineDTO]:
    return [
        CartLineDTO(
            product_id=entry.product_id,
            product_name=entry.product_name,
            unit_price=entry.unit_price.rounded(),
            quantity=entry.quantity,
            line_total=entry.line_total.rounded(),
        )
        for entry in entries
    ]


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=lines_to_dto(cart.list_entries()),
        total=cart.snapshot_total().rounded(),
        item_count=cart.total_item_count(),
    )
