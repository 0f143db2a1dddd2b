"""HTTP adapter — FastAPI routes over the Store.

Every route maps to one use-case handler and answers with JSON. Errors are
always ``{"error": "<message>"}``; the status code tells the error kind.

Route functions are plain ``def``, so FastAPI runs them on its worker
thread pool. Concurrent requests are serialised by the Store lock.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.store import Store
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import (
    DomainException,
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
)
from storefront.infrastructure.http.display import display_for
from storefront.utils.log import get_logger

logger = get_logger(__name__)


class BadRequestError(Exception):
    """A query parameter was missing or not an integer."""


def _status_for(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, (InsufficientStockError, EmptyCartError)):
        return 409
    return 400


def _money(value: Decimal) -> float:
    return float(value)


def _query_int(request: Request, name: str, default: int | None = None) -> int:
    raw = request.query_params.get(name)
    if raw is None or raw == "":
        if default is None:
            raise BadRequestError(f"Missing '{name}' parameter")
        return default
    try:
        return int(raw)
    except ValueError:
        raise BadRequestError(f"Invalid '{name}' parameter: {raw!r}") from None


def get_store(request: Request) -> Store:
    return request.app.state.store


def create_app(store: Store) -> FastAPI:
    app = FastAPI(title="Storefront", version="1.0.0")
    app.state.store = store

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException) -> JSONResponse:
        return JSONResponse(status_code=_status_for(exc), content={"error": str(exc)})

    @app.exception_handler(BadRequestError)
    async def bad_request(request: Request, exc: BadRequestError) -> JSONResponse:
        logger.warning("Bad request %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/products")
    def list_products(store: Store = Depends(get_store)):
        products = ListProductsHandler(store).handle()
        return [
            {
                "id": p.id,
                "name": p.name,
                "price": _money(p.price),
                "stock": p.stock,
                "emoji": display_for(p.id).emoji,
                "category": display_for(p.id).category,
            }
            for p in products
        ]

    @app.get("/add")
    def add(request: Request, store: Store = Depends(get_store)):
        product_id = _query_int(request, "id")
        qty = _query_int(request, "qty", default=1)
        outcome = AddToCartHandler(store).handle(product_id, qty)
        return {"status": outcome.value}

    @app.get("/update")
    def update(request: Request, store: Store = Depends(get_store)):
        product_id = _query_int(request, "id")
        qty = _query_int(request, "qty")
        outcome = UpdateCartQuantityHandler(store).handle(product_id, qty)
        return {"status": outcome.value}

    @app.get("/remove")
    def remove(request: Request, store: Store = Depends(get_store)):
        RemoveFromCartHandler(store).handle(_query_int(request, "id"))
        return {"status": "removed"}

    @app.get("/clear")
    def clear(store: Store = Depends(get_store)):
        ClearCartHandler(store).handle()
        return {"status": "cleared"}

    @app.get("/cart")
    def cart(store: Store = Depends(get_store)):
        dto = ShowCartHandler(store).handle()
        return {
            "items": [
                {
                    "id": line.product_id,
                    "name": line.product_name,
                    "price": _money(line.unit_price),
                    "quantity": line.quantity,
                }
                for line in dto.items
            ],
            "total": _money(dto.total),
            "count": dto.item_count,
        }

    @app.get("/checkout")
    def checkout(store: Store = Depends(get_store)):
        receipt = CheckoutHandler(store).handle()
        return {"status": "checked_out", "total": _money(receipt.total)}

    return app
