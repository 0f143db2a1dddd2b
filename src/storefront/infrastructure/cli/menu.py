"""Interactive menu for the counter terminal.

Reads a numbered choice and its integer arguments with ``click.prompt`` and
prints one line per outcome. End of input leaves the loop like choice 9.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.store import Store
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    NotInCartError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.cart import AddOutcome, UpdateOutcome

MENU = """
========= E-COMMERCE MENU =========
1. Display Products
2. Add to Cart
3. Remove from Cart
4. Update Cart Quantity
5. View Cart
6. Clear Cart
7. Cart Item Count
8. Checkout
9. Exit"""

EXIT_CHOICE = 9


def display_products(store: Store) -> None:
    products = ListProductsHandler(store).handle()

    click.echo()
    click.echo("--- Available Products ---")
    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 45)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10.2f} {p.stock:>6}")


def add_to_cart(store: Store) -> None:
    product_id = click.prompt("Enter Product ID", type=int)
    qty = click.prompt("Enter Quantity", type=int)

    try:
        outcome = AddToCartHandler(store).handle(product_id, qty)
    except ProductNotFoundError:
        click.echo("Product not found!")
    except InsufficientStockError as exc:
        click.echo("Cannot exceed available stock!" if exc.merge else "Insufficient stock!")
    except ValidationError as exc:
        click.echo(f"{exc}!")
    else:
        if outcome is AddOutcome.ADDED:
            click.echo("Item added to cart.")
        else:
            click.echo("Cart updated successfully.")


def remove_from_cart(store: Store) -> None:
    product_id = click.prompt("Enter Product ID", type=int)

    try:
        RemoveFromCartHandler(store).handle(product_id)
    except NotInCartError:
        click.echo("Item not found in cart.")
    else:
        click.echo("Item removed from cart.")


def update_quantity(store: Store) -> None:
    product_id = click.prompt("Enter Product ID", type=int)
    qty = click.prompt("Enter New Quantity", type=int)

    try:
        outcome = UpdateCartQuantityHandler(store).handle(product_id, qty)
    except NotInCartError:
        click.echo("Item not found in cart.")
    except InsufficientStockError:
        click.echo("Insufficient stock!")
    else:
        if outcome is UpdateOutcome.REMOVED:
            click.echo("Item removed (quantity zero).")
        else:
            click.echo("Quantity updated.")


def view_cart(store: Store) -> None:
    cart = ShowCartHandler(store).handle()
    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo()
    click.echo("--- Shopping Cart ---")
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Cost':>10}")
    click.echo(f"  {'-'*47}")
    for line in cart.items:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10.2f} {line.line_total:>10.2f}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total Amount':<27} {cart.total:>20.2f}")


def clear_cart(store: Store) -> None:
    ClearCartHandler(store).handle()
    click.echo("Cart cleared successfully.")


def item_count(store: Store) -> None:
    click.echo(f"Total items in cart: {ShowCartHandler(store).item_count()}")


def checkout(store: Store) -> None:
    try:
        receipt = CheckoutHandler(store).handle()
    except EmptyCartError:
        click.echo("Cart is empty!")
        return

    click.echo()
    click.echo("--- Checkout Bill ---")
    for line in receipt.items:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} x {line.unit_price:>10.2f}"
            f" = {line.line_total:>10.2f}"
        )
    click.echo(f"Final Amount Payable: {receipt.total:.2f}")
    click.echo("Thank you for shopping!")


ACTIONS = {
    1: display_products,
    2: add_to_cart,
    3: remove_from_cart,
    4: update_quantity,
    5: view_cart,
    6: clear_cart,
    7: item_count,
    8: checkout,
}


def run_menu(store: Store) -> None:
    """Loop until the user picks Exit or input runs out."""
    while True:
        click.echo(MENU)
        try:
            choice = click.prompt("Enter choice", type=int)
            if choice == EXIT_CHOICE:
                return
            action = ACTIONS.get(choice)
            if action is None:
                click.echo("Invalid choice!")
                continue
            action(store)
        except click.Abort:
            click.echo()
            return
