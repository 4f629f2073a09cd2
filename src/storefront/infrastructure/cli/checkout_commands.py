"""CLI command for buying products."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutCoordinator
from storefront.application.dto import CartItemSpec, OrderDTO
from storefront.application.fill_cart import FillCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.infrastructure.bootstrap import (
    order_repository,
    owned_item_repository,
    payment_provider,
    product_repository,
)


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 's1:2,t1:1' into a CartItemSpec list. A bare id means quantity 1."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            specs.append(CartItemSpec(product_id=pair, quantity=1))
            continue
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    if not specs:
        raise click.BadParameter("Expected at least one 'ProductID:Qty' item.")
    return specs


def print_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status}, paid via {dto.payment_method})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<22} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-' * 49}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<22} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-' * 49}")
    click.echo(f"  {'Total':<22} {'':>5} {'':>10} {dto.total:>10}")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def checkout(customer: str, email: str, items: str) -> None:
    """Put products in a cart and pay for them."""
    specs = _parse_items(items)
    cart = Cart()

    provider = payment_provider()
    try:
        FillCartHandler(product_repo=product_repository(), cart=cart).handle(specs)
        coordinator = CheckoutCoordinator(
            cart=cart,
            order_repo=order_repository(),
            owned_repo=owned_item_repository(),
            payment_provider=provider,
        )
        coordinator.begin()
        coordinator.submit_identification(customer, email)
        click.echo(f"Processing payment of {cart.total()} ...")
        order = coordinator.pay()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        provider.close()

    if order is None:
        raise click.ClickException("Payment was not completed. Your cart was not charged.")

    click.echo("Transaction complete.")
    print_order(OrderDTO.from_order(order))
