"""CLI commands for browsing the catalog."""

from __future__ import annotations

from decimal import Decimal

import click

from storefront.application.browse_catalog import CatalogBrowser
from storefront.application.order_ledger import ListOwnedItemsHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Category
from storefront.domain.service.catalog_filter import DEFAULT_MAX_PRICE
from storefront.infrastructure.bootstrap import (
    owned_item_repository,
    product_repository,
    semantic_search,
)

RATING_CHOICES = ("0", "3", "4", "4.5", "5")
CATEGORY_CHOICES = ["All"] + [c.value for c in Category]


def _print_products(products) -> None:
    click.echo(f"{'ID':<10} {'Name':<22} {'Category':<16} {'Price':>12} {'Rating':>7}")
    click.echo("-" * 71)
    for p in products:
        click.echo(
            f"{p.id:<10} {p.name:<22} {p.category.value:<16} "
            f"{p.display_price:>12} {p.rating:>7.1f}"
        )


@click.command("list")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    default="All",
    show_default=True,
    help="Only show one category.",
)
@click.option(
    "--max-price",
    type=click.FloatRange(min=0),
    default=float(DEFAULT_MAX_PRICE),
    show_default=True,
    help="Price ceiling (inclusive).",
)
@click.option(
    "--min-rating",
    type=click.Choice(RATING_CHOICES),
    default="0",
    show_default=True,
    help="Rating floor (inclusive).",
)
@click.option("--query", default="", help="Text to look for in names and descriptions.")
@click.option("--ai", is_flag=True, help="Let the AI pick matching products for --query.")
def catalog_list(
    category: str, max_price: float, min_rating: str, query: str, ai: bool
) -> None:
    """List the products that match the given filters."""
    browser = CatalogBrowser(
        product_repo=product_repository(),
        search_adapter=semantic_search() if ai else None,
    )

    try:
        browser.select_category(None if category.lower() == "all" else Category.parse(category))
        browser.set_max_price(Decimal(str(max_price)))
        browser.set_min_rating(float(min_rating))
        browser.set_query(query)
        if ai:
            criteria = browser.run_semantic_search()
            if criteria.semantic_ids is None and query.strip():
                click.echo("AI search unavailable; falling back to text match.", err=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = browser.visible_products()
    if not products:
        click.echo("No products match the current filters.")
        return
    _print_products(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def catalog_show(product_id: str) -> None:
    """Show one product in detail."""
    product = product_repository().get_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    click.echo(f"{product.name}  [{product.id}]")
    click.echo(f"Category: {product.category.value}")
    click.echo(f"Price:    {product.display_price}  ({product.billing_model.value})")
    click.echo(f"Rating:   {product.rating:.1f}")
    if product.description:
        click.echo()
        click.echo(product.description)
    if product.specs:
        click.echo()
        for spec in product.specs:
            click.echo(f"  - {spec}")
    if product.disclaimer:
        click.echo()
        click.echo(f"WARNING: {product.disclaimer}")
    click.echo()
    click.echo(f"[{product.billing_model.call_to_action}]")


@click.command("list")
def owned_list() -> None:
    """List products bought so far."""
    items = ListOwnedItemsHandler(owned_repo=owned_item_repository()).handle()

    if not items:
        click.echo("No owned items yet.")
        return

    click.echo(f"{'ID':<10} {'Name':<22} {'Billing':<14}")
    click.echo("-" * 48)
    for p in items:
        click.echo(f"{p.id:<10} {p.name:<22} {p.billing_model.value:<14}")
