"""CLI commands for the admin console: catalog edits, ledger and backups."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.admin_access import AdminGate
from storefront.application.manage_products import (
    AddProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from storefront.application.order_ledger import ListOrdersHandler, ResetLedgerHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import BillingModel, Category
from storefront.infrastructure.bootstrap import (
    order_repository,
    owned_item_repository,
    product_repository,
    settings,
)
from storefront.infrastructure.persistence.backup import (
    ExportBackupHandler,
    ImportBackupHandler,
)

CATEGORY_CHOICES = [c.value for c in Category]
BILLING_CHOICES = [b.value for b in BillingModel]


def _split_specs(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [s.strip() for s in raw.split(",") if s.strip()]


@click.group("admin")
@click.option(
    "--passcode",
    prompt=True,
    hide_input=True,
    help="Admin passcode.",
)
def admin(passcode: str) -> None:
    """Admin console (passcode protected)."""
    try:
        AdminGate(settings().admin_passcode).verify(passcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@admin.group("product")
def admin_product() -> None:
    """Add, edit and delete catalog products."""


@admin.group("orders")
def admin_orders() -> None:
    """Inspect or wipe the order ledger."""


@admin.group("backup")
def admin_backup() -> None:
    """Export or restore the catalog and ledger."""


# --- Products -----------------------------------------------------------------


@admin_product.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 49.00).")
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Catalog category.",
)
@click.option("--description", default="", help="Description text.")
@click.option("--rating", type=float, default=0.0, show_default=True, help="Rating 0-5.")
@click.option(
    "--billing",
    type=click.Choice(BILLING_CHOICES, case_sensitive=False),
    default=BillingModel.ONE_TIME.value,
    show_default=True,
    help="Billing model.",
)
@click.option("--specs", default=None, help="Comma-separated feature list.")
@click.option("--image", default="", help="Image URL.")
@click.option("--disclaimer", default=None, help="Risk disclaimer text.")
@click.option("--id", "product_id", default=None, help="Explicit product ID.")
def product_add(
    name: str,
    price: str,
    category: str,
    description: str,
    rating: float,
    billing: str,
    specs: str | None,
    image: str,
    disclaimer: str | None,
    product_id: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            description=description,
            rating=rating,
            billing_model=billing,
            specs=_split_specs(specs),
            image=image,
            disclaimer=disclaimer,
            product_id=product_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.display_price}")


@admin_product.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    default=None,
    help="New category.",
)
@click.option("--rating", type=float, default=None, help="New rating 0-5.")
@click.option(
    "--billing",
    type=click.Choice(BILLING_CHOICES, case_sensitive=False),
    default=None,
    help="New billing model.",
)
@click.option("--specs", default=None, help="Replacement comma-separated feature list.")
@click.option("--image", default=None, help="New image URL.")
@click.option("--disclaimer", default=None, help="New disclaimer ('' to remove).")
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    description: str | None,
    category: str | None,
    rating: float | None,
    billing: str | None,
    specs: str | None,
    image: str | None,
    disclaimer: str | None,
) -> None:
    """Edit a product. Only the given fields change."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            name=name,
            description=description,
            category=category,
            rating=rating,
            billing_model=billing,
            specs=_split_specs(specs),
            image=image,
            disclaimer=disclaimer,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated ({product.display_price})")


@admin_product.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog. Past orders keep their copy."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


# --- Orders -------------------------------------------------------------------


@admin_orders.command("list")
def orders_list() -> None:
    """Show every order and the total revenue."""
    summary = ListOrdersHandler(order_repo=order_repository()).handle()

    click.echo(f"Orders: {summary.order_count}   Revenue: {summary.revenue}")
    if not summary.orders:
        click.echo("No orders yet.")
        return

    click.echo()
    click.echo(f"{'Order':<34} {'Customer':<20} {'Items':>5} {'Total':>12}  {'Placed'}")
    click.echo("-" * 94)
    for dto in summary.orders:
        item_count = sum(item.quantity for item in dto.items)
        click.echo(
            f"{dto.id:<34} {dto.customer_name:<20} {item_count:>5} "
            f"{dto.total:>12}  {dto.created_at}"
        )


@admin_orders.command("reset")
@click.option("--yes", "confirmed", is_flag=True, help="Skip the confirmation prompt.")
def orders_reset(confirmed: bool) -> None:
    """Factory reset: delete every order and owned item."""
    if not confirmed:
        confirmed = click.confirm(
            "This permanently deletes all orders and owned items. Continue?",
            default=False,
        )

    handler = ResetLedgerHandler(
        order_repo=order_repository(),
        owned_repo=owned_item_repository(),
    )

    try:
        dropped = handler.handle(confirmed=confirmed)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ledger reset: {dropped} order(s) removed")


# --- Backup -------------------------------------------------------------------


@admin_backup.command("export")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to write. Prints to stdout when omitted.",
)
def backup_export(output: Path | None) -> None:
    """Export the catalog and order ledger as JSON."""
    handler = ExportBackupHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )
    document = handler.handle()

    if output is None:
        click.echo(document)
        return
    output.write_text(document + "\n", encoding="utf-8")
    click.echo(f"Backup written to {output}")


@admin_backup.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def backup_import(backup_file: Path) -> None:
    """Restore the catalog and/or ledger from a backup file."""
    handler = ImportBackupHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )

    try:
        summary = handler.handle(backup_file.read_bytes())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    restored = []
    if summary.products is not None:
        restored.append(f"{summary.products} product(s)")
    if summary.orders is not None:
        restored.append(f"{summary.orders} order(s)")
    click.echo(f"Restored {' and '.join(restored)}")
