import click

from storefront.infrastructure.cli.admin_commands import admin
from storefront.infrastructure.cli.catalog_commands import (
    catalog_list,
    catalog_show,
    owned_list,
)
from storefront.infrastructure.cli.chat_commands import chat
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Lumina Global storefront"""
    try:
        cfg = load_settings()
    except ValueError as exc:
        raise click.ClickException(f"Configuration error: {exc}")
    setup_logging(cfg.log_level)


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def owned() -> None:
    """Products you have bought."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_show)
owned.add_command(owned_list)
cli.add_command(checkout)
cli.add_command(chat)
cli.add_command(admin)
