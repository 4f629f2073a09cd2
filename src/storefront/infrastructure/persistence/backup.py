"""Backup export and restore for the catalog and the order ledger.

The document shape is::

    {"products": [...], "orders": [...], "timestamp": "<ISO-8601>", "version": "1.0"}

Import is all-or-nothing: every record is decoded into domain objects
before either collection is replaced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import pydantic

from storefront.domain.exceptions import DomainException, ValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.records import (
    BackupDocument,
    OrderRecord,
    ProductRecord,
)

logger = logging.getLogger(__name__)

BACKUP_VERSION = "1.0"


@dataclass(frozen=True)
class RestoreSummary:
    products: int | None
    orders: int | None


class ExportBackupHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self) -> str:
        """Return the full catalog and ledger as a JSON document."""
        document = BackupDocument(
            products=[ProductRecord.from_domain(p) for p in self._product_repo.list_all()],
            orders=[OrderRecord.from_domain(o) for o in self._order_repo.list_all()],
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=BACKUP_VERSION,
        )
        logger.info(
            "Exported backup: %d products, %d orders",
            len(document.products), len(document.orders),
        )
        return document.model_dump_json(indent=2)


class ImportBackupHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, raw: str | bytes) -> RestoreSummary:
        """Replace whichever collections the document carries.

        Raises ValidationError when the document is not a JSON object, carries
        neither collection, or contains a record that does not decode. Nothing
        is written in that case.
        """
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValidationError("Invalid backup file: not UTF-8 text") from exc

        try:
            document = BackupDocument.model_validate_json(raw)
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid backup file: {exc.error_count()} error(s)") from exc

        if document.products is None and document.orders is None:
            raise ValidationError("Invalid backup file: no products or orders found")

        try:
            products = (
                [r.to_domain() for r in document.products]
                if document.products is not None else None
            )
            orders = (
                [r.to_domain() for r in document.orders]
                if document.orders is not None else None
            )
        except (DomainException, ValueError) as exc:
            raise ValidationError(f"Invalid backup file: {exc}") from exc

        if products is not None:
            self._product_repo.replace_all(products)
        if orders is not None:
            self._order_repo.replace_all(orders)

        logger.warning(
            "Backup restored (version %s): products=%s orders=%s",
            document.version or "unknown",
            len(products) if products is not None else "kept",
            len(orders) if orders is not None else "kept",
        )
        return RestoreSummary(
            products=len(products) if products is not None else None,
            orders=len(orders) if orders is not None else None,
        )
