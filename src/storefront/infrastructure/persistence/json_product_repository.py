"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.records import ProductRecord
from storefront.infrastructure.persistence.seed_catalog import SEED_PRODUCTS

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Catalog stored as one JSON array, rewritten on every mutation.

    A missing file is created from the seed catalog.
    """

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(SEED_PRODUCTS if seed is None else seed)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(list(products.values()))

    def delete(self, product_id: str) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(list(products.values()))

    def replace_all(self, products: list[Product]) -> None:
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (ProductRecord.model_validate(item).to_domain() for item in raw)
        return {p.id: p for p in products}

    def _persist(self, products: list[Product]) -> None:
        raw = [ProductRecord.from_domain(p).model_dump(mode="json") for p in products]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[dict]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(seed, indent=2) + "\n", encoding="utf-8"
            )
            logger.info("Seeded catalog with %d products at %s", len(seed), self._file_path)
