"""JSON-file-backed implementation of OwnedItemRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.repository.owned_item_repository import OwnedItemRepository
from storefront.infrastructure.persistence.records import ProductRecord


class JsonOwnedItemRepository(OwnedItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def add_all(self, products: list[Product]) -> None:
        records = self._load_raw()
        records.extend(ProductRecord.from_domain(p).model_dump(mode="json") for p in products)
        self._persist_raw(records)

    def list_all(self) -> list[Product]:
        return [ProductRecord.model_validate(raw).to_domain() for raw in self._load_raw()]

    def clear(self) -> None:
        self._persist_raw([])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
