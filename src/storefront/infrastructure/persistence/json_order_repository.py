"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.records import OrderRecord


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def append(self, order: Order) -> None:
        records = self._load_raw()
        records.append(self._to_raw(order))
        self._persist_raw(records)

    def list_all(self) -> list[Order]:
        return [OrderRecord.model_validate(raw).to_domain() for raw in self._load_raw()]

    def clear(self) -> None:
        self._persist_raw([])

    def replace_all(self, orders: list[Order]) -> None:
        self._persist_raw([self._to_raw(o) for o in orders])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return OrderRecord.from_domain(order).model_dump(mode="json")

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
