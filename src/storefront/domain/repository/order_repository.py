"""Abstract repository for the Order ledger.

The ledger is append-only from the application's point of view; only
``clear()`` (factory reset) and ``replace_all()`` (backup restore) touch
existing entries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Record a completed order."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every recorded order, oldest first."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every order."""

    @abstractmethod
    def replace_all(self, orders: list[Order]) -> None:
        """Overwrite the whole ledger."""
