"""Abstract repository for products the customer has purchased."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class OwnedItemRepository(ABC):

    @abstractmethod
    def add_all(self, products: list[Product]) -> None:
        """Append purchased product snapshots."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every owned product, in purchase order."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every owned product."""
