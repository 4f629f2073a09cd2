"""Application services: Order ledger queries and factory reset."""

from __future__ import annotations

import logging

from storefront.application.dto import LedgerSummaryDTO, OrderDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.owned_item_repository import OwnedItemRepository

logger = logging.getLogger(__name__)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> LedgerSummaryDTO:
        orders = self._order_repo.list_all()
        revenue = Money.zero()
        for order in orders:
            revenue = revenue + order.total
        return LedgerSummaryDTO(
            order_count=len(orders),
            revenue=str(revenue),
            orders=[OrderDTO.from_order(o) for o in orders],
        )


class ResetLedgerHandler:
    """Wipe every order and owned item. Irreversible."""

    def __init__(
        self,
        order_repo: OrderRepository,
        owned_repo: OwnedItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._owned_repo = owned_repo

    def handle(self, confirmed: bool) -> int:
        """Clear the ledger and return how many orders were dropped."""
        if not confirmed:
            raise ValidationError("Factory reset must be explicitly confirmed")
        dropped = len(self._order_repo.list_all())
        self._order_repo.clear()
        self._owned_repo.clear()
        logger.warning("Factory reset: %d orders removed", dropped)
        return dropped


class ListOwnedItemsHandler:

    def __init__(self, owned_repo: OwnedItemRepository) -> None:
        self._owned_repo = owned_repo

    def handle(self) -> list[Product]:
        return self._owned_repo.list_all()
