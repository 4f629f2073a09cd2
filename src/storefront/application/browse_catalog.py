"""Application service: Browse Catalog use case.

Holds the shopper's filter criteria for one session and recomputes the
visible product list from the catalog on demand. The AI search result is
layered on top of the criteria; when the hosted model fails the search
simply has no effect.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from storefront.domain.exceptions import AssistantUnavailableError
from storefront.domain.model.product import Category, Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.assistant import SemanticSearchAdapter
from storefront.domain.service.catalog_filter import FilterCriteria, filter_products

logger = logging.getLogger(__name__)


class CatalogBrowser:

    def __init__(
        self,
        product_repo: ProductRepository,
        search_adapter: SemanticSearchAdapter | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._search_adapter = search_adapter
        self._criteria = FilterCriteria()
        self._searching = False

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def is_searching(self) -> bool:
        return self._searching

    # --- Criteria updates -----------------------------------------------------

    def select_category(self, category: Category | None) -> None:
        self._criteria = replace(self._criteria, category=category)

    def set_max_price(self, max_price: Decimal | int | str) -> None:
        self._criteria = replace(self._criteria, max_price=Decimal(str(max_price)))

    def set_min_rating(self, min_rating: float) -> None:
        self._criteria = replace(self._criteria, min_rating=float(min_rating))

    def set_query(self, query: str) -> None:
        """Update the free-text query.

        An AI result set that is already active keeps priority until the
        next AI search or a reset.
        """
        self._criteria = replace(self._criteria, query=query)

    def clear_semantic_results(self) -> None:
        self._criteria = self._criteria.with_semantic_ids(None)

    def reset_filters(self) -> None:
        self._criteria = FilterCriteria.reset()

    # --- AI search ------------------------------------------------------------

    def run_semantic_search(self) -> FilterCriteria:
        """Ask the hosted model which products match the current query.

        A blank query clears any AI result. No matches, a missing adapter
        or a failed call all mean "no AI narrowing". Only one search runs
        at a time; a call made while one is outstanding changes nothing.
        """
        if self._searching:
            logger.info("AI search already in progress; ignoring request")
            return self._criteria

        query = self._criteria.query.strip()
        if not query or self._search_adapter is None:
            self.clear_semantic_results()
            return self._criteria

        self._searching = True
        try:
            ids = self._search_adapter.search(query, self._product_repo.list_all())
        except AssistantUnavailableError as exc:
            logger.warning("AI search failed for %r: %s", query, exc)
            ids = []
        finally:
            self._searching = False

        self._criteria = self._criteria.with_semantic_ids(ids or None)
        return self._criteria

    # --- Queries --------------------------------------------------------------

    def visible_products(self) -> list[Product]:
        return filter_products(self._product_repo.list_all(), self._criteria)
