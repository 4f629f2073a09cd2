"""Domain service: catalog filtering.

Turns the full catalog plus the shopper's current criteria into the list
that should be displayed. The steps run in a fixed order and each one only
narrows the working set, so the result is always a subset of the catalog,
in catalog order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable

from storefront.domain.model.product import Category, Product

DEFAULT_MAX_PRICE = Decimal("5000")
DEFAULT_MIN_RATING = 0.0


@dataclass(frozen=True)
class FilterCriteria:
    """Everything the shopper has chosen to narrow the catalog.

    ``category=None`` means all categories. ``semantic_ids`` is the id set
    returned by the AI search; ``None`` means no AI search is active.
    """

    category: Category | None = None
    max_price: Decimal = DEFAULT_MAX_PRICE
    min_rating: float = DEFAULT_MIN_RATING
    query: str = ""
    semantic_ids: frozenset[str] | None = None

    @staticmethod
    def reset() -> FilterCriteria:
        """All defaults at once, so no intermediate state is ever observable."""
        return FilterCriteria()

    def with_semantic_ids(self, ids: Iterable[str] | None) -> FilterCriteria:
        return replace(self, semantic_ids=None if ids is None else frozenset(ids))

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria()


def filter_products(
    products: Iterable[Product], criteria: FilterCriteria
) -> list[Product]:
    """Return the visible products for ``criteria``.

    Steps:
    1. Category, unless all categories are selected.
    2. Price ceiling and rating floor, both inclusive.
    3. If an AI result set is present, membership in it. This replaces
       the free-text step entirely.
    4. Otherwise, if there is a query, case-insensitive substring match on
       name or description.
    """
    result = list(products)

    if criteria.category is not None:
        result = [p for p in result if p.category == criteria.category]

    result = [
        p for p in result
        if p.price.amount <= criteria.max_price and p.rating >= criteria.min_rating
    ]

    if criteria.semantic_ids is not None:
        result = [p for p in result if p.id in criteria.semantic_ids]
    elif criteria.query:
        result = [p for p in result if p.matches_text(criteria.query)]

    return result
