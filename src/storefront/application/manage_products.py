"""Application services: admin catalog maintenance (add, update, delete)."""

from __future__ import annotations

import logging
import re

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import (
    MAX_RATING,
    MIN_RATING,
    BillingModel,
    Category,
    Product,
)
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "product"


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        description: str = "",
        rating: float = 0.0,
        billing_model: str = BillingModel.ONE_TIME.value,
        specs: list[str] | None = None,
        image: str = "",
        disclaimer: str | None = None,
        product_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        Without an explicit ID one is derived from the name, suffixed with
        a counter if that ID is already taken.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if product_id is not None:
            if self._product_repo.get_by_id(product_id) is not None:
                raise ValidationError(f"Product ID '{product_id}' already exists")
        else:
            product_id = self._next_id(name)

        product = Product(
            id=product_id,
            name=name.strip(),
            category=Category.parse(category),
            price=Money.of(price),
            description=description,
            image=image,
            rating=rating,
            specs=list(specs or []),
            billing_model=BillingModel.parse(billing_model),
            disclaimer=disclaimer or None,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added", product.id, product.name)
        return product

    def _next_id(self, name: str) -> str:
        base = _slug(name)
        candidate, n = base, 2
        while self._product_repo.get_by_id(candidate) is not None:
            candidate = f"{base}-{n}"
            n += 1
        return candidate


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        rating: float | None = None,
        billing_model: str | None = None,
        specs: list[str] | None = None,
        image: str | None = None,
        disclaimer: str | None = None,
    ) -> Product:
        """Edit a product.

        This does NOT affect carts or existing orders; they captured a
        snapshot of the product.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Parse everything before touching the aggregate.
        price = Money.of(new_price) if new_price is not None else None
        parsed_category = Category.parse(category) if category is not None else None
        parsed_billing = (
            BillingModel.parse(billing_model) if billing_model is not None else None
        )
        if name is not None and not name.strip():
            raise ValidationError("Product name is required")
        if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
            )

        if price is not None:
            product.update_price(price)
        product.update_details(
            name=name,
            description=description,
            category=parsed_category,
            rating=rating,
            image=image,
            specs=specs,
            billing_model=parsed_billing,
            disclaimer=disclaimer,
        )
        self._product_repo.save(product)
        logger.info("Product %s updated", product_id)
        return product


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._product_repo.delete(product_id)
        logger.info("Product %s deleted", product_id)
