"""Application service: put catalog products into a cart."""

from __future__ import annotations

from storefront.application.dto import CartItemSpec
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository


class FillCartHandler:
    """Resolve product ids against the catalog and add them to ``cart``.

    All specs are validated before the cart is touched.
    """

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, item_specs: list[CartItemSpec]) -> Cart:
        if not item_specs:
            raise ValidationError("At least one item is required")

        resolved = []
        for spec in item_specs:
            if spec.quantity < 1:
                raise ValidationError(
                    f"Quantity for '{spec.product_id}' must be at least 1"
                )
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{spec.product_id}' not found")
            resolved.append((product, spec.quantity))

        for product, quantity in resolved:
            self._cart.add(product)
            if quantity > 1:
                self._cart.update_quantity(product.id, quantity - 1)
        return self._cart
