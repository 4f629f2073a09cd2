"""Cart aggregate: the customer's in-progress selection.

The cart lives only for the session. Lines hold product snapshots, so an
admin price edit after ``add()`` never changes what is already in the cart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    """A product snapshot plus a quantity that never drops below 1."""

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError("Cart quantity must be at least 1")

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """Line items keyed by product id, in the order they were first added.

    Unknown ids passed to ``update_quantity``/``remove`` are ignored;
    they are logged so a caller bug is still visible in debug output.
    """

    lines: list[CartLine] = field(default_factory=list)
    is_open: bool = False

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> CartLine:
        line = self._find(product.id)
        if line is not None:
            line.quantity += 1
        else:
            line = CartLine(product=product.snapshot(), quantity=1)
            self.lines.append(line)
        self.is_open = True
        return line

    def update_quantity(self, product_id: str, delta: int) -> None:
        line = self._find(product_id)
        if line is None:
            logger.debug("update_quantity ignored: %s not in cart", product_id)
            return
        line.quantity = max(1, line.quantity + delta)

    def remove(self, product_id: str) -> None:
        line = self._find(product_id)
        if line is None:
            logger.debug("remove ignored: %s not in cart", product_id)
            return
        self.lines.remove(line)

    def clear(self) -> None:
        self.lines.clear()

    # --- Queries --------------------------------------------------------------

    def total(self) -> Money:
        if not self.lines:
            return Money.zero()
        result = self.lines[0].line_total
        for line in self.lines[1:]:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def get(self, product_id: str) -> CartLine | None:
        return self._find(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
