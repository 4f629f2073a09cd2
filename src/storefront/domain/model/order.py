"""Order aggregate: the durable record of one successful checkout.

An order is created exactly once per successful payment and is never
modified afterwards. Its total is fixed at creation time.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


@dataclass(frozen=True)
class Order:
    """Aggregate root for completed purchases.

    Use the ``Order.create()`` factory for new orders. It validates the
    customer details, copies the lines and computes the total once. The
    ``__init__`` stays simple so the repository can reconstitute persisted
    orders (including their stored total) without re-deriving anything.
    """

    id: str
    customer_name: str
    customer_email: str
    lines: tuple[CartLine, ...]
    total: Money
    payment_method: str
    status: OrderStatus = OrderStatus.COMPLETED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_email: str,
        lines: list[CartLine],
        payment_method: str,
    ) -> Order:
        """Snapshot the given cart lines into a completed order."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not customer_email or not customer_email.strip():
            raise ValidationError("Customer email is required")
        if not lines:
            raise ValidationError("Order must contain at least one item")

        snapshot = tuple(
            CartLine(product=line.product.snapshot(), quantity=line.quantity)
            for line in lines
        )
        total = snapshot[0].line_total
        for line in snapshot[1:]:
            total = total + line.line_total

        return Order(
            id=uuid.uuid4().hex,
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip(),
            lines=snapshot,
            total=total,
            payment_method=payment_method,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
