"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single purchased line as displayed to the user."""

    product_id: str
    product_name: str
    billing_model: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed to the user."""

    id: str
    customer_name: str
    customer_email: str
    status: str
    payment_method: str
    items: list[OrderLineDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            status=order.status.value,
            payment_method=order.payment_method,
            items=[
                OrderLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    billing_model=line.product.billing_model.value,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class LedgerSummaryDTO:
    """Output: the admin console's view of the order ledger."""

    order_count: int
    revenue: str
    orders: list[OrderDTO]
