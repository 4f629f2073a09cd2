"""Persisted record shapes for products and orders.

Every JSON file and backup document goes through these pydantic models, so
malformed data is rejected in one place before it reaches the domain.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import BillingModel, Category, Product
from storefront.domain.model.value_objects import Money


class ProductRecord(BaseModel):
    id: str
    name: str
    category: str
    price: Decimal = Field(ge=0)
    currency: str = "USD"
    description: str = ""
    image: str = ""
    rating: float = Field(default=0.0, ge=0, le=5)
    specs: list[str] = Field(default_factory=list)
    billing_model: str = BillingModel.ONE_TIME.value
    disclaimer: str | None = None

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            category=Category.parse(self.category),
            price=Money(self.price, self.currency),
            description=self.description,
            image=self.image,
            rating=self.rating,
            specs=list(self.specs),
            billing_model=BillingModel.parse(self.billing_model),
            disclaimer=self.disclaimer,
        )

    @staticmethod
    def from_domain(product: Product) -> ProductRecord:
        return ProductRecord(
            id=product.id,
            name=product.name,
            category=product.category.value,
            price=product.price.amount,
            currency=product.price.currency,
            description=product.description,
            image=product.image,
            rating=product.rating,
            specs=list(product.specs),
            billing_model=product.billing_model.value,
            disclaimer=product.disclaimer,
        )


class CartLineRecord(BaseModel):
    product: ProductRecord
    quantity: int = Field(ge=1)


class OrderRecord(BaseModel):
    id: str
    customer_name: str
    customer_email: str
    lines: list[CartLineRecord]
    total: Decimal = Field(ge=0)
    currency: str = "USD"
    payment_method: str
    status: str = OrderStatus.COMPLETED.value
    created_at: datetime

    def to_domain(self) -> Order:
        # The stored total is authoritative; it is never re-derived.
        return Order(
            id=self.id,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            lines=tuple(
                CartLine(product=line.product.to_domain(), quantity=line.quantity)
                for line in self.lines
            ),
            total=Money(self.total, self.currency),
            payment_method=self.payment_method,
            status=OrderStatus(self.status),
            created_at=self.created_at,
        )

    @staticmethod
    def from_domain(order: Order) -> OrderRecord:
        return OrderRecord(
            id=order.id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            lines=[
                CartLineRecord(
                    product=ProductRecord.from_domain(line.product),
                    quantity=line.quantity,
                )
                for line in order.lines
            ],
            total=order.total.amount,
            currency=order.total.currency,
            payment_method=order.payment_method,
            status=order.status.value,
            created_at=order.created_at,
        )


class BackupDocument(BaseModel):
    """Export/import envelope. Either collection may be absent on import."""

    products: list[ProductRecord] | None = None
    orders: list[OrderRecord] | None = None
    timestamp: str | None = None
    version: str | None = None
