"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories and
the external adapters but keep everything in memory. No file I/O, no
network, no side effects.
"""

from __future__ import annotations

from typing import Sequence

from storefront.domain.exceptions import AssistantUnavailableError
from storefront.domain.model.order import Order
from storefront.domain.model.product import BillingModel, Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.owned_item_repository import OwnedItemRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.assistant import (
    ChatAdapter,
    ChatMessage,
    SemanticSearchAdapter,
)
from storefront.domain.service.payment import (
    PaymentProvider,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
)


def make_product(
    product_id: str = "p1",
    name: str = "Widget",
    price: str = "10.00",
    category: Category = Category.SAAS,
    rating: float = 4.5,
    description: str = "",
    billing_model: BillingModel = BillingModel.ONE_TIME,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        category=category,
        price=Money.of(price),
        description=description,
        rating=rating,
        billing_model=billing_model,
    )


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)

    def replace_all(self, products: list[Product]) -> None:
        self._store = {p.id: p for p in products}


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: list[Order] = list(orders or [])

    def append(self, order: Order) -> None:
        self._orders.append(order)

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def clear(self) -> None:
        self._orders = []

    def replace_all(self, orders: list[Order]) -> None:
        self._orders = list(orders)


class FakeOwnedItemRepository(OwnedItemRepository):

    def __init__(self) -> None:
        self._items: list[Product] = []

    def add_all(self, products: list[Product]) -> None:
        self._items.extend(products)

    def list_all(self) -> list[Product]:
        return list(self._items)

    def clear(self) -> None:
        self._items = []


class FakePaymentProvider(PaymentProvider):
    """Returns a fixed status and records every request it sees."""

    def __init__(
        self,
        status: PaymentStatus = PaymentStatus.SUCCEEDED,
        error: Exception | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.requests: list[PaymentRequest] = []
        self.closed = False

    @property
    def tag(self) -> str:
        return "fake"

    def charge(self, request: PaymentRequest) -> PaymentResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.status == PaymentStatus.SUCCEEDED:
            return PaymentResult(status=self.status, transaction_id="txn_1")
        return PaymentResult.closed("declined")

    def close(self) -> None:
        self.closed = True


class FakeSearchAdapter(SemanticSearchAdapter):

    def __init__(self, ids: list[str] | None = None, fail: bool = False) -> None:
        self.ids = ids or []
        self.fail = fail
        self.queries: list[str] = []

    def search(self, query: str, products: Sequence[Product]) -> list[str]:
        self.queries.append(query)
        if self.fail:
            raise AssistantUnavailableError("model offline")
        return list(self.ids)


class FakeChatAdapter(ChatAdapter):

    def __init__(self, reply_text: str = "Understood.") -> None:
        self.reply_text = reply_text
        self.calls: list[tuple[str, list[ChatMessage], int]] = []

    def reply(
        self,
        message: str,
        history: Sequence[ChatMessage],
        products: Sequence[Product],
    ) -> str:
        self.calls.append((message, list(history), len(products)))
        return self.reply_text
