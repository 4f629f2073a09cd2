"""Application service: Checkout use case.

Orchestrates the checkout state machine, the cart, the payment provider
and the order ledger. This is the only place that turns a cart into an
order.

Flow:
1. ``begin()`` opens a session, unless the cart is empty.
2. ``submit_identification()`` records the customer and moves to payment.
3. ``pay()`` charges the cart total. On success the order is appended to
   the ledger, the purchased products are recorded as owned, the cart is
   cleared and the session is confirmed. Otherwise nothing changes.
"""

from __future__ import annotations

import logging
import uuid

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.checkout import CheckoutSession, CheckoutStep
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.owned_item_repository import OwnedItemRepository
from storefront.domain.service.payment import PaymentProvider, PaymentRequest

logger = logging.getLogger(__name__)


class CheckoutCoordinator:

    def __init__(
        self,
        cart: Cart,
        order_repo: OrderRepository,
        owned_repo: OwnedItemRepository,
        payment_provider: PaymentProvider,
    ) -> None:
        self._cart = cart
        self._order_repo = order_repo
        self._owned_repo = owned_repo
        self._payment_provider = payment_provider
        self._session: CheckoutSession | None = None

    @property
    def session(self) -> CheckoutSession | None:
        return self._session

    @property
    def step(self) -> CheckoutStep | None:
        return self._session.step if self._session else None

    # --- Flow -----------------------------------------------------------------

    def begin(self) -> bool:
        """Open (or restart) checkout. Refused when the cart is empty."""
        if self._cart.is_empty:
            logger.info("Checkout refused: cart is empty")
            return False
        if self._session is not None and self._session.payment_in_flight:
            logger.info("Checkout restart refused: payment outstanding")
            return False
        self._cart.is_open = False
        self._session = CheckoutSession()
        return True

    def submit_identification(self, customer_name: str, customer_email: str) -> None:
        self._active_session().identify(customer_name, customer_email)

    def back(self) -> None:
        self._active_session().back()

    def abandon(self) -> None:
        """Leave checkout; the cart keeps its contents."""
        if self._session is not None and self._session.payment_in_flight:
            logger.info("Abandon ignored: payment outstanding")
            return
        self._session = None

    def pay(self) -> Order | None:
        """Charge the cart total through the configured provider.

        Returns the new order on success, or None when the provider
        reports that no payment was made.
        """
        session = self._active_session()
        if self._cart.is_empty:
            raise ValidationError("Cart is empty")
        session.start_payment()

        request = PaymentRequest(
            reference=uuid.uuid4().hex,
            amount=self._cart.total(),
            customer_name=session.customer_name,
            customer_email=session.customer_email,
        )
        logger.info(
            "Charging %s via %s (ref %s)",
            request.amount, self._payment_provider.tag, request.reference,
        )

        try:
            result = self._payment_provider.charge(request)
        except Exception:
            session.payment_failed()
            raise

        if not result.succeeded:
            logger.warning(
                "Payment %s not completed: %s", request.reference, result.message or "closed"
            )
            session.payment_failed()
            return None

        try:
            order = Order.create(
                customer_name=session.customer_name,
                customer_email=session.customer_email,
                lines=self._cart.lines,
                payment_method=self._payment_provider.tag,
            )
            self._order_repo.append(order)
            self._owned_repo.add_all([line.product for line in order.lines])
            self._cart.clear()
        except Exception:
            logger.exception(
                "Payment %s succeeded but recording the order failed", request.reference
            )
            session.payment_failed()
            raise
        session.confirm(order.id)

        logger.info("Order %s completed, total %s", order.id, order.total)
        return order

    # --- Internal helpers -----------------------------------------------------

    def _active_session(self) -> CheckoutSession:
        if self._session is None:
            raise ValidationError("Checkout has not been started")
        return self._session
