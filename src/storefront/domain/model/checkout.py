"""Checkout session: the state machine behind the checkout flow.

    IDENTIFICATION --identify()--> PAYMENT --confirm()--> CONFIRMED
                   <----back()----

The session only tracks state. Talking to the payment provider, writing
the order and clearing the cart is orchestrated by the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import CheckoutInProgressError, ValidationError


class CheckoutStep(Enum):
    IDENTIFICATION = "IDENTIFICATION"
    PAYMENT = "PAYMENT"
    CONFIRMED = "CONFIRMED"


@dataclass
class CheckoutSession:
    step: CheckoutStep = CheckoutStep.IDENTIFICATION
    customer_name: str = ""
    customer_email: str = ""
    payment_in_flight: bool = False
    order_id: str | None = None

    # --- State transitions ----------------------------------------------------

    def identify(self, customer_name: str, customer_email: str) -> None:
        """Transition IDENTIFICATION -> PAYMENT.

        The email is only checked for presence, not format.
        """
        self._require(CheckoutStep.IDENTIFICATION)
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not customer_email or not customer_email.strip():
            raise ValidationError("Customer email is required")
        self.customer_name = customer_name.strip()
        self.customer_email = customer_email.strip()
        self.step = CheckoutStep.PAYMENT

    def back(self) -> None:
        """Transition PAYMENT -> IDENTIFICATION to edit customer details."""
        self._require(CheckoutStep.PAYMENT)
        self._refuse_if_in_flight()
        self.step = CheckoutStep.IDENTIFICATION

    def start_payment(self) -> None:
        """Mark a payment as outstanding; a second submit is refused."""
        self._require(CheckoutStep.PAYMENT)
        self._refuse_if_in_flight()
        self.payment_in_flight = True

    def payment_failed(self) -> None:
        """Provider declined or the customer closed the dialog: stay in PAYMENT."""
        self.payment_in_flight = False

    def confirm(self, order_id: str) -> None:
        """Transition PAYMENT -> CONFIRMED after a successful payment."""
        self._require(CheckoutStep.PAYMENT)
        if not self.payment_in_flight:
            raise ValidationError("No payment is outstanding for this checkout")
        self.payment_in_flight = False
        self.order_id = order_id
        self.step = CheckoutStep.CONFIRMED

    @property
    def is_complete(self) -> bool:
        return self.step == CheckoutStep.CONFIRMED

    # --- Internal helpers -----------------------------------------------------

    def _require(self, expected: CheckoutStep) -> None:
        if self.step != expected:
            raise ValidationError(
                f"Cannot do that at checkout step {self.step.value}, "
                f"expected {expected.value}"
            )

    def _refuse_if_in_flight(self) -> None:
        if self.payment_in_flight:
            raise CheckoutInProgressError("A payment is already being processed")
