"""Unit tests for the checkout state machine."""

import pytest

from storefront.domain.exceptions import CheckoutInProgressError, ValidationError
from storefront.domain.model.checkout import CheckoutSession, CheckoutStep


def _at_payment() -> CheckoutSession:
    session = CheckoutSession()
    session.identify("Alice", "alice@example.com")
    return session


class TestIdentification:

    def test_starts_at_identification(self):
        assert CheckoutSession().step == CheckoutStep.IDENTIFICATION

    def test_identify_moves_to_payment(self):
        session = _at_payment()
        assert session.step == CheckoutStep.PAYMENT
        assert session.customer_name == "Alice"

    def test_empty_name_rejected_and_step_unchanged(self):
        session = CheckoutSession()
        with pytest.raises(ValidationError, match="name is required"):
            session.identify("", "alice@example.com")
        assert session.step == CheckoutStep.IDENTIFICATION

    def test_empty_email_rejected_and_step_unchanged(self):
        session = CheckoutSession()
        with pytest.raises(ValidationError, match="email is required"):
            session.identify("Alice", "   ")
        assert session.step == CheckoutStep.IDENTIFICATION

    def test_email_format_is_not_checked(self):
        session = CheckoutSession()
        session.identify("Alice", "not-an-email")
        assert session.step == CheckoutStep.PAYMENT


class TestPayment:

    def test_back_returns_to_identification(self):
        session = _at_payment()
        session.back()
        assert session.step == CheckoutStep.IDENTIFICATION

    def test_second_payment_refused_while_in_flight(self):
        session = _at_payment()
        session.start_payment()
        with pytest.raises(CheckoutInProgressError):
            session.start_payment()

    def test_back_refused_while_in_flight(self):
        session = _at_payment()
        session.start_payment()
        with pytest.raises(CheckoutInProgressError):
            session.back()

    def test_failed_payment_stays_on_payment(self):
        session = _at_payment()
        session.start_payment()
        session.payment_failed()
        assert session.step == CheckoutStep.PAYMENT
        assert not session.payment_in_flight

    def test_confirm(self):
        session = _at_payment()
        session.start_payment()
        session.confirm("order-1")
        assert session.is_complete
        assert session.order_id == "order-1"

    def test_confirm_without_payment_rejected(self):
        session = _at_payment()
        with pytest.raises(ValidationError, match="No payment"):
            session.confirm("order-1")

    def test_payment_before_identification_rejected(self):
        with pytest.raises(ValidationError, match="checkout step"):
            CheckoutSession().start_payment()
