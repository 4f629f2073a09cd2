"""Payment provider contract.

Checkout talks to every payment provider through this one interface and
never branches on which provider is configured. A provider reports one of
two outcomes: the payment succeeded, or the dialog was closed without a
payment (declines, cancellations and provider errors all land here).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.value_objects import Money


class PaymentStatus(Enum):
    SUCCEEDED = "SUCCEEDED"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class PaymentRequest:
    reference: str
    amount: Money
    customer_name: str
    customer_email: str

    @property
    def currency(self) -> str:
        return self.amount.currency


@dataclass(frozen=True)
class PaymentResult:
    status: PaymentStatus
    transaction_id: str | None = None
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.SUCCEEDED

    @staticmethod
    def closed(message: str = "") -> PaymentResult:
        return PaymentResult(status=PaymentStatus.CLOSED, message=message)


class PaymentProvider(ABC):

    @property
    @abstractmethod
    def tag(self) -> str:
        """Short provider name recorded on orders as the payment method."""

    @abstractmethod
    def charge(self, request: PaymentRequest) -> PaymentResult:
        """Collect the payment and report the outcome.

        Implementations must not raise for declines, cancellations or
        transport failures; they return a CLOSED result instead.
        """

    def close(self) -> None:
        """Release any connection the provider holds."""
