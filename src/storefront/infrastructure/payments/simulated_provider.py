"""In-process payment provider used when no gateway is configured."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from storefront.domain.service.payment import (
    PaymentProvider,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
)

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 2.5


class SimulatedPaymentProvider(PaymentProvider):
    """Approves every charge after a fixed processing delay.

    With ``decline=True`` every charge ends as CLOSED instead, which is
    useful for exercising the failure path of checkout.
    """

    def __init__(
        self,
        delay: float = DEFAULT_DELAY_SECONDS,
        decline: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._delay = delay
        self._decline = decline
        self._sleep = sleep

    @property
    def tag(self) -> str:
        return "simulated"

    def charge(self, request: PaymentRequest) -> PaymentResult:
        if self._delay > 0:
            self._sleep(self._delay)

        if self._decline:
            logger.info("Simulated decline for %s", request.reference)
            return PaymentResult.closed("Declined by simulated provider")

        transaction_id = f"sim_{uuid.uuid4().hex[:12]}"
        logger.info(
            "Simulated charge %s approved: %s (%s)",
            request.reference, request.amount, transaction_id,
        )
        return PaymentResult(status=PaymentStatus.SUCCEEDED, transaction_id=transaction_id)
