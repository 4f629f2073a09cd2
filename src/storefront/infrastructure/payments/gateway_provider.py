"""REST payment gateway client.

Posts one charge per checkout to ``POST /v2/charges`` and maps the answer
onto the two outcomes checkout understands. A declined card comes back as
HTTP 402; timeouts and every other failure are also reported as CLOSED,
so checkout leaves the cart untouched.
"""

from __future__ import annotations

import logging

import httpx

from storefront.domain.service.payment import (
    PaymentProvider,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
)

logger = logging.getLogger(__name__)

CHARGES_PATH = "/v2/charges"


class GatewayPaymentProvider(PaymentProvider):

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(5.0, read=8.0),
        )

    @property
    def tag(self) -> str:
        return "gateway"

    def close(self) -> None:
        self._client.close()

    def charge(self, request: PaymentRequest) -> PaymentResult:
        payload = {
            "amount": request.amount.minor_units,
            "currency": request.currency,
            "referenceId": request.reference,
            "customerName": request.customer_name,
            "customerEmail": request.customer_email,
        }
        headers = {"Idempotency-Key": request.reference}

        try:
            response = self._client.post(CHARGES_PATH, json=payload, headers=headers)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException:
            logger.error("[%s] Payment gateway timeout; treating as not paid", request.reference)
            return PaymentResult.closed("Payment gateway timed out")
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 402:
                logger.warning("[%s] Payment declined: %s", request.reference, exc.response.text)
                return PaymentResult.closed("Payment declined")
            logger.error("[%s] Payment gateway HTTP error: %s", request.reference, exc)
            return PaymentResult.closed(f"Payment gateway error ({exc.response.status_code})")
        except httpx.HTTPError as exc:
            logger.error("[%s] Payment gateway unreachable: %s", request.reference, exc)
            return PaymentResult.closed("Payment gateway unreachable")
        except ValueError:
            logger.error("[%s] Payment gateway returned a non-JSON body", request.reference)
            return PaymentResult.closed("Malformed gateway response")

        if not isinstance(body, dict) or body.get("status") != "success":
            status = body.get("status") if isinstance(body, dict) else None
            logger.warning("[%s] Charge not successful (status=%r)", request.reference, status)
            return PaymentResult.closed(f"Charge status: {status}")

        logger.info("[%s] Charge succeeded: %s", request.reference, body.get("transactionId"))
        return PaymentResult(
            status=PaymentStatus.SUCCEEDED,
            transaction_id=body.get("transactionId"),
        )
