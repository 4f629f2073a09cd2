"""Application service: admin passcode check."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import AccessDeniedError

logger = logging.getLogger(__name__)


class AdminGate:
    """Plain equality check against the configured passcode."""

    def __init__(self, passcode: str) -> None:
        self._passcode = passcode

    def verify(self, attempt: str) -> None:
        if attempt != self._passcode:
            logger.warning("Admin access denied")
            raise AccessDeniedError("Access denied: incorrect passcode")
        logger.info("Admin access granted")
