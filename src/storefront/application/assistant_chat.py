"""Application service: technical-consultant chat."""

from __future__ import annotations

import logging

from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.assistant import ChatAdapter, ChatMessage

logger = logging.getLogger(__name__)

GREETING = (
    "Lumina Secure Systems Online. I am your Technical Consultant. "
    "How can I assist with your infrastructure hardening today?"
)


class AssistantChat:
    """One conversation with the consultant, starting from the greeting."""

    def __init__(self, chat_adapter: ChatAdapter, product_repo: ProductRepository) -> None:
        self._chat_adapter = chat_adapter
        self._product_repo = product_repo
        self._history: list[ChatMessage] = [ChatMessage(role="model", content=GREETING)]

    @property
    def history(self) -> list[ChatMessage]:
        return list(self._history)

    def send(self, message: str) -> str | None:
        """Send a user message and return the reply. Blank input is ignored."""
        if not message or not message.strip():
            return None
        message = message.strip()

        # The adapter receives the history before this turn.
        prior = list(self._history)
        self._history.append(ChatMessage(role="user", content=message))
        reply = self._chat_adapter.reply(message, prior, self._product_repo.list_all())
        self._history.append(ChatMessage(role="model", content=reply))
        logger.debug("Chat turn %d answered", len(self._history) // 2)
        return reply
