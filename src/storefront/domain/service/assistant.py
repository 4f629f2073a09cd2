"""Contracts for the hosted language model.

Two capabilities are used: mapping a free-text query to matching product
ids, and answering chat messages about the catalog. Both may fail; the
application layer decides what a failure degrades to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, Sequence

from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ChatMessage:
    role: Literal["user", "model"]
    content: str


class SemanticSearchAdapter(ABC):

    @abstractmethod
    def search(self, query: str, products: Sequence[Product]) -> list[str]:
        """Return the ids of ``products`` that match ``query``.

        Raises AssistantUnavailableError when the model call fails or its
        answer cannot be parsed.
        """


class ChatAdapter(ABC):

    @abstractmethod
    def reply(
        self,
        message: str,
        history: Sequence[ChatMessage],
        products: Sequence[Product],
    ) -> str:
        """Return the assistant's answer; never raises."""
