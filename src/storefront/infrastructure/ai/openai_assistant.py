"""OpenAI-backed AI search and technical-consultant chat."""

from __future__ import annotations

import json
import logging
from typing import Sequence

import pydantic
from openai import OpenAI

from storefront.domain.exceptions import AssistantUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.service.assistant import (
    ChatAdapter,
    ChatMessage,
    SemanticSearchAdapter,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
MAX_HISTORY_MESSAGES = 10

LATENCY_FALLBACK = (
    "I apologize, my neural link is experiencing latency. "
    "Please restate your technical inquiry."
)
OFFLINE_FALLBACK = "Lumina Offline. Please reach out to ops@luminaglobal.io."

_ID_LIST = pydantic.TypeAdapter(list[str])


def _search_prompt(query: str, products: Sequence[Product]) -> str:
    inventory = [
        {"id": p.id, "name": p.name, "desc": p.description} for p in products
    ]
    return (
        f'User Query: "{query}". '
        "Identify matching Product IDs from our ecosystem. "
        f"Inventory: {json.dumps(inventory)}. "
        "Return JSON array of IDs only."
    )


def _system_prompt(products: Sequence[Product]) -> str:
    inventory = [
        {
            "id": p.id,
            "name": p.name,
            "category": p.category.value,
            "price": float(p.price.amount),
        }
        for p in products
    ]
    return (
        'You are Lumina, the Lead Technical Strategist for "Lumina Global". '
        "You help clients choose SaaS tools, trading automation, web templates, "
        "digital assets, e-commerce development and cybersecurity services from "
        "our catalog. Be concise, technical and confident. "
        "When discussing trading bots, always include a risk disclaimer: "
        "trading involves risk and past performance does not guarantee future results.\n"
        f"Current inventory: {json.dumps(inventory)}"
    )


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


class OpenAISemanticSearch(SemanticSearchAdapter):

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str = DEFAULT_MODEL,
    ) -> None:
        self._client = client or OpenAI()
        self._model = model

    def search(self, query: str, products: Sequence[Product]) -> list[str]:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": _search_prompt(query, products)}],
                temperature=0,
            )
            content = response.choices[0].message.content or ""
        except Exception as exc:
            raise AssistantUnavailableError(f"AI search request failed: {exc}") from exc

        try:
            ids = _ID_LIST.validate_json(_strip_code_fence(content))
        except pydantic.ValidationError as exc:
            raise AssistantUnavailableError("AI search returned an unreadable answer") from exc

        logger.info("AI search %r matched %d product(s)", query, len(ids))
        return ids


class OpenAIChatAdapter(ChatAdapter):

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str = DEFAULT_MODEL,
        max_history: int = MAX_HISTORY_MESSAGES,
    ) -> None:
        self._client = client or OpenAI()
        self._model = model
        self._max_history = max_history

    def reply(
        self,
        message: str,
        history: Sequence[ChatMessage],
        products: Sequence[Product],
    ) -> str:
        messages = [{"role": "system", "content": _system_prompt(products)}]
        recent = list(history)[-self._max_history:] if self._max_history > 0 else []
        for turn in recent:
            role = "assistant" if turn.role == "model" else "user"
            messages.append({"role": role, "content": turn.content})
        messages.append({"role": "user", "content": message})

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
            )
            content = response.choices[0].message.content
        except Exception as exc:
            logger.error("Chat request failed: %s", exc)
            return OFFLINE_FALLBACK

        if not content or not content.strip():
            logger.warning("Chat model returned an empty reply")
            return LATENCY_FALLBACK
        return content
