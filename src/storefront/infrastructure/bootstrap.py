"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from openai import OpenAI

from storefront.domain.service.assistant import ChatAdapter, SemanticSearchAdapter
from storefront.domain.service.payment import PaymentProvider
from storefront.infrastructure.ai.openai_assistant import (
    OpenAIChatAdapter,
    OpenAISemanticSearch,
)
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.payments.gateway_provider import GatewayPaymentProvider
from storefront.infrastructure.payments.simulated_provider import SimulatedPaymentProvider
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_owned_item_repository import (
    JsonOwnedItemRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def owned_item_repository() -> JsonOwnedItemRepository:
    return JsonOwnedItemRepository(settings().data_dir / "owned.json")


def payment_provider() -> PaymentProvider:
    cfg = settings()
    if cfg.payment_provider == "gateway":
        return GatewayPaymentProvider(cfg.payment_url)
    return SimulatedPaymentProvider(delay=cfg.payment_delay, decline=cfg.payment_decline)


def semantic_search() -> SemanticSearchAdapter | None:
    """AI search adapter, or None when no API key is configured."""
    cfg = settings()
    if not cfg.openai_api_key:
        return None
    return OpenAISemanticSearch(client=OpenAI(api_key=cfg.openai_api_key), model=cfg.ai_model)


def chat_adapter() -> ChatAdapter | None:
    cfg = settings()
    if not cfg.openai_api_key:
        return None
    return OpenAIChatAdapter(client=OpenAI(api_key=cfg.openai_api_key), model=cfg.ai_model)
