"""Tests for the OpenAI adapters with a stand-in client object."""

from types import SimpleNamespace

import pytest

from storefront.domain.exceptions import AssistantUnavailableError
from storefront.domain.model.product import Category
from storefront.domain.service.assistant import ChatMessage
from storefront.infrastructure.ai.openai_assistant import (
    LATENCY_FALLBACK,
    OFFLINE_FALLBACK,
    OpenAIChatAdapter,
    OpenAISemanticSearch,
)
from tests.fakes import make_product


class StubCompletions:

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(content=None, error=None):
    completions = StubCompletions(content, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


PRODUCTS = [
    make_product("t1", name="CryptoBot X", price="99", category=Category.TRADING_BOTS,
                 description="crypto trading bot"),
    make_product("c1", name="Security Audit", price="299", category=Category.CYBERSECURITY),
]


class TestSemanticSearch:

    def test_parses_id_array(self):
        client, completions = _client('["t1", "c1"]')
        ids = OpenAISemanticSearch(client=client, model="m").search("bots", PRODUCTS)
        assert ids == ["t1", "c1"]
        prompt = completions.calls[0]["messages"][0]["content"]
        assert prompt.startswith('User Query: "bots".')
        assert '"id": "t1"' in prompt
        assert "Return JSON array of IDs only." in prompt
        assert completions.calls[0]["model"] == "m"

    def test_accepts_fenced_json(self):
        client, _ = _client('```json\n["t1"]\n```')
        assert OpenAISemanticSearch(client=client).search("bots", PRODUCTS) == ["t1"]

    def test_unparseable_answer_raises(self):
        client, _ = _client("I think t1 fits best")
        with pytest.raises(AssistantUnavailableError):
            OpenAISemanticSearch(client=client).search("bots", PRODUCTS)

    def test_non_string_items_raise(self):
        client, _ = _client('[1, 2]')
        with pytest.raises(AssistantUnavailableError):
            OpenAISemanticSearch(client=client).search("bots", PRODUCTS)

    def test_request_failure_raises(self):
        client, _ = _client(error=RuntimeError("network down"))
        with pytest.raises(AssistantUnavailableError):
            OpenAISemanticSearch(client=client).search("bots", PRODUCTS)


class TestChatAdapter:

    def test_reply_and_prompt(self):
        client, completions = _client("Use CryptoBot X. Trading involves risk.")
        history = [ChatMessage("model", "hello"), ChatMessage("user", "hi")]

        reply = OpenAIChatAdapter(client=client).reply("which bot?", history, PRODUCTS)

        assert reply == "Use CryptoBot X. Trading involves risk."
        messages = completions.calls[0]["messages"]
        assert messages[0]["role"] == "system"
        assert "Lumina" in messages[0]["content"]
        assert '"category": "Trading Bots"' in messages[0]["content"]
        assert "risk disclaimer" in messages[0]["content"]
        assert [m["role"] for m in messages[1:]] == ["assistant", "user", "user"]
        assert messages[-1]["content"] == "which bot?"

    def test_history_is_capped(self):
        client, completions = _client("ok")
        history = [ChatMessage("user", f"m{i}") for i in range(25)]
        OpenAIChatAdapter(client=client, max_history=4).reply("next", history, PRODUCTS)
        sent = [m["content"] for m in completions.calls[0]["messages"][1:]]
        assert sent == ["m21", "m22", "m23", "m24", "next"]

    def test_empty_reply_falls_back(self):
        client, _ = _client("   ")
        assert OpenAIChatAdapter(client=client).reply("hi", [], PRODUCTS) == LATENCY_FALLBACK

    def test_error_falls_back(self):
        client, _ = _client(error=RuntimeError("quota"))
        assert OpenAIChatAdapter(client=client).reply("hi", [], PRODUCTS) == OFFLINE_FALLBACK
