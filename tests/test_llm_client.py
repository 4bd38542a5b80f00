"""Tests for the OpenAI client wrapper."""

from types import SimpleNamespace

import pytest

from app.config import settings
from services import llm_client


class FakeCompletions:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


def _fake_client(content):
    response = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(total_tokens=42),
    )
    completions = FakeCompletions(response)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


class TestGetOpenAIClient:
    """Tests for client creation."""

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.setattr(llm_client, "_client", None)
        monkeypatch.setattr(settings, "openai_api_key", None)

        with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
            llm_client.get_openai_client()

    def test_client_is_cached(self, monkeypatch):
        monkeypatch.setattr(llm_client, "_client", None)
        monkeypatch.setattr(settings, "openai_api_key", "sk-test")

        first = llm_client.get_openai_client()
        second = llm_client.get_openai_client()

        assert first is second


class TestComplete:
    """Tests for the single completion call."""

    def test_sends_one_user_message(self, monkeypatch):
        client, completions = _fake_client("OPTIMIZED_TEXT: x")
        monkeypatch.setattr(llm_client, "get_openai_client", lambda: client)
        monkeypatch.setattr(settings, "openai_model", "test-model")

        content = llm_client.complete("Hallo")

        assert content == "OPTIMIZED_TEXT: x"
        assert completions.calls == [
            {"model": "test-model", "messages": [{"role": "user", "content": "Hallo"}]}
        ]

    def test_explicit_model_wins(self, monkeypatch):
        client, completions = _fake_client("ok")
        monkeypatch.setattr(llm_client, "get_openai_client", lambda: client)

        llm_client.complete("Hallo", model="other-model")

        assert completions.calls[0]["model"] == "other-model"

    def test_no_choices(self, monkeypatch):
        client, completions = _fake_client("unused")
        completions.response = SimpleNamespace(choices=[], usage=None)
        monkeypatch.setattr(llm_client, "get_openai_client", lambda: client)

        assert llm_client.complete("Hallo") is None
