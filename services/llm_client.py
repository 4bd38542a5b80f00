# services/llm_client.py
from __future__ import annotations

import logging

from openai import OpenAI

from app.config import settings

logger = logging.getLogger(__name__)

_client: OpenAI | None = None


def get_openai_client() -> OpenAI:
    global _client
    if _client is None:
        api_key = settings.openai_api_key
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not set")
        _client = OpenAI(api_key=api_key)
    return _client


def complete(prompt: str, model: str | None = None) -> str | None:
    """
    Send a single user-role prompt to the chat completion API and return the
    raw message content (None when the API returns no content).
    Errors from the SDK are not caught here.
    """
    model_name = model or settings.openai_model
    client = get_openai_client()

    logger.info("[llm_client] completion start model=%s prompt_length=%d", model_name, len(prompt))

    response = client.chat.completions.create(
        model=model_name,
        messages=[{"role": "user", "content": prompt}],
    )

    usage = getattr(response, "usage", None)
    logger.info(
        "[llm_client] completion done model=%s total_tokens=%s",
        model_name,
        getattr(usage, "total_tokens", None) if usage else None,
    )

    if not response.choices:
        return None
    return response.choices[0].message.content
