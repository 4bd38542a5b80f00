"""
Pytest fixtures and configuration for SEO Text Optimizer tests.
"""

from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.main import app
from services import llm_client


class FakeCompletion:
    """Stand-in for llm_client.complete that records prompts."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts: List[str] = []

    def __call__(self, prompt: str, model: Optional[str] = None) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_llm(monkeypatch) -> Callable[..., FakeCompletion]:
    """Replace the LLM call; returns a factory taking content/error."""

    def _install(content: Optional[str] = None, error: Optional[Exception] = None) -> FakeCompletion:
        fake = FakeCompletion(content=content, error=error)
        monkeypatch.setattr(llm_client, "complete", fake)
        return fake

    return _install


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def long_text() -> str:
    """A multi-paragraph German text with headings, ~700 characters."""
    return (
        "## Warum Gartenpflege wichtig ist\n\n"
        "Ein gepflegter Garten sorgt für Erholung. Pflanzen wachsen gesünder. "
        "Regelmäßige Pflege spart später Zeit und Geld.\n\n"
        "## Wie Gartenpflege gelingt\n\n"
        "Gießen am Morgen schont die Pflanzen. Mulch hält den Boden feucht. "
        "Unkraut wird am besten früh entfernt. Ein Kompost liefert wertvolle Nährstoffe "
        "für jedes Beet. Werkzeuge sollten sauber und scharf bleiben.\n\n"
        "Gartenpflege ist kein Hexenwerk. Mit etwas Planung bleibt der Garten das ganze "
        "Jahr über schön. Kleine Schritte führen zu großen Ergebnissen. Wer den Garten "
        "im Herbst vorbereitet, freut sich im Frühling über kräftige Pflanzen und "
        "bunte Blüten in allen Beeten."
    )
