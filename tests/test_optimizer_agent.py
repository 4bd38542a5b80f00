"""Tests for prompt construction, response parsing and the LLM fallback."""

import pytest

from agents.optimizer_agent import (
    META_DESCRIPTION_MARKER,
    OPTIMIZED_TEXT_MARKER,
    build_prompt,
    optimize_text,
    parse_response,
)


class TestParseResponse:
    """Tests for the two-marker response grammar."""

    def test_both_sections(self):
        content = (
            f"{OPTIMIZED_TEXT_MARKER}\n## Neu\n\nBesserer Text.\n\n"
            f"{META_DESCRIPTION_MARKER}\nKurze Beschreibung.\n"
        )

        parsed = parse_response(content)

        assert parsed.optimized_text == "## Neu\n\nBesserer Text."
        assert parsed.meta_description == "Kurze Beschreibung."

    def test_missing_meta_description(self):
        parsed = parse_response(f"{OPTIMIZED_TEXT_MARKER} Nur Text")

        assert parsed.optimized_text == "Nur Text"
        assert parsed.meta_description is None

    def test_missing_optimized_text_marker(self):
        """Test that text before META_DESCRIPTION: without its marker is not used."""
        parsed = parse_response(f"Irgendein Text\n{META_DESCRIPTION_MARKER} Beschreibung")

        assert parsed.optimized_text is None
        assert parsed.meta_description == "Beschreibung"

    def test_markers_are_case_sensitive(self):
        parsed = parse_response("optimized_text: a\nmeta_description: b")

        assert parsed.optimized_text is None
        assert parsed.meta_description is None

    def test_empty_sections_count_as_missing(self):
        parsed = parse_response(f"{OPTIMIZED_TEXT_MARKER}   \n{META_DESCRIPTION_MARKER}  ")

        assert parsed.optimized_text is None
        assert parsed.meta_description is None

    @pytest.mark.parametrize("content", [None, ""])
    def test_no_content(self, content):
        parsed = parse_response(content)

        assert parsed.optimized_text is None
        assert parsed.meta_description is None


class TestBuildPrompt:
    """Tests for the instruction prompt."""

    def test_german_prompt(self):
        """Test that all request fields end up in the prompt."""
        prompt = build_prompt(
            "Mein Text.",
            "Mein Titel",
            "de",
            keywords=["garten", "rosen"],
            target_audience="family",
            tone="casual",
            seo_focus="Lokale Suche",
        )

        assert prompt.startswith("Optimiere den folgenden Text für SEO und Lesbarkeit:")
        assert "Titel: Mein Titel" in prompt
        assert "Mein Text." in prompt
        assert "Verwende diese Schlüsselwörter: garten, rosen" in prompt
        assert "Zielgruppe: Familien & Privatpersonen" in prompt
        assert "Ton: Locker & Umgangssprachlich" in prompt
        assert "SEO-Fokus: Lokale Suche" in prompt
        assert "Textlänge maximal 1000 Zeichen" in prompt
        assert OPTIMIZED_TEXT_MARKER in prompt
        assert META_DESCRIPTION_MARKER in prompt

    def test_english_prompt(self):
        prompt = build_prompt("My text.", "My title", "en", target_audience="technical")

        assert prompt.startswith("Optimize the following text for SEO and readability:")
        assert "Title: My title" in prompt
        assert "Target audience: Technical & Digital" in prompt

    def test_unknown_codes_are_kept_verbatim(self):
        prompt = build_prompt("Text.", "Titel", "de", target_audience="Gärtner", tone="witzig")

        assert "Zielgruppe: Gärtner" in prompt
        assert "Ton: witzig" in prompt

    def test_optional_fields_omitted(self):
        prompt = build_prompt("Text.", "Titel", "de")

        assert "Schlüsselwörter:" not in prompt
        assert "Zielgruppe" not in prompt
        assert "Ton:" not in prompt
        assert "SEO-Fokus" not in prompt


class TestOptimizeText:
    """Tests for the LLM round trip."""

    def test_uses_parsed_sections(self, fake_llm):
        fake = fake_llm(f"{OPTIMIZED_TEXT_MARKER}\nNeuer Text.\n{META_DESCRIPTION_MARKER}\nNeue Beschreibung.")

        outcome = optimize_text("Alter Text.", "Titel", "de", fallback_description="Alt")

        assert outcome.text == "Neuer Text."
        assert outcome.meta_description == "Neue Beschreibung."
        assert not outcome.used_fallback_text
        assert not outcome.used_fallback_description
        assert len(fake.prompts) == 1
        assert "Alter Text." in fake.prompts[0]

    def test_falls_back_on_unparsable_response(self, fake_llm):
        fake_llm("Sorry, I cannot help with that.")

        outcome = optimize_text("Alter Text.", "Titel", "de", fallback_description="Alt")

        assert outcome.text == "Alter Text."
        assert outcome.meta_description == "Alt"
        assert outcome.used_fallback_text
        assert outcome.used_fallback_description

    def test_falls_back_on_empty_response(self, fake_llm):
        fake_llm(None)

        outcome = optimize_text("Alter Text.", "Titel", "en", fallback_description="Old")

        assert outcome.text == "Alter Text."
        assert outcome.meta_description == "Old"

    def test_call_errors_propagate(self, fake_llm):
        fake_llm(error=RuntimeError("API down"))

        with pytest.raises(RuntimeError, match="API down"):
            optimize_text("Text.", "Titel", "de", fallback_description="x")
