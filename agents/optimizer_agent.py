# agents/optimizer_agent.py

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional

from app.config import settings
from models.labels import TARGET_AUDIENCE_LABELS, TONE_LABELS
from models.request_models import Language
from services import llm_client

# ============================================================
# Logger
# ============================================================

logger = logging.getLogger(__name__)

# always print to the console, even when uvicorn has not configured logging
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

logger.setLevel(settings.log_level.upper())

# ============================================================
# Response grammar
# ============================================================

OPTIMIZED_TEXT_MARKER = "OPTIMIZED_TEXT:"
META_DESCRIPTION_MARKER = "META_DESCRIPTION:"

# upper bound given to the model for the rewritten text
MAX_OPTIMIZED_LENGTH = 1000


class ParsedResponse(NamedTuple):
    """Sections of a completion; None when a section is missing or empty."""
    optimized_text: Optional[str]
    meta_description: Optional[str]


class OptimizationOutcome(NamedTuple):
    text: str
    meta_description: str
    used_fallback_text: bool
    used_fallback_description: bool


# ============================================================
# Prompt
# ============================================================

_PROMPT_TEXTS: Dict[Language, Dict[str, str]] = {
    "de": {
        "intro": "Optimiere den folgenden Text für SEO und Lesbarkeit:",
        "title": "Titel",
        "keywords": "Verwende diese Schlüsselwörter",
        "audience": "Zielgruppe",
        "tone": "Ton",
        "seo_focus": "SEO-Fokus",
        "rules": f"""
Wichtige Hinweise:
- Textlänge maximal {MAX_OPTIMIZED_LENGTH} Zeichen
- Keine Personalpronomen verwenden
- Keine Aufzählungen verwenden
- Klare, prägnante Sätze
- Natürliche Keyword-Platzierung
- Gute Lesbarkeit
- Locker gesprochener Text

SEO-Headline-Struktur:
- H2: 1-3 Unterüberschriften mit relevanten Keywords
- H3: Weitere Unterpunkte bei Bedarf
- Keywords in Überschriften natürlich einbauen
- Überschriften als Fragen oder Aussagen formulieren
- Klare Hierarchie der Überschriften
""".strip(),
        "format": f"""
Antworte im Format:
{OPTIMIZED_TEXT_MARKER}
[optimierter Text]

{META_DESCRIPTION_MARKER}
[Meta-Beschreibung mit Keywords]
""".strip(),
    },
    "en": {
        "intro": "Optimize the following text for SEO and readability:",
        "title": "Title",
        "keywords": "Use these keywords",
        "audience": "Target audience",
        "tone": "Tone",
        "seo_focus": "SEO focus",
        "rules": f"""
Important notes:
- Maximum text length {MAX_OPTIMIZED_LENGTH} characters
- Do not use personal pronouns
- Do not use bullet lists
- Clear, concise sentences
- Natural keyword placement
- Good readability
- Relaxed, conversational text

SEO headline structure:
- H2: 1-3 subheadings with relevant keywords
- H3: further sub-points where needed
- Work keywords naturally into headings
- Phrase headings as questions or statements
- Clear heading hierarchy
""".strip(),
        "format": f"""
Answer in the format:
{OPTIMIZED_TEXT_MARKER}
[optimized text]

{META_DESCRIPTION_MARKER}
[meta description with keywords]
""".strip(),
    },
}


def _label(table: Dict[Language, Dict[str, str]], language: Language, value: str) -> str:
    """Known form codes become their localized label; anything else is kept verbatim."""
    return table[language].get(value, value)


def build_prompt(
    text: str,
    title: str,
    language: Language,
    keywords: Optional[List[str]] = None,
    target_audience: Optional[str] = None,
    tone: Optional[str] = None,
    seo_focus: Optional[str] = None,
) -> str:
    t = _PROMPT_TEXTS[language]

    lines = [
        t["intro"],
        f"{t['title']}: {title}",
        text,
        "",
    ]
    if keywords:
        lines.append(f"{t['keywords']}: {', '.join(keywords)}")
    if target_audience:
        lines.append(f"{t['audience']}: {_label(TARGET_AUDIENCE_LABELS, language, target_audience)}")
    if tone:
        lines.append(f"{t['tone']}: {_label(TONE_LABELS, language, tone)}")
    if seo_focus:
        lines.append(f"{t['seo_focus']}: {seo_focus}")

    lines.extend(["", t["rules"], "", t["format"]])
    return "\n".join(lines)


# ============================================================
# Response parsing
# ============================================================

def parse_response(content: Optional[str]) -> ParsedResponse:
    """
    Split a completion into its two labeled sections.

    Grammar (markers are case-sensitive):
        OPTIMIZED_TEXT: <text> META_DESCRIPTION: <description>

    The optimized text runs from its marker up to META_DESCRIPTION: (or the
    end); the description runs from its marker to the end. A missing marker
    or a section that is empty after stripping yields None.
    """
    if not content:
        return ParsedResponse(None, None)

    body, sep, description = content.partition(META_DESCRIPTION_MARKER)
    meta_description = description.strip() if sep else ""

    optimized_text = ""
    if OPTIMIZED_TEXT_MARKER in body:
        optimized_text = body.split(OPTIMIZED_TEXT_MARKER, 1)[1].strip()

    return ParsedResponse(optimized_text or None, meta_description or None)


# ============================================================
# Public
# ============================================================

def optimize_text(
    text: str,
    title: str,
    language: Language,
    fallback_description: str,
    keywords: Optional[List[str]] = None,
    target_audience: Optional[str] = None,
    tone: Optional[str] = None,
    seo_focus: Optional[str] = None,
) -> OptimizationOutcome:
    """
    Ask the LLM for an optimized text and meta description.

    Parsing anomalies fall back to ``text`` / ``fallback_description``.
    Errors raised by the LLM call itself propagate to the caller.
    """
    prompt = build_prompt(
        text,
        title,
        language,
        keywords=keywords,
        target_audience=target_audience,
        tone=tone,
        seo_focus=seo_focus,
    )

    logger.info(
        "[optimizer] LLM call start language=%s text_length=%d keywords=%d",
        language,
        len(text),
        len(keywords or []),
    )

    content = llm_client.complete(prompt)
    parsed = parse_response(content)

    if parsed.optimized_text is None:
        logger.warning("[optimizer] no %s section in response, original text used", OPTIMIZED_TEXT_MARKER)
    if parsed.meta_description is None:
        logger.warning("[optimizer] no %s section in response, generated description used", META_DESCRIPTION_MARKER)

    outcome = OptimizationOutcome(
        text=parsed.optimized_text or text,
        meta_description=parsed.meta_description or fallback_description,
        used_fallback_text=parsed.optimized_text is None,
        used_fallback_description=parsed.meta_description is None,
    )

    logger.info(
        "[optimizer] LLM call done response_length=%d optimized_length=%d",
        len(content or ""),
        len(outcome.text),
    )
    return outcome
