# agents/analyzer_agent.py

from __future__ import annotations

import math
import re
from typing import Dict, List, Optional

from models.analysis_models import (
    AnalysisLabels,
    KeywordDensityAnalysis,
    KeywordDensityItem,
    ReadabilityAnalysis,
    StructureAnalysis,
    TextAnalysis,
    TextLengthAnalysis,
)
from models.labels import COMPLEXITY_LABELS, DENSITY_STATUS_LABELS, LENGTH_STATUS_LABELS
from models.request_models import Language

# ============================================================
# Thresholds
# ============================================================

RECOMMENDED_LENGTH = 1000
MIN_LENGTH = 500
MAX_LENGTH = 1000

DENSITY_MIN = 1.0
DENSITY_MAX = 5.0

EASY_SCORE = 80
MEDIUM_SCORE = 60

MIN_HEADINGS = 2
MAX_AVG_PARAGRAPH_LENGTH = 200
MIN_SENTENCES = 5

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t]*\n")
_HEADING_RE = re.compile(r"^#{1,6}\s+.+$", re.MULTILINE)
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

STRUCTURE_RECOMMENDATIONS: Dict[Language, Dict[str, str]] = {
    "de": {
        "headings": "Mehr Überschriften einbauen",
        "paragraphs": "Lange Absätze kürzen",
        "sentences": "Mehr Sätze hinzufügen",
    },
    "en": {
        "headings": "Add more headings",
        "paragraphs": "Shorten long paragraphs",
        "sentences": "Add more sentences",
    },
}


# ============================================================
# Utilities
# ============================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _words(text: str) -> List[str]:
    return text.split()


def _sentences(text: str) -> List[str]:
    """Non-empty segments between runs of . ! ?"""
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def _paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def _count_syllables(text: str) -> int:
    """Vowel clusters as a rough syllable estimate."""
    return len(_VOWEL_GROUP_RE.findall(text.lower()))


def _count_occurrences(text: str, keyword: str) -> int:
    if not keyword:
        return 0
    return text.lower().count(keyword.lower())


# ============================================================
# Metrics
# ============================================================

def analyze_text_length(text: str) -> TextLengthAnalysis:
    length = len(text)
    if length < MIN_LENGTH:
        status = "too_short"
    elif length > MAX_LENGTH:
        status = "too_long"
    else:
        status = "optimal"
    return TextLengthAnalysis(current=length, recommended=RECOMMENDED_LENGTH, status=status)


def calculate_flesch_index(text: str) -> int:
    """
    Flesch-style score: 180 - words/sentences - 58.5 * syllables/words.
    Returns 0 when the text has no words or no sentences.
    """
    words = len(_words(text))
    sentences = len(_sentences(text))
    if words == 0 or sentences == 0:
        return 0
    syllables = _count_syllables(text)
    return _round_half_up(180 - (words / sentences) - (58.5 * syllables / words))


def analyze_readability(text: str) -> ReadabilityAnalysis:
    sentences = _sentences(text)
    if not sentences or not _words(text):
        return ReadabilityAnalysis(flesch_index=0, avg_sentence_length=0, complexity="complex")

    flesch_index = calculate_flesch_index(text)
    avg_sentence_length = sum(len(_words(s)) for s in sentences) / len(sentences)

    if flesch_index > EASY_SCORE:
        complexity = "easy"
    elif flesch_index > MEDIUM_SCORE:
        complexity = "medium"
    else:
        complexity = "complex"

    return ReadabilityAnalysis(
        flesch_index=flesch_index,
        avg_sentence_length=_round_half_up(avg_sentence_length),
        complexity=complexity,
    )


def analyze_keyword_density(text: str, keywords: Optional[List[str]] = None) -> KeywordDensityAnalysis:
    """
    total_density = len(keywords) * 100 / word_count.

    This is a global ratio over the keyword list, not a sum of the
    per-keyword densities in ``distribution``.
    """
    word_count = len(_words(text))
    keywords = keywords or []

    if word_count == 0:
        total_density = 0.0
        distribution = [KeywordDensityItem(keyword=k, density=0.0) for k in keywords]
    else:
        total_density = len(keywords) * 100 / word_count
        distribution = [
            KeywordDensityItem(keyword=k, density=_count_occurrences(text, k) * 100 / word_count)
            for k in keywords
        ]

    if total_density < DENSITY_MIN:
        status = "too_low"
    elif total_density > DENSITY_MAX:
        status = "too_high"
    else:
        status = "optimal"

    return KeywordDensityAnalysis(total_density=total_density, status=status, distribution=distribution)


def analyze_structure(text: str, language: Language = "de") -> StructureAnalysis:
    paragraphs = _paragraphs(text)
    headings = len(_HEADING_RE.findall(text))
    sentences = len(_sentences(text))

    if paragraphs:
        avg_paragraph_length = _round_half_up(sum(len(p) for p in paragraphs) / len(paragraphs))
    else:
        avg_paragraph_length = 0

    messages = STRUCTURE_RECOMMENDATIONS[language]
    recommendations: List[str] = []
    if headings < MIN_HEADINGS:
        recommendations.append(messages["headings"])
    if avg_paragraph_length > MAX_AVG_PARAGRAPH_LENGTH:
        recommendations.append(messages["paragraphs"])
    if sentences < MIN_SENTENCES:
        recommendations.append(messages["sentences"])

    return StructureAnalysis(
        headings=headings,
        paragraphs=len(paragraphs),
        sentences=sentences,
        avg_paragraph_length=avg_paragraph_length,
        recommendations=recommendations,
    )


# ============================================================
# Public
# ============================================================

def analyze_text(
    text: str,
    keywords: Optional[List[str]] = None,
    language: Language = "de",
) -> TextAnalysis:
    """Run all four metrics on one text."""
    return TextAnalysis(
        text_length=analyze_text_length(text),
        readability=analyze_readability(text),
        keyword_density=analyze_keyword_density(text, keywords),
        structure=analyze_structure(text, language),
    )


def build_labels(analysis: TextAnalysis, language: Language) -> AnalysisLabels:
    return AnalysisLabels(
        text_length=LENGTH_STATUS_LABELS[language][analysis.text_length.status],
        readability=COMPLEXITY_LABELS[language][analysis.readability.complexity],
        keyword_density=DENSITY_STATUS_LABELS[language][analysis.keyword_density.status],
    )
