# agents/metadata_agent.py

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Dict, List, Tuple

from app.config import settings
from models.request_models import Language
from models.seo_models import META_DESCRIPTION_MAX_LEN, SeoMetadata

logger = logging.getLogger(__name__)

# ============================================================
# Parameters
# ============================================================

# number of primary keywords taken from the frequency ranking
MAX_KEYWORDS = 5
# keywords considered for the "learn more about ..." sentence
MAX_DESCRIPTION_KEYWORDS = 3
# tokens up to this length are never keywords
MIN_WORD_LEN = 3

# ============================================================
# Language tables
# ============================================================

STOPWORDS: Dict[Language, frozenset] = {
    "de": frozenset([
        "der", "die", "das", "und", "oder", "aber", "für", "mit", "bei", "seit",
        "von", "aus", "nach", "zu", "zum", "zur", "in", "im", "an", "am", "auf",
        "über", "unter", "hinter", "neben", "zwischen",
    ]),
    "en": frozenset([
        "the", "and", "or", "but", "for", "with", "at", "by", "from", "to", "in",
        "on", "of", "a", "an", "is", "are", "was", "were", "be", "been", "being",
    ]),
}

# suffixes: plural/inflection, derivations, compounds
LSI_SUFFIXES: Dict[Language, Tuple[str, ...]] = {
    "de": ("e", "en", "er", "es", "ung", "lich", "keit", "bereich", "system", "prozess"),
    "en": ("s", "ing", "ed", "er", "al", "ity", "ion", "system", "process", "management"),
}

LEARN_MORE_TEMPLATES: Dict[Language, str] = {
    "de": " Erfahren Sie mehr über {keywords}.",
    "en": " Learn more about {keywords}.",
}

DEFAULT_SITE_NAMES: Dict[Language, str] = {
    "de": "Ihre Website",
    "en": "Your Website",
}

_TOKEN_SPLIT_RE = re.compile(r"\W+")
_FIRST_SENTENCE_RE = re.compile(r"[.!?]")


# ============================================================
# Building blocks
# ============================================================

def _site_name(language: Language) -> str:
    override = settings.site_name_de if language == "de" else settings.site_name_en
    return override or DEFAULT_SITE_NAMES[language]


def extract_keywords(text: str, title: str, language: Language, limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Rank the tokens of title + text by frequency.
    Stopwords and tokens of MIN_WORD_LEN characters or fewer are skipped;
    ties keep the order of first occurrence.
    """
    stopwords = STOPWORDS[language]
    tokens = _TOKEN_SPLIT_RE.split(f"{title} {text}".lower())
    freq = Counter(t for t in tokens if len(t) > MIN_WORD_LEN and t not in stopwords)
    return [word for word, _ in freq.most_common(limit)]


def generate_lsi_keywords(keywords: List[str], language: Language) -> List[str]:
    variants: List[str] = []
    seen = set()
    for keyword in keywords:
        for suffix in LSI_SUFFIXES[language]:
            variant = f"{keyword}{suffix}"
            if len(variant) <= MIN_WORD_LEN or variant in seen:
                continue
            seen.add(variant)
            variants.append(variant)
    return variants


def build_meta_description(text: str, keywords: List[str], language: Language) -> str:
    """
    First sentence of the body, plus a "learn more about ..." sentence naming
    the top keywords it does not already contain, when that still fits.
    Never longer than META_DESCRIPTION_MAX_LEN.
    """
    description = _FIRST_SENTENCE_RE.split(text, maxsplit=1)[0].strip()

    if len(description) < META_DESCRIPTION_MAX_LEN:
        lowered = description.lower()
        remaining = [k for k in keywords[:MAX_DESCRIPTION_KEYWORDS] if k not in lowered]
        if remaining:
            addition = LEARN_MORE_TEMPLATES[language].format(keywords=", ".join(remaining))
            if len(description) + len(addition) <= META_DESCRIPTION_MAX_LEN:
                description += addition

    return description[:META_DESCRIPTION_MAX_LEN]


# ============================================================
# Public
# ============================================================

def generate_seo_metadata(text: str, title: str, language: Language) -> SeoMetadata:
    """Deterministic SEO metadata for one title + body text."""
    keywords = extract_keywords(text, title, language)
    lsi_keywords = generate_lsi_keywords(keywords, language)
    meta_description = build_meta_description(text, keywords, language)

    logger.info(
        "[metadata] generated language=%s keywords=%s lsi=%d description_length=%d",
        language,
        keywords,
        len(lsi_keywords),
        len(meta_description),
    )

    return SeoMetadata(
        title=f"{title} | {_site_name(language)}",
        meta_description=meta_description,
        og_title=title,
        og_description=meta_description,
        twitter_title=title,
        twitter_description=meta_description,
        keywords=keywords,
        lsi_keywords=lsi_keywords,
    )
