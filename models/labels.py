# models/labels.py
"""
Static, language-keyed lookup tables for display labels.

Every status / complexity value maps to its label explicitly; there is no
runtime key construction.
"""

from __future__ import annotations

from typing import Dict

from models.analysis_models import Complexity, DensityStatus, LengthStatus
from models.request_models import Language

LENGTH_STATUS_LABELS: Dict[Language, Dict[LengthStatus, str]] = {
    "de": {
        "too_short": "Zu kurz",
        "optimal": "Optimal",
        "too_long": "Zu lang",
    },
    "en": {
        "too_short": "Too short",
        "optimal": "Optimal",
        "too_long": "Too long",
    },
}

DENSITY_STATUS_LABELS: Dict[Language, Dict[DensityStatus, str]] = {
    "de": {
        "too_low": "Zu niedrig",
        "optimal": "Optimal",
        "too_high": "Zu hoch",
    },
    "en": {
        "too_low": "Too low",
        "optimal": "Optimal",
        "too_high": "Too high",
    },
}

COMPLEXITY_LABELS: Dict[Language, Dict[Complexity, str]] = {
    "de": {
        "easy": "Leicht",
        "medium": "Mittel",
        "complex": "Komplex",
    },
    "en": {
        "easy": "Easy",
        "medium": "Medium",
        "complex": "Complex",
    },
}

# Form option codes -> labels embedded into the LLM prompt
TARGET_AUDIENCE_LABELS: Dict[Language, Dict[str, str]] = {
    "de": {
        "family": "Familien & Privatpersonen",
        "education": "Bildung & Wissenschaft",
        "creative": "Kreative & Kultur",
        "technical": "Technik & Digital",
        "health": "Gesundheit & Wellness",
        "general": "Allgemeine Öffentlichkeit",
    },
    "en": {
        "family": "Families & Private Individuals",
        "education": "Education & Science",
        "creative": "Creative & Cultural",
        "technical": "Technical & Digital",
        "health": "Health & Wellness",
        "general": "General Public",
    },
}

TONE_LABELS: Dict[Language, Dict[str, str]] = {
    "de": {
        "friendly": "Freundlich & Persönlich",
        "professional": "Professionell & Formell",
        "educational": "Bildend & Erklärend",
        "engaging": "Engagiert & Überzeugend",
        "casual": "Locker & Umgangssprachlich",
        "neutral": "Neutral & Sachlich",
    },
    "en": {
        "friendly": "Friendly & Personal",
        "professional": "Professional & Formal",
        "educational": "Educational & Explanatory",
        "engaging": "Engaging & Persuasive",
        "casual": "Casual & Conversational",
        "neutral": "Neutral & Factual",
    },
}
