# models/request_models.py

from __future__ import annotations

from typing import Annotated, List, Literal, Optional

from pydantic import Field, StringConstraints

from models.analysis_models import CamelModel

# -----------------------------------------
# Supported locales
# -----------------------------------------
Language = Literal["de", "en"]

TITLE_MAX_LEN = 60

NonEmptyText = Annotated[str, StringConstraints(min_length=1)]


class OptimizationRequest(CamelModel):
    """Payload of POST /api/optimize.

    Only ``texts[0]`` is optimized; further texts are accepted as-is.
    """

    texts: List[NonEmptyText] = Field(..., min_length=1)
    keywords: Optional[List[str]] = None
    target_audience: Optional[str] = None
    tone: Optional[str] = None
    seo_focus: Optional[str] = None
    language: Language
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)


class AnalyzeRequest(CamelModel):
    """Payload of POST /api/analyze (metrics and metadata without the LLM)."""

    text: str = Field(..., min_length=1)
    keywords: Optional[List[str]] = None
    language: Language
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
