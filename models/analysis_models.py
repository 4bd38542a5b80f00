# models/analysis_models.py

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# -----------------------------------------
# Status / complexity values
# -----------------------------------------
LengthStatus = Literal["too_short", "optimal", "too_long"]
DensityStatus = Literal["too_low", "optimal", "too_high"]
Complexity = Literal["easy", "medium", "complex"]


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (the JSON wire format)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextLengthAnalysis(CamelModel):
    current: int
    recommended: int = 1000
    status: LengthStatus


class ReadabilityAnalysis(CamelModel):
    flesch_index: int
    avg_sentence_length: int
    complexity: Complexity


class KeywordDensityItem(CamelModel):
    keyword: str
    density: float


class KeywordDensityAnalysis(CamelModel):
    # total_density is len(keywords) * 100 / word_count, not a per-keyword sum
    total_density: float
    status: DensityStatus
    distribution: List[KeywordDensityItem] = Field(default_factory=list)


class StructureAnalysis(CamelModel):
    headings: int
    paragraphs: int
    sentences: int
    avg_paragraph_length: int
    recommendations: List[str] = Field(default_factory=list)


class TextAnalysis(CamelModel):
    """
    The four metric records computed from one text.
    Purely derived; recomputed whenever the text changes.
    """

    text_length: TextLengthAnalysis
    readability: ReadabilityAnalysis
    keyword_density: KeywordDensityAnalysis
    structure: StructureAnalysis


class AnalysisLabels(CamelModel):
    """Localized display labels for the status values of a TextAnalysis."""

    text_length: str
    readability: str
    keyword_density: str
