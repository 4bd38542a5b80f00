# models/result_models.py

from __future__ import annotations

from typing import List

from pydantic import Field

from models.analysis_models import AnalysisLabels, CamelModel, TextAnalysis
from models.seo_models import SeoMetadata


class OptimizedText(CamelModel):
    text: str
    analysis: TextAnalysis
    labels: AnalysisLabels


class OptimizationResult(CamelModel):
    """
    Response of POST /api/optimize.
    Lives for one request/response cycle only.
    """

    meta_description: str
    optimized_texts: List[OptimizedText] = Field(default_factory=list)

    # user keywords + extracted keywords + LSI keywords, order kept, duplicates dropped
    keywords: List[str] = Field(default_factory=list)

    seo_metadata: SeoMetadata


class AnalyzeResult(CamelModel):
    analysis: TextAnalysis
    labels: AnalysisLabels
    seo_metadata: SeoMetadata
