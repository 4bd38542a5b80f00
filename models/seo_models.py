# models/seo_models.py

from __future__ import annotations

from typing import List

from pydantic import Field

from models.analysis_models import CamelModel

META_DESCRIPTION_MAX_LEN = 155


class SeoMetadata(CamelModel):
    """SEO metadata derived from a title and body text.

    Attributes:
        title (str): Page title with the site name suffix.
        meta_description (str): At most 155 characters.
        og_title / og_description (str): Open Graph pair.
        twitter_title / twitter_description (str): Social card pair.
        keywords (List[str]): Top keywords by frequency (stopwords excluded).
        lsi_keywords (List[str]): Deduplicated morphological variants of ``keywords``.
    """

    title: str
    meta_description: str = Field(..., max_length=META_DESCRIPTION_MAX_LEN)
    og_title: str
    og_description: str
    twitter_title: str
    twitter_description: str
    keywords: List[str] = Field(default_factory=list)
    lsi_keywords: List[str] = Field(default_factory=list)
