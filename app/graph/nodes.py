# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import List

from agents.analyzer_agent import analyze_text, build_labels
from agents.metadata_agent import generate_seo_metadata
from agents.optimizer_agent import optimize_text
from app.graph.state import OptimizationState
from models.request_models import OptimizationRequest
from models.result_models import OptimizationResult, OptimizedText
from models.seo_models import META_DESCRIPTION_MAX_LEN, SeoMetadata

logger = logging.getLogger(__name__)


def _log_progress(state: OptimizationState, node: str, message: str) -> OptimizationState:
    """Append a progress line to the state and log it."""
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


def _merge_keywords(*groups: List[str]) -> List[str]:
    merged: List[str] = []
    seen = set()
    for group in groups:
        for keyword in group:
            if keyword in seen:
                continue
            seen.add(keyword)
            merged.append(keyword)
    return merged


# ---------- Metadata node ----------


def metadata_node(state: OptimizationState) -> OptimizationState:
    """Baseline SEO metadata from the original text (no LLM)."""
    state = _log_progress(state, "metadata", "start: generating baseline metadata")

    request: OptimizationRequest = state["request"]
    state["seo_metadata"] = generate_seo_metadata(state["text"], request.title, request.language)

    state = _log_progress(state, "metadata", "done: baseline metadata generated")
    return state


# ---------- Optimizer node ----------


def optimizer_node(state: OptimizationState) -> OptimizationState:
    """LLM rewrite + marker parsing, with fallback to the original text/description."""
    state = _log_progress(state, "optimizer", "start: requesting optimized text")

    request: OptimizationRequest = state["request"]
    metadata: SeoMetadata = state["seo_metadata"]

    outcome = optimize_text(
        state["text"],
        request.title,
        request.language,
        fallback_description=metadata.meta_description,
        keywords=request.keywords,
        target_audience=request.target_audience,
        tone=request.tone,
        seo_focus=request.seo_focus,
    )
    state["optimized_text"] = outcome.text
    state["meta_description"] = outcome.meta_description

    state = _log_progress(
        state,
        "optimizer",
        f"done: fallback_text={outcome.used_fallback_text} "
        f"fallback_description={outcome.used_fallback_description}",
    )
    return state


# ---------- Analysis node ----------


def analysis_node(state: OptimizationState) -> OptimizationState:
    """Recompute the four metrics on the text that will be returned."""
    state = _log_progress(state, "analysis", "start: analyzing optimized text")

    request: OptimizationRequest = state["request"]
    analysis = analyze_text(state["optimized_text"], request.keywords, request.language)
    state["analysis"] = analysis
    state["labels"] = build_labels(analysis, request.language)

    state = _log_progress(
        state,
        "analysis",
        f"done: length={analysis.text_length.current} flesch={analysis.readability.flesch_index}",
    )
    return state


# ---------- Assembler node ----------


def assembler_node(state: OptimizationState) -> OptimizationState:
    """Merge everything into the OptimizationResult."""
    state = _log_progress(state, "assembler", "start: assembling result")

    request: OptimizationRequest = state["request"]
    metadata: SeoMetadata = state["seo_metadata"]
    meta_description: str = state["meta_description"][:META_DESCRIPTION_MAX_LEN]

    seo_metadata = metadata.model_copy(
        update={
            "meta_description": meta_description,
            "og_description": meta_description,
            "twitter_description": meta_description,
        }
    )

    state["result"] = OptimizationResult(
        meta_description=meta_description,
        optimized_texts=[
            OptimizedText(
                text=state["optimized_text"],
                analysis=state["analysis"],
                labels=state["labels"],
            )
        ],
        keywords=_merge_keywords(request.keywords or [], metadata.keywords, metadata.lsi_keywords),
        seo_metadata=seo_metadata,
    )

    state = _log_progress(state, "assembler", "done: result assembled")
    return state
