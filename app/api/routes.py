# app/api/routes.py
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from agents.analyzer_agent import analyze_text, build_labels
from agents.metadata_agent import generate_seo_metadata
from app.api.errors import internal_error_payload
from app.graph.workflow import run_optimization
from models.request_models import AnalyzeRequest, OptimizationRequest
from models.result_models import AnalyzeResult, OptimizationResult

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Endpoints ---------


@router.post("/optimize", response_model=OptimizationResult)
def api_optimize(payload: OptimizationRequest):
    """
    Main API.

    1) baseline SEO metadata
    2) LLM rewrite of texts[0]
    3) metrics on the rewritten text
    4) merged result
    """
    logger.info(
        "[api.optimize] start language=%s title=%s texts=%d",
        payload.language,
        payload.title,
        len(payload.texts),
    )

    try:
        state = run_optimization(payload)
    except Exception as e:  # noqa: BLE001
        logger.exception("[api.optimize] failed: %s", e)
        return JSONResponse(status_code=500, content=internal_error_payload(e, payload.language))

    logger.info("[api.optimize] done nodes=%s", state.get("current_node"))
    return state["result"]


@router.post("/analyze", response_model=AnalyzeResult)
def api_analyze(payload: AnalyzeRequest) -> AnalyzeResult:
    """Metrics and baseline metadata for a text, without calling the LLM."""
    logger.info("[api.analyze] language=%s text_length=%d", payload.language, len(payload.text))

    analysis = analyze_text(payload.text, payload.keywords, payload.language)
    return AnalyzeResult(
        analysis=analysis,
        labels=build_labels(analysis, payload.language),
        seo_metadata=generate_seo_metadata(payload.text, payload.title, payload.language),
    )
