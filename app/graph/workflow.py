# app/graph/workflow.py
from __future__ import annotations

import logging

from app.graph import nodes
from app.graph.state import OptimizationState, create_initial_state
from models.request_models import OptimizationRequest

logger = logging.getLogger(__name__)


def run_optimization(request: OptimizationRequest) -> OptimizationState:
    """
    Linear workflow behind /api/optimize.

    metadata -> optimizer (LLM) -> analysis -> assembler
    """
    logger.info(
        "[workflow] run_optimization start language=%s texts=%d keywords=%d",
        request.language,
        len(request.texts),
        len(request.keywords or []),
    )

    state = create_initial_state(request)

    # 1) baseline metadata from the original text
    state = nodes.metadata_node(state)

    # 2) LLM rewrite (falls back to the original on unparsable output)
    state = nodes.optimizer_node(state)

    # 3) metrics on the returned text
    state = nodes.analysis_node(state)

    # 4) result
    state = nodes.assembler_node(state)

    logger.info("[workflow] run_optimization done current_node=%s", state.get("current_node"))
    return state
