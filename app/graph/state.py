# app/graph/state.py
from __future__ import annotations

from typing import Any, Dict

from models.request_models import OptimizationRequest


class OptimizationState(Dict[str, Any]):
    """
    State container passed from node to node.
    A plain dict; the subclass only names it for type hints.

    Keys filled along the way:
      request, text, seo_metadata, optimized_text, meta_description,
      analysis, labels, result, progress_messages, current_node
    """
    pass


def create_initial_state(request: OptimizationRequest) -> OptimizationState:
    state: OptimizationState = OptimizationState()
    state["request"] = request
    # only the first text is optimized
    state["text"] = request.texts[0]
    state["progress_messages"] = []
    state["current_node"] = None
    return state
