# app/api/errors.py
"""
Error payloads of the HTTP API.

400: {"error", "details": [{"field", "message"}], "message"}
500: {"error", "details": "<exception text>", "message"}
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from models.request_models import TITLE_MAX_LEN, Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE: Language = "de"

# (field, pydantic error type) -> message
FIELD_MESSAGES: Dict[Language, Dict[Tuple[str, str], str]] = {
    "de": {
        ("texts", "missing"): "Mindestens ein Text ist erforderlich",
        ("texts", "too_short"): "Mindestens ein Text ist erforderlich",
        ("texts", "list_type"): "Die Texte müssen als Liste übergeben werden",
        ("texts", "string_too_short"): "Der Text darf nicht leer sein",
        ("text", "missing"): "Der Text darf nicht leer sein",
        ("text", "string_too_short"): "Der Text darf nicht leer sein",
        ("title", "missing"): "Der Titel ist erforderlich",
        ("title", "string_too_short"): "Der Titel ist erforderlich",
        ("title", "string_too_long"): f"Der Titel darf maximal {TITLE_MAX_LEN} Zeichen lang sein",
        ("language", "missing"): 'Sprache muss entweder "de" oder "en" sein',
        ("language", "literal_error"): 'Sprache muss entweder "de" oder "en" sein',
    },
    "en": {
        ("texts", "missing"): "At least one text is required",
        ("texts", "too_short"): "At least one text is required",
        ("texts", "list_type"): "Texts must be sent as a list",
        ("texts", "string_too_short"): "The text must not be empty",
        ("text", "missing"): "The text must not be empty",
        ("text", "string_too_short"): "The text must not be empty",
        ("title", "missing"): "The title is required",
        ("title", "string_too_short"): "The title is required",
        ("title", "string_too_long"): f"The title must be at most {TITLE_MAX_LEN} characters long",
        ("language", "missing"): 'Language must be either "de" or "en"',
        ("language", "literal_error"): 'Language must be either "de" or "en"',
    },
}

SUMMARY_MESSAGES: Dict[Language, Dict[str, str]] = {
    "de": {
        "validation_error": "Ungültige Anfragedaten",
        "validation_message": "Bitte überprüfen Sie die eingegebenen Daten",
        "internal_error": "Interner Serverfehler",
        "internal_message": "Ein unerwarteter Fehler ist aufgetreten",
        "unknown_error": "Unbekannter Fehler",
    },
    "en": {
        "validation_error": "Invalid request data",
        "validation_message": "Please check the submitted data",
        "internal_error": "Internal server error",
        "internal_message": "An unexpected error occurred",
        "unknown_error": "Unknown error",
    },
}


def detect_language(body: Any) -> Language:
    """Language tag of a raw payload, German when absent or invalid."""
    if isinstance(body, dict) and body.get("language") in ("de", "en"):
        return body["language"]
    return DEFAULT_LANGUAGE


def _field_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or "body"


def format_validation_errors(errors: Sequence[Dict[str, Any]], language: Language) -> List[Dict[str, str]]:
    messages = FIELD_MESSAGES[language]
    details: List[Dict[str, str]] = []
    for err in errors:
        field = _field_path(err.get("loc", ()))
        root = field.split(".", 1)[0]
        message = messages.get((root, err.get("type", "")), err.get("msg", ""))
        details.append({"field": field, "message": message})
    return details


def validation_error_payload(errors: Sequence[Dict[str, Any]], language: Language) -> Dict[str, Any]:
    summary = SUMMARY_MESSAGES[language]
    return {
        "error": summary["validation_error"],
        "details": format_validation_errors(errors, language),
        "message": summary["validation_message"],
    }


def internal_error_payload(exc: BaseException, language: Language) -> Dict[str, Any]:
    summary = SUMMARY_MESSAGES[language]
    return {
        "error": summary["internal_error"],
        "details": str(exc) or summary["unknown_error"],
        "message": summary["internal_message"],
    }


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    language = detect_language(getattr(exc, "body", None))
    errors = exc.errors()
    logger.info("[api] validation failed path=%s errors=%d", request.url.path, len(errors))
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(validation_error_payload(errors, language)),
    )
