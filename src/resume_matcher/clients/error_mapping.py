"""Map provider failures onto the AnalysisError taxonomy.

Provider-specific knowledge (Anthropic SDK exception types, status codes and
error text) lives here only; the rest of the package deals in ``ErrorKind``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math

import anthropic
from pydantic import ValidationError

from resume_matcher.models.errors import AnalysisError, ErrorKind

logger = logging.getLogger(__name__)

MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "Resume text and job description are required",
    ErrorKind.UNAUTHORIZED: (
        "Invalid or missing API key. Check ANTHROPIC_API_KEY in your environment."
    ),
    ErrorKind.RATE_LIMITED: "The analysis service is busy. Please try again in a minute.",
    ErrorKind.MODEL_UNAVAILABLE: (
        "The analysis model is currently unavailable. Please try again shortly."
    ),
    ErrorKind.PARSE_FAILURE: "The analysis service returned an unreadable report. Please retry.",
    ErrorKind.UNKNOWN: "Analysis failed unexpectedly. Please try again later.",
}

# Checked in order; the first rule with a matching marker wins.
TEXT_RULES: list[tuple[ErrorKind, tuple[str, ...]]] = [
    (ErrorKind.RATE_LIMITED, ("429", "quota", "too many requests", "rate limit", "rate_limit")),
    (ErrorKind.UNAUTHORIZED, ("401", "403", "api key", "api_key", "unauthorized", "permission")),
    (ErrorKind.MODEL_UNAVAILABLE, ("404", "not found", "overloaded", "503", "timed out", "timeout")),
    (ErrorKind.PARSE_FAILURE, ("json",)),
]

_STATUS_KINDS: dict[int, ErrorKind] = {
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.MODEL_UNAVAILABLE,
    429: ErrorKind.RATE_LIMITED,
}


def make_error(kind: ErrorKind, retry_after: float | None = None) -> AnalysisError:
    """Build an AnalysisError carrying the standard message for ``kind``."""
    return AnalysisError(kind, MESSAGES[kind], retry_after=retry_after)


def classify_text(text: str) -> ErrorKind:
    """Classify raw error text by marker substrings."""
    lowered = text.lower()
    for kind, markers in TEXT_RULES:
        if any(marker in lowered for marker in markers):
            return kind
    return ErrorKind.UNKNOWN


def _retry_after(exc: anthropic.APIStatusError) -> float | None:
    value = exc.response.headers.get("retry-after")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if math.isfinite(seconds) else None


def _classify_type(exc: BaseException) -> ErrorKind | None:
    if isinstance(exc, (json.JSONDecodeError, ValidationError)):
        return ErrorKind.PARSE_FAILURE
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return ErrorKind.MODEL_UNAVAILABLE
    if isinstance(exc, anthropic.APIConnectionError):  # includes APITimeoutError
        return ErrorKind.MODEL_UNAVAILABLE
    if isinstance(exc, anthropic.APIStatusError):
        kind = _STATUS_KINDS.get(exc.status_code)
        if kind is not None:
            return kind
        if exc.status_code >= 500:
            return ErrorKind.MODEL_UNAVAILABLE
    return None


def classify_provider_error(exc: BaseException) -> AnalysisError:
    """Turn any exception raised while calling the model into an AnalysisError.

    Rate-limit markers in the error text win over everything else. Otherwise
    known SDK types are mapped by type and status code, and anything left
    falls back to the remaining substring rules.
    """
    if isinstance(exc, AnalysisError):
        return exc

    text = str(exc)
    if classify_text(text) is ErrorKind.RATE_LIMITED:
        kind = ErrorKind.RATE_LIMITED
    else:
        kind = _classify_type(exc) or classify_text(text)

    retry_after = None
    if kind is ErrorKind.RATE_LIMITED and isinstance(exc, anthropic.APIStatusError):
        retry_after = _retry_after(exc)

    logger.warning("Provider error classified as %s: %s", kind.value, exc)
    return make_error(kind, retry_after=retry_after)
