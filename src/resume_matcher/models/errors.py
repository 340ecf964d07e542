"""Error taxonomy surfaced by the analysis orchestrator."""

from __future__ import annotations

import math
from enum import Enum

RATE_LIMIT_MIN_WAIT = 30
RATE_LIMIT_MAX_WAIT = 60


class ErrorCategory(str, Enum):
    FIX_SETUP = "fix_setup"
    RETRY_SOON = "retry_soon"
    UNEXPECTED = "unexpected"


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    MODEL_UNAVAILABLE = "model_unavailable"
    PARSE_FAILURE = "parse_failure"
    UNKNOWN = "unknown"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]

    @property
    def retryable(self) -> bool:
        return self not in (ErrorKind.INVALID_INPUT, ErrorKind.UNAUTHORIZED)


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.MODEL_UNAVAILABLE: 503,
    ErrorKind.PARSE_FAILURE: 500,
    ErrorKind.UNKNOWN: 500,
}

_CATEGORIES: dict[ErrorKind, ErrorCategory] = {
    ErrorKind.INVALID_INPUT: ErrorCategory.FIX_SETUP,
    ErrorKind.UNAUTHORIZED: ErrorCategory.FIX_SETUP,
    ErrorKind.RATE_LIMITED: ErrorCategory.RETRY_SOON,
    ErrorKind.MODEL_UNAVAILABLE: ErrorCategory.RETRY_SOON,
    ErrorKind.PARSE_FAILURE: ErrorCategory.UNEXPECTED,
    ErrorKind.UNKNOWN: ErrorCategory.UNEXPECTED,
}


class AnalysisError(Exception):
    """Raised when no usable AnalysisResult can be produced.

    Args:
        kind: Taxonomy entry used for status mapping and retry decisions.
        message: Short user-facing message. Never a raw provider payload.
        retry_after: Suggested wait in seconds. Rate-limited errors always
            carry one, clamped to the 30-60s window.
    """

    def __init__(self, kind: ErrorKind, message: str, retry_after: float | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        if kind is ErrorKind.RATE_LIMITED:
            wait = RATE_LIMIT_MIN_WAIT
            if retry_after is not None and math.isfinite(retry_after):
                wait = retry_after
            retry_after = min(max(wait, RATE_LIMIT_MIN_WAIT), RATE_LIMIT_MAX_WAIT)
        self.retry_after = retry_after

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_wire(self) -> dict:
        body: dict = {"error": self.message, "kind": self.kind.value}
        if self.retry_after is not None:
            body["retryAfter"] = int(self.retry_after)
        return body

    def __repr__(self) -> str:
        return f"AnalysisError(kind={self.kind.value!r}, message={self.message!r})"
