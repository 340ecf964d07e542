"""Analyze operation consumed by the presentation layer.

Framework-agnostic: takes the decoded request payload and returns a JSON-ready
body together with the status code to send.
"""

from __future__ import annotations

import logging

from resume_matcher.clients.error_mapping import make_error
from resume_matcher.models.errors import AnalysisError, ErrorKind
from resume_matcher.pipeline.orchestrator import AnalysisOrchestrator

logger = logging.getLogger(__name__)

RESUME_FIELD = "resumeText"
JOB_FIELD = "jobDescription"


async def handle_analyze(payload: object, orchestrator: AnalysisOrchestrator) -> tuple[dict, int]:
    """Run one analysis request.

    Returns:
        ``(report, 200)`` on success, otherwise ``({"error": ..., "kind": ...}, status)``
        with 400/401/429/503/500 depending on the error kind.
    """
    if not isinstance(payload, dict):
        error = make_error(ErrorKind.INVALID_INPUT)
        return error.to_wire(), error.status_code

    try:
        result = await orchestrator.analyze(payload.get(RESUME_FIELD), payload.get(JOB_FIELD))
    except AnalysisError as e:
        logger.info("Analyze request failed: %s -> %d", e.kind.value, e.status_code)
        return e.to_wire(), e.status_code
    return result.to_wire(), 200
