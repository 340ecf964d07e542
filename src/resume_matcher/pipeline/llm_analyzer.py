"""LLM-backed analyzer: prompt, call the model, validate the report."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from resume_matcher.clients.error_mapping import make_error
from resume_matcher.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.models.errors import ErrorKind
from resume_matcher.pipeline.prompt_builder import JSON_ONLY_SYSTEM, build_prompt
from resume_matcher.utils.json_parser import extract_json_object

logger = logging.getLogger(__name__)


def parse_analysis(text: str) -> AnalysisResult:
    """Parse model output into an AnalysisResult.

    Raises:
        AnalysisError: ``PARSE_FAILURE`` when the text is not a JSON object or
            the object does not match the report schema.
    """
    try:
        data = extract_json_object(text)
    except ValueError as e:
        logger.warning("Model output is not a JSON object: %s", e)
        raise make_error(ErrorKind.PARSE_FAILURE) from e
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        logger.warning("Model output failed schema validation: %d errors", e.error_count())
        raise make_error(ErrorKind.PARSE_FAILURE) from e


class ExternalAnalyzer:
    """Analyzer that delegates the report to Claude.

    Provider exceptions are not classified here; they propagate to the
    orchestrator as raised by the SDK.
    """

    name = "external"

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        prompt = build_prompt(resume_text, job_text)
        response = await self.llm.generate(
            prompt=prompt,
            system=JSON_ONLY_SYSTEM,
            model=self.model,
            max_tokens=self.max_tokens,
        )
        result = parse_analysis(response.text)
        logger.info(
            "LLM analysis: score=%d (%d input, %d output tokens)",
            result.match_score, response.input_tokens, response.output_tokens,
        )
        return result
