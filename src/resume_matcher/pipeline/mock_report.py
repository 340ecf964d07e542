"""Heuristic report builder: keyword matching plus canned report content."""

from __future__ import annotations

import logging

from resume_matcher.matching.heuristic import FOUND_LIMIT, MISSING_LIMIT, match_keywords
from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.resources.loader import (
    KeywordLexicon,
    MockReportTemplate,
    default_lexicon,
    default_mock_template,
)

logger = logging.getLogger(__name__)


def learning_recommendations(missing: list[str], template: MockReportTemplate) -> list[str]:
    if missing:
        return [f"{template.learning_prefix}{', '.join(missing)}"]
    return [template.aligned_message]


def build_mock_report(
    resume_text: str,
    job_text: str,
    *,
    lexicon: KeywordLexicon | None = None,
    template: MockReportTemplate | None = None,
    found_limit: int = FOUND_LIMIT,
    missing_limit: int = MISSING_LIMIT,
) -> AnalysisResult:
    """Build a complete report without calling any external service."""
    if lexicon is None:
        lexicon = default_lexicon()
    if template is None:
        template = default_mock_template()
    outcome = match_keywords(
        resume_text,
        job_text,
        lexicon,
        found_limit=found_limit,
        missing_limit=missing_limit,
    )
    # Copies keep the cached template untouched if a caller mutates the result.
    return AnalysisResult(
        match_score=outcome.match_score,
        keywords_found=outcome.found_keywords,
        keywords_missing=outcome.missing_keywords,
        suggestions=[s.model_copy() for s in template.suggestions],
        optimized_sections=template.optimized_sections.model_copy(deep=True),
        warnings=list(template.warnings),
        learning_recommendations=learning_recommendations(outcome.missing_keywords, template),
    )


class HeuristicAnalyzer:
    """Analyzer backed by the keyword matcher; needs no credentials."""

    name = "heuristic"

    def __init__(
        self,
        lexicon: KeywordLexicon | None = None,
        template: MockReportTemplate | None = None,
        *,
        found_limit: int = FOUND_LIMIT,
        missing_limit: int = MISSING_LIMIT,
    ):
        self.lexicon = default_lexicon() if lexicon is None else lexicon
        self.template = default_mock_template() if template is None else template
        self.found_limit = found_limit
        self.missing_limit = missing_limit

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        result = build_mock_report(
            resume_text,
            job_text,
            lexicon=self.lexicon,
            template=self.template,
            found_limit=self.found_limit,
            missing_limit=self.missing_limit,
        )
        logger.info(
            "Heuristic analysis: score=%d, found=%d, missing=%d",
            result.match_score, len(result.keywords_found), len(result.keywords_missing),
        )
        return result
