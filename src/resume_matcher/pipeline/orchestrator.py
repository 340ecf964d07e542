"""Analysis orchestrator - validates input, runs the analyzer, classifies failures."""

from __future__ import annotations

import asyncio
import logging
import time

from resume_matcher.clients.error_mapping import classify_provider_error, make_error
from resume_matcher.clients.llm_client import LLMClient
from resume_matcher.config import AppConfig, get_api_key
from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.models.errors import AnalysisError, ErrorKind
from resume_matcher.pipeline.base import Analyzer
from resume_matcher.pipeline.llm_analyzer import ExternalAnalyzer
from resume_matcher.pipeline.mock_report import HeuristicAnalyzer
from resume_matcher.resources.loader import load_lexicon

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def _is_blank(text: object) -> bool:
    return not isinstance(text, str) or not text.strip()


class AnalysisOrchestrator:
    """Runs one analysis per call with no state shared between calls.

    Failures always surface as ``AnalysisError``; nothing is retried and the
    heuristic analyzer is never substituted at request time. Which analyzer
    runs is fixed when the orchestrator is built.
    """

    def __init__(
        self,
        analyzer: Analyzer | None,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self.analyzer = analyzer  # None: no credentials in strict mode
        self.timeout = timeout

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        if _is_blank(resume_text) or _is_blank(job_text):
            logger.warning("Rejected analysis request: resume or job description is empty")
            raise make_error(ErrorKind.INVALID_INPUT)

        if self.analyzer is None:
            logger.warning("Rejected analysis request: no API key configured")
            raise make_error(ErrorKind.UNAUTHORIZED)

        start = time.monotonic()
        try:
            result = await asyncio.wait_for(
                self.analyzer.analyze(resume_text, job_text),
                timeout=self.timeout,
            )
        except AnalysisError as e:
            logger.warning("Analysis failed (%s): %s", e.kind.value, e.message)
            raise
        except asyncio.TimeoutError as e:
            logger.error("Analyzer %s timed out after %ss", self.analyzer.name, self.timeout)
            raise make_error(ErrorKind.MODEL_UNAVAILABLE) from e
        except Exception as e:
            raise classify_provider_error(e) from e

        logger.info(
            "Analysis done: analyzer=%s, score=%d, %.1fs",
            self.analyzer.name, result.match_score, time.monotonic() - start,
        )
        return result


def build_analyzer(config: AppConfig, api_key: str | None) -> Analyzer | None:
    """Select the analyzer for this deployment.

    Returns ``None`` when no key is configured in strict mode.
    """
    if api_key:
        llm = LLMClient(api_key=api_key, timeout=config.llm.timeout)
        return ExternalAnalyzer(llm, model=config.llm.model, max_tokens=config.llm.max_tokens)
    if config.analysis.mode == "demo":
        return HeuristicAnalyzer(
            load_lexicon(config.analysis.lexicon_path),
            found_limit=config.analysis.found_limit,
            missing_limit=config.analysis.missing_limit,
        )
    return None


def build_orchestrator(
    config: AppConfig | None = None,
    api_key: str | None = None,
) -> AnalysisOrchestrator:
    """Build the orchestrator once at startup from config and the environment."""
    config = config or AppConfig()
    if api_key is None:
        api_key = get_api_key()
    analyzer = build_analyzer(config, api_key)
    if analyzer is None:
        logger.warning("No API key set and analysis.mode is strict; requests will fail")
    else:
        logger.info("Using %s analyzer (mode=%s)", analyzer.name, config.analysis.mode)
    return AnalysisOrchestrator(analyzer, timeout=config.llm.timeout)
