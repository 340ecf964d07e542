"""Analyzers and the orchestrator that runs them."""

from resume_matcher.pipeline.llm_analyzer import ExternalAnalyzer
from resume_matcher.pipeline.mock_report import HeuristicAnalyzer, build_mock_report
from resume_matcher.pipeline.orchestrator import AnalysisOrchestrator, build_orchestrator

__all__ = [
    "AnalysisOrchestrator",
    "ExternalAnalyzer",
    "HeuristicAnalyzer",
    "build_mock_report",
    "build_orchestrator",
]
