"""Data models for resume analysis."""

from resume_matcher.models.analysis import (
    AnalysisResult,
    MatchOutcome,
    OptimizedSections,
    Suggestion,
)
from resume_matcher.models.errors import AnalysisError, ErrorCategory, ErrorKind

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "ErrorCategory",
    "ErrorKind",
    "MatchOutcome",
    "OptimizedSections",
    "Suggestion",
]
