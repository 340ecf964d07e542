"""Bundled lexicon and report templates."""

from resume_matcher.resources.loader import (
    KeywordLexicon,
    MockReportTemplate,
    default_lexicon,
    default_mock_template,
    load_lexicon,
    load_mock_template,
)

__all__ = [
    "KeywordLexicon",
    "MockReportTemplate",
    "default_lexicon",
    "default_mock_template",
    "load_lexicon",
    "load_mock_template",
]
