"""Heuristic keyword matcher used when no external analyzer is available."""

from __future__ import annotations

from resume_matcher.models.analysis import MatchOutcome
from resume_matcher.resources.loader import KeywordLexicon, default_lexicon

BASE_SCORE = 50
POINTS_PER_KEYWORD = 8
MIN_SCORE = 45
MAX_SCORE = 95

FOUND_LIMIT = 8
MISSING_LIMIT = 5


def tokenize(text: str) -> list[str]:
    """Lowercase and split on whitespace."""
    return text.lower().split()


def _appears_in(term: str, tokens: list[str]) -> bool:
    return any(term in token for token in tokens)


def score_for(found_total: int) -> int:
    """Map the number of shared keywords to a score in [MIN_SCORE, MAX_SCORE]."""
    return min(MAX_SCORE, max(MIN_SCORE, BASE_SCORE + POINTS_PER_KEYWORD * found_total))


def match_keywords(
    resume_text: str,
    job_text: str,
    lexicon: KeywordLexicon | None = None,
    *,
    found_limit: int = FOUND_LIMIT,
    missing_limit: int = MISSING_LIMIT,
) -> MatchOutcome:
    """Compare two documents against the keyword lexicon.

    A term is found when a token of each document contains it, and missing
    when only the job description has it. Both lists keep lexicon order and
    are truncated to their limits; the score uses the uncapped found count.
    """
    if lexicon is None:
        lexicon = default_lexicon()
    resume_tokens = tokenize(resume_text)
    job_tokens = tokenize(job_text)

    found: list[str] = []
    missing: list[str] = []
    for term in lexicon:
        if not _appears_in(term, job_tokens):
            continue
        if _appears_in(term, resume_tokens):
            found.append(term)
        else:
            missing.append(term)

    return MatchOutcome(
        found_keywords=found[:found_limit],
        missing_keywords=missing[:missing_limit],
        found_total=len(found),
        match_score=score_for(len(found)),
    )
