"""Dependency-free keyword matching."""

from resume_matcher.matching.heuristic import match_keywords, score_for, tokenize

__all__ = ["match_keywords", "score_for", "tokenize"]
