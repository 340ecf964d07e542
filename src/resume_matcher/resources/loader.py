"""Loaders for bundled YAML resources (keyword lexicon, mock report)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel

from resume_matcher.models.analysis import OptimizedSections, Suggestion

RESOURCES_DIR = Path(__file__).parent


class KeywordLexicon:
    """Immutable, ordered set of lowercase keyword terms."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[str]):
        seen: dict[str, None] = {}
        for term in terms:
            normalized = term.strip().lower()
            if normalized:
                seen.setdefault(normalized, None)
        self._terms: tuple[str, ...] = tuple(seen)

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def contains(self, token: str) -> bool:
        """True if any lexicon term occurs inside ``token`` (substring match)."""
        token = token.lower()
        return any(term in token for term in self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"KeywordLexicon({len(self._terms)} terms)"


class MockReportTemplate(BaseModel):
    suggestions: list[Suggestion]
    optimized_sections: OptimizedSections
    warnings: list[str]
    learning_prefix: str = "Consider learning: "
    aligned_message: str = "Your skills align well with this position"


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Resource not found: {path}")
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_lexicon(path: str | Path | None = None) -> KeywordLexicon:
    """Load a keyword lexicon from YAML. Defaults to the bundled tech lexicon."""
    if path is None:
        return default_lexicon()
    data = _read_yaml(Path(path))
    terms = data.get("terms")
    if not terms:
        raise ValueError(f"Lexicon file has no terms: {path}")
    if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
        raise ValueError(f"Lexicon terms must be a list of strings: {path}")
    return KeywordLexicon(terms)


def load_mock_template(path: str | Path | None = None) -> MockReportTemplate:
    """Load the static mock report content from YAML."""
    if path is None:
        return default_mock_template()
    return MockReportTemplate(**_read_yaml(Path(path)))


@lru_cache(maxsize=1)
def default_lexicon() -> KeywordLexicon:
    return load_lexicon(RESOURCES_DIR / "lexicon.yaml")


@lru_cache(maxsize=1)
def default_mock_template() -> MockReportTemplate:
    return load_mock_template(RESOURCES_DIR / "mock_report.yaml")
