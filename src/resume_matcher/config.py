"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

API_KEY_ENV = "ANTHROPIC_API_KEY"

ANALYSIS_MODES = ("strict", "demo")


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: float = 30
    max_tokens: int = 4096

    def __post_init__(self):
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_tokens", self.max_tokens, 256, 64000)


@dataclass(frozen=True)
class AnalysisConfig:
    # strict: fail with Unauthorized when no API key is set.
    # demo: serve heuristic reports when no API key is set.
    mode: str = "strict"
    found_limit: int = 8
    missing_limit: int = 5
    lexicon_path: str | None = None

    def __post_init__(self):
        if self.mode not in ANALYSIS_MODES:
            raise ValueError(f"mode must be one of {ANALYSIS_MODES}, got {self.mode!r}")
        _check_range("found_limit", self.found_limit, 0, 100)
        _check_range("missing_limit", self.missing_limit, 0, 100)


@dataclass(frozen=True)
class ExtractionConfig:
    max_file_mb: float = 5

    def __post_init__(self):
        _check_range("max_file_mb", self.max_file_mb, 0.1, 50)

    @property
    def max_bytes(self) -> int:
        return int(self.max_file_mb * 1024 * 1024)


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)


def get_api_key() -> str | None:
    """Return the configured API key, treating blank values as unset."""
    key = os.environ.get(API_KEY_ENV, "").strip()
    return key or None


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**(raw.get("llm") or {})),
        analysis=AnalysisConfig(**(raw.get("analysis") or {})),
        extraction=ExtractionConfig(**(raw.get("extraction") or {})),
    )
