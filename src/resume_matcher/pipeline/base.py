"""Analyzer capability shared by the heuristic and LLM-backed variants."""

from __future__ import annotations

from typing import Protocol

from resume_matcher.models.analysis import AnalysisResult


class Analyzer(Protocol):
    name: str

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult: ...
