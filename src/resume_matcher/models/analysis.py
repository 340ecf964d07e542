"""Pydantic models for the analysis report."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Base for models exchanged with callers and the LLM in camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class MatchOutcome(BaseModel):
    found_keywords: list[str]
    missing_keywords: list[str]
    found_total: int = 0  # uncapped, drives the score
    match_score: int = Field(ge=0, le=100)


class Suggestion(_WireModel):
    section: str
    original: str
    improved: str
    reason: str


class OptimizedSections(_WireModel):
    summary: str
    experience: list[str]
    skills: list[str]
    education: list[str]


class AnalysisResult(_WireModel):
    """Full optimization report. Every analyzer must produce this shape."""

    match_score: int = Field(alias="matchScore", ge=0, le=100)
    keywords_found: list[str] = Field(alias="keywordsFound")
    keywords_missing: list[str] = Field(alias="keywordsMissing")
    suggestions: list[Suggestion]
    optimized_sections: OptimizedSections = Field(alias="optimizedSections")
    warnings: list[str]
    learning_recommendations: list[str] = Field(alias="learningRecommendations")
