"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_matcher.clients.llm_client import LLMClient, LLMResponse
from resume_matcher.resources.loader import KeywordLexicon


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com

Summary:
Backend engineer with 5 years of Python and PostgreSQL experience.

Experience:
- Acme Corp (2021 - present) - Software Engineer
  - Built REST APIs in Python serving 2M requests/day
  - Migrated CI to GitHub Actions, cutting build time 35%
  - Ran services on Linux hosts with Redis caching

Education:
- B.Sc. Computer Science, State University (2015 - 2019)
"""


@pytest.fixture
def sample_job_text() -> str:
    return """Senior Backend Engineer

We are looking for an engineer with:
- Strong Python and SQL skills
- Experience with Docker and Kubernetes
- Familiarity with AWS and Redis
- Agile / Scrum teams
"""


@pytest.fixture
def small_lexicon() -> KeywordLexicon:
    return KeywordLexicon(["python", "sql", "docker", "kubernetes", "git"])


@pytest.fixture
def llm_report_json() -> dict:
    return {
        "matchScore": 72,
        "keywordsFound": ["Python", "SQL", "Redis"],
        "keywordsMissing": ["Docker", "Kubernetes"],
        "suggestions": [
            {
                "section": "Experience",
                "original": "Built REST APIs in Python serving 2M requests/day",
                "improved": "Designed and built Python REST APIs on SQL-backed services handling 2M requests/day",
                "reason": "Surfaces SQL keyword from the job description",
            }
        ],
        "optimizedSections": {
            "summary": "Backend engineer with 5 years of Python, SQL and Redis experience.",
            "experience": ["Built Python REST APIs serving 2M requests/day"],
            "skills": ["Python", "SQL", "PostgreSQL", "Redis", "Linux"],
            "education": ["B.Sc. Computer Science, State University"],
        },
        "warnings": ["No Docker or Kubernetes experience listed"],
        "learningRecommendations": ["Currently learning: Docker, Kubernetes"],
    }


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    return client
