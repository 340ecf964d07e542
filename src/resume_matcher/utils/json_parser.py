"""Extract a JSON object from model output."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> dict:
    """Parse a JSON object from an LLM response.

    Accepts bare JSON, JSON wrapped in a ```json fence, or an object embedded
    in surrounding prose (first '{' to last '}'). Arrays and scalars are
    rejected since every caller expects an object.

    Raises:
        ValueError: No JSON object could be parsed.
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected text, got {type(text).__name__}")
    text = text.strip()

    for candidate in (text, _strip_code_fences(text), _slice_braces(text)):
        if not candidate:
            continue
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _slice_braces(text: str) -> str:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return ""
    return text[start : end + 1]
