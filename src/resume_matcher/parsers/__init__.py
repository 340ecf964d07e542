"""Document text extraction."""

from resume_matcher.parsers.resume_parser import (
    ExtractionResult,
    clean_text,
    extract_text,
    load_document,
)

__all__ = ["ExtractionResult", "clean_text", "extract_text", "load_document"]
