"""Tests for document text extraction."""

from unittest.mock import patch

import pytest

from resume_matcher.parsers.resume_parser import (
    DOCX_MIME,
    PDF_MIME,
    clean_text,
    extract_text,
    load_document,
)

LONG_TEXT = "Jane Doe - Backend engineer with Python, SQL and Redis experience since 2019."


class TestExtractText:
    def test_plain_text(self):
        result = extract_text(b"Jane Doe\n\n\n\nPython   developer", "text/plain")
        assert result.ok
        assert result.text == "Jane Doe\n\nPython developer"
        assert not result.requires_manual_input

    def test_empty_bytes(self):
        result = extract_text(b"", PDF_MIME)
        assert result.error == "No file provided"
        assert result.text is None

    def test_unsupported_mime(self):
        result = extract_text(b"GIF89a", "image/gif")
        assert not result.ok
        assert "accepted" in result.error

    def test_too_large(self):
        result = extract_text(b"x" * 2048, "text/plain", max_size=1024)
        assert result.error.startswith("File size must be less than")

    def test_non_utf8_text(self):
        result = extract_text("résumé".encode("latin-1"), "text/plain")
        assert result.error == "Text files must be UTF-8 encoded"

    def test_pdf_with_text(self):
        with patch(
            "resume_matcher.parsers.resume_parser._read_pdf", return_value=(LONG_TEXT, 2)
        ):
            result = extract_text(b"%PDF-1.7 ...", PDF_MIME)
        assert result.text == LONG_TEXT
        assert result.pages == 2
        assert not result.requires_manual_input

    def test_pdf_without_text_layer_returns_placeholder(self):
        with patch("resume_matcher.parsers.resume_parser._read_pdf", return_value=("", 1)):
            result = extract_text(b"%PDF-1.7 ...", PDF_MIME, file_name="scan.pdf")
        assert result.ok
        assert result.requires_manual_input
        assert "paste your resume text manually" in result.text
        assert "scan.pdf" in result.text

    def test_corrupt_pdf_returns_placeholder(self):
        with patch(
            "resume_matcher.parsers.resume_parser._read_pdf",
            side_effect=RuntimeError("cannot open broken document"),
        ):
            result = extract_text(b"not really a pdf", PDF_MIME)
        assert result.ok
        assert result.requires_manual_input

    def test_docx(self):
        with patch("resume_matcher.parsers.resume_parser._read_docx", return_value="Jane\n•  Python"):
            result = extract_text(b"PK...", DOCX_MIME)
        assert result.text == "Jane\n- Python"


class TestCleanText:
    def test_removes_unicode_artifacts(self):
        assert clean_text("\ufeffHello\u200bWorld\u00ad!") == "HelloWorld!"

    def test_normalizes_bullets(self):
        result = clean_text("● item1\n•  item2\n◆ item3")
        assert result == "- item1\n- item2\n- item3"

    def test_collapses_blank_lines(self):
        assert "\n\n\n" not in clean_text("a\n\n\n\n\nb")


class TestLoadDocument:
    def test_txt_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe\nPython", encoding="utf-8")
        assert load_document(path) == "Jane Doe\nPython"

    def test_md_file(self, tmp_path):
        path = tmp_path / "job.md"
        path.write_text("# Backend Engineer\n\n● Python", encoding="utf-8")
        assert "- Python" in load_document(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "resume.xyz"
        path.write_text("test")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_document(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("")
        with pytest.raises(ValueError, match="No file provided"):
            load_document(path)
