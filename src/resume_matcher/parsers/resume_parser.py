"""Text extraction for uploaded resume and job description files."""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIMES = ("text/plain", "text/markdown")

SUPPORTED_MIMES = (PDF_MIME, DOCX_MIME, *TEXT_MIMES)

SUFFIX_MIMES: dict[str, str] = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": "text/plain",
    ".md": "text/markdown",
}

DEFAULT_MAX_SIZE = 5 * 1024 * 1024
MIN_TEXT_LENGTH = 50


class ExtractionResult(BaseModel):
    """Outcome of a text extraction. Exactly one of ``text``/``error`` is set."""

    text: str | None = None
    requires_manual_input: bool = False
    pages: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clean_text(text: str) -> str:
    """Normalize extracted text.

    Removes BOM/zero-width artifacts, unifies bullet glyphs to ``-``,
    collapses runs of spaces and caps blank lines at one.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def manual_input_placeholder(file_name: str, size: int) -> str:
    return (
        "[Could not extract text from this PDF]\n\n"
        "Please paste your resume text manually.\n\n"
        f"File received: {file_name} ({size / 1024:.1f} KB)"
    )


def _read_pdf(data: bytes) -> tuple[str, int]:
    import fitz  # pymupdf

    with fitz.open(stream=data, filetype="pdf") as doc:
        pages = [page.get_text() for page in doc]
    return "\n".join(pages), len(pages)


def _read_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())


def extract_text(
    file_bytes: bytes,
    mime_type: str,
    max_size: int = DEFAULT_MAX_SIZE,
    file_name: str = "upload",
) -> ExtractionResult:
    """Extract plain text from an uploaded file.

    PDFs that yield little or no text return a placeholder asking the user to
    paste their resume, flagged with ``requires_manual_input``. The placeholder
    is still usable as document text.
    """
    if not file_bytes:
        return ExtractionResult(error="No file provided")
    if mime_type not in SUPPORTED_MIMES:
        return ExtractionResult(error="Only PDF, DOCX or plain-text files are accepted")
    if len(file_bytes) > max_size:
        return ExtractionResult(
            error=f"File size must be less than {max_size / (1024 * 1024):g}MB"
        )

    if mime_type == PDF_MIME:
        try:
            raw, pages = _read_pdf(file_bytes)
        except Exception:
            logger.warning("PDF extraction failed for %s", file_name, exc_info=True)
            raw, pages = "", 1
        text = clean_text(raw)
        if len(text) < MIN_TEXT_LENGTH:
            return ExtractionResult(
                text=manual_input_placeholder(file_name, len(file_bytes)),
                requires_manual_input=True,
                pages=pages,
            )
        return ExtractionResult(text=text, pages=pages)

    if mime_type == DOCX_MIME:
        try:
            raw = _read_docx(file_bytes)
        except Exception:
            logger.warning("DOCX extraction failed for %s", file_name, exc_info=True)
            return ExtractionResult(error="Failed to read DOCX file")
        return ExtractionResult(text=clean_text(raw), pages=1)

    try:
        raw = file_bytes.decode("utf-8")
    except UnicodeDecodeError:
        return ExtractionResult(error="Text files must be UTF-8 encoded")
    return ExtractionResult(text=clean_text(raw), pages=1)


def load_document(file_path: str | Path, max_size: int = DEFAULT_MAX_SIZE) -> str:
    """Read a resume or job description file from disk and return its text.

    Raises:
        ValueError: Unsupported suffix or the file could not be extracted.
    """
    path = Path(file_path)
    mime_type = SUFFIX_MIMES.get(path.suffix.lower())
    if mime_type is None:
        raise ValueError(f"Unsupported file format: {path.suffix}")
    result = extract_text(path.read_bytes(), mime_type, max_size=max_size, file_name=path.name)
    if not result.ok:
        raise ValueError(f"{path.name}: {result.error}")
    if result.requires_manual_input:
        logger.warning("No text layer found in %s", path.name)
    return result.text
