"""
Résumé text extraction.

Converts an uploaded résumé file into UTF‑8 plain text.  Only two
formats contribute text: PDF files (parsed with ``pdfplumber``) and
plain ``.txt`` files.  Every other extension is accepted for storage
by the application layer but yields an empty string here.

Extraction failures are recovered locally.  A corrupt PDF or an
unreadable text file returns ``""`` so that a single bad upload
degrades that candidate's score instead of aborting a ranking request.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Optional

import pdfplumber

if TYPE_CHECKING:  # pragma: no cover
    from ..recruitment.schema import ResumeDocument

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"
TEXT_EXTENSION = ".txt"


def _normalize_extension(file_path: str, ext: Optional[str]) -> str:
    if ext is None:
        ext = os.path.splitext(file_path)[1]
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def _extract_pdf_text(file_path: str) -> str:
    """Concatenate the text of every PDF page in document order."""
    try:
        pages = []
        with pdfplumber.open(file_path) as pdf:
            for page in pdf.pages:
                pages.append(page.extract_text() or "")
        text = "\n".join(pages)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to parse PDF %s: %s", file_path, exc)
        return ""
    logger.debug("Extracted %d characters from PDF %s", len(text), file_path)
    return text


def _extract_plain_text(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read text résumé %s: %s", file_path, exc)
        return ""


def extract_text(file_path: str, ext: Optional[str] = None) -> str:
    """Extract plain text from a résumé file.

    Args:
        file_path: Path to the résumé on disk.
        ext: File extension deciding how the file is read, with or
            without the leading dot.  Defaults to the extension of
            ``file_path``.  Compared case‑insensitively.

    Returns:
        The extracted text, or an empty string when the file cannot be
        parsed or its type is not supported.
    """
    ext = _normalize_extension(file_path, ext)
    if ext == PDF_EXTENSION:
        return _extract_pdf_text(file_path)
    if ext == TEXT_EXTENSION:
        return _extract_plain_text(file_path)
    logger.debug("Skipping text extraction for unsupported extension %r (%s)", ext, file_path)
    return ""


def extract_document_text(document: "ResumeDocument") -> str:
    """Extract text from a :class:`ResumeDocument`."""
    return extract_text(document.path, document.extension)
