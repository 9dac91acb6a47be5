"""
Document text extraction.

Decodes syllabus files into the plain text the parser consumes:
- PDF via pdfplumber (page text joined with newlines)
- DOCX via python-docx (paragraphs, then table rows with cells joined by spaces)
- anything else read as UTF-8, falling back to latin-1
"""

import logging
from pathlib import Path
from typing import List, Union

import docx
import pdfplumber

from .errors import UnsupportedDocumentError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def extract_pdf_text(pdf_path: PathLike) -> str:
    """Extract text from every page of a PDF."""
    pages_text: List[str] = []
    with pdfplumber.open(str(pdf_path)) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if text:
                pages_text.append(text)
    return "\n".join(pages_text)


def extract_docx_text(docx_path: PathLike) -> str:
    """Extract paragraph and table text from a DOCX file.

    Table rows are emitted as one line each, cells separated by two spaces,
    so evaluation tables keep the "1  5  Examen  20  100%" row shape.
    """
    document = docx.Document(str(docx_path))
    lines = [para.text for para in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.append("  ".join(cell.text.strip() for cell in row.cells))
    return "\n".join(lines)


def extract_plain_text(path: PathLike) -> str:
    """Read a text file as UTF-8, falling back to latin-1."""
    raw = Path(path).read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1", errors="ignore")


def read_document_text(path: PathLike) -> str:
    """Decode a syllabus file into plain text based on its extension.

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedDocumentError: If the file cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")

    suffix = path.suffix.lower()
    logger.debug("Reading %s as %s", path, suffix or "plain text")
    try:
        if suffix == ".pdf":
            return extract_pdf_text(path)
        if suffix == ".docx":
            return extract_docx_text(path)
    except Exception as exc:
        raise UnsupportedDocumentError(f"Could not read {path.name}: {exc}") from exc
    return extract_plain_text(path)
