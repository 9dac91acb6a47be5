"""
Course Information Extraction Module

Pulls labeled single-line fields ("Curso: Finanzas I", "Docente: ...") from
the whole syllabus text.
"""

import re
from typing import Dict, Optional, Pattern

from .lexicons import METADATA_LABELS
from .models import Metadata


def _label_pattern(synonyms) -> Pattern:
    """Build a pattern for "<label>: <value>" at the start of a line."""
    return re.compile(
        r'^[ \t•*\-]*(?:' + '|'.join(synonyms) + r')[ \t]*:[ \t]*(\S[^\n]*?)[ \t]*$',
        re.IGNORECASE | re.MULTILINE,
    )


LABEL_PATTERNS: Dict[str, Pattern] = {
    field_name: _label_pattern(synonyms)
    for field_name, synonyms in METADATA_LABELS.items()
}


def extract_labeled_field(text: str, pattern: Pattern) -> Optional[str]:
    """Get the value of the first line matching a label pattern."""
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_metadata(full_text: str) -> Metadata:
    """Extract course name, instructor, term and course code.

    Each field is looked up independently; labels that are missing leave
    the field as None.
    """
    values = {
        field_name: extract_labeled_field(full_text, pattern)
        for field_name, pattern in LABEL_PATTERNS.items()
    }
    return Metadata(**values)
