"""
Evaluation type classification and abbreviation normalization.

Both functions are pure lookups against the static tables in lexicons.py.
"""

import re
import unicodedata

from .lexicons import CANONICAL_ABBREVIATIONS, KIND_LEXICONS, WHOLE_WORD_TERMS
from .models import EvaluationKind


def _keyword_pattern(keywords):
    """Keywords must start a word ("lab" matches "labs" but not "colaborativo").

    Terms in WHOLE_WORD_TERMS must be the whole word, plural allowed
    ("tests" but not "testimonio").
    """
    parts = []
    for keyword in sorted(keywords):
        if keyword in WHOLE_WORD_TERMS:
            parts.append(re.escape(keyword) + r's?\b')
        else:
            parts.append(re.escape(keyword))
    return re.compile(r'\b(?:' + '|'.join(parts) + ')')


_KIND_PATTERNS = tuple(
    (kind, _keyword_pattern(keywords))
    for kind, keywords in KIND_LEXICONS
)


def fold_text(text: str) -> str:
    """Lowercase text and strip accents ("Investigación" -> "investigacion")."""
    decomposed = unicodedata.normalize('NFKD', text.lower())
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def classify(name: str) -> EvaluationKind:
    """Infer the evaluation kind from its name.

    The folded name is tested against the exam, project, homework and
    participation lexicons in that order; the first lexicon with a keyword
    starting one of the words in the name wins.

    Args:
        name: Free-text evaluation name, e.g. "Examen Escrito 1"

    Returns:
        Matching EvaluationKind, or EvaluationKind.OTHER if nothing matches
    """
    folded = fold_text(name)
    for kind, pattern in _KIND_PATTERNS:
        if pattern.search(folded):
            return kind
    return EvaluationKind.OTHER


def normalize_abbreviation(raw: str) -> str:
    """Map a raw abbreviation token to its canonical form.

    Spelled-out aliases ("Examen Final") are matched ignoring accents and
    repeated spaces. Unknown tokens are returned trimmed and uppercased.
    """
    normalized = raw.strip().upper()
    key = ' '.join(fold_text(raw).split()).upper()
    return CANONICAL_ABBREVIATIONS.get(key, normalized)
