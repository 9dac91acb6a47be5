"""
Section Location Module

Finds named sections ("VII. Evaluación", "Schedule", ...) inside the raw text
of a syllabus. A section is the text between the end of its heading line and
the start of the next heading line, or the end of the document.

Headings are matched case-insensitively and accent-insensitively, with an
optional roman or arabic numeral prefix. A numbered heading may carry a short
qualifier after the title but not a sentence, so "8 Evaluación parcial EP"
(a schedule row) and "3 evaluaciones escritas." (prose) are not headings.
An unnumbered heading only counts
when the title is alone on its line, so that table headers like
"Evaluación  Sigla  Peso" are not mistaken for headings.
"""

import logging
import re
from typing import Iterable, Optional, Pattern

from .lexicons import EVALUATION_TITLES, OTHER_SECTION_TITLES, SCHEDULE_TITLES

logger = logging.getLogger(__name__)


_ACCENTED_VOWELS = {
    'a': '[aá]',
    'e': '[eé]',
    'i': '[ií]',
    'o': '[oó]',
    'u': '[uúü]',
}

# "VII." / "VII" / "7." / "7)" in front of a title; arabic numerals need "." or ")"
_NUMERAL_PREFIX = r'(?:[IVX]{1,5}(?:[.)][ \t]*|[ \t]+)|\d{1,2}[.)][ \t]*)'

# Short qualifier after the title ("Evaluación del aprendizaje"), not a sentence
_TITLE_SUFFIX = r'[^\n.%:]{0,40}:?[ \t]*'


def accent_insensitive(fragment: str) -> str:
    """Let every plain vowel in a regex fragment also match its accented form."""
    return ''.join(_ACCENTED_VOWELS.get(ch, ch) for ch in fragment)


def _titles_alternation(titles: Iterable[str]) -> str:
    return '(?:' + '|'.join(accent_insensitive(t) for t in titles) + ')'


def build_heading_pattern(titles: Iterable[str]) -> Pattern:
    """Build a heading pattern for the given title phrases.

    The pattern matches a whole heading line, either numbered
    ("VII. Sistema de Evaluación") or bare ("Evaluation:").
    """
    title = _titles_alternation(titles)
    return re.compile(
        r'^[ \t]*(?:'
        + _NUMERAL_PREFIX + title + r'\b' + _TITLE_SUFFIX
        + r'|' + title + r'[ \t]*:?[ \t]*'
        + r')$',
        re.IGNORECASE | re.MULTILINE,
    )


EVALUATION_HEADING = build_heading_pattern(EVALUATION_TITLES)
SCHEDULE_HEADING = build_heading_pattern(SCHEDULE_TITLES)

# Any line that opens a new section: a numbered capitalized line without a
# percentage in it, or one of the known section titles alone on its line
NEXT_HEADING = re.compile(
    r'^[ \t]*(?:'
    r'(?:[IVX]{1,5}\.?|\d{1,2}\.)[ \t]+(?![^\n]*%)[A-ZÁÉÍÓÚÑ][^\n]*'
    r'|(?i:' + _titles_alternation(EVALUATION_TITLES + SCHEDULE_TITLES + OTHER_SECTION_TITLES)
    + r')[ \t]*:?[ \t]*'
    r')$',
    re.MULTILINE,
)


def locate_section(text: str, heading_pattern: Pattern,
                   next_heading_pattern: Pattern = NEXT_HEADING) -> Optional[str]:
    """Get the text of the section introduced by a heading.

    Args:
        text: Full document text
        heading_pattern: Compiled pattern matching the section heading line
        next_heading_pattern: Compiled pattern matching any following heading

    Returns:
        Text strictly between the heading and the next heading (or end of
        text), or None if the heading is not found
    """
    heading = heading_pattern.search(text)
    if not heading:
        logger.debug("Heading not found: %s", heading_pattern.pattern[:60])
        return None

    start = heading.end()
    following = next_heading_pattern.search(text, start)
    end = following.start() if following else len(text)

    logger.debug("Section found after heading %r (%d chars)",
                 heading.group(0).strip(), end - start)
    return text[start:end]


def find_evaluation_section(text: str) -> Optional[str]:
    """Get the evaluation/grading section."""
    return locate_section(text, EVALUATION_HEADING)


def find_schedule_section(text: str) -> Optional[str]:
    """Get the schedule/calendar section."""
    return locate_section(text, SCHEDULE_HEADING)
