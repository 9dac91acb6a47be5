"""
Evaluation Extraction Module

Turns the text of a syllabus evaluation section into EvaluationItem records.

Syllabi from different institutions share no common layout, so extraction is
a chain of partial parsers tried in a fixed priority order:
1. Tabular-standard ("N.º  Semana  Tipo de evaluación  Peso" tables)
2. Abbreviation rows ("EE1  Examen Escrito 1  20")
3. Simple colon lines ("Examen parcial: 30%")

The first strategy that yields at least one item wins. Results from different
strategies are never merged.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence, Tuple

from .classification import classify
from .lexicons import ABBREVIATION_TOKEN_PATTERN
from .models import EvaluationItem

logger = logging.getLogger(__name__)

Strategy = Callable[[str], List[EvaluationItem]]


# Strategy 1: header row with number, week/date, type and weight columns
TABLE_HEADER_PATTERN = re.compile(
    r'^[^\n]*?'
    r'(?:N\.?\s*[º°]|Nro\.?|No\.|N[uú]m(?:ero)?\.?|\#)'
    r'[^\n]*?(?:Semana|Fecha|Week|Date)'
    r'[^\n]*?(?:Tipo|Evaluaci[oó]n|Type|Evaluation|Assessment)'
    r'[^\n]*?(?:Peso|Weight|Ponderaci[oó]n)'
    r'[^\n]*$',
    re.IGNORECASE | re.MULTILINE,
)

# Table body runs until the first blank line
TABLE_BODY_PATTERN = re.compile(r'\A\s*(.*?)(?:\n[ \t]*\n|\Z)', re.DOTALL)

# "<index> <week>" at the start of a token; zero-width so candidates may overlap
ROW_PREFIX_PATTERN = re.compile(r'(?<!\S)(?=(\d+)\s+(\d+)\s)')
ROW_PREFIX_STRIP = re.compile(r'^\s*\d+\s+\d+\s+')

# Weight is the integer right before a percentage: "20  100%" -> 20
TABLE_WEIGHT_PATTERN = re.compile(r'(?<!\d)(\d{1,3})\s+\d{1,3}\s*%')

# Strategy 2: "EE1  Examen Escrito 1  20" / "TI Trabajo de Investigación 30%".
# A row ends at its weight when the line ends or another "<TOKEN> " row follows,
# so several rows may share one line.
ABBREVIATION_ROW_PATTERN = re.compile(
    r'[ \t]*(' + ABBREVIATION_TOKEN_PATTERN + r')[ \t]+(\S.*?)[ \t]+(\d+)[ \t]*%?'
    r'(?=[ \t]*$|[ \t]+' + ABBREVIATION_TOKEN_PATTERN + r'[ \t])'
)

# Strategy 3: "Examen parcial: 30%"
COLON_ROW_PATTERN = re.compile(
    r'^[ \t]*([^:\n]+?)[ \t]*:[ \t]*(\d+)[ \t]*%',
    re.MULTILINE,
)

_LEADING_BULLET = re.compile(r'^[-•*·]+\s*')


def _clean_name(text: str) -> str:
    """Collapse whitespace and drop list bullets and trailing separators."""
    name = ' '.join(text.split())
    name = _LEADING_BULLET.sub('', name)
    return name.rstrip(' :-–')


def _parse_weight(raw: str) -> Optional[int]:
    """Parse a weight token, returning None if it is not an integer in 0-100."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    if 0 <= value <= 100:
        return value
    return None


def _segment_rows(body: str) -> List[Tuple[int, int, str]]:
    """Split a table body into (index, week, segment) rows.

    A row starts at an "<index> <week>" prefix and runs to the next accepted
    prefix. After the first row, a prefix only counts when its index is the
    previous index plus one, so "Examen Escrito 1 20 100%" stays in one row.
    """
    starts: List[Tuple[int, int, int]] = []
    for match in ROW_PREFIX_PATTERN.finditer(body):
        index, week = int(match.group(1)), int(match.group(2))
        if starts and index != starts[-1][1] + 1:
            continue
        starts.append((match.start(), index, week))

    rows = []
    for i, (position, index, week) in enumerate(starts):
        end = starts[i + 1][0] if i + 1 < len(starts) else len(body)
        rows.append((index, week, body[position:end]))
    return rows


def extract_table_rows(section_text: str) -> List[EvaluationItem]:
    """Strategy 1: standard numbered table with a weight column."""
    header = TABLE_HEADER_PATTERN.search(section_text)
    if not header:
        return []

    body_match = TABLE_BODY_PATTERN.match(section_text[header.end():])
    body = body_match.group(1) if body_match else ''
    logger.debug("Evaluation table found, body: %r", body[:500])

    items: List[EvaluationItem] = []
    for index, week, segment in _segment_rows(body):
        row = ROW_PREFIX_STRIP.sub('', segment)

        weight_match = TABLE_WEIGHT_PATTERN.search(row)
        if weight_match:
            weight = _parse_weight(weight_match.group(1))
            if weight is None:
                logger.debug("Dropping row %d, weight out of range: %r", index, segment.strip())
                continue
            name = _clean_name(row[:weight_match.start()])
            needs_review = False
        else:
            # Keep the row, but flag the missing weight
            weight = 0
            name = _clean_name(row)
            needs_review = True

        if not name:
            logger.debug("Dropping row %d, empty name: %r", index, segment.strip())
            continue

        items.append(EvaluationItem(
            sequence=len(items) + 1,
            name=name,
            weight=weight,
            kind=classify(name),
            week=week if week > 0 else None,
            needs_review=needs_review,
            source="table",
        ))
        logger.debug("Captured table row: %s", items[-1])

    return items


def extract_abbreviation_rows(section_text: str) -> List[EvaluationItem]:
    """Strategy 2: rows introduced by an abbreviation such as EE1 or TI."""
    items: List[EvaluationItem] = []
    for line in section_text.splitlines():
        # Rows must follow each other from the start of the line
        position = 0
        while True:
            match = ABBREVIATION_ROW_PATTERN.match(line, position)
            if not match:
                break
            position = match.end()

            abbreviation, raw_name, raw_weight = match.groups()
            weight = _parse_weight(raw_weight)
            name = _clean_name(raw_name)
            if weight is None or not name:
                continue

            items.append(EvaluationItem(
                sequence=len(items) + 1,
                name=name,
                weight=weight,
                kind=classify(name),
                abbreviation=abbreviation,
                source="abbreviation",
            ))
    return items


def extract_colon_rows(section_text: str) -> List[EvaluationItem]:
    """Strategy 3: "<name>: <weight>%" lines."""
    items: List[EvaluationItem] = []
    for match in COLON_ROW_PATTERN.finditer(section_text):
        raw_name, raw_weight = match.groups()
        weight = _parse_weight(raw_weight)
        name = _clean_name(raw_name)
        if weight is None or not name:
            continue

        items.append(EvaluationItem(
            sequence=len(items) + 1,
            name=name,
            weight=weight,
            kind=classify(name),
            source="colon",
        ))
    return items


# Fixed priority order
STRATEGIES: Tuple[Strategy, ...] = (
    extract_table_rows,
    extract_abbreviation_rows,
    extract_colon_rows,
)


def extract_evaluations(section_text: Optional[str],
                        strategies: Sequence[Strategy] = STRATEGIES) -> Tuple[EvaluationItem, ...]:
    """Extract evaluations from an evaluation section.

    Args:
        section_text: Text of the evaluation section, or None if the
                      document has none
        strategies: Extraction strategies in priority order

    Returns:
        Items from the first strategy that found any, or an empty tuple
    """
    if not section_text:
        return ()

    for strategy in strategies:
        items = strategy(section_text)
        if items:
            logger.debug("Strategy %s extracted %d evaluation(s)",
                         getattr(strategy, '__name__', strategy), len(items))
            return tuple(items)

    logger.debug("No extraction strategy matched the evaluation section")
    return ()
