"""
Schedule extraction module.

Parses the schedule ("Cronograma") section line by line into ScheduleEntry
records. Typical rows:

    1  02/03  Introducción  -
    5  30/03  Tema 5  EE1
    Semana 6  Valuation basics
"""

import logging
import re
from typing import List, Optional, Tuple

from .lexicons import ABBREVIATION_REF_PATTERN
from .models import ScheduleEntry

logger = logging.getLogger(__name__)


DATE_TOKEN_PATTERN = r'\d{4}-\d{2}-\d{2}|\d{1,2}/\d{1,2}(?:/\d{2,4})?'

SCHEDULE_ROW_PATTERN = re.compile(
    r'^\s*(?i:(?:semana|week|sem\.)\s*)?'
    r'(\d{1,3})'
    r'(?:\s+(' + DATE_TOKEN_PATTERN + r'))?'
    r'(?:\s+(.*?))?\s*$'
)

# Evaluation reference at the end of the topic ("Tema 5 EE1")
TRAILING_REF_PATTERN = re.compile(r'(?:^|\s)(' + ABBREVIATION_REF_PATTERN + r')$')

# "-" placeholder used for weeks without an evaluation
TRAILING_PLACEHOLDER_PATTERN = re.compile(r'(?:^|\s+)[-–—]$')


def parse_schedule_line(line: str) -> Optional[ScheduleEntry]:
    """Parse one schedule line, or return None if it is not a schedule row."""
    match = SCHEDULE_ROW_PATTERN.match(line)
    if not match:
        return None

    week = int(match.group(1))
    if week < 1:
        return None

    date = match.group(2)
    topic = (match.group(3) or '').strip()
    topic = TRAILING_PLACEHOLDER_PATTERN.sub('', topic)

    evaluation_ref = None
    ref_match = TRAILING_REF_PATTERN.search(topic)
    if ref_match:
        evaluation_ref = ref_match.group(1)
        topic = topic[:ref_match.start()].strip()

    return ScheduleEntry(
        week=week,
        date=date,
        topic=topic,
        evaluation_ref=evaluation_ref,
    )


def extract_schedule(section_text: Optional[str]) -> Tuple[ScheduleEntry, ...]:
    """Extract weekly entries from a schedule section.

    Lines that do not look like schedule rows are skipped. Entries keep the
    order of their lines; repeated weeks are not merged.
    """
    if not section_text:
        return ()

    entries: List[ScheduleEntry] = []
    for line in section_text.splitlines():
        if not line.strip():
            continue
        entry = parse_schedule_line(line)
        if entry is None:
            continue
        entries.append(entry)

    logger.debug("Schedule entries extracted: %d", len(entries))
    return tuple(entries)
