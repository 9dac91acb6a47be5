"""
Linking module for evaluations and schedule.

Copies week and date information from schedule entries onto the evaluations
they reference by abbreviation (e.g. the "EE1" in "5  30/03  Tema 5  EE1").
"""

from dataclasses import replace
from typing import Dict, Sequence, Tuple

from .classification import normalize_abbreviation
from .models import EvaluationItem, ParseResult, ScheduleEntry


def _index_schedule(schedule: Sequence[ScheduleEntry]) -> Dict[str, ScheduleEntry]:
    """Map each normalized evaluation reference to its first schedule entry."""
    index: Dict[str, ScheduleEntry] = {}
    for entry in schedule:
        if not entry.evaluation_ref:
            continue
        index.setdefault(normalize_abbreviation(entry.evaluation_ref), entry)
    return index


def link(evaluations: Sequence[EvaluationItem],
         schedule: Sequence[ScheduleEntry]) -> Tuple[EvaluationItem, ...]:
    """Merge schedule week/date into evaluations with a matching abbreviation.

    Args:
        evaluations: Extracted evaluations
        schedule: Extracted schedule entries

    Returns:
        New tuple of evaluations, same length and order. Matched evaluations
        get week and date from the first schedule entry referencing them;
        everything else is passed through unchanged.
    """
    by_ref = _index_schedule(schedule)

    linked = []
    for evaluation in evaluations:
        entry = None
        if evaluation.abbreviation:
            entry = by_ref.get(normalize_abbreviation(evaluation.abbreviation))
        if entry is None:
            linked.append(evaluation)
        else:
            linked.append(replace(evaluation, week=entry.week, date=entry.date))
    return tuple(linked)


def link_result(result: ParseResult) -> ParseResult:
    """Return a copy of a ParseResult with its evaluations linked."""
    return replace(result, evaluations=link(result.evaluations, result.schedule))
