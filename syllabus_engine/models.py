"""
Data models for the syllabus extraction engine.

This module defines all the data structures produced by a parse. Every model
is a frozen dataclass: once the parser has built a value it is never changed,
and the linking step builds new records instead of editing old ones.

These models represent:
- Evaluation items (graded components with a weight)
- Schedule entries (one week of the course timeline)
- Course metadata (labeled fields like course name or instructor)
- The parse result that bundles all of the above
- The weight-sum diagnostic
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class EvaluationKind(str, Enum):
    """Closed set of evaluation kinds an item can be classified as."""
    EXAM = "exam"
    PROJECT = "project"
    HOMEWORK = "homework"
    PARTICIPATION = "participation"
    OTHER = "other"


@dataclass(frozen=True)
class EvaluationItem:
    """Represents one graded component of a course.

    The sequence number is assigned by the extractor in order of appearance,
    it is not copied from the numbering printed in the syllabus. Week and date
    may come from the evaluation table itself or be filled in later by the
    linker from the schedule.
    """
    sequence: int               # 1, 2, 3... in extraction order
    name: str                   # e.g., "Examen Escrito 1", "Trabajo de Investigación"
    weight: int                 # Percentage of the final grade, always within 0-100
    kind: EvaluationKind = EvaluationKind.OTHER
    week: Optional[int] = None  # Week number the evaluation happens in, if known
    date: Optional[str] = None  # Raw date token as written ("30/03", "2026-03-30"), not parsed
    abbreviation: Optional[str] = None  # Short institutional code like "EE1" or "TI"
    needs_review: bool = False  # True when the weight could not be read and defaulted to 0
    source: str = "unknown"     # Which strategy produced it: "table", "abbreviation", "colon"


@dataclass(frozen=True)
class ScheduleEntry:
    """Represents one week of the course timeline."""
    week: int                   # Week number (always positive)
    topic: str = ""             # Free text, may be empty
    date: Optional[str] = None  # Raw date token, same semantics as EvaluationItem.date
    evaluation_ref: Optional[str] = None  # Abbreviation of an evaluation held that week


@dataclass(frozen=True)
class Metadata:
    """Labeled single-line fields found anywhere in the document."""
    course_name: Optional[str] = None
    instructor: Optional[str] = None
    term: Optional[str] = None
    course_code: Optional[str] = None


@dataclass(frozen=True)
class ParseResult:
    """Container for everything extracted from one syllabus."""
    evaluations: Tuple[EvaluationItem, ...] = ()
    schedule: Tuple[ScheduleEntry, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.evaluations)


@dataclass(frozen=True)
class WeightDiagnostic:
    """Non-fatal signal that the evaluation weights do not add up to ~100%."""
    total_weight: int
    expected: int = 100
    tolerance: int = 5

    @property
    def deviation(self) -> int:
        return self.total_weight - self.expected

    @property
    def message(self) -> str:
        return (
            f"Evaluation weights sum to {self.total_weight}% "
            f"(expected {self.expected}% +/- {self.tolerance})"
        )


# Serialization helpers for JSON conversion

def serialize_evaluation(item: EvaluationItem) -> Dict[str, Any]:
    """Convert an EvaluationItem to a JSON-serializable dict."""
    return {
        "sequence": item.sequence,
        "name": item.name,
        "weight": item.weight,
        "kind": item.kind.value,
        "week": item.week,
        "date": item.date,
        "abbreviation": item.abbreviation,
        "needs_review": item.needs_review,
        "source": item.source,
    }


def serialize_schedule_entry(entry: ScheduleEntry) -> Dict[str, Any]:
    """Convert a ScheduleEntry to a JSON-serializable dict."""
    return {
        "week": entry.week,
        "date": entry.date,
        "topic": entry.topic,
        "evaluation_ref": entry.evaluation_ref,
    }


def serialize_metadata(metadata: Metadata) -> Dict[str, Optional[str]]:
    """Convert Metadata to a dict, keeping unset fields as None."""
    return {
        "course_name": metadata.course_name,
        "instructor": metadata.instructor,
        "term": metadata.term,
        "course_code": metadata.course_code,
    }


def serialize_parse_result(result: ParseResult) -> Dict[str, Any]:
    """Serialize a ParseResult to a JSON-serializable dict."""
    return {
        "evaluations": [serialize_evaluation(e) for e in result.evaluations],
        "schedule": [serialize_schedule_entry(s) for s in result.schedule],
        "metadata": serialize_metadata(result.metadata),
        "total_weight": result.total_weight,
    }


def serialize_diagnostic(diagnostic: Optional[WeightDiagnostic]) -> Optional[Dict[str, Any]]:
    """Serialize a WeightDiagnostic (or None) for JSON output."""
    if diagnostic is None:
        return None
    return {
        "total_weight": diagnostic.total_weight,
        "expected": diagnostic.expected,
        "tolerance": diagnostic.tolerance,
        "message": diagnostic.message,
    }
