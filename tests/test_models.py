"""Unit tests for data models."""

import dataclasses

import pytest
from syllabus_engine.models import (
    EvaluationItem, EvaluationKind, Metadata, ParseResult, ScheduleEntry,
    WeightDiagnostic, serialize_diagnostic, serialize_evaluation,
    serialize_parse_result,
)


def test_evaluation_item():
    """Test EvaluationItem model."""
    item = EvaluationItem(
        sequence=1,
        name="Examen Escrito 1",
        weight=20,
        kind=EvaluationKind.EXAM,
        abbreviation="EE1"
    )
    assert item.sequence == 1
    assert item.name == "Examen Escrito 1"
    assert item.weight == 20
    assert item.kind == EvaluationKind.EXAM
    assert item.week is None
    assert item.date is None
    assert item.needs_review is False


def test_evaluation_item_is_frozen():
    """Test that extracted records cannot be modified in place."""
    item = EvaluationItem(sequence=1, name="Examen", weight=20)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.week = 5


def test_schedule_entry():
    """Test ScheduleEntry model."""
    entry = ScheduleEntry(week=5, date="30/03", topic="Tema 5", evaluation_ref="EE1")
    assert entry.week == 5
    assert entry.date == "30/03"
    assert entry.topic == "Tema 5"
    assert entry.evaluation_ref == "EE1"


def test_parse_result_defaults():
    """Test ParseResult defaults to empty values."""
    result = ParseResult()
    assert result.evaluations == ()
    assert result.schedule == ()
    assert result.metadata == Metadata()
    assert result.total_weight == 0


def test_parse_result_total_weight():
    """Test total weight sums all evaluations."""
    result = ParseResult(evaluations=(
        EvaluationItem(sequence=1, name="Examen", weight=40),
        EvaluationItem(sequence=2, name="Trabajo", weight=35),
    ))
    assert result.total_weight == 75


def test_weight_diagnostic():
    """Test WeightDiagnostic deviation and message."""
    diagnostic = WeightDiagnostic(total_weight=80)
    assert diagnostic.expected == 100
    assert diagnostic.tolerance == 5
    assert diagnostic.deviation == -20
    assert "80%" in diagnostic.message


def test_serialization():
    """Test serialization helpers."""
    item = EvaluationItem(
        sequence=2, name="Trabajo", weight=30, kind=EvaluationKind.PROJECT,
        week=14, date="01/06", abbreviation="TI", source="abbreviation"
    )
    data = serialize_evaluation(item)
    assert data["kind"] == "project"
    assert data["week"] == 14
    assert data["abbreviation"] == "TI"

    result = ParseResult(
        evaluations=(item,),
        schedule=(ScheduleEntry(week=14, topic="Avance"),),
        metadata=Metadata(course_name="Finanzas"),
    )
    serialized = serialize_parse_result(result)
    assert serialized["total_weight"] == 30
    assert serialized["schedule"][0] == {
        "week": 14, "date": None, "topic": "Avance", "evaluation_ref": None
    }
    assert serialized["metadata"]["course_name"] == "Finanzas"
    assert serialized["metadata"]["instructor"] is None


def test_serialize_diagnostic():
    """Test diagnostic serialization, including the no-diagnostic case."""
    assert serialize_diagnostic(None) is None
    data = serialize_diagnostic(WeightDiagnostic(total_weight=80))
    assert data["total_weight"] == 80
    assert data["expected"] == 100
