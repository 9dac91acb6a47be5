"""Unit tests for evaluation type classification and abbreviation normalization."""

import pytest
from syllabus_engine.classification import classify, fold_text, normalize_abbreviation
from syllabus_engine.models import EvaluationKind


@pytest.mark.parametrize("name, expected", [
    ("Examen Escrito 1", EvaluationKind.EXAM),
    ("EXAMEN PARCIAL", EvaluationKind.EXAM),
    ("Final Exam", EvaluationKind.EXAM),
    ("Midterm", EvaluationKind.EXAM),
    ("Trabajo de Investigación", EvaluationKind.PROJECT),
    ("Proyecto final", EvaluationKind.PROJECT),
    ("Research paper", EvaluationKind.PROJECT),
    ("Práctica Calificada 2", EvaluationKind.HOMEWORK),
    ("Tareas semanales", EvaluationKind.HOMEWORK),
    ("Homework 3", EvaluationKind.HOMEWORK),
    ("Participación en clase", EvaluationKind.PARTICIPATION),
    ("Asistencia", EvaluationKind.PARTICIPATION),
    ("Attendance", EvaluationKind.PARTICIPATION),
    ("Exposición oral", EvaluationKind.OTHER),
    ("", EvaluationKind.OTHER),
])
def test_classify(name, expected):
    """Test lexicon classification of evaluation names."""
    assert classify(name) == expected


def test_classify_exam_checked_first():
    """Test the exam lexicon wins over later lexicons."""
    assert classify("Examen sobre el trabajo de investigación") == EvaluationKind.EXAM


def test_classify_matches_word_starts_only():
    """Test keywords inside other words do not match ("lab" in "colaborativa")."""
    assert classify("Participación colaborativa") == EvaluationKind.PARTICIPATION
    assert classify("Contest entry") == EvaluationKind.OTHER


@pytest.mark.parametrize("name, expected", [
    ("Testimonio personal", EvaluationKind.OTHER),
    ("Unit tests", EvaluationKind.EXAM),
    ("Test 2", EvaluationKind.EXAM),
    ("Labs", EvaluationKind.HOMEWORK),
    ("Laboratorio 3", EvaluationKind.HOMEWORK),
    ("Labor social", EvaluationKind.OTHER),
])
def test_short_keywords_match_whole_words(name, expected):
    """Test short English keywords do not match longer words they start."""
    assert classify(name) == expected


def test_fold_text():
    """Test accents and case are folded."""
    assert fold_text("Investigación PRÁCTICA") == "investigacion practica"


@pytest.mark.parametrize("raw, expected", [
    ("EE", "EE"),
    ("ee", "EE"),
    ("  ti ", "TI"),
    ("ee1", "EE1"),
    ("xyz", "XYZ"),
    ("Examen Final", "EF"),
    (" Trabajo de  Investigación ", "TI"),
    ("", ""),
])
def test_normalize_abbreviation(raw, expected):
    """Test abbreviation normalization never fails and uppercases unknown tokens."""
    assert normalize_abbreviation(raw) == expected
