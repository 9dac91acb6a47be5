"""Unit tests for course metadata extraction."""

from syllabus_engine.course_extractor import LABEL_PATTERNS, extract_labeled_field, extract_metadata
from syllabus_engine.models import Metadata


def test_spanish_labels(table_syllabus):
    """Test Spanish labels in a full syllabus."""
    metadata = extract_metadata(table_syllabus)
    assert metadata.course_name == "Finanzas Corporativas"
    assert metadata.instructor == "Ana Torres"
    assert metadata.term == "2026-I"
    assert metadata.course_code == "FIN301"


def test_english_labels(colon_syllabus):
    """Test English labels."""
    metadata = extract_metadata(colon_syllabus)
    assert metadata.course_name == "Intro to Finance"
    assert metadata.instructor == "Dr. Jane Roe"
    assert metadata.term == "Fall 2026"
    assert metadata.course_code is None


def test_label_synonyms():
    """Test alternative labels and accented spellings."""
    text = "Asignatura: Contabilidad\nProfesora: María Quispe\nPeríodo académico: 2026-II\n"
    metadata = extract_metadata(text)
    assert metadata.course_name == "Contabilidad"
    assert metadata.instructor == "María Quispe"
    assert metadata.term == "2026-II"


def test_code_label_is_not_course_name():
    """Test "Código del curso" is read as the code, not the course name."""
    text = "Código del curso: MAT101\nNombre del curso: Cálculo I\n"
    metadata = extract_metadata(text)
    assert metadata.course_code == "MAT101"
    assert metadata.course_name == "Cálculo I"


def test_first_occurrence_wins():
    """Test the first matching line is used."""
    text = "Docente: Ana Torres\nDocente: Luis Rojas\n"
    assert extract_labeled_field(text, LABEL_PATTERNS["instructor"]) == "Ana Torres"


def test_label_needs_line_start_and_value():
    """Test labels inside prose or without a value are ignored."""
    text = "Este curso: una introducción.\nDocente:\n"
    metadata = extract_metadata(text)
    assert metadata.course_name is None
    assert metadata.instructor is None


def test_no_labels():
    """Test missing labels leave every field empty."""
    assert extract_metadata("Texto sin etiquetas.") == Metadata()
