"""
Static lexicons used by the extraction engine.

All tables here are built once at import time and never written to again:
keyword sets are frozensets, lookup tables are read-only mapping proxies.
Keywords are stored lowercase and without accents; callers fold the text
they compare against the same way (see classification.fold_text).
"""

from types import MappingProxyType
from typing import Mapping, Tuple, FrozenSet

from .models import EvaluationKind


# Evaluation kind keywords (Spanish and English)
EXAM_TERMS: FrozenSet[str] = frozenset({
    'examen', 'exam', 'parcial', 'midterm', 'prueba', 'quiz', 'test',
    'evaluacion escrita', 'control de lectura',
})

PROJECT_TERMS: FrozenSet[str] = frozenset({
    'trabajo', 'proyecto', 'project', 'investigacion', 'research',
    'monografia', 'ensayo', 'essay', 'paper', 'informe', 'report',
    'portafolio', 'portfolio',
})

HOMEWORK_TERMS: FrozenSet[str] = frozenset({
    'practica', 'tarea', 'homework', 'assignment', 'ejercicio', 'exercise',
    'laboratorio', 'lab', 'problem set',
})

PARTICIPATION_TERMS: FrozenSet[str] = frozenset({
    'participacion', 'asistencia', 'participation', 'attendance',
    'intervencion',
})

# Short keywords that are also the start of unrelated words ("testimonio")
WHOLE_WORD_TERMS: FrozenSet[str] = frozenset({'test', 'paper', 'lab'})

# Tested in this order, first match wins
KIND_LEXICONS: Tuple[Tuple[EvaluationKind, FrozenSet[str]], ...] = (
    (EvaluationKind.EXAM, EXAM_TERMS),
    (EvaluationKind.PROJECT, PROJECT_TERMS),
    (EvaluationKind.HOMEWORK, HOMEWORK_TERMS),
    (EvaluationKind.PARTICIPATION, PARTICIPATION_TERMS),
)


# Known institutional abbreviations and their canonical spelling
CANONICAL_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    'EE': 'EE',    # Examen Escrito
    'EP': 'EP',    # Examen Parcial
    'EF': 'EF',    # Examen Final
    'TI': 'TI',    # Trabajo de Investigación
    'PC': 'PC',    # Práctica Calificada
    'EC': 'EC',    # Evaluación Continua
    'PF': 'PF',    # Producto Final
    'TA': 'TA',    # Trabajo Académico
    # Spelled-out forms (unaccented, single spaces)
    'EXAMEN ESCRITO': 'EE',
    'EXAMEN PARCIAL': 'EP',
    'EXAMEN FINAL': 'EF',
    'TRABAJO DE INVESTIGACION': 'TI',
    'PRACTICA CALIFICADA': 'PC',
    'EVALUACION CONTINUA': 'EC',
    'PRODUCTO FINAL': 'PF',
    'TRABAJO ACADEMICO': 'TA',
})

# Regex fragment for a schedule evaluation reference: a known code plus optional digits
ABBREVIATION_REF_PATTERN = r'(?:{})\d*'.format(
    '|'.join(sorted(set(CANONICAL_ABBREVIATIONS.values())))
)

# Generic abbreviation token shape used by the abbreviation strategy
ABBREVIATION_TOKEN_PATTERN = r'[A-Z]{2,3}\d*'


# Section heading titles (accents are folded by document_structure)
EVALUATION_TITLES: Tuple[str, ...] = (
    r'sistema\s+de\s+evaluacion',
    r'evaluacion(?:es)?',
    r'evaluation',
    r'assessments?',
    r'grading(?:\s+scheme)?',
    r'calificacion',
)

SCHEDULE_TITLES: Tuple[str, ...] = (
    r'cronograma(?:\s+de\s+actividades)?',
    r'calendario(?:\s+academico)?',
    r'programacion(?:\s+de\s+contenidos)?',
    r'(?:course\s+)?schedule',
    r'course\s+calendar',
)

# Other common titles that close the section before them
OTHER_SECTION_TITLES: Tuple[str, ...] = (
    r'bibliografia', r'bibliography', r'referencias', r'references',
    r'metodologia', r'methodology', r'sumilla', r'competencias',
    r'contenidos?', r'course\s+description', r'learning\s+outcomes',
    r'politicas', r'policies', r'recursos', r'resources',
)


# Metadata label synonyms, matched case-insensitively before a colon
METADATA_LABELS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'course_name': (
        r'curso', r'asignatura', r'nombre\s+del\s+curso',
        r'course(?:\s+(?:name|title))?',
    ),
    'instructor': (
        r'profesor(?:a)?', r'docente(?:s)?', r'instructor', r'professor',
    ),
    'term': (
        r'semestre(?:\s+acad[eé]mico)?', r'ciclo', r'per[ií]odo(?:\s+acad[eé]mico)?',
        r'term', r'semester',
    ),
    'course_code': (
        r'c[oó]digo(?:\s+del\s+curso)?', r'course\s+code',
    ),
})
