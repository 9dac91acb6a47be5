"""Shared syllabus texts for the test suite."""

import pytest


TABLE_SYLLABUS = """SÍLABO
Curso: Finanzas Corporativas
Docente: Ana Torres
Ciclo: 2026-I
Código: FIN301

I. Sumilla
El curso introduce los fundamentos de las finanzas corporativas.

VI. Cronograma
1 02/03 Introducción -
2 09/03 Valor del dinero en el tiempo
5 30/03 Tema 5 EE1
10 04/05 Tema 10 EE2
14 01/06 Avance de investigación TI
16 15/06 Repaso EF

VII. Evaluación
N.º Semana Tipo de evaluación Peso
1 5 Examen Escrito 1 20 100%
2 10 Examen Escrito 2 25 100%
3 14 Trabajo de Investigación 30 100%
4 16 Examen Final 25 100%

VIII. Bibliografía
Brealey, R. Principios de finanzas corporativas.
"""


ABBREVIATION_SYLLABUS = """Asignatura: Contabilidad General

VI. Cronograma
1 02/03 Introducción -
5 30/03 Tema 5 EE1
14 01/06 Avance de investigación TI

VII. Sistema de Evaluación
Evaluación Sigla Peso
EE1 Examen Escrito 1 20
EE2 Examen Escrito 2 30
TI Trabajo de Investigación 30%
PA Participación en clase 20
"""


COLON_SYLLABUS = """Course: Intro to Finance
Instructor: Dr. Jane Roe
Term: Fall 2026

Grading
Midterm exam: 30%
Final exam: 40%
Homework: 20%
Class participation: 10%

Course Schedule
Week 1 Introduction
Week 2 Time value of money
"""


UNDERWEIGHT_SYLLABUS = """VII. Evaluación
N.º Semana Tipo de evaluación Peso
1 5 Examen Parcial 20 100%
2 10 Trabajo de Investigación 30 100%
3 16 Examen Final 30 100%
"""


NO_EVALUATION_SYLLABUS = """Curso: Historia del Arte
I. Sumilla
Recorrido por los principales movimientos artísticos.
II. Bibliografía
Gombrich, E. La historia del arte.
"""


@pytest.fixture
def table_syllabus():
    return TABLE_SYLLABUS


@pytest.fixture
def abbreviation_syllabus():
    return ABBREVIATION_SYLLABUS


@pytest.fixture
def colon_syllabus():
    return COLON_SYLLABUS


@pytest.fixture
def underweight_syllabus():
    return UNDERWEIGHT_SYLLABUS


@pytest.fixture
def no_evaluation_syllabus():
    return NO_EVALUATION_SYLLABUS
