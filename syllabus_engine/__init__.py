"""Rule-based extraction of evaluations, schedule and metadata from syllabus text."""

import logging

from .classification import classify, normalize_abbreviation
from .config import ParserConfig
from .document_structure import locate_section
from .linker import link, link_result
from .models import (
    EvaluationItem, EvaluationKind, Metadata, ParseResult, ScheduleEntry,
    WeightDiagnostic,
)
from .parser import check_weights, parse, parse_with_diagnostics

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EvaluationItem", "EvaluationKind", "Metadata", "ParseResult",
    "ScheduleEntry", "WeightDiagnostic", "ParserConfig",
    "classify", "normalize_abbreviation", "locate_section",
    "link", "link_result", "check_weights", "parse", "parse_with_diagnostics",
]
