"""
Syllabus parse orchestrator.

Composes section location, evaluation/schedule/metadata extraction and the
weight-sum check into one pure function:

    result = parse(text)
    linked = link(result.evaluations, result.schedule)

parse() returns the raw extraction; schedule information is only merged
into evaluations by link().
"""

import logging
from typing import Optional, Sequence, Tuple

from .assessment_extractor import extract_evaluations
from .config import ParserConfig
from .course_extractor import extract_metadata
from .document_structure import find_evaluation_section, find_schedule_section
from .models import EvaluationItem, ParseResult, WeightDiagnostic
from .schedule_extractor import extract_schedule

logger = logging.getLogger(__name__)


def check_weights(evaluations: Sequence[EvaluationItem],
                  expected: int = 100,
                  tolerance: int = 5) -> Optional[WeightDiagnostic]:
    """Check that evaluation weights add up to roughly the expected total.

    Returns:
        A WeightDiagnostic when the total is positive and deviates from the
        expected total by more than the tolerance, otherwise None
    """
    total = sum(e.weight for e in evaluations)
    if total > 0 and abs(total - expected) > tolerance:
        return WeightDiagnostic(total_weight=total, expected=expected, tolerance=tolerance)
    return None


def parse_with_diagnostics(text: str,
                           config: Optional[ParserConfig] = None
                           ) -> Tuple[ParseResult, Optional[WeightDiagnostic]]:
    """Parse syllabus text and also return the weight-sum diagnostic.

    Args:
        text: Plain text of the whole syllabus
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Tuple of (unlinked ParseResult, WeightDiagnostic or None)
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")
    config = config or ParserConfig()

    logger.debug("Parsing syllabus text (%d characters)", len(text))

    evaluations = extract_evaluations(find_evaluation_section(text))
    schedule = extract_schedule(find_schedule_section(text))
    metadata = extract_metadata(text)

    logger.debug("Extracted %d evaluation(s), %d schedule entries",
                 len(evaluations), len(schedule))

    diagnostic = check_weights(
        evaluations,
        expected=config.expected_total_weight,
        tolerance=config.weight_tolerance,
    )
    if diagnostic:
        logger.warning(diagnostic.message)

    result = ParseResult(evaluations=evaluations, schedule=schedule, metadata=metadata)
    return result, diagnostic


def parse(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse syllabus text into evaluations, schedule and metadata.

    Never raises on malformed syllabus text: anything that cannot be
    recognized is simply left out. A weight-sum deviation is logged as a
    warning; use parse_with_diagnostics() to receive it as a value.
    """
    result, _ = parse_with_diagnostics(text, config)
    return result
