"""
iCalendar generation module.

Generates .ics files with one event per dated evaluation, ready for import
into a calendar application.
"""

import logging
import uuid
from datetime import datetime, time, timedelta
from typing import Iterable, Optional

from icalendar import Calendar, Event
from pytz import timezone

from .dates import resolve_date_token
from .models import EvaluationItem

logger = logging.getLogger(__name__)


class ICalendarGenerator:
    """Generates iCalendar (.ics) files from linked evaluations."""

    def __init__(self, timezone_str: str = "America/Lima", due_time: time = time(23, 59)):
        """Initialize calendar generator.

        Args:
            timezone_str: Timezone string (default: America/Lima)
            due_time: Time of day given to each evaluation event
        """
        self.tz = timezone(timezone_str)
        self.due_time = due_time

    def generate_calendar(self, evaluations: Iterable[EvaluationItem], year: int,
                          course_name: Optional[str] = None) -> Calendar:
        """Generate a calendar with one event per dated evaluation.

        Evaluations without a date, or whose date token cannot be resolved,
        are left out.

        Args:
            evaluations: Evaluations, normally after linking with the schedule
            year: Year for date tokens written without one ("30/03")
            course_name: Optional course name used as summary prefix

        Returns:
            Calendar object ready for export
        """
        cal = Calendar()
        cal.add('prodid', '-//Syllabus Engine//EN')
        cal.add('version', '2.0')
        cal.add('calscale', 'GREGORIAN')
        cal.add('method', 'PUBLISH')

        for evaluation in evaluations:
            event = self._create_evaluation_event(evaluation, year, course_name)
            if event is not None:
                cal.add_component(event)

        return cal

    def _create_evaluation_event(self, evaluation: EvaluationItem, year: int,
                                 course_name: Optional[str]) -> Optional[Event]:
        """Create the event for one evaluation, or None if it has no usable date."""
        due_date = resolve_date_token(evaluation.date, year)
        if due_date is None:
            if evaluation.date:
                logger.debug("Skipping %r, unreadable date %r", evaluation.name, evaluation.date)
            return None

        due_dt = self.tz.localize(datetime.combine(due_date, self.due_time))

        label = evaluation.name
        if evaluation.abbreviation:
            label = f"{evaluation.abbreviation} - {label}"
        summary = f"{label} ({evaluation.weight}%)"
        if course_name:
            summary = f"{course_name}: {summary}"

        event = Event()
        event.add('uid', f"{uuid.uuid4()}@syllabus-engine")
        event.add('dtstart', due_dt)
        event.add('dtend', due_dt + timedelta(minutes=1))
        event.add('summary', summary)

        desc_parts = [f"Evaluation: {evaluation.name}"]
        desc_parts.append(f"Type: {evaluation.kind.value}")
        desc_parts.append(f"Weight: {evaluation.weight}%")
        if evaluation.week:
            desc_parts.append(f"Week: {evaluation.week}")
        if evaluation.needs_review:
            desc_parts.append("Weight could not be read from the syllabus, please review")
        event.add('description', "\n".join(desc_parts))
        event.add('priority', 5)

        return event

    def export_to_file(self, calendar: Calendar, filepath: str):
        """Export calendar to .ics file.

        Args:
            calendar: Calendar object
            filepath: Path to output file
        """
        with open(filepath, 'wb') as f:
            f.write(calendar.to_ical())
