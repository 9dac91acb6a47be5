"""
Date token resolution.

Evaluation and schedule dates are kept as the raw tokens found in the
syllabus ("30/03", "30/03/2026", "2026-03-30"). This module turns such a
token into a calendar date when a caller needs one, e.g. for export.
Day-first order is assumed for slash dates, as in Spanish syllabi.
"""

import re
from datetime import date
from typing import Optional

import dateparser

DATEPARSER_SETTINGS = {
    'DATE_ORDER': 'DMY',
    'PREFER_DAY_OF_MONTH': 'first',
    'RETURN_AS_TIMEZONE_AWARE': False,
}

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
DAY_MONTH_PATTERN = re.compile(r'^\d{1,2}/\d{1,2}$')


def resolve_date_token(token: Optional[str], year: int) -> Optional[date]:
    """Resolve a raw date token to a date.

    Args:
        token: Raw token such as "30/03" (None is allowed)
        year: Year to use when the token has none

    Returns:
        The date, or None if the token is missing or not a valid date
    """
    if not token:
        return None
    token = token.strip()

    if ISO_DATE_PATTERN.match(token):
        try:
            return date.fromisoformat(token)
        except ValueError:
            return None

    if DAY_MONTH_PATTERN.match(token):
        token = f"{token}/{year}"

    parsed = dateparser.parse(token, languages=['es', 'en'], settings=DATEPARSER_SETTINGS)
    if parsed is None:
        return None
    return parsed.date()
