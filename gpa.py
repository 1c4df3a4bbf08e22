"""
Four point and nine point GPA from scraped York grades
"""

import logging
import math
from types import MappingProxyType
from typing import Iterable

from errors import CreditParseError
from records import CourseRecord, GpaResult

logger = logging.getLogger(__name__)

NINE_POINT = MappingProxyType({
    "A+": 9.0,
    "A": 8.0,
    "B+": 7.0,
    "B": 6.0,
    "C+": 5.0,
    "C": 4.0,
    "D+": 3.0,
    "D": 2.0,
    "E": 1.0,
    "F": 0.0,
})

FOUR_POINT = MappingProxyType({
    "A+": 4.0,
    "A": 3.8,
    "B+": 3.3,
    "B": 3.0,
    "C+": 2.3,
    "C": 2.0,
    "D+": 1.3,
    "D": 1.0,
    "E": 0.7,
    "F": 0.0,
})

# "SC MATH 1300 3.00": faculty, subject, number, credits
CREDIT_TOKEN_INDEX = 3


def _divide(total: float, credits: float) -> float:
    # floating point division as IEEE 754 defines it, x / 0 included
    if credits == 0:
        if total == 0 or math.isnan(total):
            return math.nan
        return math.copysign(math.inf, total)
    return total / credits


def credit_weight(course: str) -> float:
    """Extract the credit value embedded in a course code"""
    parts = course.split()
    if len(parts) <= CREDIT_TOKEN_INDEX:
        raise CreditParseError(f"No credit value in course '{course}'")
    try:
        return float(parts[CREDIT_TOKEN_INDEX])
    except ValueError as exc:
        raise CreditParseError(
            f"Credit value '{parts[CREDIT_TOKEN_INDEX]}' in course '{course}' is not a number"
        ) from exc


def compute_gpa(records: Iterable[CourseRecord]) -> GpaResult:
    """Credit weighted average of every record with a letter grade.

    Records whose grade is not a letter grade (IP, DEF, W, ...) are left out of
    both the sums and the credit total. When nothing qualifies both averages
    are 0 / 0, which is NaN.
    """
    total_credits = 0.0
    nine_point = 0.0
    four_point = 0.0

    for record in records:
        if record.grade not in NINE_POINT:
            logger.debug("Skipping %s with non-letter grade %r", record.course, record.grade)
            continue

        credit = credit_weight(record.course)
        nine_point += NINE_POINT[record.grade] * credit
        four_point += FOUR_POINT[record.grade] * credit
        total_credits += credit

    logger.info("Computing GPA over %s credits", total_credits)
    return GpaResult(
        four=_divide(four_point, total_credits),
        nine=_divide(nine_point, total_credits),
    )
