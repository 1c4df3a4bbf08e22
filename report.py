"""Render scraped grades and GPA as JSON or as text tables"""

from __future__ import annotations

import json
import math
import struct
from typing import Dict, List, Optional, Sequence

from records import CourseRecord, GpaResult

GPA_HEADERS = ("Four Point", "Nine Point")
GRADE_HEADERS = ("Session", "Course", "Title", "Grade")


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def gpa_text(value: float) -> str:
    """Shortest text that reads back as the same single precision value.

    GPA averages are shown at single precision, so 3.2999999999999994 prints
    as 3.3 and 7.0 as 7.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    single = _single(value)
    for digits in range(1, 10):
        text = f"{single:.{digits}g}"
        if _single(float(text)) == single:
            return text
    return repr(single)


def gpa_payload(gpa: GpaResult) -> Dict[str, Optional[float]]:
    """GPA for JSON output; an undefined average becomes null"""
    return {
        key: None if math.isnan(value) else float(gpa_text(value))
        for key, value in gpa.to_dict().items()
    }


def render_json(records: Sequence[CourseRecord], gpa: GpaResult) -> str:
    payload = {
        "gpa": gpa_payload(gpa),
        "grades": [record.to_dict() for record in records],
    }
    return json.dumps(payload, separators=(",", ":"))


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    """Left aligned text table: '=' rule under the header, '-' rule between rows"""
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def rule(char: str) -> str:
        return "+" + "+".join(char * (width + 2) for width in widths) + "+"

    def line(values: Sequence[str]) -> str:
        return "|" + "|".join(f" {value:<{width}} " for value, width in zip(values, widths)) + "|"

    lines: List[str] = [rule("-"), line(headers)]
    if not cells:
        lines.append(rule("-"))
    else:
        lines.append(rule("="))
        for row in cells:
            lines.append(line(row))
            lines.append(rule("-"))
    return "\n".join(lines)


def render_tables(records: Sequence[CourseRecord], gpa: GpaResult) -> str:
    grade_rows = [
        (record.session, record.course, record.title, record.grade)
        for record in records
    ]
    return "\n".join([
        "GPA:",
        format_table(GPA_HEADERS, [(gpa_text(gpa.four), gpa_text(gpa.nine))]),
        "",
        "Grades:",
        format_table(GRADE_HEADERS, grade_rows),
    ])
