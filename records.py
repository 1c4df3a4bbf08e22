"""Records passed between the scraper, the GPA calculator and the report"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Credential:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class CourseRecord:
    session: str
    course: str
    title: str
    grade: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CourseRecord":
        return cls(
            session=payload.get("session", ""),
            course=payload.get("course", ""),
            title=payload.get("title", ""),
            grade=payload.get("grade", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "session": self.session,
            "course": self.course,
            "title": self.title,
            "grade": self.grade,
        }


@dataclass(frozen=True)
class GpaResult:
    four: float
    nine: float

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GpaResult":
        return cls(four=float(payload["four"]), nine=float(payload["nine"]))

    def to_dict(self) -> Dict[str, float]:
        return {"four": self.four, "nine": self.nine}
