from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from gradetrack.domain.errors import UnknownSubjectCode
from gradetrack.domain.logic.grading import is_empty_grade
from gradetrack.domain.models.entities import GradeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CourseResult:
    credits: int
    grade_point: int


def round_2dp_half_up(x: float) -> float:
    # Ties round up. Decimal(x) keeps the exact binary value of x.
    return float(Decimal(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def calc_sgpa(courses: Iterable[CourseResult]) -> float:
    weighted = 0.0
    total_credits = 0
    for c in courses:
        weighted += c.credits * c.grade_point
        total_credits += c.credits
    if total_credits == 0:
        return 0.0
    return round_2dp_half_up(weighted / total_credits)


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"


class GpaEngine:
    """
    Holds the per-subject grade selection for one registry and derives the
    credit-weighted GPA from it.

    The selection maps subject code -> grade point; a missing key means no
    grade. Points are only ever copied from the registry's scale. Derived
    values are recomputed on every read.
    """

    def __init__(self, registry: GradeRegistry) -> None:
        self.registry = registry
        self._selection: dict[str, int] = {}

    @property
    def selection(self) -> Mapping[str, int]:
        return MappingProxyType(self._selection)

    def set_grade(self, subject_code: str, grade_label: str | None) -> None:
        if is_empty_grade(grade_label):
            if self._selection.pop(subject_code, None) is not None:
                logger.debug(f"Cleared grade for {subject_code}")
            return

        point = self.registry.scale.point_for(grade_label)
        try:
            credits = self.registry.subject(subject_code).credits
        except UnknownSubjectCode as exc:
            logger.warning(f"{exc}; grade {grade_label} will not count towards the GPA")
        else:
            logger.debug(f"Set grade for {subject_code} ({credits} credits) to {grade_label} ({point})")
        self._selection[subject_code] = point

    def course_results(self) -> list[CourseResult]:
        results = []
        for subject in self.registry.subjects:
            point = self._selection.get(subject.code)
            if point is not None:
                results.append(CourseResult(credits=subject.credits, grade_point=point))
        return results

    def compute_gpa(self) -> float:
        return calc_sgpa(self.course_results())

    def graded_count(self) -> int:
        return sum(1 for code in self._selection if self.registry.has_subject(code))

    def total_credits(self) -> int:
        return self.registry.total_credits

    def label_for_point(self, grade_point: int | None) -> str:
        return self.registry.scale.label_for(grade_point)

    def grade_label(self, subject_code: str) -> str:
        return self.label_for_point(self._selection.get(subject_code))
