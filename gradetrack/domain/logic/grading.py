from __future__ import annotations

from gradetrack.domain.models.entities import GradeRegistry, GradeScale, Subject

EMPTY_GRADE = ""

# No failing bands: every selectable grade is a pass.
GRADE_BANDS: list[tuple[str, int]] = [
    ("O", 10),
    ("A+", 9),
    ("A", 8),
    ("B+", 7),
    ("B", 6),
]

SEMESTER_5_SUBJECTS: list[tuple[str, int]] = [
    ("AD3501", 3),
    ("AD3511", 2),
    ("AD3512", 2),
    ("CCS334", 3),
    ("CCS335", 3),
    ("CS3551", 3),
    ("CCW331", 3),
    ("CW3551", 3),
]

DEFAULT_GRADE_SCALE = GradeScale(tuple(GRADE_BANDS))


def build_registry(subjects: list[tuple[str, int]], scale: GradeScale = DEFAULT_GRADE_SCALE) -> GradeRegistry:
    return GradeRegistry(
        subjects=tuple(Subject(code=code, credits=credits) for code, credits in subjects),
        scale=scale,
    )


def build_default_registry() -> GradeRegistry:
    return build_registry(SEMESTER_5_SUBJECTS)


def is_empty_grade(label: str | None) -> bool:
    return label is None or label == EMPTY_GRADE


def grade_option_text(label: str, point: int) -> str:
    return f"{label} - {point} points"
