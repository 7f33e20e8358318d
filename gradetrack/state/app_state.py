from __future__ import annotations

from dataclasses import dataclass, field

from gradetrack.domain.logic.gpa import GpaEngine, format_gpa
from gradetrack.domain.logic.grading import build_default_registry, grade_option_text


@dataclass(frozen=True)
class GpaSummary:
    gpa: str
    total_subjects: int
    total_credits: int
    graded_subjects: int


@dataclass
class AppState:
    semester_label: str = "Semester 5"
    engine: GpaEngine = field(default_factory=lambda: GpaEngine(build_default_registry()))

    def select_grade(self, subject_code: str, grade_label: str | None) -> GpaSummary:
        self.engine.set_grade(subject_code, grade_label)
        return self.summary()

    def summary(self) -> GpaSummary:
        return GpaSummary(
            gpa=format_gpa(self.engine.compute_gpa()),
            total_subjects=self.engine.registry.subject_count,
            total_credits=self.engine.total_credits(),
            graded_subjects=self.engine.graded_count(),
        )

    def grade_options(self) -> list[tuple[str, str]]:
        return [(label, grade_option_text(label, point)) for label, point in self.engine.registry.scale]
