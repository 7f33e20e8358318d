from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gradetrack.domain.errors import InvalidGradeLabel, UnknownSubjectCode


@dataclass(frozen=True)
class Subject:
    code: str
    credits: int

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Subject code must not be empty")
        if self.credits <= 0:
            raise ValueError(f"Subject credits must be greater than 0 (got {self.credits} for {self.code})")


@dataclass(frozen=True)
class GradeScale:
    """
    Ordered (label, point) pairs. Forward and reverse lookups both walk this
    one tuple, so if two labels ever share a point the reverse lookup returns
    the one listed first.
    """

    bands: tuple[tuple[str, int], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for label, point in self.bands:
            if not label:
                raise ValueError("Grade labels must not be empty")
            if label in seen:
                raise ValueError(f"Duplicate grade label: {label}")
            if isinstance(point, bool) or not isinstance(point, int) or point <= 0:
                raise ValueError(f"Grade point for {label} must be a positive integer (got {point!r})")
            seen.add(label)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self.bands)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.bands)

    @property
    def points(self) -> tuple[int, ...]:
        return tuple(point for _, point in self.bands)

    @property
    def is_injective(self) -> bool:
        return len(set(self.points)) == len(self.bands)

    def point_for(self, label: str) -> int:
        for name, point in self.bands:
            if name == label:
                return point
        raise InvalidGradeLabel(label)

    def label_for(self, point: int | None) -> str:
        if point is None:
            return ""
        for label, value in self.bands:
            if value == point:
                return label
        return ""


@dataclass(frozen=True)
class GradeRegistry:
    subjects: tuple[Subject, ...]
    scale: GradeScale

    def __post_init__(self) -> None:
        codes = [s.code for s in self.subjects]
        duplicates = sorted({c for c in codes if codes.count(c) > 1})
        if duplicates:
            raise ValueError(f"Duplicate subject codes: {', '.join(duplicates)}")

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(s.code for s in self.subjects)

    @property
    def subject_count(self) -> int:
        return len(self.subjects)

    @property
    def total_credits(self) -> int:
        return sum(s.credits for s in self.subjects)

    def has_subject(self, code: str) -> bool:
        return any(s.code == code for s in self.subjects)

    def subject(self, code: str) -> Subject:
        for s in self.subjects:
            if s.code == code:
                return s
        raise UnknownSubjectCode(code)
