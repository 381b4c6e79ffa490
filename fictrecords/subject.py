"""A subject taken in one trimester, with its marks and grade."""

from __future__ import annotations

from dataclasses import dataclass

# (lowest mark, highest mark, grade, grade point)
_GRADE_BANDS: tuple[tuple[float, float, str, float], ...] = (
    (0, 49, "F", 0.00),
    (50, 54, "C", 2.00),
    (55, 59, "C+", 2.33),
    (60, 64, "B-", 2.67),
    (65, 69, "B", 3.00),
    (70, 74, "B+", 3.33),
    (75, 79, "A-", 3.67),
    (80, 89, "A", 4.00),
    (90, 100, "A+", 4.00),
)

UNGRADED = "N/A"
UNGRADED_POINT = -1.0


@dataclass
class Subject:
    """One subject result: code, name, credit hours and marks."""

    subject_code: str = " "
    subject_name: str = " "
    credit_hours: int = 0
    marks: float = 0.0

    def _band(self) -> tuple[str, float] | None:
        for low, high, grade, point in _GRADE_BANDS:
            if low <= self.marks <= high:
                return grade, point
        return None

    def grade(self) -> str:
        """Letter grade for the marks, or ``"N/A"`` when outside every band."""
        band = self._band()
        return band[0] if band else UNGRADED

    def grade_point(self) -> float:
        """Grade point for the marks, or ``-1.0`` when outside every band."""
        band = self._band()
        return band[1] if band else UNGRADED_POINT

    def render(self) -> str:
        """One table row describing this subject."""
        return (
            f"\n{self.subject_code}\t{self.subject_name:<35}{self.credit_hours:>7}"
            f"\t{' ':<3}{self.grade()}\t{self.grade_point():.5f}"
        )