"""A student's record and cumulative results."""

from __future__ import annotations

from dataclasses import dataclass, field

from fictrecords.exam import Exam


@dataclass
class Student:
    """Personal details plus the trimester exams a student has taken."""

    name: str = " "
    id: str = " "
    course: str = " "
    phone_no: str = " "
    current_cgpa: float = 0.0
    total_credits_earned: int = 0
    exams: list[Exam] = field(default_factory=list)

    @property
    def exam_cnt(self) -> int:
        return len(self.exams)

    def calculate_current_cgpa(self) -> float:
        """Update the CGPA and earned credits from the exams; return the CGPA.

        Raises ValueError when there is no exam result yet.
        """
        if not self.exams:
            raise ValueError("No exam result yet.")
        credits = sum(exam.total_credit_hours for exam in self.exams)
        if credits == 0:
            raise ValueError("exam results carry no credit hours")
        points = sum(exam.gpa * exam.total_credit_hours for exam in self.exams)
        self.total_credits_earned = credits
        self.current_cgpa = points / credits
        return self.current_cgpa

    def sorts_before(self, other: Student) -> bool:
        """True when this student's name is not after ``other``'s."""
        return self.name <= other.name

    def same_id(self, other: Student) -> bool:
        """True when both students carry the same ID."""
        return self.id == other.id

    def render(self) -> str:
        """The student's details block as printed in reports."""
        return (
            f"\n\nName: {self.name}"
            f"\nId: {self.id}"
            f"\nCourse: {self.course}"
            f"\nPhone No: {self.phone_no}"
            f"\nCurrent CGPA: {self.current_cgpa:g}"
            f"\nTotal Credits Earned: {self.total_credits_earned}"
            "\n"
        )