"""Results of one trimester's exams."""

from __future__ import annotations

from dataclasses import dataclass, field

from fictrecords.subject import Subject

TRIMESTER_NAMES = {1: "Jan", 5: "May", 10: "Oct"}
_RULE = "\n" + "_" * 86


@dataclass
class Exam:
    """A trimester's subjects and the GPA computed from them."""

    trimester: int = 0
    year: int = 0
    gpa: float = 0.0
    subjects: list[Subject] = field(default_factory=list)

    @property
    def num_of_subjects(self) -> int:
        return len(self.subjects)

    @property
    def total_credit_hours(self) -> int:
        return sum(subject.credit_hours for subject in self.subjects)

    def trimester_name(self) -> str:
        """Month name of the trimester, or a single space when unknown."""
        return TRIMESTER_NAMES.get(self.trimester, " ")

    def calculate_gpa(self) -> float:
        """Compute, store and return the credit-weighted GPA.

        Raises ValueError when there are no subjects or no credit hours.
        """
        if not self.subjects:
            raise ValueError("exam has no subjects")
        credits = self.total_credit_hours
        if credits == 0:
            raise ValueError("exam has no credit hours")
        weighted = sum(s.grade_point() * s.credit_hours for s in self.subjects)
        self.gpa = weighted / credits
        return self.gpa

    def render(self) -> str:
        """The exam result block as printed in reports."""
        gpa = f"{self.gpa:.5f}" if self.subjects else f"{self.gpa:g}"
        parts = [
            f"\n\n{self.trimester_name()} {self.year} Exam Results: \n",
            f"\n{self.num_of_subjects} subjects taken.",
            _RULE,
            f"\nSubject Code\t{'Subject Name':<35}Credit Hours\tGrade \tGrade Point",
            _RULE,
            *(subject.render() for subject in self.subjects),
            f"\nGPA: {gpa}",
            "\n\n",
        ]
        return "".join(parts)