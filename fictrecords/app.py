"""Menu-driven student records system: loading, reporting and filtering."""

from __future__ import annotations

import argparse
import copy
import sys
from collections.abc import Callable
from typing import TextIO

from fictrecords.exam import Exam
from fictrecords.student import Student
from fictrecords.student_list import StudentList
from fictrecords.subject import Subject

STUDENT_FILE = "student.txt"
EXAM_FILE = "exam.txt"
RESULT_FILE = "student_result.txt"

MAX_EXAMS = 10
MAX_SUBJECTS = 6

NO_EXAM_MESSAGE = "THIS STUDENT HAVEN'T TAKEN ANY EXAM YET"
COURSES = ("CS", "IA", "IB", "CN", "CT")
_ID_PREFIXES = {"CS": "BCS", "CN": "BCN", "CT": "BCT", "IA": "BIA", "IB": "BIB"}
_FIELD_KEYS = (
    ("Student Id", "id"),
    ("Name", "name"),
    ("course", "course"),
    ("Phone Number", "phone_no"),
)

_MENU_TEXT = (
    "\n----------------------------------------------------\n"
    "\tStudent FICT Management System Menu\n"
    "----------------------------------------------------\n"
    "\t1. Create student list\n"
    "\t2. Delete Student\n"
    "\t3. Print student list\n"
    "\t4. Insert exam result\n"
    "\t5. Print Exam Statistic\n"
    "\t6. Filter Student\n"
    "\t7. Update Student's ID and Phone\n"
    "\t8. Find Potential First Class Student\n"
    "\t9. Exit\n"
    "----------------------------------------------------\n"
)


def _field_value(line: str) -> str:
    # Everything from two characters past the '=' sign.
    return line[line.find("=") + 2:]


def create_student_list(filename, students: StudentList) -> int:
    """Load students from ``filename`` in name order; return how many were added.

    Records whose ID is already in the list are skipped.
    Raises OSError when the file cannot be opened.
    """
    added = 0
    current = Student()
    with open(filename, encoding="utf-8") as infile:
        for raw in infile:
            line = raw.rstrip("\r\n")
            for key, attribute in _FIELD_KEYS:
                if key in line:
                    setattr(current, attribute, _field_value(line))
                    break
            else:
                continue
            if attribute != "phone_no":
                continue
            if not any(current.same_id(existing) for existing in students):
                students.insert_sorted(current)
                added += 1
            current = Student()
    return added


def delete_student(students: StudentList, student_id: str) -> bool:
    """Remove the first student with ``student_id``; return whether one was found."""
    for position, student in enumerate(students, start=1):
        if student.id == student_id:
            students.remove(position)
            return True
    return False


def _render_students(students: StudentList) -> str:
    blocks = []
    for student in students:
        blocks.append(student.render())
        if student.exams:
            blocks.extend(exam.render() for exam in student.exams)
        else:
            blocks.append(NO_EXAM_MESSAGE + "\n")
    return "".join(blocks)


def print_list(students: StudentList, source: int, out: TextIO | None = None) -> None:
    """Print every student with their exams: to ``out`` (1) or to the result file (2).

    Raises ValueError for an empty list or an unknown source.
    """
    out = sys.stdout if out is None else out
    if students.is_empty():
        raise ValueError("Cannot print from empty list!")
    if source == 1:
        out.write(_render_students(students))
    elif source == 2:
        with open(RESULT_FILE, "w", encoding="utf-8") as outfile:
            outfile.write(_render_students(students))
        out.write(f"\n\nThe result has been written to the file {RESULT_FILE}.\n")
    else:
        raise ValueError("Invalid source.")


class _Scanner:
    """Reads whitespace-separated tokens and delimited text from a string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> str | None:
        text, pos = self._text, self._pos
        while pos < len(text) and text[pos].isspace():
            pos += 1
        start = pos
        while pos < len(text) and not text[pos].isspace():
            pos += 1
        self._pos = pos
        return text[start:pos] or None

    def required_word(self) -> str:
        word = self.word()
        if word is None:
            raise ValueError("exam file ends in the middle of a record")
        return word

    def integer(self) -> int:
        word = self.required_word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected a whole number, found {word!r}") from None

    def number(self) -> float:
        word = self.required_word()
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"expected a number, found {word!r}") from None

    def skip_char(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def until(self, delimiter: str) -> str:
        end = self._text.find(delimiter, self._pos)
        if end < 0:
            value, self._pos = self._text[self._pos:], len(self._text)
        else:
            value, self._pos = self._text[self._pos:end], end + 1
        return value


def _read_exam(scanner: _Scanner) -> Exam:
    exam = Exam(trimester=scanner.integer(), year=scanner.integer())
    count = scanner.integer()
    if count > MAX_SUBJECTS:
        raise ValueError(f"an exam holds at most {MAX_SUBJECTS} subjects, not {count}")
    for _ in range(count):
        code = scanner.required_word()
        scanner.skip_char()
        name = scanner.until("\t")
        exam.subjects.append(
            Subject(code, name, scanner.integer(), scanner.number())
        )
    try:
        exam.calculate_gpa()
    except ValueError:
        exam.gpa = 0.0
    return exam


def insert_exam_results(filename, students: StudentList) -> int:
    """Attach exam results from ``filename`` to matching students; return how many matched.

    Raises OSError when the file cannot be opened and ValueError when it is malformed
    or a student would exceed the exam limit.
    """
    with open(filename, encoding="utf-8") as infile:
        scanner = _Scanner(infile.read())
    matched = 0
    while (student_id := scanner.word()) is not None:
        exam = _read_exam(scanner)
        for student in students:
            if student.id != student_id:
                continue
            if student.exam_cnt >= MAX_EXAMS:
                raise ValueError(
                    f"student {student_id} already has {MAX_EXAMS} exam results"
                )
            student.exams.append(exam)
            try:
                student.calculate_current_cgpa()
            except ValueError:
                pass
            matched += 1
            break
    return matched


def print_statistic(students: StudentList, out: TextIO | None = None) -> None:
    """Print course counts and averages for the list.

    Raises ValueError for an empty list.
    """
    out = sys.stdout if out is None else out
    if students.is_empty():
        raise ValueError("The list is empty")
    total = len(students)
    per_course = dict.fromkeys(COURSES, 0)
    total_cgpa = 0.0
    total_subjects = 0
    total_credits = 0
    for student in students:
        total_cgpa += student.current_cgpa
        if student.course in per_course:
            per_course[student.course] += 1
        for exam in student.exams:
            total_subjects += exam.num_of_subjects
            total_credits += exam.total_credit_hours

    lines = [f"\n\nTotal Students: {total}\n"]
    lines.extend(f"  {course} Students : {n}\n" for course, n in per_course.items())
    lines.append("\n")
    lines.append(f"Average CGPA: {total_cgpa / total:.5f}\n")
    lines.append(f"Average Subjects Taken Per Semester: {total_subjects / total:.2f}\n")
    lines.append(f"Average Credits Earned Per Semester: {total_credits / total:.2f}\n")
    out.write("".join(lines))


def _enrolment_year(student_id: str) -> int | None:
    digits = student_id[:2]
    if len(digits) == 2 and digits.isdigit():
        return int(digits) + 2000
    return None


def filter_students(
    source: StudentList, target: StudentList, course: str, year: int, total_credit: int
) -> bool:
    """Copy into ``target`` the students of ``course`` enrolled in ``year`` with enough credits.

    Returns False, doing nothing, when ``source`` is empty or ``target`` is not.
    """
    if source.is_empty() or not target.is_empty():
        return False
    for student in source:
        if (
            student.course == course
            and _enrolment_year(student.id) == year
            and student.total_credits_earned >= total_credit
        ):
            target.insert_sorted(copy.deepcopy(student))
    return True


def update_id_and_phone(students: StudentList) -> bool:
    """Prefix IDs with the course code and rewrite phone numbers; False for an empty list."""
    if students.is_empty():
        return False
    for student in students:
        student.id = _ID_PREFIXES.get(student.course[:2], "") + student.id
        phone = student.phone_no
        lead = "02" if not phone or ord(phone[0]) % 2 == 0 else "01"
        student.phone_no = lead + phone[:3] + phone[4:8]
    return True


def _is_potential_first_class(student: Student) -> bool:
    first_class = 0
    others = 0
    for exam in student.exams:
        if exam.gpa >= 3.75 and student.total_credits_earned >= 12:
            first_class += 1
        elif exam.gpa >= 3.5:
            others += 1
    return first_class >= 3 and others == student.exam_cnt - first_class


def find_potential_first_class(
    source: StudentList, target: StudentList, course: str
) -> bool:
    """Copy into ``target`` the students of ``course`` on track for first class.

    Returns False, doing nothing, when ``source`` is empty or ``target`` is not.
    """
    if source.is_empty() or not target.is_empty():
        return False
    for student in source:
        if (
            student.course == course
            and student.exam_cnt >= 3
            and _is_potential_first_class(student)
        ):
            target.insert_sorted(copy.deepcopy(student))
    return True


def _ask(read: Callable[[], str], out: TextIO, prompt: str) -> str:
    out.write(prompt)
    out.flush()
    return read().strip()


def _to_int(text: str) -> int | None:
    try:
        return int(text.split()[0]) if text.split() else None
    except ValueError:
        return None


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def menu(read: Callable[[], str], out: TextIO) -> int:
    """Show the menu until a choice from 1 to 9 is entered; return it."""
    while True:
        out.write(_MENU_TEXT)
        choice = _to_int(_ask(read, out, "Please enter your choice in number: "))
        if choice is not None and 1 <= choice <= 9:
            return choice
        out.write("\n\nInvalid choice, please try again.\n")


def _show(students: StudentList, source: int, out: TextIO) -> bool:
    try:
        print_list(students, source, out)
    except ValueError as error:
        out.write(f"{error}\n")
        return False
    except OSError:
        out.write(f"Error: Cannot open the file {RESULT_FILE}.\n")
        return False
    return True


def _run(read: Callable[[], str], out: TextIO, student_file: str, exam_file: str) -> None:
    students = StudentList()
    potential = StudentList()
    while True:
        choice = menu(read, out)

        if choice == 1:
            try:
                create_student_list(student_file, students)
            except OSError:
                out.write(f"\n\nError: Cannot open the file {student_file} successfully\n")
                out.write("\nStudent list is not created successfully.\n")
            else:
                out.write(f"\n\nSuccessfully open the file {student_file}.\n")
                out.write("\nStudent list is created successfully.\n\n")

        elif choice == 2:
            sid = _first_token(_ask(
                read, out,
                "\n\nPlease enter the student ID (e.g:2300123) that you wish to delete: ",
            ))
            out.write(f"\n\nDo you confirm to delete student {sid} from the list?\n")
            confirm = _ask(read, out, "Choice (Y/N): ")
            if confirm[:1] in ("Y", "y") and confirm:
                if delete_student(students, sid):
                    out.write(f"Student ID {sid} has been deleted.\n")
                else:
                    out.write(f"\nStudent ID {sid} is not found.\n")

        elif choice == 3:
            out.write("\nPlease enter the source: \n")
            out.write("1. Print to the screen\n")
            out.write(f"2. Write in {RESULT_FILE}\n")
            source = _to_int(_ask(read, out, "\nSource (1/2): "))
            _show(students, source if source is not None else 0, out)

        elif choice == 4:
            try:
                insert_exam_results(exam_file, students)
            except OSError:
                out.write(f"\n\nError: Cannot open the file {exam_file} successfully\n")
                out.write("\n\nExam results are not inserted successfully from file.\n")
            except ValueError as error:
                out.write(f"\n\n{error}\n")
                out.write("\n\nExam results are not inserted successfully from file.\n")
            else:
                out.write(f"\n\nSuccessfully open the file {exam_file}.\n")
                out.write("\n\nExam results are inserted successfully from file.\n")
                _show(students, 1, out)

        elif choice == 5:
            try:
                print_statistic(students, out)
            except ValueError as error:
                out.write(f"\n\n{error}\n")
                out.write("\n\nExam statistic is not printed successfully.\n")
            else:
                out.write("\n\nExam statistic is printed successfully.\n\n\n")

        elif choice == 6:
            while True:
                course = _first_token(_ask(read, out, "\nPlease enter the course(XX): "))
                year = _to_int(_ask(read, out, "\nPlease enter the year(XXXX) : ")) or 0
                credit = _to_int(_ask(read, out, "\nPlease enter the total credit: ")) or 0
                filtered = StudentList()
                if filter_students(students, filtered, course, year, credit):
                    _show(filtered, 1, out)
                else:
                    out.write("\nNo students found with the given conditions.\n\n")
                while True:
                    out.write("\nWould you like to continue filtering student?\n")
                    answer = _ask(read, out, "\nEnter your choice (Y/N): ")[:1].upper()
                    if answer in ("Y", "N"):
                        break
                if answer == "N":
                    break

        elif choice == 7:
            if update_id_and_phone(students):
                _show(students, 1, out)
                out.write("\n\nThe student's ID and phone are updated successfully.\n\n\n")
            else:
                out.write("\nThe student's ID and phone are not updated successfully.\n\n")

        elif choice == 8:
            course = _first_token(_ask(read, out, "\n\nPlease enter the course(XX): "))
            if find_potential_first_class(students, potential, course) and potential.is_empty():
                out.write(
                    f"\nThere is no student in {course} that has potential "
                    "to get first class.\n\n"
                )
            _show(potential, 1, out)

        else:
            out.write("********************************\n")
            out.write("\nThank you for using the system!\n")
            out.write("\n\tGoodbye :)\n\n\n")
            out.write("********************************\n\n")
            return


def main(argv=None) -> int:
    """Run the interactive records menu."""
    parser = argparse.ArgumentParser(
        prog="fictrecords", description="Student records management menu."
    )
    parser.add_argument("--students", default=STUDENT_FILE, help="student details file")
    parser.add_argument("--exams", default=EXAM_FILE, help="exam results file")
    args = parser.parse_args(argv)
    try:
        _run(input, sys.stdout, args.students, args.exams)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())