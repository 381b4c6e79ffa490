import io

import pytest

from fictrecords.app import (
    NO_EXAM_MESSAGE,
    RESULT_FILE,
    create_student_list,
    delete_student,
    filter_students,
    find_potential_first_class,
    insert_exam_results,
    main,
    menu,
    print_list,
    print_statistic,
    update_id_and_phone,
)
from fictrecords.exam import Exam
from fictrecords.student import Student
from fictrecords.student_list import StudentList
from fictrecords.subject import Subject

STUDENT_TEXT = (
    "Student Id = 2300123\n"
    "Name = Zara Lim\n"
    "course = CS\n"
    "Phone Number = abc-defgh\n"
    "\n"
    "Student Id = 2200456\n"
    "Name = Adam Tan\n"
    "course = IA\n"
    "Phone Number = bcd-efghi\n"
    "\n"
    "Student Id = 2300123\n"
    "Name = Copy Person\n"
    "course = CS\n"
    "Phone Number = abc-defgh\n"
)

EXAM_TEXT = (
    "2300123 1 2023 2\n"
    "UCCD1004 Programming Concepts\t3 85\n"
    "UCCD1024 Data Structures\t4 92\n"
)


@pytest.fixture
def student_file(tmp_path):
    path = tmp_path / "student.txt"
    path.write_text(STUDENT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def loaded(student_file):
    students = StudentList()
    create_student_list(student_file, students)
    return students


def _first_class_student(name, course, gpas):
    exams = [
        Exam(trimester=1, year=2023, gpa=gpa, subjects=[Subject("X", "x", 4, 90)])
        for gpa in gpas
    ]
    return Student(name=name, id="2300001", course=course, exams=exams,
                   total_credits_earned=12)


def test_create_student_list_sorts_and_skips_duplicates(student_file):
    students = StudentList()
    added = create_student_list(student_file, students)
    assert added == 2
    assert [s.name for s in students] == ["Adam Tan", "Zara Lim"]
    assert [s.id for s in students] == ["2200456", "2300123"]
    assert students.get(2).phone_no == "abc-defgh"


def test_create_student_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_student_list(tmp_path / "absent.txt", StudentList())


def test_delete_student(loaded):
    assert delete_student(loaded, "2300123") is True
    assert [s.id for s in loaded] == ["2200456"]
    assert delete_student(loaded, "2300123") is False
    assert len(loaded) == 1


def test_insert_exam_results(loaded, tmp_path):
    exam_path = tmp_path / "exam.txt"
    exam_path.write_text(EXAM_TEXT, encoding="utf-8")
    assert insert_exam_results(exam_path, loaded) == 1
    student = next(s for s in loaded if s.id == "2300123")
    assert student.exam_cnt == 1
    exam = student.exams[0]
    assert [s.subject_name for s in exam.subjects] == [
        "Programming Concepts", "Data Structures"
    ]
    assert exam.gpa == pytest.approx(4.0)
    assert student.current_cgpa == pytest.approx(4.0)
    assert student.total_credits_earned == exam.total_credit_hours
    other = next(s for s in loaded if s.id == "2200456")
    assert other.exams == []


def test_insert_exam_results_truncated(loaded, tmp_path):
    exam_path = tmp_path / "exam.txt"
    exam_path.write_text("2300123 1 2023 2\nUCCD1004 Programming\t3", encoding="utf-8")
    with pytest.raises(ValueError):
        insert_exam_results(exam_path, loaded)


def test_print_list_to_screen(loaded):
    out = io.StringIO()
    print_list(loaded, 1, out)
    text = out.getvalue()
    assert text.count(NO_EXAM_MESSAGE) == 2
    assert text.index("Adam Tan") < text.index("Zara Lim")


def test_print_list_errors(loaded):
    with pytest.raises(ValueError, match="empty"):
        print_list(StudentList(), 1, io.StringIO())
    with pytest.raises(ValueError, match="Invalid source"):
        print_list(loaded, 3, io.StringIO())


def test_print_list_to_file(loaded, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    print_list(loaded, 2, out)
    written = (tmp_path / RESULT_FILE).read_text(encoding="utf-8")
    screen = io.StringIO()
    print_list(loaded, 1, screen)
    assert written == screen.getvalue()
    assert RESULT_FILE in out.getvalue()


def test_print_statistic(loaded):
    out = io.StringIO()
    print_statistic(loaded, out)
    text = out.getvalue()
    assert "Total Students: 2\n" in text
    assert "  CS Students : 1\n" in text
    assert "  IA Students : 1\n" in text
    assert "Average CGPA: 0.00000\n" in text


def test_print_statistic_empty():
    with pytest.raises(ValueError, match="The list is empty"):
        print_statistic(StudentList(), io.StringIO())


def test_filter_students(loaded):
    loaded.get(2).total_credits_earned = 20
    target = StudentList()
    assert filter_students(loaded, target, "CS", 2023, 10) is True
    assert [s.id for s in target] == ["2300123"]
    target.get(1).name = "Changed"
    assert loaded.get(2).name == "Zara Lim"


def test_filter_students_requires_empty_target(loaded):
    target = StudentList([Student(name="x")])
    assert filter_students(loaded, target, "CS", 2023, 0) is False
    assert len(target) == 1
    assert filter_students(StudentList(), StudentList(), "CS", 2023, 0) is False


def test_update_id_and_phone(loaded):
    assert update_id_and_phone(loaded) is True
    zara = loaded.get(2)
    assert zara.id == "BCS2300123"
    assert zara.phone_no == "01abcdefg"
    assert loaded.get(1).id == "BIA2200456"
    assert update_id_and_phone(StudentList()) is False


def test_find_potential_first_class():
    good = _first_class_student("Good", "CS", [3.8, 3.9, 4.0, 3.6])
    weak = _first_class_student("Weak", "CS", [3.8, 3.9, 4.0, 3.0])
    other = _first_class_student("Other", "IA", [4.0, 4.0, 4.0])
    source = StudentList([good, weak, other])
    target = StudentList()
    assert find_potential_first_class(source, target, "CS") is True
    assert [s.name for s in target] == ["Good"]
    assert find_potential_first_class(source, target, "CS") is False


def test_menu_retries_until_valid():
    answers = iter(["12", "abc", "4"])
    out = io.StringIO()
    assert menu(lambda: next(answers), out) == 4
    assert out.getvalue().count("Invalid choice, please try again.") == 2


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    assert main([]) == 0
    assert "Thank you for using the system!" in capsys.readouterr().out


def test_main_loads_and_prints(student_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n1\n9\n"))
    assert main(["--students", str(student_file)]) == 0
    text = capsys.readouterr().out
    assert "Student list is created successfully." in text
    assert "Name: Adam Tan" in text
    assert "Name: Zara Lim" in text