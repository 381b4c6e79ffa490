# fictrecords

An interactive console tool for keeping a faculty's student records. It reads
student details and trimester exam results from text files, works out each
exam's GPA and each student's cumulative CGPA, and lets you print, filter and
update the records.

## Installing

```
pip install .
```

## Running

Start the menu from the directory that holds your data files:

```
fictrecords
```

By default it reads `student.txt` and `exam.txt` from the current directory.
Other files can be named:

```
fictrecords --students my_students.txt --exams my_exams.txt
```

The menu offers:

1. Create student list: reads the student file; a record whose ID is already
   in the list is skipped.
2. Delete student: asks for an ID and a Y/N confirmation.
3. Print student list: to the screen (1) or to `student_result.txt` (2).
4. Insert exam results: reads the exam file, attaches each exam to the student
   with that ID, recomputes the CGPA and prints the list.
5. Print exam statistics: the number of students, the count for each of the
   courses CS, IA, IB, CN and CT, the average CGPA, and the average number of
   subjects and credits per student.
6. Filter students by course, enrolment year and minimum credits earned. The
   enrolment year is taken from the first two digits of the ID (`23...` is 2023).
7. Update IDs and phone numbers: each ID gets the prefix `BCS`, `BCN`, `BCT`,
   `BIA` or `BIB` after the student's course, and each phone number is
   rewritten with a leading `01` or `02` and its fourth character dropped.
8. Find potential first-class students in a course: students with at least
   three exams, of which at least three have a GPA of 3.75 or more (with at
   least 12 credits earned in total) and the rest at least 3.5. The result list
   is kept for the rest of the session.
9. Exit.

End of input (Ctrl-D) also leaves the menu. Students are always kept in
ascending order of name.

## Input files

The student file holds one `key = value` line per field, each record ending on
its phone number line:

```
Student Id = 2300123
Name = Jane Doe
course = CS
Phone Number = <phone number>
```

The exam file holds, for each exam, whitespace-separated: the student ID, the
trimester (1 = Jan, 5 = May, 10 = Oct), the year and the number of subjects
(at most 6), then for each subject its code, one separating character, the
subject name ended by a tab, the credit hours and the marks. A student can
hold at most 10 exam results.

## Grading

| Marks  | Grade | Point |
|--------|-------|-------|
| 90–100 | A+    | 4.00  |
| 80–89  | A     | 4.00  |
| 75–79  | A-    | 3.67  |
| 70–74  | B+    | 3.33  |
| 65–69  | B     | 3.00  |
| 60–64  | B-    | 2.67  |
| 55–59  | C+    | 2.33  |
| 50–54  | C     | 2.00  |
| 0–49   | F     | 0.00  |

Marks outside these bands grade as `N/A` with point `-1.0`. An exam's GPA is
the credit-weighted mean of its grade points; the CGPA is the credit-weighted
mean of the exam GPAs.

## Using it as a library

The records are plain dataclasses: `fictrecords.subject.Subject`,
`fictrecords.exam.Exam` and `fictrecords.student.Student`. Students are held in
`fictrecords.student_list.StudentList`, addressed by 1-based position
(`get`, `set`, `insert_at`, `remove`, `insert_sorted`).

```python
import sys

from fictrecords.student_list import StudentList
from fictrecords.app import (
    create_student_list,
    insert_exam_results,
    print_list,
    print_statistic,
)

students = StudentList()
create_student_list("student.txt", students)   # returns the number added
insert_exam_results("exam.txt", students)      # returns the number matched
print_statistic(students, sys.stdout)
print_list(students, 1, sys.stdout)
```

`create_student_list` and `insert_exam_results` raise `OSError` when a file
cannot be opened; `insert_exam_results` raises `ValueError` for a malformed
exam file or too many exams. `print_list` and `print_statistic` raise
`ValueError` for an empty list. `filter_students` and
`find_potential_first_class` copy matching students into a target list and
return `False` without doing anything when the source is empty or the target
is not.

## Running the tests

```
pip install .[test]
pytest
```