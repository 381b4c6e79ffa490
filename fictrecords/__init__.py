"""Student records: exam results, GPA and CGPA, filtering and reports."""

__version__ = "1.0.0"
__all__ = ["app", "exam", "student", "student_list", "subject"]