"""An ordered collection of students addressed by 1-based position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fictrecords.student import Student


class StudentList:
    """Students held in order; positions run from 1 to ``len(self)``."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._items: list[Student] = list(students)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"StudentList({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def _index(self, position: int) -> int:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range 1..{len(self._items)}")
        return position - 1

    def get(self, position: int) -> Student:
        """Return the student at ``position``."""
        return self._items[self._index(position)]

    def set(self, position: int, student: Student) -> None:
        """Replace the student at ``position``."""
        self._items[self._index(position)] = student

    def insert_at(self, position: int, student: Student) -> None:
        """Insert ``student`` so that it ends up at ``position``."""
        if not 1 <= position <= len(self._items) + 1:
            raise IndexError(
                f"position {position} out of range 1..{len(self._items) + 1}"
            )
        self._items.insert(position - 1, student)

    def remove(self, position: int) -> Student:
        """Remove and return the student at ``position``."""
        return self._items.pop(self._index(position))

    def insert_sorted(self, student: Student) -> None:
        """Insert ``student`` before the first student whose name is not before it."""
        index = next(
            (i for i, current in enumerate(self._items) if student.sorts_before(current)),
            len(self._items),
        )
        self._items.insert(index, student)