################################################################################
# File Name: filters.py
# Purpose/Description: Lazy record filters and field-based sorting
# Author: Ralph Agent
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Student Analytics Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | Ralph Agent  | Initial implementation
# ================================================================================
################################################################################

"""
Record filters and sorting.

Filters are generators over the caller's collection: nothing is copied
until the caller iterates, and the input is never modified. Sorting returns
a new list.
"""

from datetime import date
from typing import Iterable, Iterator

from records.types import Student

from .fields import DEFAULT_FIELD_REGISTRY, FieldRegistry
from .predicates import StudentPredicate


def filterRecords(records: Iterable[Student], predicate: StudentPredicate) -> Iterator[Student]:
    """Yield the students matching predicate, in input order."""
    return (student for student in records if predicate(student))


def filterByAgeRange(records: Iterable[Student], minAge: int, maxAge: int) -> Iterator[Student]:
    """
    Yield students with minAge <= age <= maxAge.

    The range is not validated; when minAge > maxAge nothing matches.
    """
    return (student for student in records if minAge <= student.age <= maxAge)


def filterByCoursePrefix(records: Iterable[Student], prefix: str) -> Iterator[Student]:
    """
    Yield students enrolled in at least one course whose code starts with prefix.

    Args:
        records: Students to scan
        prefix: Course code prefix, case-sensitive (e.g., 'CS')
    """
    return (
        student for student in records
        if any(course.code.startswith(prefix) for course in student.courses)
    )


def sortByField(
    records: Iterable[Student],
    fieldName: str,
    descending: bool = False,
    registry: FieldRegistry | None = None
) -> list[Student]:
    """
    Sort students by a registered numeric field.

    The sort is stable: students with equal values keep their input order
    in both directions.

    Args:
        records: Students to sort
        fieldName: Registered field name
        descending: Largest first when True
        registry: Field registry (default: DEFAULT_FIELD_REGISTRY)

    Returns:
        New sorted list

    Raises:
        UnknownFieldError: If fieldName is not registered
    """
    accessor = (registry or DEFAULT_FIELD_REGISTRY).resolve(fieldName)
    return sorted(records, key=accessor, reverse=descending)


def sortByEnrollmentDate(records: Iterable[Student], descending: bool = False) -> list[Student]:
    """
    Sort students by enrollment date.

    Students without an enrollment date sort after all dated students.
    """
    students = list(records)
    dated = [student for student in students if student.enrollmentDate is not None]
    undated = [student for student in students if student.enrollmentDate is None]
    return sorted(dated, key=_enrollmentDate, reverse=descending) + undated


def _enrollmentDate(student: Student) -> date:
    return student.enrollmentDate
