################################################################################
# File Name: pipeline.py
# Purpose/Description: Two-stage flatten-then-group aggregation pipeline
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
Grouping and aggregation pipeline.

Two stages:
1. Optional flattening: each Student expands to one CourseRow per course
2. Grouping: rows are bucketed by a key selector and aggregated

Groups come back in first-seen key order, which report layouts rely on.
Keys are compared with ==, so string keys are case-sensitive and composite
keys (tuples, frozen dataclasses) compare structurally.

Usage:
    from grouping import groupAndAggregate

    byMajor = groupAndAggregate(students, lambda s: s.major, lambda s: s.gpa)

    byInstructor = groupAndAggregate(
        students,
        keySelector=lambda row: row.course.instructor,
        valueSelector=lambda row: row.course.grade,
        flatten=True
    )
"""

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List

from records.types import Student

from .types import CourseRow, GroupAggregate

logger = logging.getLogger(__name__)

KeySelector = Callable[[Any], Hashable]
ValueSelector = Callable[[Any], float]


# ================================================================================
# Flattening
# ================================================================================

def flattenCourses(records: Iterable[Student]) -> Iterator[CourseRow]:
    """
    Expand each student into one row per course.

    Rows are yielded in student order, then course order. Students with no
    courses contribute no rows.
    """
    for student in records:
        for course in student.courses:
            yield CourseRow(student=student, course=course)


# ================================================================================
# Grouping
# ================================================================================

def groupRecords(items: Iterable[Any], keySelector: KeySelector) -> Dict[Hashable, List[Any]]:
    """
    Bucket items by key, preserving first-seen key order.

    Args:
        items: Items to group
        keySelector: Callable returning a hashable key per item

    Returns:
        Ordered mapping of key -> members in input order
    """
    groups: Dict[Hashable, List[Any]] = {}
    for item in items:
        groups.setdefault(keySelector(item), []).append(item)
    return groups


def _rows(records: Iterable[Student], flatten: bool) -> Iterable[Any]:
    return flattenCourses(records) if flatten else records


def groupAndAggregate(
    records: Iterable[Student],
    keySelector: KeySelector,
    valueSelector: ValueSelector,
    flatten: bool = False
) -> Dict[Hashable, GroupAggregate]:
    """
    Group records and compute count and average per group.

    Args:
        records: Students to group
        keySelector: Key per Student, or per CourseRow when flatten is True
        valueSelector: Numeric value per Student/CourseRow to average
        flatten: Expand to per-course rows before grouping

    Returns:
        Ordered mapping of key -> GroupAggregate; empty for empty input
    """
    groups = groupRecords(_rows(records, flatten), keySelector)

    result: Dict[Hashable, GroupAggregate] = {}
    for key, members in groups.items():
        values = [valueSelector(member) for member in members]
        result[key] = GroupAggregate(
            key=key,
            count=len(members),
            average=sum(values) / len(values)
        )

    logger.debug(f"Grouped records | groups={len(result)} | flatten={flatten}")
    return result


def countByKey(
    records: Iterable[Student],
    keySelector: KeySelector,
    flatten: bool = False
) -> Dict[Hashable, int]:
    """
    Count members per key, in first-seen key order.

    Args:
        records: Students to count
        keySelector: Key per Student, or per CourseRow when flatten is True
        flatten: Expand to per-course rows before counting

    Returns:
        Ordered mapping of key -> count
    """
    counts: Dict[Hashable, int] = {}
    for item in _rows(records, flatten):
        key = keySelector(item)
        counts[key] = counts.get(key, 0) + 1
    return counts


def averageGPAByMajor(records: Iterable[Student]) -> Dict[str, float]:
    """
    Average GPA per major, in first-seen major order.

    Args:
        records: Students to summarize

    Returns:
        Ordered mapping of major -> average GPA
    """
    aggregates = groupAndAggregate(records, _major, _gpa)
    return {major: aggregate.average for major, aggregate in aggregates.items()}


def _major(student: Student) -> str:
    return student.major


def _gpa(student: Student) -> float:
    return student.gpa
