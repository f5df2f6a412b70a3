################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the grouping subpackage
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
Type definitions for the grouping subpackage.

Provides:
- CourseRow: one (student, course) pair produced by flattening
- GroupAggregate: count and average for one group
- GpaBandCounts: low/mid/high GPA counts for one group
"""

from dataclasses import dataclass
from typing import Any, Hashable

from records.types import Course, Student


@dataclass(frozen=True)
class CourseRow:
    """A student paired with one of their courses."""
    student: Student
    course: Course


@dataclass
class GroupAggregate:
    """
    Aggregate for one group.

    Attributes:
        key: Group key
        count: Number of members in the group (always at least 1)
        average: Mean of the selected value over the members
    """
    key: Hashable
    count: int
    average: float

    def toDict(self) -> dict[str, Any]:
        """Convert aggregate to dictionary for serialization."""
        return {
            'key': self.key,
            'count': self.count,
            'average': self.average
        }


@dataclass
class GpaBandCounts:
    """Number of students below, within and above the GPA band thresholds."""
    low: int = 0
    mid: int = 0
    high: int = 0

    @property
    def total(self) -> int:
        return self.low + self.mid + self.high

    def toDict(self) -> dict[str, Any]:
        """Convert counts to dictionary for serialization."""
        return {
            'low': self.low,
            'mid': self.mid,
            'high': self.high,
            'total': self.total
        }
