################################################################################
# File Name: __init__.py
# Purpose/Description: Grouping subpackage for grouped aggregates and pivots
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
Grouping Subpackage.

This subpackage contains:
- Course flattening (student -> per-course rows)
- Ordered grouping with count/average aggregates
- GPA band pivot per major

Usage:
    from grouping import averageGPAByMajor, groupAndAggregate

    averages = averageGPAByMajor(students)
"""

from .pipeline import (
    averageGPAByMajor,
    countByKey,
    flattenCourses,
    groupAndAggregate,
    groupRecords,
)
from .pivot import (
    DEFAULT_HIGH_THRESHOLD,
    DEFAULT_MID_THRESHOLD,
    gpaDistributionByMajor,
    gpaDistributionFromConfig,
)
from .types import CourseRow, GpaBandCounts, GroupAggregate

__all__ = [
    # Types
    'CourseRow',
    'GroupAggregate',
    'GpaBandCounts',
    # Pipeline
    'flattenCourses',
    'groupRecords',
    'groupAndAggregate',
    'countByKey',
    'averageGPAByMajor',
    # Pivot
    'DEFAULT_MID_THRESHOLD',
    'DEFAULT_HIGH_THRESHOLD',
    'gpaDistributionByMajor',
    'gpaDistributionFromConfig',
]
