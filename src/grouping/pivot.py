################################################################################
# File Name: pivot.py
# Purpose/Description: GPA band distribution per major
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
GPA distribution pivot.

Counts students per major in three GPA bands:
- low:  gpa < midThreshold
- mid:  midThreshold <= gpa < highThreshold
- high: gpa >= highThreshold

Thresholds default to 3.5 and 3.8 and can be taken from the
'grouping.gpaBands' configuration section.
"""

from typing import Any, Dict, Iterable

from records.types import Student

from .pipeline import groupRecords
from .types import GpaBandCounts

DEFAULT_MID_THRESHOLD = 3.5
DEFAULT_HIGH_THRESHOLD = 3.8


def gpaDistributionByMajor(
    records: Iterable[Student],
    midThreshold: float = DEFAULT_MID_THRESHOLD,
    highThreshold: float = DEFAULT_HIGH_THRESHOLD
) -> Dict[str, GpaBandCounts]:
    """
    Count students per GPA band for each major.

    Args:
        records: Students to pivot
        midThreshold: Lowest GPA counted as mid
        highThreshold: Lowest GPA counted as high

    Returns:
        Ordered mapping of major -> GpaBandCounts, first-seen major order
    """
    distribution: Dict[str, GpaBandCounts] = {}
    for major, students in groupRecords(records, lambda s: s.major).items():
        counts = GpaBandCounts()
        for student in students:
            if student.gpa < midThreshold:
                counts.low += 1
            elif student.gpa < highThreshold:
                counts.mid += 1
            else:
                counts.high += 1
        distribution[major] = counts
    return distribution


def gpaDistributionFromConfig(
    records: Iterable[Student],
    config: Dict[str, Any]
) -> Dict[str, GpaBandCounts]:
    """
    gpaDistributionByMajor with thresholds from 'grouping.gpaBands'.

    Args:
        records: Students to pivot
        config: Configuration dictionary

    Returns:
        Ordered mapping of major -> GpaBandCounts
    """
    bands = config.get('grouping', {}).get('gpaBands', {})
    return gpaDistributionByMajor(
        records,
        midThreshold=float(bands.get('mid', DEFAULT_MID_THRESHOLD)),
        highThreshold=float(bands.get('high', DEFAULT_HIGH_THRESHOLD))
    )
