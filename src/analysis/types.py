################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the analysis subpackage
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
Type definitions for the analysis subpackage.

Provides:
- StudentStatistics dataclass for the GPA statistical summary

These types have no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StudentStatistics:
    """
    Statistical summary of a student collection.

    A fresh instance is produced on every engine call. An empty collection
    yields all zeros and no outliers.

    Attributes:
        meanGPA: Arithmetic mean of GPAs
        medianGPA: Median GPA (mean of the two middle values when even)
        standardDeviation: Population standard deviation of GPAs
        ageGPACorrelation: Pearson correlation of age and GPA, 0 when
            either variable has no spread
        outlierIds: Ids of students outside the IQR fences, in input order
        sampleCount: Number of students summarized
    """
    meanGPA: float = 0.0
    medianGPA: float = 0.0
    standardDeviation: float = 0.0
    ageGPACorrelation: float = 0.0
    outlierIds: list[int] = field(default_factory=list)
    sampleCount: int = 0

    def toDict(self) -> dict[str, Any]:
        """Convert statistics to dictionary for serialization."""
        return {
            'meanGPA': self.meanGPA,
            'medianGPA': self.medianGPA,
            'standardDeviation': self.standardDeviation,
            'ageGPACorrelation': self.ageGPACorrelation,
            'outlierIds': list(self.outlierIds),
            'sampleCount': self.sampleCount
        }
