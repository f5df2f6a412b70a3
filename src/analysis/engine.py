################################################################################
# File Name: engine.py
# Purpose/Description: Statistics engine for student GPA analysis
# Author: Ralph Agent
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Student Analytics Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | Ralph Agent  | Initial implementation
# 2026-10-19    | Ralph Agent  | Reject non-positive outlier multiplier from config
# ================================================================================
################################################################################

"""
Statistics engine for student academic records.

Provides:
- computeStatistics: GPA summary, age/GPA correlation and IQR outliers
- StatisticsEngine class carrying the configured outlier multiplier

Every call works on its own snapshot of the input and returns a new
StudentStatistics; the engine keeps no state between calls and never
modifies the records it is given.

Usage:
    from analysis import computeStatistics

    stats = computeStatistics(students)
    print(stats.meanGPA, stats.outlierIds)
"""

import logging
import time
from typing import Any, Dict, Iterable, Optional

from common.error_handler import ConfigurationError
from records.types import Student

from .calculations import (
    DEFAULT_OUTLIER_MULTIPLIER,
    calculateCorrelation,
    calculateMean,
    calculateMedian,
    calculateOutlierBounds,
    calculatePopulationStandardDeviation,
    calculateQuartiles,
    findOutlierIndexes,
)
from .types import StudentStatistics

logger = logging.getLogger(__name__)


# ================================================================================
# Statistics Computation
# ================================================================================

def computeStatistics(
    records: Iterable[Student],
    outlierMultiplier: float = DEFAULT_OUTLIER_MULTIPLIER
) -> StudentStatistics:
    """
    Compute GPA statistics for a student collection.

    Steps:
    1. Sort the GPAs ascending
    2. Mean, median and population standard deviation of the GPAs
    3. Pearson correlation of each student's age with their own GPA
       (0.0 when ages or GPAs have no spread)
    4. Q1 = gpas[n//4], Q3 = gpas[3n//4]; students strictly outside
       [Q1 - k*IQR, Q3 + k*IQR] are outliers, reported in input order

    Args:
        records: Students to summarize (consumed once)
        outlierMultiplier: IQR multiplier k (default: 1.5)

    Returns:
        StudentStatistics; all zeros with no outliers for an empty collection
    """
    students = list(records)
    n = len(students)

    if n == 0:
        logger.debug("No records supplied, returning empty statistics")
        return StudentStatistics()

    gpas = sorted(student.gpa for student in students)

    mean = calculateMean(gpas)
    median = calculateMedian(gpas)
    stdDev = calculatePopulationStandardDeviation(gpas, mean)

    correlation = calculateCorrelation(
        [student.age for student in students],
        [student.gpa for student in students]
    )

    q1, q3 = calculateQuartiles(gpas)
    bounds = calculateOutlierBounds(q1, q3, outlierMultiplier)
    outlierIds = [
        students[i].id
        for i in findOutlierIndexes([student.gpa for student in students], bounds)
    ]

    logger.debug(
        f"Statistics computed | records={n} | q1={q1} | q3={q3} | "
        f"bounds=({bounds[0]:.4f}, {bounds[1]:.4f}) | outliers={len(outlierIds)}"
    )

    return StudentStatistics(
        meanGPA=mean,
        medianGPA=median,
        standardDeviation=stdDev,
        ageGPACorrelation=correlation,
        outlierIds=outlierIds,
        sampleCount=n
    )


# ================================================================================
# Statistics Engine Class
# ================================================================================

class StatisticsEngine:
    """
    Configured front end for computeStatistics.

    Reads 'analysis.outlierMultiplier' from configuration once at
    construction. Instances hold no per-call state and may be shared.

    Example:
        config = loadConfig()
        engine = StatisticsEngine(config)
        stats = engine.computeStatistics(students)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the statistics engine.

        Args:
            config: Configuration dictionary with optional 'analysis' section

        Raises:
            ConfigurationError: If outlierMultiplier is not a positive number
        """
        analysisConfig = (config or {}).get('analysis', {})
        rawMultiplier = analysisConfig.get('outlierMultiplier', DEFAULT_OUTLIER_MULTIPLIER)

        try:
            multiplier = float(rawMultiplier)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"analysis.outlierMultiplier must be numeric, got {rawMultiplier!r}",
                details={'outlierMultiplier': rawMultiplier}
            ) from e

        if not multiplier > 0:
            raise ConfigurationError(
                f"analysis.outlierMultiplier must be positive, got {multiplier}",
                details={'outlierMultiplier': rawMultiplier}
            )

        self.outlierMultiplier = multiplier

    def computeStatistics(self, records: Iterable[Student]) -> StudentStatistics:
        """
        Compute statistics using the configured outlier multiplier.

        Args:
            records: Students to summarize

        Returns:
            Fresh StudentStatistics
        """
        startTime = time.perf_counter()
        result = computeStatistics(records, self.outlierMultiplier)
        durationMs = (time.perf_counter() - startTime) * 1000

        logger.info(
            f"Statistics complete | records={result.sampleCount} | "
            f"outliers={len(result.outlierIds)} | duration={durationMs:.2f}ms"
        )
        return result
