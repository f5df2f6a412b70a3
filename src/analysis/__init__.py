################################################################################
# File Name: __init__.py
# Purpose/Description: Analysis subpackage for student statistics
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
Analysis Subpackage.

This subpackage contains the statistics components:
- Pure calculation functions (mean, median, population std, correlation,
  quartiles, outlier fences)
- Statistics engine producing StudentStatistics
- Factory and summary helpers

Usage:
    from analysis import StatisticsEngine, computeStatistics

    stats = computeStatistics(students)

    engine = createStatisticsEngineFromConfig(config)
    stats = engine.computeStatistics(students)
"""

from .calculations import (
    DEFAULT_OUTLIER_MULTIPLIER,
    calculateCorrelation,
    calculateMean,
    calculateMedian,
    calculateOutlierBounds,
    calculatePopulationStandardDeviation,
    calculatePopulationVariance,
    calculateQuartiles,
    findOutlierIndexes,
)
from .engine import StatisticsEngine, computeStatistics
from .exceptions import InsufficientDataError, StatisticsError
from .helpers import createStatisticsEngineFromConfig, getStatisticsSummary
from .types import StudentStatistics

__all__ = [
    # Types
    'StudentStatistics',
    # Exceptions
    'StatisticsError',
    'InsufficientDataError',
    # Calculation functions
    'DEFAULT_OUTLIER_MULTIPLIER',
    'calculateMean',
    'calculateMedian',
    'calculatePopulationVariance',
    'calculatePopulationStandardDeviation',
    'calculateCorrelation',
    'calculateQuartiles',
    'calculateOutlierBounds',
    'findOutlierIndexes',
    # Engine
    'StatisticsEngine',
    'computeStatistics',
    # Helpers
    'createStatisticsEngineFromConfig',
    'getStatisticsSummary',
]
