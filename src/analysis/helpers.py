################################################################################
# File Name: helpers.py
# Purpose/Description: Factory and helper functions for the analysis subpackage
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
Factory and helper functions for the analysis subpackage.

Provides:
- createStatisticsEngineFromConfig: Factory function for StatisticsEngine
- getStatisticsSummary: Rounded, display-ready view of StudentStatistics
"""

from typing import Any

from .engine import StatisticsEngine
from .types import StudentStatistics


def createStatisticsEngineFromConfig(config: dict[str, Any]) -> StatisticsEngine:
    """
    Create a StatisticsEngine from configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured StatisticsEngine instance

    Example:
        config = loadConfig('analytics.json')
        engine = createStatisticsEngineFromConfig(config)
    """
    return StatisticsEngine(config)


def getStatisticsSummary(stats: StudentStatistics, precision: int = 2) -> dict[str, Any]:
    """
    Get a summary of statistics rounded for reporting.

    Args:
        stats: Statistics to summarize
        precision: Decimal places for real-valued fields

    Returns:
        Dictionary with rounded values and the outlier ids
    """
    return {
        'meanGPA': round(stats.meanGPA, precision),
        'medianGPA': round(stats.medianGPA, precision),
        'standardDeviation': round(stats.standardDeviation, precision),
        'ageGPACorrelation': round(stats.ageGPACorrelation, precision),
        'outlierIds': list(stats.outlierIds),
        'outlierCount': len(stats.outlierIds),
        'sampleCount': stats.sampleCount
    }
