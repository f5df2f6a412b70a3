################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception definitions for the analysis subpackage
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
Exception definitions for the analysis subpackage.

Provides:
- StatisticsError: Base exception for statistics-related errors
- InsufficientDataError: Not enough data points for a calculation

The engine never raises InsufficientDataError for an empty collection; it
returns a zero-valued StudentStatistics instead. The error is raised only by
the individual calculation functions when called directly.
"""

from common.error_handler import DataError


class StatisticsError(DataError):
    """Base exception for statistics-related errors."""
    pass


class InsufficientDataError(StatisticsError):
    """Not enough data points to calculate a statistic."""
    pass
