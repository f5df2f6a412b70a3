################################################################################
# File Name: calculations.py
# Purpose/Description: Pure calculation functions for statistics analysis
# Author: Ralph Agent
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Student Analytics Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | Ralph Agent  | Initial implementation
# 2026-10-19    | Ralph Agent  | Float sums via math.fsum instead of exact fractions
# ================================================================================
################################################################################

"""
Pure calculation functions for statistics analysis.

Provides:
- calculateMean: Arithmetic mean
- calculateMedian: Median with the two-middle-values rule for even counts
- calculatePopulationVariance: Variance with divisor n
- calculatePopulationStandardDeviation: Square root of the population variance
- calculateCorrelation: Pearson correlation (population form) with zero fallback
- calculateQuartiles: Q1/Q3 by truncating index into the sorted values
- calculateOutlierBounds: Tukey fences from Q1/Q3

Sums go through math.fsum, and the mean is clamped to the range of the
values, so a list of identical values has a mean equal to that value and a
variance of exactly 0.0.

These are pure functions with no side effects.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .exceptions import InsufficientDataError, StatisticsError

DEFAULT_OUTLIER_MULTIPLIER = 1.5


# ================================================================================
# Statistics Calculator Functions
# ================================================================================

def calculateMean(values: Sequence[float]) -> float:
    """
    Calculate arithmetic mean of values.

    Args:
        values: List of numeric values

    Returns:
        Mean value

    Raises:
        InsufficientDataError: If values list is empty
    """
    if not values:
        raise InsufficientDataError("Cannot calculate mean of empty list")
    mean = math.fsum(values) / len(values)
    return float(min(max(mean, min(values)), max(values)))


def calculateMedian(values: Sequence[float]) -> float:
    """
    Calculate the median of values.

    For an even count the result is the mean of the elements at sorted
    positions n//2 - 1 and n//2; for an odd count it is the element at n//2.

    Args:
        values: List of numeric values, in any order

    Returns:
        Median value

    Raises:
        InsufficientDataError: If values list is empty
    """
    if not values:
        raise InsufficientDataError("Cannot calculate median of empty list")

    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 0:
        return (ordered[n // 2 - 1] + ordered[n // 2]) / 2
    return float(ordered[n // 2])


def calculatePopulationVariance(values: Sequence[float], mean: Optional[float] = None) -> float:
    """
    Calculate population variance (divisor n) of values.

    Args:
        values: List of numeric values
        mean: Pre-calculated mean (optional)

    Returns:
        Variance, never negative

    Raises:
        InsufficientDataError: If values list is empty
    """
    if not values:
        raise InsufficientDataError("Cannot calculate variance of empty list")
    if mean is None:
        mean = calculateMean(values)
    return math.fsum((value - mean) ** 2 for value in values) / len(values)


def calculatePopulationStandardDeviation(
    values: Sequence[float],
    mean: Optional[float] = None
) -> float:
    """
    Calculate population standard deviation of values.

    Args:
        values: List of numeric values
        mean: Pre-calculated mean (optional)

    Returns:
        Standard deviation, never negative

    Raises:
        InsufficientDataError: If values list is empty
    """
    return math.sqrt(calculatePopulationVariance(values, mean))


def calculateCorrelation(xValues: Sequence[float], yValues: Sequence[float]) -> float:
    """
    Calculate Pearson's r between paired values, population form.

    covariance = mean((x - meanX) * (y - meanY)), divided by the product of
    the population standard deviations. When either standard deviation is
    zero the result is 0.0 rather than undefined.

    Args:
        xValues: First variable
        yValues: Second variable, paired index-by-index with xValues

    Returns:
        Correlation coefficient, or 0.0 when either variable has no spread

    Raises:
        InsufficientDataError: If the lists are empty
        StatisticsError: If the lists differ in length
    """
    if len(xValues) != len(yValues):
        raise StatisticsError(
            "Cannot correlate lists of different lengths",
            details={'xCount': len(xValues), 'yCount': len(yValues)}
        )
    if not xValues:
        raise InsufficientDataError("Cannot calculate correlation of empty lists")

    meanX = calculateMean(xValues)
    meanY = calculateMean(yValues)
    stdX = calculatePopulationStandardDeviation(xValues, meanX)
    stdY = calculatePopulationStandardDeviation(yValues, meanY)

    if stdX <= 0 or stdY <= 0:
        return 0.0

    covariance = math.fsum((x - meanX) * (y - meanY) for x, y in zip(xValues, yValues)) / len(xValues)
    return covariance / (stdX * stdY)


def calculateQuartiles(values: Sequence[float]) -> Tuple[float, float]:
    """
    Calculate Q1 and Q3 by truncating index.

    Q1 is the sorted element at n//4 and Q3 the element at 3n//4. No
    interpolation is performed.

    Args:
        values: List of numeric values, in any order

    Returns:
        Tuple of (q1, q3)

    Raises:
        InsufficientDataError: If values list is empty
    """
    if not values:
        raise InsufficientDataError("Cannot calculate quartiles of empty list")

    ordered = sorted(values)
    n = len(ordered)
    return (ordered[n // 4], ordered[3 * n // 4])


def calculateOutlierBounds(
    q1: float,
    q3: float,
    multiplier: float = DEFAULT_OUTLIER_MULTIPLIER
) -> Tuple[float, float]:
    """
    Calculate Tukey outlier fences.

    Args:
        q1: First quartile
        q3: Third quartile
        multiplier: IQR multiplier (default: 1.5)

    Returns:
        Tuple of (lowerBound, upperBound); values strictly outside are outliers
    """
    iqr = q3 - q1
    return (q1 - multiplier * iqr, q3 + multiplier * iqr)


def findOutlierIndexes(
    values: Sequence[float],
    bounds: Tuple[float, float]
) -> List[int]:
    """
    Positions of values strictly outside bounds, in input order.

    Args:
        values: Values to test
        bounds: (lowerBound, upperBound)

    Returns:
        List of indexes into values
    """
    lowerBound, upperBound = bounds
    return [i for i, value in enumerate(values) if value < lowerBound or value > upperBound]
