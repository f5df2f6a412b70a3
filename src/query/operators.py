################################################################################
# File Name: operators.py
# Purpose/Description: Closed set of comparison operators for predicates
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
Comparison operators for dynamic predicates.

The operator set is closed: GREATER_THAN ('>'), LESS_THAN ('<') and
EQUAL ('='). EQUAL is exact float equality with no tolerance.
"""

import operator
from enum import Enum

from .exceptions import UnsupportedOperatorError


class ComparisonOperator(Enum):
    """Supported comparison operators, valued by their surface token."""
    GREATER_THAN = '>'
    LESS_THAN = '<'
    EQUAL = '='

    @classmethod
    def fromToken(cls, token: str) -> 'ComparisonOperator':
        """
        Parse a surface token.

        Args:
            token: One of '>', '<', '='

        Returns:
            Matching ComparisonOperator

        Raises:
            UnsupportedOperatorError: For any other token
        """
        for member in cls:
            if member.value == token:
                return member
        raise UnsupportedOperatorError(token, supported=[member.value for member in cls])

    def compare(self, left: float, right: float) -> bool:
        """Apply the comparison as `left <op> right`."""
        return _COMPARATORS[self](left, right)


_COMPARATORS = {
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.EQUAL: operator.eq,
}
