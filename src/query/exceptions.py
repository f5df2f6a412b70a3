################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception definitions for the query subpackage
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
Exception definitions for the query subpackage.

Provides:
- QueryError: Base exception for query construction errors
- UnknownFieldError: Field name not present in the field registry
- UnsupportedOperatorError: Operator token outside '>', '<', '='
- DuplicateFieldError: Field name registered twice without replace=True

All are data errors in the common error taxonomy.
"""

from common.error_handler import DataError


# ================================================================================
# Custom Exceptions
# ================================================================================

class QueryError(DataError):
    """Base exception for query construction errors."""
    pass


class UnknownFieldError(QueryError):
    """Field name is not registered."""

    def __init__(self, fieldName: str, knownFields: list[str] | None = None):
        super().__init__(
            f"Unknown field '{fieldName}'",
            details={'field': fieldName, 'knownFields': knownFields or []}
        )
        self.fieldName = fieldName


class UnsupportedOperatorError(QueryError):
    """Operator token is not one of the supported comparisons."""

    def __init__(self, token: str, supported: list[str] | None = None):
        super().__init__(
            f"Unsupported operator '{token}'",
            details={'operator': token, 'supported': supported or []}
        )
        self.token = token


class DuplicateFieldError(QueryError):
    """Field name is already registered."""
    pass
