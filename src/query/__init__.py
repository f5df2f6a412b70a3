################################################################################
# File Name: __init__.py
# Purpose/Description: Query subpackage for dynamic filters and sorting
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
Query Subpackage.

This subpackage contains the runtime query components:
- Field registry resolving field names to numeric accessors
- Comparison operators and the predicate builder
- Lazy record filters and field-based sorting

Usage:
    from query import buildPredicate, filterRecords

    honors = list(filterRecords(students, buildPredicate('GPA', '>', 3.5)))
"""

from .exceptions import (
    DuplicateFieldError,
    QueryError,
    UnknownFieldError,
    UnsupportedOperatorError,
)
from .fields import (
    DEFAULT_FIELD_REGISTRY,
    FieldAccessor,
    FieldRegistry,
    createDefaultFieldRegistry,
)
from .filters import (
    filterByAgeRange,
    filterByCoursePrefix,
    filterRecords,
    sortByEnrollmentDate,
    sortByField,
)
from .operators import ComparisonOperator
from .predicates import (
    FieldPredicate,
    StudentPredicate,
    allOf,
    anyOf,
    buildPredicate,
    negate,
)

__all__ = [
    # Exceptions
    'QueryError',
    'UnknownFieldError',
    'UnsupportedOperatorError',
    'DuplicateFieldError',
    # Field registry
    'FieldAccessor',
    'FieldRegistry',
    'DEFAULT_FIELD_REGISTRY',
    'createDefaultFieldRegistry',
    # Predicates
    'ComparisonOperator',
    'FieldPredicate',
    'StudentPredicate',
    'buildPredicate',
    'allOf',
    'anyOf',
    'negate',
    # Filters
    'filterRecords',
    'filterByAgeRange',
    'filterByCoursePrefix',
    'sortByField',
    'sortByEnrollmentDate',
]
