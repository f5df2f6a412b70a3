################################################################################
# File Name: predicates.py
# Purpose/Description: Runtime construction of field/operator/value predicates
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
Predicate builder.

Builds reusable Student -> bool tests from a (field, operator, value)
triple chosen at runtime, e.g. from a report filter form:

    isHonors = buildPredicate('GPA', '>', 3.5)
    honors = [s for s in students if isHonors(s)]

Predicates are pure and can be combined with allOf, anyOf and negate.
"""

import logging
from typing import Callable

from records.types import Student

from .exceptions import QueryError
from .fields import DEFAULT_FIELD_REGISTRY, FieldAccessor, FieldRegistry
from .operators import ComparisonOperator

logger = logging.getLogger(__name__)

StudentPredicate = Callable[[Student], bool]


class FieldPredicate:
    """
    Compiled comparison of one registered field against a threshold.

    Attributes:
        fieldName: Field the predicate reads
        operator: Comparison applied
        value: Threshold compared against
    """

    def __init__(
        self,
        fieldName: str,
        operator: ComparisonOperator,
        value: float,
        accessor: FieldAccessor
    ):
        self.fieldName = fieldName
        self.operator = operator
        self.value = value
        self._accessor = accessor

    def __call__(self, student: Student) -> bool:
        return self.operator.compare(self._accessor(student), self.value)

    def describe(self) -> str:
        """Human-readable form, e.g. 'GPA > 3.5'."""
        return f"{self.fieldName} {self.operator.value} {self.value}"

    def __repr__(self) -> str:
        return f"FieldPredicate({self.describe()!r})"


def buildPredicate(
    fieldName: str,
    operator: str | ComparisonOperator,
    value: float,
    registry: FieldRegistry | None = None
) -> FieldPredicate:
    """
    Build a predicate comparing a Student field to a value.

    Args:
        fieldName: Registered field name (e.g., 'GPA', 'Age')
        operator: '>', '<', '=' or a ComparisonOperator
        value: Threshold value
        registry: Field registry (default: DEFAULT_FIELD_REGISTRY)

    Returns:
        FieldPredicate callable

    Raises:
        UnknownFieldError: If fieldName is not registered
        UnsupportedOperatorError: If operator is not supported
    """
    registry = registry or DEFAULT_FIELD_REGISTRY

    try:
        accessor = registry.resolve(fieldName)
        comparison = (
            operator if isinstance(operator, ComparisonOperator)
            else ComparisonOperator.fromToken(operator)
        )
    except QueryError as e:
        logger.warning(f"Rejected predicate | field={fieldName} | operator={operator} | {e}")
        raise

    predicate = FieldPredicate(fieldName, comparison, value, accessor)
    logger.debug(f"Built predicate | {predicate.describe()}")
    return predicate


# ================================================================================
# Combinators
# ================================================================================

def allOf(*predicates: StudentPredicate) -> StudentPredicate:
    """Predicate that holds when every given predicate holds (true if none given)."""
    return lambda student: all(predicate(student) for predicate in predicates)


def anyOf(*predicates: StudentPredicate) -> StudentPredicate:
    """Predicate that holds when at least one given predicate holds."""
    return lambda student: any(predicate(student) for predicate in predicates)


def negate(predicate: StudentPredicate) -> StudentPredicate:
    """Predicate that holds when the given predicate does not."""
    return lambda student: not predicate(student)
