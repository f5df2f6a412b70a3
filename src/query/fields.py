################################################################################
# File Name: fields.py
# Purpose/Description: Field registry mapping field names to numeric accessors
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
Field registry for dynamic queries.

A field name such as 'GPA' resolves to an accessor that extracts a numeric
value from a Student. Names are matched exactly (case-sensitive). New fields
are added with register() without touching the predicate builder or sort
code that resolves them.

Usage:
    from query.fields import DEFAULT_FIELD_REGISTRY

    accessor = DEFAULT_FIELD_REGISTRY.resolve('GPA')
    accessor(student)  # -> 3.8

    DEFAULT_FIELD_REGISTRY.register('Credits', lambda s: sum(c.credits for c in s.courses))
"""

import logging
from typing import Callable

from records.types import Student

from .exceptions import DuplicateFieldError, UnknownFieldError

logger = logging.getLogger(__name__)

FieldAccessor = Callable[[Student], float]


class FieldRegistry:
    """
    Name-to-accessor mapping for numeric Student fields.

    Example:
        registry = FieldRegistry()
        registry.register('Age', lambda s: s.age)
        registry.resolve('Age')(student)
    """

    def __init__(self, fields: dict[str, FieldAccessor] | None = None):
        """
        Initialize the registry.

        Args:
            fields: Optional initial name -> accessor mapping
        """
        self._fields: dict[str, FieldAccessor] = {}
        for name, accessor in (fields or {}).items():
            self.register(name, accessor)

    def register(self, name: str, accessor: FieldAccessor, replace: bool = False) -> None:
        """
        Register a field accessor.

        Args:
            name: Field name used in queries
            accessor: Callable extracting a numeric value from a Student
            replace: Allow overwriting an existing registration

        Raises:
            DuplicateFieldError: If name is taken and replace is False
        """
        if name in self._fields and not replace:
            raise DuplicateFieldError(
                f"Field '{name}' is already registered",
                details={'field': name}
            )
        self._fields[name] = accessor
        logger.debug(f"Registered field | name={name}")

    def resolve(self, name: str) -> FieldAccessor:
        """
        Look up the accessor for a field name.

        Args:
            name: Field name (exact, case-sensitive)

        Returns:
            Accessor callable

        Raises:
            UnknownFieldError: If name is not registered
        """
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name, knownFields=self.fieldNames()) from None

    def isRegistered(self, name: str) -> bool:
        """Check whether a field name is registered."""
        return name in self._fields

    def fieldNames(self) -> list[str]:
        """Registered field names in registration order."""
        return list(self._fields)


def createDefaultFieldRegistry() -> FieldRegistry:
    """
    Create a registry with the standard Student fields.

    Returns:
        FieldRegistry with 'GPA', 'Age' and 'Id'
    """
    return FieldRegistry({
        'GPA': lambda student: student.gpa,
        'Age': lambda student: student.age,
        'Id': lambda student: student.id,
    })


DEFAULT_FIELD_REGISTRY = createDefaultFieldRegistry()
