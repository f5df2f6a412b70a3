################################################################################
# File Name: types.py
# Purpose/Description: Student, Course and Address record definitions
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
Record definitions for student academic data.

Provides:
- Address dataclass for a student's postal address
- Course dataclass for one course taken by a student
- Student dataclass for a student with nested address and courses

Records are passive: the query, analysis and grouping packages read them
and never modify them. These types have no dependencies on other project
modules (only stdlib).
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


# ================================================================================
# Data Classes
# ================================================================================

@dataclass
class Address:
    """Postal address owned by a single Student."""
    street: str = ''
    city: str = ''
    state: str = ''
    zipCode: str = ''

    def toDict(self) -> dict[str, Any]:
        """Convert address to dictionary for serialization."""
        return {
            'street': self.street,
            'city': self.city,
            'state': self.state,
            'zipCode': self.zipCode
        }


@dataclass
class Course:
    """
    A course taken by a student.

    Attributes:
        code: Course code (e.g., 'CS101')
        name: Course title
        credits: Credit hours
        grade: Grade points earned (same scale as GPA)
        semester: Semester label (e.g., 'Fall 2022')
        instructor: Instructor name
    """
    code: str
    name: str
    credits: int = 0
    grade: float = 0.0
    semester: str = ''
    instructor: str = ''

    def toDict(self) -> dict[str, Any]:
        """Convert course to dictionary for serialization."""
        return {
            'code': self.code,
            'name': self.name,
            'credits': self.credits,
            'grade': self.grade,
            'semester': self.semester,
            'instructor': self.instructor
        }


@dataclass
class Student:
    """
    A student academic record.

    Attributes:
        id: Identifier, unique within a collection
        name: Full name
        age: Age in years
        major: Declared major
        gpa: Grade point average (conventionally 0.0-4.0, not enforced)
        enrollmentDate: Date the student enrolled
        email: Contact email
        address: Postal address, if known
        courses: Courses taken, in the order recorded
    """
    id: int
    name: str
    age: int
    major: str
    gpa: float
    enrollmentDate: date | None = None
    email: str = ''
    address: Address | None = None
    courses: list[Course] = field(default_factory=list)

    def toDict(self) -> dict[str, Any]:
        """Convert student to dictionary for serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'age': self.age,
            'major': self.major,
            'gpa': self.gpa,
            'enrollmentDate': self.enrollmentDate.isoformat() if self.enrollmentDate else None,
            'email': self.email,
            'address': self.address.toDict() if self.address else None,
            'courses': [course.toDict() for course in self.courses]
        }
