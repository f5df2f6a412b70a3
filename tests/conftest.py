################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
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
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(sampleStudents, makeStudent):
        pass
"""

import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from records.types import Address, Course, Student  # noqa: E402


# ================================================================================
# Record Fixtures
# ================================================================================

@pytest.fixture
def sampleStudents() -> List[Student]:
    """
    Provide the three reference students.

    Returns:
        Alice (CS, 3.8), Bob (Mathematics, 3.2), Carol (CS, 3.9)
    """
    return [
        Student(
            id=1, name='Alice Johnson', age=20, major='Computer Science',
            gpa=3.8, enrollmentDate=date(2022, 9, 1),
            email='alice.j@university.edu',
            address=Address(city='Seattle', state='WA', zipCode='98101'),
            courses=[
                Course(code='CS101', name='Intro to Programming', credits=3,
                       grade=3.7, semester='Fall 2022', instructor='Dr. Smith'),
                Course(code='MATH201', name='Calculus II', credits=4,
                       grade=3.9, semester='Fall 2022', instructor='Prof. Johnson'),
            ]
        ),
        Student(
            id=2, name='Bob Wilson', age=22, major='Mathematics',
            gpa=3.2, enrollmentDate=date(2021, 9, 1),
            email='bob.w@university.edu',
            address=Address(city='Portland', state='OR', zipCode='97201'),
            courses=[
                Course(code='MATH301', name='Linear Algebra', credits=3,
                       grade=3.3, semester='Spring 2023', instructor='Dr. Brown'),
                Course(code='STAT101', name='Statistics', credits=3,
                       grade=3.1, semester='Spring 2023', instructor='Prof. Davis'),
            ]
        ),
        Student(
            id=3, name='Carol Davis', age=19, major='Computer Science',
            gpa=3.9, enrollmentDate=date(2023, 9, 1),
            email='carol.d@university.edu',
            address=Address(city='San Francisco', state='CA', zipCode='94101'),
            courses=[
                Course(code='CS102', name='Data Structures', credits=4,
                       grade=4.0, semester='Fall 2023', instructor='Dr. Smith'),
                Course(code='CS201', name='Algorithms', credits=3,
                       grade=3.8, semester='Fall 2023', instructor='Prof. Lee'),
            ]
        ),
    ]


@pytest.fixture
def makeStudent() -> Callable[..., Student]:
    """
    Provide a factory for minimal students.

    Returns:
        Callable(id, gpa, age=20, major='Undeclared', **overrides) -> Student
    """
    def factory(id: int, gpa: float, age: int = 20, major: str = 'Undeclared', **overrides: Any) -> Student:
        return Student(
            id=id,
            name=overrides.pop('name', f'Student {id}'),
            age=age,
            major=major,
            gpa=gpa,
            **overrides
        )

    return factory


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'application': {
            'name': 'TestAnalytics'
        },
        'logging': {
            'level': 'DEBUG',
            'maskPII': True
        },
        'analysis': {
            'outlierMultiplier': 3.0
        },
        'grouping': {
            'gpaBands': {
                'mid': 3.0,
                'high': 3.6
            }
        }
    }


@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before test, restores after.
    """
    varsToRemove = ['ANALYTICS_OUTLIER_MULTIPLIER', 'ANALYTICS_LOG_LEVEL', 'TEST_VAR']

    saved = {}
    for var in varsToRemove:
        saved[var] = os.environ.pop(var, None)

    yield

    for var, value in saved.items():
        if value is not None:
            os.environ[var] = value
        else:
            os.environ.pop(var, None)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
