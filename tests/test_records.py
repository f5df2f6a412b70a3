################################################################################
# File Name: test_records.py
# Purpose/Description: Tests for the record model
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
Tests for the records.types module.

Run with:
    pytest tests/test_records.py -v
"""

import sys
from pathlib import Path
srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from records import Address, Course, Student


class TestStudent:
    """Tests for Student, Course and Address."""

    def test_student_defaults_emptyCoursesNoAddress(self):
        """
        Given: A student built with only required fields
        When: Defaults are inspected
        Then: No address, no courses, and course lists are not shared
        """
        first = Student(id=1, name='A', age=20, major='Art', gpa=3.0)
        second = Student(id=2, name='B', age=21, major='Art', gpa=3.1)

        first.courses.append(Course(code='ART100', name='Drawing'))

        assert first.address is None
        assert second.courses == []

    def test_toDict_sampleStudent_serializesNested(self, sampleStudents):
        """
        Given: Alice
        When: toDict() is called
        Then: Date is ISO formatted and nested records are dictionaries
        """
        data = sampleStudents[0].toDict()

        assert data['enrollmentDate'] == '2022-09-01'
        assert data['address']['city'] == 'Seattle'
        assert data['courses'][0]['code'] == 'CS101'
        assert len(data['courses']) == 2

    def test_toDict_noAddressNoDate_serializesNone(self):
        """
        Given: A student without address or enrollment date
        When: toDict() is called
        Then: Both serialize as None
        """
        data = Student(id=1, name='A', age=20, major='Art', gpa=3.0).toDict()

        assert data['address'] is None
        assert data['enrollmentDate'] is None

    def test_address_toDict_allFields(self):
        """
        Given: An address
        When: toDict() is called
        Then: All four fields are present
        """
        address = Address(street='1 Main St', city='Seattle', state='WA', zipCode='98101')

        assert address.toDict() == {
            'street': '1 Main St',
            'city': 'Seattle',
            'state': 'WA',
            'zipCode': '98101'
        }
