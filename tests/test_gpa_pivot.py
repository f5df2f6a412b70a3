################################################################################
# File Name: test_gpa_pivot.py
# Purpose/Description: Tests for the GPA band pivot
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
Tests for the grouping.pivot module.

Run with:
    pytest tests/test_gpa_pivot.py -v
"""

import sys
from pathlib import Path
srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from grouping import GpaBandCounts, gpaDistributionByMajor, gpaDistributionFromConfig


class TestGpaDistribution:
    """Tests for gpaDistributionByMajor and gpaDistributionFromConfig."""

    def test_gpaDistributionByMajor_defaultBands(self, sampleStudents):
        """
        Given: Alice 3.8 (CS), Bob 3.2 (Math), Carol 3.9 (CS)
        When: Pivoted with default thresholds 3.5 / 3.8
        Then: CS has two high, Math has one low
        """
        result = gpaDistributionByMajor(sampleStudents)

        assert list(result) == ['Computer Science', 'Mathematics']
        assert result['Computer Science'] == GpaBandCounts(low=0, mid=0, high=2)
        assert result['Mathematics'] == GpaBandCounts(low=1, mid=0, high=0)

    def test_gpaDistributionByMajor_thresholdBoundaries(self, makeStudent):
        """
        Given: GPAs exactly at 3.5 and 3.8 plus one just below 3.5
        When: Pivoted
        Then: 3.5 is mid, 3.8 is high, 3.49 is low
        """
        students = [
            makeStudent(id=1, gpa=3.49, major='Physics'),
            makeStudent(id=2, gpa=3.5, major='Physics'),
            makeStudent(id=3, gpa=3.8, major='Physics'),
        ]

        counts = gpaDistributionByMajor(students)['Physics']

        assert (counts.low, counts.mid, counts.high) == (1, 1, 1)
        assert counts.total == 3

    def test_gpaDistributionByMajor_emptyInput_returnsEmpty(self):
        """
        Given: No students
        When: Pivoted
        Then: Returns an empty mapping
        """
        assert gpaDistributionByMajor([]) == {}

    def test_gpaDistributionFromConfig_usesConfiguredBands(self, sampleStudents, sampleConfig):
        """
        Given: Bands mid=3.0, high=3.6
        When: gpaDistributionFromConfig() is called
        Then: Bob (3.2) counts as mid
        """
        result = gpaDistributionFromConfig(sampleStudents, sampleConfig)

        assert result['Mathematics'] == GpaBandCounts(low=0, mid=1, high=0)
        assert result['Computer Science'].toDict() == {'low': 0, 'mid': 0, 'high': 2, 'total': 2}

    def test_gpaDistributionFromConfig_missingSection_usesDefaults(self, sampleStudents):
        """
        Given: Config without a grouping section
        When: gpaDistributionFromConfig() is called
        Then: Matches the default thresholds
        """
        assert gpaDistributionFromConfig(sampleStudents, {}) == gpaDistributionByMajor(sampleStudents)
