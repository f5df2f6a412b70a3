################################################################################
# File Name: __init__.py
# Purpose/Description: Records subpackage for student academic data
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
Records Subpackage.

Usage:
    from records import Student, Course, Address
"""

from .types import Address, Course, Student

__all__ = [
    'Address',
    'Course',
    'Student',
]
