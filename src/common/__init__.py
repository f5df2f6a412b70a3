################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
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
Common utilities package.

This package provides shared functionality used across the application:
- Configuration validation and loading
- Logging configuration
- Error taxonomy and reporting

Usage:
    from common.config_loader import loadConfig
    from common.logging_config import getLogger
    from common.error_handler import DataError
"""

from .config_loader import loadConfig, resolvePlaceholders
from .config_validator import ConfigValidationError, ConfigValidator
from .error_handler import (
    BaseError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    classifyError,
    formatError,
    handleError,
)
from .logging_config import getLogger, logWithContext, setupLogging, setupLoggingFromConfig

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'loadConfig',
    'resolvePlaceholders',
    'getLogger',
    'logWithContext',
    'setupLogging',
    'setupLoggingFromConfig',
    'BaseError',
    'ConfigurationError',
    'DataError',
    'ErrorCategory',
    'classifyError',
    'formatError',
    'handleError',
]
