################################################################################
# File Name: logging_config.py
# Purpose/Description: Logging setup with student PII masking
# Author: Ralph Agent
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Student Analytics Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | Ralph Agent  | Initial implementation
# 2026-10-19    | Ralph Agent  | Mask rendered messages; close replaced handlers
# ================================================================================
################################################################################

"""
Logging configuration module.

Student records carry email addresses and phone-like identifiers, so every
handler installed here masks them before anything is written.

Usage:
    from common.logging_config import setupLogging, getLogger

    setupLogging(level='DEBUG')
    logger = getLogger(__name__)
    logWithContext(logger, 'info', "Statistics computed", records=42)
"""

import logging
import re
import sys
from pathlib import Path
from typing import Any

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PII_PATTERNS = {
    'email': re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b'),
    'phone': re.compile(r'\b\d{3}[-.]\d{3}[-.]\d{4}\b'),
}


class PIIMaskingFilter(logging.Filter):
    """
    Logging filter that replaces emails and phone numbers with tokens.

    The message is rendered with its arguments before masking, so PII inside
    mapping arguments or in the str() of a logged object (a Student repr
    includes its email) is masked as well.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = maskPII(record.getMessage())
        record.args = ()
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that appends a record's `extra` dict as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        extra = getattr(record, 'extra', None)
        if extra and isinstance(extra, dict):
            message += ' | ' + ' '.join(f'{k}={v}' for k, v in extra.items())

        return message


def maskPII(message: str) -> str:
    """
    Mask PII patterns in a message.

    Args:
        message: Text to mask

    Returns:
        Text with each match replaced by [EMAIL_MASKED] / [PHONE_MASKED]
    """
    for name, pattern in PII_PATTERNS.items():
        message = pattern.sub(f'[{name.upper()}_MASKED]', message)
    return message


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
    enablePIIMasking: bool = True
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output
        enablePIIMasking: Whether to mask PII in logs

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(rootLogger.handlers):
        rootLogger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logFile, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        if enablePIIMasking:
            handler.addFilter(PIIMaskingFilter())
        rootLogger.addHandler(handler)

    rootLogger.info(f"Logging configured | level={level}")

    return rootLogger


def setupLoggingFromConfig(config: dict[str, Any]) -> logging.Logger:
    """
    Configure logging from the 'logging' section of a validated config.

    Args:
        config: Configuration dictionary (see common.config_validator)

    Returns:
        Root logger instance
    """
    loggingConfig = config.get('logging', {})
    return setupLogging(
        level=loggingConfig.get('level', 'INFO'),
        logFormat=loggingConfig.get('format'),
        logFile=loggingConfig.get('file'),
        enablePIIMasking=loggingConfig.get('maskPII', True)
    )


def getLogger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level name
        message: Log message
        **context: Additional context fields, rendered as key=value
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        contextStr = ' | ' + ' '.join(f'{k}={v}' for k, v in context.items())
        logFunc(message + contextStr)
    else:
        logFunc(message)
