################################################################################
# File Name: test_logging_config.py
# Purpose/Description: Tests for logging configuration
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
Tests for the common.logging_config module.

Run with:
    pytest tests/test_logging_config.py -v
"""

import logging
from typing import Generator

import pytest

import sys
from pathlib import Path
srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.logging_config import (
    PIIMaskingFilter,
    StructuredFormatter,
    logWithContext,
    maskPII,
    setupLogging,
    setupLoggingFromConfig,
)


@pytest.fixture
def restoreRootLogger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    rootLogger = logging.getLogger()
    savedHandlers = list(rootLogger.handlers)
    savedLevel = rootLogger.level

    yield

    rootLogger.handlers[:] = savedHandlers
    rootLogger.setLevel(savedLevel)


def _record(msg: str, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name='test',
        level=logging.INFO,
        pathname='test.py',
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None
    )


class TestPIIMasking:
    """Tests for maskPII and PIIMaskingFilter."""

    def test_maskPII_studentEmail_masked(self):
        """
        Given: A message with a student email
        When: maskPII() is called
        Then: The email is replaced
        """
        result = maskPII('Loaded alice.j@university.edu')

        assert result == 'Loaded [EMAIL_MASKED]'

    def test_maskPII_phone_masked(self):
        """
        Given: A message with a phone number
        When: maskPII() is called
        Then: The phone number is replaced
        """
        assert '[PHONE_MASKED]' in maskPII('Call 555-123-4567')

    def test_maskPII_gpaAndIds_untouched(self):
        """
        Given: A message with numbers that are not PII
        When: maskPII() is called
        Then: It is unchanged
        """
        message = 'Statistics complete | records=3 | meanGPA=3.63'

        assert maskPII(message) == message

    def test_filter_masksMessageAndArgs(self):
        """
        Given: A record with an email in msg and in args
        When: filter() is called
        Then: Both are masked and the record is kept
        """
        record = _record('Student %s from bob.w@university.edu', ('carol.d@university.edu',))

        assert PIIMaskingFilter().filter(record) is True
        assert record.getMessage() == 'Student [EMAIL_MASKED] from [EMAIL_MASKED]'

    def test_filter_mappingArgs_masked(self):
        """
        Given: A record formatted from a mapping argument holding an email
        When: filter() is called
        Then: The rendered message has the email masked
        """
        record = _record('Notify %(email)s', ({'email': 'alice.j@university.edu'},))

        PIIMaskingFilter().filter(record)

        assert record.getMessage() == 'Notify [EMAIL_MASKED]'

    def test_filter_studentObjectArg_emailMasked(self, sampleStudents):
        """
        Given: A Student passed as a logging argument
        When: filter() is called
        Then: The email from the Student repr does not reach the message
        """
        record = _record('Loaded %s', (sampleStudents[0],))

        PIIMaskingFilter().filter(record)

        message = record.getMessage()
        assert 'alice.j@university.edu' not in message
        assert '[EMAIL_MASKED]' in message
        assert 'Alice Johnson' in message

    def test_filter_appliedTwice_messageUnchanged(self):
        """
        Given: A record already masked by one handler
        When: A second handler's filter runs on it
        Then: The message is the same and literal percent signs survive
        """
        record = _record('Top %d%% of bob.w@university.edu', (10,))

        PIIMaskingFilter().filter(record)
        PIIMaskingFilter().filter(record)

        assert record.getMessage() == 'Top 10% of [EMAIL_MASKED]'


class TestSetupLogging:
    """Tests for setupLogging and helpers."""

    def test_setupLogging_setsLevelAndHandler(self, restoreRootLogger):
        """
        Given: level DEBUG
        When: setupLogging() is called
        Then: Root logger is at DEBUG with one masked console handler
        """
        rootLogger = setupLogging(level='DEBUG')

        assert rootLogger.level == logging.DEBUG
        assert len(rootLogger.handlers) == 1
        assert any(isinstance(f, PIIMaskingFilter) for f in rootLogger.handlers[0].filters)

    def test_setupLogging_logFile_addsFileHandler(self, restoreRootLogger, tmp_path):
        """
        Given: A log file path in a new directory
        When: setupLogging() is called
        Then: The directory is created and a file handler added
        """
        logFile = tmp_path / 'logs' / 'analytics.log'

        rootLogger = setupLogging(logFile=str(logFile))

        assert logFile.parent.exists()
        assert len(rootLogger.handlers) == 2
        for handler in rootLogger.handlers:
            handler.close()

    def test_setupLogging_calledAgain_closesPreviousFileHandler(self, restoreRootLogger, tmp_path):
        """
        Given: Logging already configured with a log file
        When: setupLogging() is called a second time
        Then: The earlier file handler is removed and its stream closed
        """
        rootLogger = setupLogging(logFile=str(tmp_path / 'first.log'))
        firstFileHandler = next(
            h for h in rootLogger.handlers if isinstance(h, logging.FileHandler)
        )

        setupLogging(level='INFO')

        assert firstFileHandler not in rootLogger.handlers
        assert firstFileHandler.stream is None

    def test_setupLoggingFromConfig_readsLevelAndMasking(self, restoreRootLogger, sampleConfig):
        """
        Given: Config with logging.level DEBUG and maskPII False
        When: setupLoggingFromConfig() is called
        Then: Level is DEBUG and no masking filter is installed
        """
        sampleConfig['logging']['maskPII'] = False

        rootLogger = setupLoggingFromConfig(sampleConfig)

        assert rootLogger.level == logging.DEBUG
        assert rootLogger.handlers[0].filters == []

    def test_structuredFormatter_appendsExtra(self):
        """
        Given: A record with an extra dict
        When: Formatted
        Then: key=value pairs are appended
        """
        record = _record('Grouped')
        record.extra = {'groups': 2}

        result = StructuredFormatter(fmt='%(message)s').format(record)

        assert result == 'Grouped | groups=2'

    def test_logWithContext_rendersContext(self, caplog):
        """
        Given: Context fields
        When: logWithContext() is called
        Then: They are appended to the message
        """
        logger = logging.getLogger('test.context')

        with caplog.at_level(logging.INFO, logger='test.context'):
            logWithContext(logger, 'info', 'Report built', majors=2)

        assert caplog.records[-1].getMessage() == 'Report built | majors=2'
