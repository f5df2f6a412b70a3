################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with required fields and defaults
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
Configuration validation module.

Configuration is a nested dictionary addressed with dot-notation keys
('analysis.outlierMultiplier'). The validator checks required keys, fills
in defaults and enforces the numeric constraints the analytics code relies
on.

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator()
    config = validator.validate(rawConfig)
"""

import logging
from typing import Any, Dict, List, Optional

from .error_handler import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, missingFields: Optional[List[str]] = None):
        super().__init__(message, details={'missingFields': missingFields or []})
        self.missingFields = missingFields or []


REQUIRED_KEYS: List[str] = []

DEFAULTS: Dict[str, Any] = {
    'application.name': 'StudentAnalytics',
    'logging.level': 'INFO',
    'logging.maskPII': True,
    'analysis.outlierMultiplier': 1.5,
    'grouping.gpaBands.mid': 3.5,
    'grouping.gpaBands.high': 3.8,
}


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Attributes:
        requiredKeys: List of required configuration keys (dot notation)
        defaults: Dictionary of default values for optional fields
    """

    def __init__(
        self,
        requiredKeys: Optional[List[str]] = None,
        defaults: Optional[Dict[str, Any]] = None
    ):
        self.requiredKeys = requiredKeys if requiredKeys is not None else REQUIRED_KEYS
        self.defaults = defaults if defaults is not None else DEFAULTS

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and enhance configuration.

        Performs:
        1. Required field validation
        2. Default value application
        3. Range checks on analysis and grouping settings

        Args:
            config: Raw configuration dictionary (modified in place)

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigValidationError: If required fields are missing or a value
                is out of range
        """
        missingFields = self._validateRequired(config)
        if missingFields:
            fieldList = ', '.join(missingFields)
            raise ConfigValidationError(
                f"Missing required configuration fields: {fieldList}",
                missingFields=missingFields
            )

        config = self._applyDefaults(config)
        self._validateRanges(config)

        logger.info("Configuration validated successfully")
        return config

    def _validateRequired(self, config: Dict[str, Any]) -> List[str]:
        return [key for key in self.requiredKeys if self.getNestedValue(config, key) is None]

    def _applyDefaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        for key, defaultValue in self.defaults.items():
            if self.getNestedValue(config, key) is None:
                self.setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def _validateRanges(self, config: Dict[str, Any]) -> None:
        """
        Check numeric settings.

        Values may arrive as strings after placeholder resolution, so each is
        coerced to float and written back.
        """
        numericKeys = [
            'analysis.outlierMultiplier',
            'grouping.gpaBands.mid',
            'grouping.gpaBands.high',
        ]
        for key in numericKeys:
            value = self.getNestedValue(config, key)
            if value is None:
                continue
            try:
                self.setNestedValue(config, key, float(value))
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(f"{key} must be numeric, got {value!r}") from e

        multiplier = self.getNestedValue(config, 'analysis.outlierMultiplier')
        if multiplier is not None and multiplier <= 0:
            raise ConfigValidationError(
                f"analysis.outlierMultiplier must be positive, got {multiplier}"
            )

        mid = self.getNestedValue(config, 'grouping.gpaBands.mid')
        high = self.getNestedValue(config, 'grouping.gpaBands.high')
        if mid is not None and high is not None and mid >= high:
            raise ConfigValidationError(
                f"grouping.gpaBands.mid ({mid}) must be below grouping.gpaBands.high ({high})"
            )

    def getNestedValue(self, config: Dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'grouping.gpaBands.mid')

        Returns:
            Value if found, None otherwise
        """
        value: Any = config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def setNestedValue(self, config: Dict[str, Any], key: str, value: Any) -> None:
        """
        Set a value in nested dictionary using dot notation.

        Args:
            config: Configuration dictionary to modify
            key: Dot-notation key
            value: Value to set
        """
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value


def validateConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convenience function to validate configuration with module defaults.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated configuration
    """
    return ConfigValidator().validate(config)
