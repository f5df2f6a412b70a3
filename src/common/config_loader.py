################################################################################
# File Name: config_loader.py
# Purpose/Description: Configuration loading with environment placeholders
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
Configuration loading module.

Provides:
- Resolution of ${VAR_NAME} placeholders from the environment
- Default values via ${VAR_NAME:default}
- Optional JSON configuration file, validated with ConfigValidator

The analytics engine itself never touches the filesystem; this loader is the
only place a file is read, and only when the caller passes a path.

Usage:
    from common.config_loader import loadConfig

    config = loadConfig()                       # defaults + environment
    config = loadConfig('analytics.json')       # file + environment
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

from .config_validator import ConfigValidator
from .error_handler import ConfigurationError

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def resolvePlaceholders(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolvePlaceholders(value) for key, value in config.items()}

    if isinstance(config, list):
        return [resolvePlaceholders(item) for item in config]

    if isinstance(config, str):
        return _resolveString(config)

    return config


def _resolveString(value: str) -> str:
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        if defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue

        logger.warning(f"Environment variable {varName} not set and no default")
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, value)


def loadConfig(
    configPath: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    validator: Optional[ConfigValidator] = None
) -> Dict[str, Any]:
    """
    Build a validated configuration dictionary.

    Args:
        configPath: Optional path to a JSON configuration file
        overrides: Optional dot-notation overrides applied after the file,
            e.g. {'analysis.outlierMultiplier': 3.0}
        validator: Validator to use (default: module defaults)

    Returns:
        Validated configuration with placeholders resolved

    Raises:
        ConfigurationError: If the file is missing or is not valid JSON
        ConfigValidationError: If validation fails
    """
    validator = validator or ConfigValidator()
    config: Dict[str, Any] = {}

    if configPath is not None:
        configFile = Path(configPath)
        if not configFile.exists():
            raise ConfigurationError(
                f"Configuration file not found: {configPath}",
                details={'path': str(configPath)}
            )

        logger.info(f"Loading configuration from {configPath}")
        try:
            with open(configFile, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {configPath}",
                details={'path': str(configPath), 'error': str(e)}
            ) from e

    config = resolvePlaceholders(config)

    for key, value in (overrides or {}).items():
        validator.setNestedValue(config, key, value)

    return validator.validate(config)
