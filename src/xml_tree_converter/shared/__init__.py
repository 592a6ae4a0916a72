"""Shared utilities for XML tree conversion.

This module provides the configuration object, exception types, statistics
and logging helpers used across the parser adapter, converter and CLI.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ConverterConfig,
)
from .errors import (
    EmptyInputError,
    InputTooLargeError,
    MalformedXmlError,
    XMLConversionError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import ConversionStatistics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConverterConfig",
    "ConversionStatistics",
    "EmptyInputError",
    "InputTooLargeError",
    "MalformedXmlError",
    "XMLConversionError",
    "CorrelationLogger",
    "get_logger",
]
