"""Configuration for XML tree conversion.

This module provides the immutable configuration object shared by the parser
adapter, the tree converter and the command-line tool.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional, Union

VALID_LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for parsing and converting XML documents.

    Thread-safe due to frozen dataclass implementation. The parser flags map
    onto ``lxml.etree.XMLParser`` options. Entities declared in the document's
    internal DTD subset are always substituted; the defaults keep external
    entities, DTD loading and network access switched off.

    Attributes:
        strip_namespaces: Report tag and attribute names by local name
            instead of ``{uri}name`` Clark notation
        resolve_entities: Also substitute external entities
        load_dtd: Load the document's DTD
        no_network: Forbid network access while parsing
        huge_tree: Lift libxml2's nesting depth and text size limits
        max_input_size_bytes: Reject larger inputs before parsing
        logging_level: Level used by the command-line tool
    """

    strip_namespaces: bool = True
    resolve_entities: bool = False
    load_dtd: bool = False
    no_network: bool = True
    huge_tree: bool = False
    max_input_size_bytes: Optional[int] = None
    logging_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for config_field in fields(self):
            if config_field.type in (bool, "bool"):
                value = getattr(self, config_field.name)
                if not isinstance(value, bool):
                    raise ConfigValidationError(
                        f"{config_field.name} must be a boolean, got {value!r}",
                        field_name=config_field.name,
                    )

        if self.max_input_size_bytes is not None and (
            isinstance(self.max_input_size_bytes, bool)
            or not isinstance(self.max_input_size_bytes, int)
            or self.max_input_size_bytes <= 0
        ):
            raise ConfigValidationError(
                "max_input_size_bytes must be > 0 or None",
                field_name="max_input_size_bytes",
            )

        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {list(VALID_LOGGING_LEVELS)}",
                field_name="logging_level",
                suggestions=list(VALID_LOGGING_LEVELS),
            )

    def override(self, **kwargs: Any) -> "ConverterConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Configuration fields to override

        Returns:
            New ConverterConfig instance with overrides applied
        """
        unknown = set(kwargs) - {config_field.name for config_field in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
            )
        return replace(self, **kwargs)

    def parser_options(self) -> Dict[str, Union[bool, str]]:
        """Keyword arguments for ``lxml.etree.XMLParser``."""
        return {
            "resolve_entities": True if self.resolve_entities else "internal",
            "load_dtd": self.load_dtd,
            "no_network": self.no_network,
            "huge_tree": self.huge_tree,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConverterConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            ConverterConfig instance created from dictionary
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ConverterConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def secure(cls) -> "ConverterConfig":
        """Create configuration preset for untrusted input."""
        return cls()

    @classmethod
    def permissive(cls) -> "ConverterConfig":
        """Create configuration preset for trusted, possibly very deep documents."""
        return cls(resolve_entities=True, load_dtd=True, huge_tree=True)
