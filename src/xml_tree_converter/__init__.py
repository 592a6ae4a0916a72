"""XML Tree Converter.

Converts XML documents into generic, information-preserving trees of plain
values: each element keeps its own text, its attributes and its children
grouped by tag name, without any schema knowledge.

Progressive API Disclosure:
- Level 1: Simple functions - convert_xml_to_array(), convert_file()
- Level 2: Configured converter - XMLTreeConverter class
- Level 3: Pre-parsed trees - convert_element(), convert_node()
"""

__version__ = "0.1.0"
__author__ = "XML Tree Converter Team"

# Level 1 and 2: entry points and the reusable converter
from .api import (
    XMLTreeConverter,
    convert_file,
    convert_with_statistics,
    convert_xml,
    convert_xml_to_array,
    parse_document,
)

# Configuration, errors and statistics
from .shared import (
    ConfigError,
    ConfigValidationError,
    ConversionStatistics,
    ConverterConfig,
    EmptyInputError,
    InputTooLargeError,
    MalformedXmlError,
    XMLConversionError,
)

# Level 3: output model and tree conversion
from .tree import ConvertedDocument, ConvertedNode, convert_element, convert_node

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: simple conversion functions
    "convert_xml_to_array",
    "convert_xml",
    "convert_file",
    "convert_with_statistics",
    "parse_document",

    # Level 2: reusable converter
    "XMLTreeConverter",

    # Level 3: pre-parsed trees
    "convert_element",
    "convert_node",

    # Result objects and data structures
    "ConvertedDocument",
    "ConvertedNode",
    "ConversionStatistics",

    # Configuration
    "ConverterConfig",
    "ConfigError",
    "ConfigValidationError",

    # Errors
    "XMLConversionError",
    "EmptyInputError",
    "InputTooLargeError",
    "MalformedXmlError",
]
