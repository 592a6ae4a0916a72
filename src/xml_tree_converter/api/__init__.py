"""Public conversion API.

Module-level functions cover one-off conversions; XMLTreeConverter keeps a
configuration and usage statistics for repeated use.
"""

from .parser import (
    XMLTreeConverter,
    convert_file,
    convert_with_statistics,
    convert_xml,
    convert_xml_to_array,
    parse_document,
)

__all__ = [
    "XMLTreeConverter",
    "convert_file",
    "convert_with_statistics",
    "convert_xml",
    "convert_xml_to_array",
    "parse_document",
]
