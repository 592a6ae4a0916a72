"""Command-line interface module for XML Tree Converter.

This module provides the xml-tree tool for converting XML files into JSON or
text outlines and for reporting per-file statistics.
"""

from .main import main

__all__ = ["main"]
