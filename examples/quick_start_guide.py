#!/usr/bin/env python3
"""
Quick Start Guide for the XML Tree Converter.

This example walks through converting a document, reading the converted
tree, handling bad input and reusing a configured converter.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_tree_converter import (
    ConverterConfig,
    EmptyInputError,
    MalformedXmlError,
    XMLTreeConverter,
    convert_xml_to_array,
)

CATALOG_XML = """<?xml version="1.0" encoding="utf-8"?>
<catalog xmlns:media="urn:example:media">
    <book id="b1" genre="fiction">
        <title>My Book</title>
        <author>John Doe</author>
        <price currency="USD">19.99</price>
    </book>
    <magazine id="m1">Monthly Digest</magazine>
    <book id="b2">
        <title>Another Book</title>
        <media:cover media:format="png"/>
    </book>
</catalog>
"""


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - XML Tree Converter")
    print("=" * 45)

    # Step 1: Convert a document
    print("\n📄 Step 1: Converting XML")
    print("-" * 30)

    document = convert_xml_to_array(CATALOG_XML)
    print(f"✅ Root <{document.root_tag}> has {len(document)} top-level tag names")
    print(f"📏 Elements converted: {document.element_count}")

    # Step 2: Navigate the converted tree
    print("\n🔍 Step 2: Reading Values")
    print("-" * 30)

    for book in document["book"]:
        title = book.find_child("title")
        print(f"📚 {book.get_attribute('id')}: {title.value if title else '?'}")
        for cover in book.find_children("cover"):
            print(f"   cover format: {cover.get_attribute('format')}")

    # Step 3: Plain dictionaries for JSON
    print("\n🧾 Step 3: Plain Dictionary Output")
    print("-" * 30)
    print(json.dumps(document["magazine"][0].to_dict(), indent=2))

    # Step 4: Bad input
    print("\n⚠️  Step 4: Error Handling")
    print("-" * 30)

    for bad_input in ("", "<catalog><book></catalog>"):
        try:
            convert_xml_to_array(bad_input)
        except EmptyInputError as e:
            print(f"❌ Empty input: {e}")
        except MalformedXmlError as e:
            print(f"❌ Malformed input at line {e.line}: {e.parser_message}")

    # Step 5: Reusable converter with configuration
    print("\n⚙️  Step 5: Configured Converter")
    print("-" * 30)

    converter = XMLTreeConverter(ConverterConfig(strip_namespaces=False))
    namespaced = converter.convert(CATALOG_XML)
    print(f"🏷️  Child tags of the second book: {list(namespaced['book'][1].children)}")
    print(f"📊 Converter statistics: {converter.statistics}")


if __name__ == "__main__":
    quick_start_example()
