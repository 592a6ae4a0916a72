"""Test module for xml_tree_converter package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_tree_converter

    # Assert
    assert xml_tree_converter is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_tree_converter

    # Assert
    assert isinstance(xml_tree_converter.__version__, str)
    assert xml_tree_converter.__version__ == "0.1.0"


def test_package_all_exports() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import xml_tree_converter

    # Assert
    for name in xml_tree_converter.__all__:
        assert hasattr(xml_tree_converter, name), name
    assert "convert_xml_to_array" in xml_tree_converter.__all__
    assert "XMLTreeConverter" in xml_tree_converter.__all__


def test_top_level_conversion() -> None:
    """Test the package-level entry point converts a document."""
    # Arrange
    from xml_tree_converter import convert_xml_to_array

    # Act
    document = convert_xml_to_array("<root><foo>bar</foo></root>")

    # Assert
    assert document.to_dict() == {"foo": [{"value": "bar", "children": {}, "attributes": {}}]}
