"""Document entry points for XML tree conversion.

This module wraps lxml parsing and the tree converter behind simple
module-level functions, plus a reusable converter class that keeps a
configuration and usage statistics across calls.
"""

import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from lxml import etree

from xml_tree_converter.shared import (
    ConversionStatistics,
    ConverterConfig,
    EmptyInputError,
    InputTooLargeError,
    MalformedXmlError,
    XMLConversionError,
    get_logger,
)
from xml_tree_converter.tree import ConvertedDocument, collect_statistics, convert_element

# Type definitions for input data
InputType = Union[str, bytes]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion


def _content_length(content: Any) -> int:
    return len(content) if isinstance(content, (str, bytes)) else 0


def _preview(content: InputType) -> str:
    text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
    return text[:PREVIEW_LENGTH] + "..." if len(text) > PREVIEW_LENGTH else text


def parse_document(
    content: Optional[InputType], config: Optional[ConverterConfig] = None
) -> etree._Element:
    """Parse XML content into an lxml root element.

    String input is handed to the parser as UTF-8, overriding any encoding
    named in its XML declaration. Byte input is decoded as the declaration
    or byte order mark says.

    Args:
        content: XML content as string or bytes
        config: Parser configuration (defaults to ConverterConfig())

    Returns:
        Root element of the parsed document

    Raises:
        EmptyInputError: If content is None, empty or only whitespace
        InputTooLargeError: If content exceeds config.max_input_size_bytes
        MalformedXmlError: If lxml cannot parse the content
    """
    config = config or ConverterConfig()

    if content is None:
        raise EmptyInputError()
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"XML content must be str or bytes, not {type(content).__name__}")
    if not content.strip():
        raise EmptyInputError()

    if isinstance(content, str):
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedXmlError(str(e)) from e
        encoding: Optional[str] = "utf-8"
    else:
        data = content
        encoding = None

    limit = config.max_input_size_bytes
    if limit is not None and len(data) > limit:
        raise InputTooLargeError(len(data), limit)

    parser = etree.XMLParser(encoding=encoding, **config.parser_options())
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        raise MalformedXmlError(e.msg or str(e), line, column) from e


def convert_xml_to_array(
    xml_text: Optional[InputType],
    config: Optional[ConverterConfig] = None,
    correlation_id: Optional[str] = None
) -> ConvertedDocument:
    """Convert an XML document into a ConvertedDocument.

    The root element is parsed and discarded; each of its child elements is
    converted and grouped under its tag name in document order.

    Args:
        xml_text: XML content as string or bytes
        config: Conversion configuration (defaults to ConverterConfig())
        correlation_id: Optional correlation ID for request tracking

    Returns:
        ConvertedDocument keyed by the tag names of the root's children

    Raises:
        EmptyInputError: If the input is empty
        MalformedXmlError: If the input is not well-formed XML

    Examples:
        >>> document = convert_xml_to_array('<root><foo>bar</foo></root>')
        >>> document.to_dict()
        {'foo': [{'value': 'bar', 'children': {}, 'attributes': {}}]}
    """
    document, _processing_time = _convert_timed(
        xml_text, config or ConverterConfig(), correlation_id
    )
    return document


# Pythonic alias for the main entry point
convert_xml = convert_xml_to_array


def convert_with_statistics(
    xml_text: Optional[InputType],
    config: Optional[ConverterConfig] = None,
    correlation_id: Optional[str] = None
) -> Tuple[ConvertedDocument, ConversionStatistics]:
    """Convert an XML document and gather size and timing statistics.

    Args:
        xml_text: XML content as string or bytes
        config: Conversion configuration (defaults to ConverterConfig())
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Tuple of the converted document and its statistics
    """
    document, processing_time = _convert_timed(
        xml_text, config or ConverterConfig(), correlation_id
    )
    statistics = collect_statistics(
        document,
        input_length=_content_length(xml_text),
        processing_time_ms=processing_time,
    )
    return document, statistics


def convert_file(
    file_path: Union[str, Path],
    config: Optional[ConverterConfig] = None,
    correlation_id: Optional[str] = None
) -> ConvertedDocument:
    """Convert an XML file into a ConvertedDocument.

    The file is read as bytes so that its XML declaration decides the
    encoding.

    Args:
        file_path: Path to XML file (string or Path object)
        config: Conversion configuration (defaults to ConverterConfig())
        correlation_id: Optional correlation ID for request tracking

    Returns:
        ConvertedDocument for the file's content

    Raises:
        FileNotFoundError: If the file does not exist
        EmptyInputError: If the file is empty
        MalformedXmlError: If the file is not well-formed XML
    """
    path_obj = Path(file_path)
    logger = get_logger(__name__, correlation_id, "convert_file")
    logger.debug("Reading XML file", extra={"file_path": str(path_obj)})

    return convert_xml_to_array(path_obj.read_bytes(), config, correlation_id)


def _convert_timed(
    xml_text: Optional[InputType],
    config: ConverterConfig,
    correlation_id: Optional[str]
) -> Tuple[ConvertedDocument, float]:
    start_time = time.perf_counter()
    logger = get_logger(__name__, correlation_id, "convert_xml")

    logger.debug(
        "Starting XML conversion",
        extra={
            "input_type": type(xml_text).__name__,
            "content_length": _content_length(xml_text),
            "preview": _preview(xml_text) if _content_length(xml_text) else "",
        }
    )

    try:
        root = parse_document(xml_text, config)
    except XMLConversionError as e:
        logger.warning(
            "XML input rejected",
            extra={"error_type": type(e).__name__, "error": str(e)}
        )
        raise

    document = convert_element(root, config.strip_namespaces)
    processing_time = (time.perf_counter() - start_time) * MS_PER_SECOND

    logger.info(
        "XML conversion completed",
        extra={
            "root_tag": document.root_tag,
            "top_level_tags": len(document),
            "processing_time_ms": processing_time,
        }
    )
    return document, processing_time


class XMLTreeConverter:
    """Reusable XML tree converter with configuration and usage statistics.

    Instances can be shared between threads; each conversion builds its own
    lxml parser and the statistics counters are lock-protected.

    Examples:
        >>> converter = XMLTreeConverter()
        >>> document = converter.convert('<root><item id="1">a</item></root>')
        >>> document["item"][0].attributes
        {'id': '1'}
        >>> converter.statistics["successful_conversions"]
        1
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize converter.

        Args:
            config: Conversion configuration (defaults to ConverterConfig())
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ConverterConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "xml_tree_converter")

        self._lock = threading.RLock()
        self._conversion_count = 0
        self._successful_conversions = 0
        self._total_processing_time = 0.0

    def convert(
        self,
        xml_text: Optional[InputType],
        correlation_id_override: Optional[str] = None
    ) -> ConvertedDocument:
        """Convert XML content with this converter's configuration.

        Raises:
            EmptyInputError: If the input is empty
            MalformedXmlError: If the input is not well-formed XML
        """
        document, _statistics = self.convert_with_statistics(xml_text, correlation_id_override)
        return document

    def convert_with_statistics(
        self,
        xml_text: Optional[InputType],
        correlation_id_override: Optional[str] = None
    ) -> Tuple[ConvertedDocument, ConversionStatistics]:
        """Convert XML content and return per-document statistics."""
        start_time = time.perf_counter()
        try:
            document, statistics = convert_with_statistics(
                xml_text, self.config, correlation_id_override or self.correlation_id
            )
        except XMLConversionError:
            self._record((time.perf_counter() - start_time) * MS_PER_SECOND, success=False)
            raise

        self._record(statistics.processing_time_ms, success=True)
        return document, statistics

    def convert_file(
        self,
        file_path: Union[str, Path],
        correlation_id_override: Optional[str] = None
    ) -> ConvertedDocument:
        """Convert an XML file with this converter's configuration."""
        return self.convert(Path(file_path).read_bytes(), correlation_id_override)

    def _record(self, processing_time: float, success: bool) -> None:
        with self._lock:
            self._conversion_count += 1
            self._total_processing_time += processing_time
            if success:
                self._successful_conversions += 1

    def reconfigure(self, config: ConverterConfig) -> None:
        """Replace the converter configuration."""
        self.config = config
        self.logger.info(
            "Converter reconfigured",
            extra={"config": config.to_dict()}
        )

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get converter usage statistics."""
        with self._lock:
            count = self._conversion_count
            return {
                "total_conversions": count,
                "successful_conversions": self._successful_conversions,
                "failed_conversions": count - self._successful_conversions,
                "success_rate": self._successful_conversions / count if count > 0 else 0.0,
                "total_processing_time_ms": self._total_processing_time,
                "average_processing_time_ms": (
                    self._total_processing_time / count if count > 0 else 0.0
                ),
                "correlation_id": self.correlation_id,
            }

    def reset_statistics(self) -> None:
        """Reset converter usage statistics."""
        with self._lock:
            self._conversion_count = 0
            self._successful_conversions = 0
            self._total_processing_time = 0.0

        self.logger.info("Converter statistics reset")
