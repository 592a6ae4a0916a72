"""Exception hierarchy for XML tree conversion.

Only the document entry points raise these. Converting an already parsed
element tree cannot fail.
"""

from typing import Optional


class XMLConversionError(Exception):
    """Base exception for all conversion failures."""


class EmptyInputError(XMLConversionError):
    """Raised when the XML input is empty or contains only whitespace."""

    def __init__(self, message: str = "XML string is empty") -> None:
        super().__init__(message)


class InputTooLargeError(XMLConversionError):
    """Raised when the XML input exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"XML input of {size} bytes exceeds limit of {limit} bytes")
        self.size = size
        self.limit = limit


class MalformedXmlError(XMLConversionError):
    """Raised when the XML parser rejects the input.

    Attributes:
        parser_message: Message reported by the underlying parser
        line: Line of the first error, when the parser reports one
        column: Column of the first error, when the parser reports one
    """

    def __init__(
        self,
        parser_message: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ) -> None:
        location = ""
        if line is not None:
            location = f" (line {line}"
            location += f", column {column})" if column is not None else ")"
        super().__init__(f"XML string is invalid: {parser_message}{location}")
        self.parser_message = parser_message
        self.line = line
        self.column = column
