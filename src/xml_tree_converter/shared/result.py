"""Statistics collected about a conversion."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ConversionStatistics:
    """Size and timing figures for one converted document.

    The root element is not part of a converted document, so it is not
    counted and its children sit at depth 1.
    """

    element_count: int = 0
    attribute_count: int = 0
    max_depth: int = 0
    input_length: int = 0
    processing_time_ms: float = 0.0

    @property
    def elements_per_second(self) -> float:
        """Calculate elements converted per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.element_count * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary representation."""
        return {
            "element_count": self.element_count,
            "attribute_count": self.attribute_count,
            "max_depth": self.max_depth,
            "input_length": self.input_length,
            "processing_time_ms": self.processing_time_ms,
        }
