"""Tests for correlation-aware logging."""

import logging

from xml_tree_converter.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test CorrelationLogger behaviour."""

    def test_component_defaults_to_module_name(self):
        logger = get_logger("xml_tree_converter.api.parser")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "parser"
        assert logger.correlation_id is None

    def test_records_carry_context(self, caplog):
        """Test records include component, correlation ID and extra fields."""
        logger = get_logger("xml_tree_converter.tests", "abc-123", "converter")

        with caplog.at_level(logging.DEBUG, logger="xml_tree_converter.tests"):
            logger.info("converted", extra={"element_count": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "converted"
        assert record.component == "converter"
        assert record.correlation_id == "abc-123"
        assert record.element_count == 3

    def test_levels(self, caplog):
        """Test each level method logs at its level."""
        logger = get_logger("xml_tree_converter.tests")

        with caplog.at_level(logging.DEBUG, logger="xml_tree_converter.tests"):
            logger.debug("d")
            logger.warning("w")
            logger.error("e", exc_info=False)

        assert [record.levelno for record in caplog.records] == [
            logging.DEBUG,
            logging.WARNING,
            logging.ERROR,
        ]

    def test_is_enabled_for(self):
        logger = get_logger("xml_tree_converter.tests.enabled")
        logger.logger.setLevel(logging.ERROR)
        assert logger.is_enabled_for(logging.ERROR)
        assert not logger.is_enabled_for(logging.DEBUG)
