"""Tests for error handling and custom exceptions."""

import pytest

from timecodec.exceptions import ParseError, TimecodecError
from timecodec.utils import isodatetime


class TestExceptionClasses:
    """Test custom exception classes."""

    def test_base_error_with_message(self):
        """Base exception should accept message."""
        error = TimecodecError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"

    def test_base_error_with_details(self):
        """Base exception should accept details dict."""
        details = {"value": "2016-02-30", "kind": "date"}
        error = TimecodecError("Invalid date", details=details)
        assert error.details == details

    def test_base_error_without_details(self):
        """Base exception should have empty details dict by default."""
        error = TimecodecError("Test")
        assert error.details == {}

    def test_parse_error_inherits_base(self):
        """ParseError should inherit from TimecodecError."""
        assert issubclass(ParseError, TimecodecError)

    def test_parse_error_is_value_error(self):
        """ParseError should be catchable as ValueError."""
        assert issubclass(ParseError, ValueError)


class TestParseErrors:
    """Test errors raised by the codec."""

    def test_message_names_the_input(self):
        """Grammar failures should quote the offending text."""
        with pytest.raises(ParseError) as exc_info:
            isodatetime.parse_date_time("yesterday")
        assert "'yesterday'" in exc_info.value.message
        assert exc_info.value.details == {"value": "yesterday", "kind": "date-time"}

    def test_impossible_date_reports_reason(self):
        """Calendar failures should carry the datetime error text."""
        with pytest.raises(ParseError) as exc_info:
            isodatetime.parse_date("2019-02-29")
        assert "out of range" in exc_info.value.message

    def test_chains_underlying_error(self):
        """Calendar failures should chain the original ValueError."""
        with pytest.raises(ParseError) as exc_info:
            isodatetime.parse_date("2016-13-01")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_rejected_input_is_logged(self, caplog):
        """Rejected input should be logged at DEBUG."""
        with caplog.at_level("DEBUG", logger="timecodec.utils.isodatetime"):
            with pytest.raises(ParseError):
                isodatetime.parse_date("not-a-date")
        assert "not-a-date" in caplog.text
