"""
Tests for custom exceptions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from herald.core.exceptions import (
    HeraldError,
    ConfigurationError,
    UpstreamError,
    EmptyInputError,
    PriorDataReadError,
    InvalidReleaseDataError,
)


class TestExceptions:
    """Tests for custom exception classes."""

    def test_herald_error_is_exception(self):
        """Test that HeraldError is an Exception."""
        assert issubclass(HeraldError, Exception)

    @pytest.mark.parametrize("error_class", [
        ConfigurationError,
        UpstreamError,
        EmptyInputError,
        PriorDataReadError,
        InvalidReleaseDataError,
    ])
    def test_errors_inherit_from_herald_error(self, error_class):
        """Test that every custom error can be caught as HeraldError."""
        assert issubclass(error_class, HeraldError)
        with pytest.raises(HeraldError):
            raise error_class("failed")

    def test_upstream_error_keeps_status_code(self):
        """Test that UpstreamError carries the HTTP status."""
        error = UpstreamError("Token request failed: 401", status_code=401)
        assert error.status_code == 401
        assert str(error) == "Token request failed: 401"

    def test_upstream_error_status_code_optional(self):
        """Test that UpstreamError works without a status code."""
        assert UpstreamError("connection refused").status_code is None

    def test_exception_chaining(self):
        """Test that exceptions can be chained."""
        try:
            raise ValueError("Original error")
        except ValueError as e:
            with pytest.raises(PriorDataReadError) as exc_info:
                raise PriorDataReadError("Wrapped error") from e

            assert exc_info.value.__cause__ == e
