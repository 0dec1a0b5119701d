"""Shared fixtures and utilities for cplx tests."""

import pytest

from cplx import CplxFormatter, CplxFormatOptions, CplxFormatMode, CplxAngleUnit, CplxNumber, is_close, format_number


@pytest.fixture
def formatter():
    """Create a formatter with default options."""
    return CplxFormatter()


@pytest.fixture
def formatter_custom():
    """Factory for formatters with custom options."""
    def _create_formatter(
        mode: CplxFormatMode = CplxFormatMode.CARTESIAN,
        angle_unit: CplxAngleUnit = CplxAngleUnit.RADIANS
    ) -> CplxFormatter:
        return CplxFormatter(CplxFormatOptions(mode=mode, angle_unit=angle_unit))
    return _create_formatter


class CplxTestHelpers:
    """Helper utilities for cplx testing."""

    @staticmethod
    def assert_close(actual: CplxNumber, expected: CplxNumber, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> None:
        """Assert that two numbers agree in both real and imaginary parts."""
        assert is_close(actual, expected, rel_tol=rel_tol, abs_tol=abs_tol), \
            f"Expected {format_number(expected)}, got {format_number(actual)}"

    @staticmethod
    def assert_formats_as(value: CplxNumber, expected: str, **kwargs) -> None:
        """Assert that a number renders as the expected text."""
        result = format_number(value, **kwargs)
        assert result == expected, f"Expected '{expected}', got '{result}'"


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return CplxTestHelpers
