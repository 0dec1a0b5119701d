"""Tests for number construction and representation."""

import math

import pytest

from cplx import (
    CplxCartesian, CplxPolar, CplxConstructionError, CplxTypeError,
    from_cartesian, from_polar, from_complex, is_real, is_number
)


class TestCartesianConstruction:
    """Test the Cartesian constructor."""

    def test_create_cartesian(self):
        """Test creating a value with a non-zero imaginary part."""
        z = from_cartesian(2, 4)
        assert z == CplxCartesian(2, 4)
        assert z.re == 2
        assert z.im == 4

    def test_zero_imaginary_degenerates_to_real(self):
        """Test that an exactly zero imaginary part gives back the real scalar."""
        assert from_cartesian(5, 0) == 5
        assert isinstance(from_cartesian(5, 0), int)

        assert from_cartesian(2.5, 0.0) == 2.5
        assert isinstance(from_cartesian(2.5, 0.0), float)

        # Negative zero is still zero
        assert isinstance(from_cartesian(3, -0.0), int)

    def test_zero_real_part_stays_complex(self):
        """Test that a purely imaginary value is not collapsed."""
        assert from_cartesian(0, 1) == CplxCartesian(0, 1)

    @pytest.mark.parametrize("re,im", [("2", 3), (2, "3"), (None, 1), (True, 1), (1, 2j), ([1], 0)])
    def test_non_real_parts_rejected(self, re, im):
        """Test that both parts must be plain int or float values."""
        with pytest.raises(CplxTypeError, match="Function 'from_cartesian' requires real components"):
            from_cartesian(re, im)

    def test_non_real_parts_rejected_by_dataclass(self):
        """Test that direct construction enforces the same rule."""
        with pytest.raises(CplxTypeError, match="CplxCartesian"):
            CplxCartesian("2", 3)

    def test_cartesian_is_immutable(self):
        """Test that Cartesian values cannot be modified."""
        z = from_cartesian(1, 2)
        with pytest.raises(AttributeError):
            z.re = 5

    def test_cartesian_equality(self):
        """Test Cartesian value equality."""
        assert from_cartesian(1, 2) == from_cartesian(1, 2)
        assert from_cartesian(1, 2) != from_cartesian(1, -2)


class TestPolarConstruction:
    """Test the polar constructor."""

    def test_create_polar(self):
        """Test creating a value from magnitude and angle."""
        z = from_polar(4, 1.3)
        assert z == CplxPolar(4.0, 1.3)
        assert isinstance(z.magnitude, float)

    def test_angle_is_not_normalized(self):
        """Test that angles outside [-pi, pi] are kept exactly as given."""
        z = from_polar(1, 7.5)
        assert z.angle == 7.5

        z = from_polar(1, -10)
        assert z.angle == -10.0

    def test_zero_angle_degenerates_to_real(self):
        """Test that a zero angle gives back the magnitude as a scalar."""
        assert from_polar(2, 0) == 2.0
        assert isinstance(from_polar(2, 0), float)

    def test_zero_magnitude_degenerates_to_zero(self):
        """Test that a zero magnitude gives back zero whatever the angle."""
        assert from_polar(0, 1.3) == 0.0
        assert isinstance(from_polar(0, 1.3), float)

    @pytest.mark.parametrize("magnitude", [-1, -0.001, -1e300, float('-inf'), float('nan')])
    def test_invalid_magnitude_rejected(self, magnitude):
        """Test that negative and NaN magnitudes are rejected, not clamped."""
        with pytest.raises(CplxConstructionError, match="Polar magnitude must be non-negative"):
            from_polar(magnitude, 1.0)

    @pytest.mark.parametrize("magnitude,angle", [("2", 3), (2, "3"), (None, 1.0), (False, 1.0), (1.0, 1j)])
    def test_non_real_coordinates_rejected(self, magnitude, angle):
        """Test that a non-number is reported as a type error, not a bad magnitude."""
        with pytest.raises(CplxTypeError, match="Function 'from_polar' requires real components"):
            from_polar(magnitude, angle)

    def test_complex_coordinate_suggests_from_complex(self):
        """Test that a Python complex coordinate points at from_complex."""
        with pytest.raises(CplxTypeError) as exc_info:
            from_polar(2j, 1.0)

        assert exc_info.value.received == "complex"
        assert "from_complex" in exc_info.value.suggestion

    def test_invalid_magnitude_rejected_by_dataclass(self):
        """Test that direct construction enforces the same rule."""
        with pytest.raises(CplxConstructionError):
            CplxPolar(-1.0, 0.5)

        with pytest.raises(CplxTypeError, match="CplxPolar"):
            CplxPolar("1", 0.5)

    def test_polar_is_immutable(self):
        """Test that polar values cannot be modified."""
        z = from_polar(1, 1)
        with pytest.raises(AttributeError):
            z.angle = 2.0


class TestInterop:
    """Test conversion from Python complex and type checks."""

    def test_from_complex(self):
        """Test building a value from a Python complex."""
        assert from_complex(3 + 4j) == CplxCartesian(3.0, 4.0)

    def test_from_complex_real(self):
        """Test that a Python complex with no imaginary part degenerates."""
        assert from_complex(complex(2, 0)) == 2.0
        assert isinstance(from_complex(complex(2, 0)), float)

    @pytest.mark.parametrize("value,expected", [
        (1, True),
        (1.5, True),
        (-0.0, True),
        (True, False),
        ("1", False),
        (None, False),
        (1j, False),
        (CplxCartesian(1, 1), False),
    ])
    def test_is_real(self, value, expected):
        """Test plain real scalar detection."""
        assert is_real(value) is expected

    @pytest.mark.parametrize("value,expected", [
        (1, True),
        (2.5, True),
        (CplxCartesian(1, 1), True),
        (CplxPolar(1.0, 1.0), True),
        (False, False),
        (1j, False),
        ([1, 2], False),
    ])
    def test_is_number(self, value, expected):
        """Test number detection across representations."""
        assert is_number(value) is expected

    def test_degenerate_values_are_plain_scalars(self):
        """Test that degenerate values are the scalars themselves, with no wrapper."""
        assert type(from_cartesian(7, 0)) is int
        assert type(from_polar(7, 0)) is float
        assert math.isclose(from_polar(7, 0) + 1, 8.0)
