"""
Complex value representations.

A number is one of three shapes:

- a plain `int` or `float` (the real case, never wrapped)
- `CplxCartesian`, an immutable (re, im) pair
- `CplxPolar`, an immutable (magnitude, angle) pair with angle in radians

Use `from_cartesian` and `from_polar` rather than the dataclasses directly: they
collapse values that are exactly real back to a plain scalar.
"""

from dataclasses import dataclass
from typing import Any, Union

from cplx.cplx_error import CplxConstructionError, CplxTypeError


@dataclass(frozen=True)
class CplxCartesian:
    """Complex value stored as real and imaginary parts."""
    re: Union[int, float]
    im: Union[int, float]

    def __post_init__(self) -> None:
        _check_component(self.re, "CplxCartesian")
        _check_component(self.im, "CplxCartesian")


@dataclass(frozen=True)
class CplxPolar:
    """Complex value stored as magnitude and angle (radians, not normalized)."""
    magnitude: float
    angle: float

    def __post_init__(self) -> None:
        _check_component(self.magnitude, "CplxPolar")
        _check_component(self.angle, "CplxPolar")
        _check_magnitude(self.magnitude)


CplxNumber = Union[int, float, CplxCartesian, CplxPolar]


def _check_component(value: Any, function_name: str) -> None:
    if not is_real(value):
        raise CplxTypeError(
            f"Function '{function_name}' requires real components",
            received=type(value).__name__,
            expected="int or float",
            suggestion="Use from_complex() for a Python complex" if isinstance(value, complex) else None
        )


def _check_magnitude(magnitude: Any) -> None:
    # Written as a negated comparison so NaN is rejected too
    if not magnitude >= 0:
        raise CplxConstructionError(
            "Polar magnitude must be non-negative",
            received=repr(magnitude),
            expected="a magnitude >= 0",
            suggestion="Put the sign into the angle instead: from_polar(r, angle + pi)"
        )


def is_real(value: Any) -> bool:
    """Check if a value is a plain real scalar (bool is not a number here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Check if a value is any supported number representation."""
    return is_real(value) or isinstance(value, (CplxCartesian, CplxPolar))


def from_cartesian(re: Union[int, float], im: Union[int, float]) -> CplxNumber:
    """
    Create a number from its Cartesian coordinates.

    Args:
        re: Real part
        im: Imaginary part

    Returns:
        `re` itself if `im` is exactly zero, otherwise a CplxCartesian

    Raises:
        CplxTypeError: If either part is not an int or float
    """
    _check_component(re, "from_cartesian")
    _check_component(im, "from_cartesian")

    if im == 0:
        return re

    return CplxCartesian(re, im)


def from_polar(magnitude: Union[int, float], angle: Union[int, float]) -> CplxNumber:
    """
    Create a number from its polar coordinates.

    Args:
        magnitude: Distance from the origin, must be >= 0
        angle: Angle in radians; any range is accepted and kept as given

    Returns:
        A float if the value is exactly real (zero angle or zero magnitude),
        otherwise a CplxPolar

    Raises:
        CplxTypeError: If either coordinate is not an int or float
        CplxConstructionError: If magnitude is negative
    """
    _check_component(magnitude, "from_polar")
    _check_component(angle, "from_polar")
    _check_magnitude(magnitude)

    if magnitude == 0:
        return 0.0

    if angle == 0:
        return float(magnitude)

    return CplxPolar(float(magnitude), float(angle))


def from_complex(value: complex) -> CplxNumber:
    """Create a number from a Python built-in complex."""
    return from_cartesian(value.real, value.imag)
