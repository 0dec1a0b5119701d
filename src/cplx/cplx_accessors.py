"""
Accessors for the four canonical observables of a number.

This is the only module that looks at how a value is represented.  Everything
built on top of it asks for real, imaginary, magnitude or angle and never
inspects the representation itself.
"""

import math
from typing import Any, Union

from cplx.cplx_error import CplxDomainError, CplxTypeError
from cplx.cplx_value import CplxCartesian, CplxNumber, CplxPolar, is_number, is_real


def ensure_number(value: Any, function_name: str) -> CplxNumber:
    """Ensure value is a number, raise error if not."""
    if not is_number(value):
        raise CplxTypeError(
            f"Function '{function_name}' requires numeric arguments",
            received=type(value).__name__,
            expected="int, float, CplxCartesian or CplxPolar",
            suggestion="Wrap Python complex values with from_complex()" if isinstance(value, complex) else None
        )

    return value


def real(z: CplxNumber) -> Union[int, float]:
    """Get the real part of a number."""
    if isinstance(z, CplxCartesian):
        return z.re

    if isinstance(z, CplxPolar):
        return z.magnitude * math.cos(z.angle)

    return ensure_number(z, "real")


def imaginary(z: CplxNumber) -> Union[int, float]:
    """Get the imaginary part of a number."""
    if isinstance(z, CplxCartesian):
        return z.im

    if isinstance(z, CplxPolar):
        return z.magnitude * math.sin(z.angle)

    if isinstance(ensure_number(z, "imaginary"), float):
        return 0.0

    return 0


def magnitude(z: CplxNumber) -> Union[int, float]:
    """Get the magnitude (absolute value) of a number."""
    if isinstance(z, CplxCartesian):
        return math.hypot(z.re, z.im)

    if isinstance(z, CplxPolar):
        return z.magnitude

    return abs(ensure_number(z, "magnitude"))


def angle(z: CplxNumber) -> float:
    """
    Get the angle of a number, in radians.

    Cartesian values use the four-quadrant arctangent.  Polar values return the
    stored angle exactly as it was supplied.

    Raises:
        CplxDomainError: If z is zero, which has no angle
    """
    if isinstance(z, CplxCartesian):
        return math.atan2(z.im, z.re)

    if isinstance(z, CplxPolar):
        return z.angle

    if ensure_number(z, "angle") == 0:
        raise CplxDomainError(
            "Angle of zero is undefined",
            received=repr(z),
            expected="a non-zero number"
        )

    return math.atan2(0.0, z)


def is_zero(z: CplxNumber) -> bool:
    """Check if a number is exactly zero."""
    return real(z) == 0 and imaginary(z) == 0


def to_complex(z: CplxNumber) -> complex:
    """Convert a number to a Python built-in complex."""
    return complex(real(z), imaginary(z))


def is_close(z1: CplxNumber, z2: CplxNumber, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
    """
    Check if two numbers are close, comparing real and imaginary parts separately.

    Tolerances have the same meaning as in `math.isclose`.
    """
    return (
        math.isclose(real(z1), real(z2), rel_tol=rel_tol, abs_tol=abs_tol) and
        math.isclose(imaginary(z1), imaginary(z2), rel_tol=rel_tol, abs_tol=abs_tol)
    )
