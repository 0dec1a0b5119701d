"""
Arithmetic on numbers in any representation.

All operations are built on the accessors and rebuild their results through
`from_cartesian`, so a result that is exactly real comes back as a plain scalar.
When every operand is already a plain scalar the work is handed straight to
Python's own arithmetic.
"""

import logging
import math
import sys
from typing import Tuple, Union

from cplx.cplx_accessors import ensure_number, imaginary, is_zero, magnitude, real
from cplx.cplx_error import CplxDomainError, CplxInternalError
from cplx.cplx_value import CplxNumber, CplxPolar, from_cartesian, from_polar, is_real


_logger = logging.getLogger("CplxArithmetic")


def negate(z: CplxNumber) -> CplxNumber:
    """Negate a number."""
    if is_real(ensure_number(z, "negate")):
        return -z

    return from_cartesian(-real(z), -imaginary(z))


def conjugate(z: CplxNumber) -> CplxNumber:
    """Get the complex conjugate of a number."""
    if is_real(ensure_number(z, "conjugate")):
        return z

    return from_cartesian(real(z), -imaginary(z))


def add(z1: CplxNumber, z2: CplxNumber) -> CplxNumber:
    """Add two numbers."""
    ensure_number(z1, "add")
    ensure_number(z2, "add")

    if is_real(z1) and is_real(z2):
        return z1 + z2

    return from_cartesian(real(z1) + real(z2), imaginary(z1) + imaginary(z2))


def subtract(z1: CplxNumber, z2: CplxNumber) -> CplxNumber:
    """Subtract z2 from z1."""
    ensure_number(z1, "subtract")
    ensure_number(z2, "subtract")

    if is_real(z1) and is_real(z2):
        return z1 - z2

    return from_cartesian(real(z1) - real(z2), imaginary(z1) - imaginary(z2))


def multiply(z1: CplxNumber, z2: CplxNumber) -> CplxNumber:
    """Multiply two numbers."""
    ensure_number(z1, "multiply")
    ensure_number(z2, "multiply")

    if is_real(z1) and is_real(z2):
        return z1 * z2

    re1, im1 = real(z1), imaginary(z1)
    re2, im2 = real(z2), imaginary(z2)
    return from_cartesian(re1 * re2 - im1 * im2, re1 * im2 + im1 * re2)


def divide(numerator: CplxNumber, denominator: CplxNumber) -> CplxNumber:
    """
    Divide two numbers.

    Both numerator and denominator are multiplied by the conjugate of the
    denominator, which leaves a real denominator to divide the parts by.

    Args:
        numerator: Number to divide
        denominator: Number to divide by

    Returns:
        The quotient

    Raises:
        CplxDomainError: If the denominator is zero
        CplxInternalError: If the scaled denominator is not real
    """
    ensure_number(numerator, "divide")
    ensure_number(denominator, "divide")

    if is_zero(denominator):
        raise CplxDomainError(
            "Division by zero",
            received=f"divide({numerator!r}, {denominator!r})",
            expected="a non-zero denominator"
        )

    if is_real(denominator):
        if is_real(numerator):
            return numerator / denominator

        return from_cartesian(real(numerator) / denominator, imaginary(numerator) / denominator)

    scaled_numerator, scale = _scale_by_conjugate(numerator, denominator)
    if not _in_float_range(scaled_numerator, scale):
        # Intermediate products left float range; redo the step with the denominator at unit size
        size = magnitude(denominator)
        scaled_numerator, scale = _scale_by_conjugate(divide(numerator, size), divide(denominator, size))

    return from_cartesian(real(scaled_numerator) / scale, imaginary(scaled_numerator) / scale)


def _scale_by_conjugate(
    numerator: CplxNumber,
    denominator: CplxNumber
) -> Tuple[CplxNumber, Union[int, float]]:
    """
    Multiply numerator and denominator by the conjugate of the denominator.

    Returns:
        Tuple of (scaled numerator, real scaled denominator)

    Raises:
        CplxInternalError: If the scaled denominator is not real
    """
    conj = conjugate(denominator)
    scaled_numerator = multiply(numerator, conj)
    scaled_denominator = multiply(denominator, conj)

    # NaN here comes from non-finite input
    if imaginary(scaled_denominator) != 0 and math.isfinite(real(scaled_denominator)):
        _logger.error(
            "Conjugate scaling of %r produced non-real denominator %r", denominator, scaled_denominator
        )
        raise CplxInternalError(
            "Denominator is not real after conjugate scaling",
            received=repr(scaled_denominator)
        )

    return scaled_numerator, real(scaled_denominator)


def _in_float_range(scaled_numerator: CplxNumber, scale: Union[int, float]) -> bool:
    return (
        scale >= sys.float_info.min and
        math.isfinite(scale) and
        math.isfinite(real(scaled_numerator)) and
        math.isfinite(imaginary(scaled_numerator))
    )


def invert(z: CplxNumber) -> CplxNumber:
    """
    Get the multiplicative inverse of a number.

    Raises:
        CplxDomainError: If z is zero
    """
    return divide(1, ensure_number(z, "invert"))


def sqrt(z: CplxNumber) -> CplxNumber:
    """
    Get the principal square root of a number.

    Polar values stay polar: the magnitude is rooted and the angle halved.
    Negative real scalars give a purely imaginary result.
    """
    ensure_number(z, "sqrt")

    if isinstance(z, CplxPolar):
        return from_polar(math.sqrt(z.magnitude), z.angle / 2)

    if is_real(z):
        if not z < 0:
            return math.sqrt(z)

        return from_cartesian(0.0, math.sqrt(-z))

    re = real(z)
    mag = magnitude(z)

    # Rounding can leave these a hair below zero
    root_re = math.sqrt(max((mag + re) / 2, 0.0))
    root_im = math.sqrt(max((mag - re) / 2, 0.0))
    if imaginary(z) < 0:
        root_im = -root_im

    return from_cartesian(root_re, root_im)


def exp(z: CplxNumber) -> CplxNumber:
    """Get e raised to the power of a number."""
    if is_real(ensure_number(z, "exp")):
        return math.exp(z)

    scale = math.exp(real(z))
    im = imaginary(z)
    return from_cartesian(scale * math.cos(im), scale * math.sin(im))


def ln(z: CplxNumber) -> CplxNumber:
    """
    Get the principal natural logarithm of a number.

    The imaginary part of the result is in (-pi, pi].

    Raises:
        CplxDomainError: If z is zero
    """
    ensure_number(z, "ln")

    if is_real(z) and z > 0:
        return math.log(z)

    if is_zero(z):
        raise CplxDomainError(
            "Logarithm of zero is undefined",
            received=repr(z),
            expected="a non-zero number"
        )

    return from_cartesian(math.log(magnitude(z)), math.atan2(imaginary(z), real(z)))


def _real_power_defined(base: Union[int, float], exponent: Union[int, float]) -> bool:
    if base > 0:
        return True

    if base == 0:
        return exponent >= 0

    return isinstance(exponent, int) or exponent.is_integer()


def pow(z: CplxNumber, w: CplxNumber) -> CplxNumber:  # pylint: disable=redefined-builtin
    """
    Raise z to the power w, using the principal branch.

    Raises:
        CplxDomainError: If z is zero and w does not have a positive real part
    """
    ensure_number(z, "pow")
    ensure_number(w, "pow")

    if is_real(z) and is_real(w) and _real_power_defined(z, w):
        return z ** w

    if is_zero(z):
        if is_zero(w):
            return 1

        if real(w) > 0:
            return 0.0

        raise CplxDomainError(
            "Zero raised to a power without a positive real part is undefined",
            received=f"pow({z!r}, {w!r})",
            expected="an exponent with a positive real part"
        )

    return exp(multiply(w, ln(z)))
