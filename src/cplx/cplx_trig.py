"""
Trigonometric and hyperbolic functions.

Everything here is derived from the arithmetic operations and the complex
exponential and logarithm, so none of it depends on how its argument is
represented.  Each function hands plain real scalars to `math` when the real
result is defined.
"""

import math

from cplx.cplx_accessors import ensure_number, imaginary, is_zero, real
from cplx.cplx_arithmetic import add, divide, invert, ln, multiply, negate, sqrt, subtract
from cplx.cplx_error import CplxDomainError
from cplx.cplx_value import CplxCartesian, CplxNumber, from_cartesian, is_real


_J = CplxCartesian(0, 1)
_NEG_J = CplxCartesian(0, -1)
_HALF_J = CplxCartesian(0, 0.5)

# Beyond this |im|, tanh(|im|) rounds to 1 and the imaginary part of tan is +-1
_TAN_SATURATION = 20.0


def _undefined(function_name: str, z: CplxNumber, reason: str) -> CplxDomainError:
    return CplxDomainError(
        f"Function '{function_name}' is undefined at {z!r}",
        received=repr(z),
        expected=reason
    )


def _reciprocal(value: CplxNumber, function_name: str, z: CplxNumber) -> CplxNumber:
    """Invert value, reporting a zero divisor against the calling function."""
    if is_zero(value):
        raise _undefined(function_name, z, "an argument where the divisor function is non-zero")

    return invert(value)


# Circular functions

def sin(z: CplxNumber) -> CplxNumber:
    """Get the sine of a number."""
    if is_real(ensure_number(z, "sin")):
        return math.sin(z)

    re, im = real(z), imaginary(z)
    return from_cartesian(math.sin(re) * math.cosh(im), math.cos(re) * math.sinh(im))


def cos(z: CplxNumber) -> CplxNumber:
    """Get the cosine of a number."""
    if is_real(ensure_number(z, "cos")):
        return math.cos(z)

    re, im = real(z), imaginary(z)
    return from_cartesian(math.cos(re) * math.cosh(im), -math.sin(re) * math.sinh(im))


def tan(z: CplxNumber) -> CplxNumber:
    """
    Get the tangent of a number.

    Uses tan(x + jy) = (sin(2x) + j*sinh(2y)) / (cos(2x) + cosh(2y)), which is
    sin(z) / cos(z) without the overflow of sin and cos for large |y|.
    """
    if is_real(ensure_number(z, "tan")):
        return math.tan(z)

    re, im = real(z), imaginary(z)
    if im == 0:
        return math.tan(re)

    if abs(im) > _TAN_SATURATION:
        return from_cartesian(2 * math.sin(2 * re) * math.exp(-2 * abs(im)), math.copysign(1.0, im))

    denominator = math.cos(2 * re) + math.cosh(2 * im)
    return from_cartesian(math.sin(2 * re) / denominator, math.sinh(2 * im) / denominator)


def csc(z: CplxNumber) -> CplxNumber:
    """
    Get the cosecant of a number.

    Raises:
        CplxDomainError: If sin(z) is exactly zero
    """
    ensure_number(z, "csc")
    return _reciprocal(sin(z), "csc", z)


def sec(z: CplxNumber) -> CplxNumber:
    """
    Get the secant of a number.

    Raises:
        CplxDomainError: If cos(z) is exactly zero
    """
    ensure_number(z, "sec")
    return _reciprocal(cos(z), "sec", z)


def cot(z: CplxNumber) -> CplxNumber:
    """
    Get the cotangent of a number.

    Raises:
        CplxDomainError: If tan(z) is exactly zero
    """
    ensure_number(z, "cot")
    return _reciprocal(tan(z), "cot", z)


# Inverse circular functions

def asin(z: CplxNumber) -> CplxNumber:
    """Get the principal arcsine of a number: -j * ln(j*z + sqrt(1 - z^2))."""
    ensure_number(z, "asin")

    if is_real(z) and -1 <= z <= 1:
        return math.asin(z)

    im = imaginary(z)
    if im > 0 or (im == 0 and real(z) < 0):
        # asin is odd; in this half-plane j*z and the root cancel inside the logarithm
        return negate(asin(negate(z)))

    root = sqrt(subtract(1, multiply(z, z)))
    return multiply(_NEG_J, ln(add(multiply(_J, z), root)))


def acos(z: CplxNumber) -> CplxNumber:
    """Get the principal arccosine of a number: pi/2 - asin(z)."""
    ensure_number(z, "acos")

    if is_real(z) and -1 <= z <= 1:
        return math.acos(z)

    return subtract(math.pi / 2, asin(z))


def atan(z: CplxNumber) -> CplxNumber:
    """
    Get the principal arctangent of a number: (j/2) * (ln(1 - j*z) - ln(1 + j*z)).

    Raises:
        CplxDomainError: At the branch points +j and -j
    """
    if is_real(ensure_number(z, "atan")):
        return math.atan(z)

    jz = multiply(_J, z)
    lower = subtract(1, jz)
    upper = add(1, jz)
    if is_zero(lower) or is_zero(upper):
        raise _undefined("atan", z, "an argument other than +j or -j")

    return multiply(_HALF_J, subtract(ln(lower), ln(upper)))


def acsc(z: CplxNumber) -> CplxNumber:
    """Get the principal arccosecant of a number: asin(1/z)."""
    ensure_number(z, "acsc")
    return asin(_reciprocal(z, "acsc", z))


def asec(z: CplxNumber) -> CplxNumber:
    """Get the principal arcsecant of a number: acos(1/z)."""
    ensure_number(z, "asec")
    return acos(_reciprocal(z, "asec", z))


def acot(z: CplxNumber) -> CplxNumber:
    """Get the principal arccotangent of a number: atan(1/z)."""
    ensure_number(z, "acot")
    return atan(_reciprocal(z, "acot", z))


# Hyperbolic functions

def sinh(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic sine of a number: -j * sin(j*z)."""
    if is_real(ensure_number(z, "sinh")):
        return math.sinh(z)

    return multiply(_NEG_J, sin(multiply(_J, z)))


def cosh(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic cosine of a number: cos(j*z)."""
    if is_real(ensure_number(z, "cosh")):
        return math.cosh(z)

    return cos(multiply(_J, z))


def tanh(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic tangent of a number: -j * tan(j*z)."""
    if is_real(ensure_number(z, "tanh")):
        return math.tanh(z)

    return multiply(_NEG_J, tan(multiply(_J, z)))


def csch(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic cosecant of a number."""
    ensure_number(z, "csch")
    return _reciprocal(sinh(z), "csch", z)


def sech(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic secant of a number."""
    ensure_number(z, "sech")
    return _reciprocal(cosh(z), "sech", z)


def coth(z: CplxNumber) -> CplxNumber:
    """Get the hyperbolic cotangent of a number."""
    ensure_number(z, "coth")
    return _reciprocal(tanh(z), "coth", z)


# Inverse hyperbolic functions

def asinh(z: CplxNumber) -> CplxNumber:
    """Get the principal inverse hyperbolic sine of a number: -j * asin(j*z)."""
    if is_real(ensure_number(z, "asinh")):
        return math.asinh(z)

    return multiply(_NEG_J, asin(multiply(_J, z)))


def acosh(z: CplxNumber) -> CplxNumber:
    """Get the principal inverse hyperbolic cosine of a number."""
    ensure_number(z, "acosh")

    if is_real(z) and z >= 1:
        return math.acosh(z)

    # 2 * ln(sqrt((z + 1) / 2) + sqrt((z - 1) / 2)); the two roots never cancel
    upper = sqrt(divide(add(z, 1), 2))
    lower = sqrt(divide(subtract(z, 1), 2))
    return multiply(2, ln(add(upper, lower)))


def atanh(z: CplxNumber) -> CplxNumber:
    """
    Get the principal inverse hyperbolic tangent of a number: -j * atan(j*z).

    Raises:
        CplxDomainError: At +1 and -1
    """
    ensure_number(z, "atanh")

    if is_real(z) and -1 < z < 1:
        return math.atanh(z)

    if is_zero(subtract(1, z)) or is_zero(add(1, z)):
        raise _undefined("atanh", z, "an argument other than +1 or -1")

    return multiply(_NEG_J, atan(multiply(_J, z)))


def acsch(z: CplxNumber) -> CplxNumber:
    """Get the principal inverse hyperbolic cosecant of a number: asinh(1/z)."""
    ensure_number(z, "acsch")
    return asinh(_reciprocal(z, "acsch", z))


def asech(z: CplxNumber) -> CplxNumber:
    """Get the principal inverse hyperbolic secant of a number: acosh(1/z)."""
    ensure_number(z, "asech")
    return acosh(_reciprocal(z, "asech", z))


def acoth(z: CplxNumber) -> CplxNumber:
    """Get the principal inverse hyperbolic cotangent of a number: atanh(1/z)."""
    ensure_number(z, "acoth")
    return atanh(_reciprocal(z, "acoth", z))
