"""Complex numbers in Cartesian or polar form, with plain reals accepted everywhere."""

# Exceptions
from cplx.cplx_error import CplxError, CplxConstructionError, CplxDomainError, CplxTypeError, CplxInternalError

# Value types and constructors
from cplx.cplx_value import (
    CplxCartesian, CplxPolar, CplxNumber, from_cartesian, from_polar, from_complex, is_real, is_number
)

# Accessors
from cplx.cplx_accessors import real, imaginary, magnitude, angle, is_zero, is_close, to_complex

# Arithmetic
from cplx.cplx_arithmetic import (
    negate, conjugate, add, subtract, multiply, divide, invert, sqrt, exp, ln, pow  # pylint: disable=redefined-builtin
)

# Trigonometric and hyperbolic functions
from cplx.cplx_trig import (
    sin, cos, tan, csc, sec, cot,
    asin, acos, atan, acsc, asec, acot,
    sinh, cosh, tanh, csch, sech, coth,
    asinh, acosh, atanh, acsch, asech, acoth
)

# Formatting
from cplx.cplx_format import CplxFormatMode, CplxAngleUnit, CplxFormatOptions, CplxFormatter, format_number
from cplx.cplx_format import format_number as format  # pylint: disable=redefined-builtin


__all__ = [
    # Exceptions
    "CplxError", "CplxConstructionError", "CplxDomainError", "CplxTypeError", "CplxInternalError",

    # Value types and constructors
    "CplxCartesian", "CplxPolar", "CplxNumber", "from_cartesian", "from_polar", "from_complex",
    "is_real", "is_number",

    # Accessors
    "real", "imaginary", "magnitude", "angle", "is_zero", "is_close", "to_complex",

    # Arithmetic
    "negate", "conjugate", "add", "subtract", "multiply", "divide", "invert", "sqrt", "exp", "ln", "pow",

    # Trigonometric and hyperbolic functions
    "sin", "cos", "tan", "csc", "sec", "cot",
    "asin", "acos", "atan", "acsc", "asec", "acot",
    "sinh", "cosh", "tanh", "csch", "sech", "coth",
    "asinh", "acosh", "atanh", "acsch", "asech", "acoth",

    # Formatting
    "CplxFormatMode", "CplxAngleUnit", "CplxFormatOptions", "CplxFormatter", "format_number", "format"
]
