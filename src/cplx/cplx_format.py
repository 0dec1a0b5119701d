"""Text rendering of numbers in Cartesian or polar form."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from cplx.cplx_accessors import angle, ensure_number, imaginary, magnitude, real
from cplx.cplx_value import CplxNumber


class CplxFormatMode(Enum):
    """Which coordinates a number is rendered in."""
    CARTESIAN = "cartesian"
    POLAR = "polar"


class CplxAngleUnit(Enum):
    """Unit used for the angle in polar rendering."""
    RADIANS = "radians"
    DEGREES = "degrees"


@dataclass
class CplxFormatOptions:
    """Options for controlling number rendering."""
    mode: CplxFormatMode = CplxFormatMode.CARTESIAN
    angle_unit: CplxAngleUnit = CplxAngleUnit.RADIANS


class CplxFormatter:
    """
    Render numbers as text.

    Cartesian form is "<re>+j<im>" or "<re>-j<|im|>".  Polar form is
    "<magnitude>∠<angle>", with a trailing "°" when the angle is in degrees.
    Each component is rendered with `repr`, so integers stay integers and floats
    keep their shortest round-tripping form.
    """

    def __init__(self, options: CplxFormatOptions | None = None):
        """
        Initialize the formatter.

        Args:
            options: Rendering options; defaults to Cartesian with radians
        """
        self._options = options or CplxFormatOptions()
        self._logger = logging.getLogger("CplxFormatter")

    def options(self) -> CplxFormatOptions:
        """Get the rendering options."""
        return self._options

    def format(self, z: CplxNumber) -> str:
        """
        Render a number using this formatter's options.

        Args:
            z: Number to render

        Returns:
            The rendered text

        Raises:
            CplxDomainError: If rendering zero in polar form, as zero has no angle
        """
        ensure_number(z, "format")
        self._logger.debug(
            "Formatting %r as %s (%s)", z, self._options.mode.value, self._options.angle_unit.value
        )

        if self._options.mode == CplxFormatMode.POLAR:
            return self._format_polar(z)

        return self._format_cartesian(z)

    def _format_cartesian(self, z: CplxNumber) -> str:
        im = imaginary(z)
        sign = "-" if im < 0 else "+"
        return f"{real(z)!r}{sign}j{abs(im)!r}"

    def _format_polar(self, z: CplxNumber) -> str:
        theta = angle(z)
        if self._options.angle_unit == CplxAngleUnit.DEGREES:
            rendered_angle = f"{theta * 180 / math.pi!r}°"

        else:
            rendered_angle = repr(theta)

        return f"{magnitude(z)!r}∠{rendered_angle}"


def format_number(
    z: CplxNumber,
    mode: Union[CplxFormatMode, str] = CplxFormatMode.CARTESIAN,
    angle_unit: Union[CplxAngleUnit, str] = CplxAngleUnit.RADIANS
) -> str:
    """
    Render a number as text.

    Args:
        z: Number to render
        mode: CplxFormatMode or its value, "cartesian" or "polar"
        angle_unit: CplxAngleUnit or its value, "radians" or "degrees"

    Returns:
        The rendered text

    Raises:
        ValueError: If mode or angle_unit is not recognised
    """
    options = CplxFormatOptions(mode=CplxFormatMode(mode), angle_unit=CplxAngleUnit(angle_unit))
    return CplxFormatter(options).format(z)
