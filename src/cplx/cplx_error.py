"""Exception classes for complex number operations, with detailed context."""

from typing import Optional


class CplxError(Exception):
    """Base exception for complex number errors with detailed context information."""

    def __init__(
        self,
        message: str,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            received: What was actually received
            expected: What was expected
            suggestion: Suggestion for fixing the error
        """
        self.message = message
        self.received = received
        self.expected = expected
        self.suggestion = suggestion

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class CplxConstructionError(CplxError):
    """Invalid components supplied to a constructor."""


class CplxDomainError(CplxError):
    """Operation evaluated at a point where its result is undefined."""


class CplxTypeError(CplxError):
    """Operand is not a number."""


class CplxInternalError(CplxError):
    """Internal consistency check failed; indicates a bug, not bad input."""
