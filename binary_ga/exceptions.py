"""
Exception classes for the binary GA operators

All precondition failures raised by the operators share a single kind,
InvalidArgumentError, raised before any random draw or output allocation.
"""

from typing import Any, Optional


class OperatorError(Exception):
    """Base exception for all genetic operator errors."""
    pass


class InvalidArgumentError(OperatorError, ValueError):
    """Raised when an operator or configuration parameter is out of range."""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
