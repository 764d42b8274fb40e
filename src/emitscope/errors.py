from __future__ import annotations


class EmitscopeError(Exception):
    """Base class for errors raised at the package boundary."""


class AbiFormatError(EmitscopeError, ValueError):
    """The ABI payload is not a recognizable interface description."""


class InputValueError(EmitscopeError, ValueError):
    """A user-supplied argument cannot be converted to its ABI type."""
