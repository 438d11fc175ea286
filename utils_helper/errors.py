"""Exceptions raised by utils_helper."""


class EmptySequenceError(ValueError):
    """Raised when a strict first-element lookup finds no elements."""
