"""Sequence access helpers."""
import logging
from typing import Iterable, Optional, TypeVar

from utils_helper.errors import EmptySequenceError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def first_element(sequence: Iterable[T], default: Optional[T] = None,
                  strict: bool = False) -> Optional[T]:
    """Return the first element of a sequence.

    The input is never mutated. One-shot iterators such as generators
    have exactly one item consumed.

    Args:
        sequence: List, tuple, string or any other iterable
        default: Value returned when the sequence is empty
        strict: Raise EmptySequenceError instead of returning default

    Returns:
        First element, or default when the sequence is empty

    Raises:
        EmptySequenceError: If the sequence is empty and strict is set

    Examples:
        >>> first_element([1, 2, 3])
        1
        >>> first_element([]) is None
        True
    """
    for item in sequence:
        return item

    if strict:
        raise EmptySequenceError("Cannot take first element of an empty sequence")

    logger.debug("Empty sequence, returning default %r", default)
    return default
