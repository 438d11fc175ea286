"""Main Utils Helper API.

Provides the UtilsHelper namespace grouping the escaping and sequence
helpers as static methods.
"""
from typing import Iterable, Optional, TypeVar

from utils_helper.utils.escape_utils import escape_break_line, escape_special_character
from utils_helper.utils.sequence_utils import first_element

T = TypeVar('T')


class UtilsHelper:
    """Stateless namespace for string escaping and sequence access.

    All methods are static; the class holds no state and is not meant
    to be instantiated.
    """

    @staticmethod
    def escape_break_line(text: str) -> str:
        """Escape newline characters as ``\\n`` text."""
        return escape_break_line(text)

    @staticmethod
    def escape_special_character(text: str) -> str:
        """Escape single quotes as ``\\'``."""
        return escape_special_character(text)

    @staticmethod
    def first_element(sequence: Iterable[T], default: Optional[T] = None,
                      strict: bool = False) -> Optional[T]:
        """Return the first element of a sequence, or default when empty."""
        return first_element(sequence, default=default, strict=strict)
