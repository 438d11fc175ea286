"""Utility functions for string escaping and sequence access."""

from utils_helper.utils.escape_utils import escape_break_line, escape_special_character
from utils_helper.utils.sequence_utils import first_element

__all__ = ['escape_break_line', 'escape_special_character', 'first_element']
