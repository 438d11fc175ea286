"""
Utils Helper - string escaping and sequence access helpers.

This package provides escaping of newlines and single quotes for
embedding text in quoted literals, plus first-element lookup over
any sequence.
"""
import logging

__version__ = "1.0.0"

# Errors
from utils_helper.errors import EmptySequenceError

# Utilities
from utils_helper.utils.escape_utils import (
    escape_break_line, escape_special_character,
    BREAK_LINE, ESCAPED_BREAK_LINE, SINGLE_QUOTE, ESCAPED_SINGLE_QUOTE
)
from utils_helper.utils.sequence_utils import first_element

# Main API
from utils_helper.api import UtilsHelper

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    '__version__',
    # Errors
    'EmptySequenceError',
    # Escaping
    'escape_break_line', 'escape_special_character',
    'BREAK_LINE', 'ESCAPED_BREAK_LINE', 'SINGLE_QUOTE', 'ESCAPED_SINGLE_QUOTE',
    # Sequences
    'first_element',
    # API
    'UtilsHelper',
]
