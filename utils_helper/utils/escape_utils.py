"""String escaping helpers for embedding text in quoted literals."""

BREAK_LINE = '\n'
ESCAPED_BREAK_LINE = '\\n'

SINGLE_QUOTE = "'"
ESCAPED_SINGLE_QUOTE = "\\'"


def escape_break_line(text: str) -> str:
    """Escape newline characters as the two-character text ``\\n``.

    Args:
        text: Raw text to escape

    Returns:
        Text with every newline replaced by a backslash followed by ``n``

    Examples:
        >>> escape_break_line("a\\nb")
        'a\\\\nb'
        >>> escape_break_line("")
        ''
    """
    return str(text).replace(BREAK_LINE, ESCAPED_BREAK_LINE)


def escape_special_character(text: str) -> str:
    """Escape single quotes as ``\\'``.

    Args:
        text: Raw text to escape

    Returns:
        Text with every single quote prefixed by a backslash

    Examples:
        >>> escape_special_character("it's")
        "it\\\\'s"
    """
    return str(text).replace(SINGLE_QUOTE, ESCAPED_SINGLE_QUOTE)
