"""
Input Sanitization Module

Cleans ingredient text received from API clients. Search requests match
on the sanitized copy and echo the coerced original.
"""

import re

_CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_ingredient_text(text, max_length=500):
    """
    Sanitize a single ingredient line.

    Args:
        text: Single ingredient line (can be None or a non-string)
        max_length: Maximum length (default 500)

    Returns:
        The line with control characters removed, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters (tabs survive)
    text = _CONTROL_CHARS_RE.sub('', text)

    # Truncate
    if len(text) > max_length:
        text = text[:max_length]

    return text


def coerce_ingredient_lines(lines):
    """
    Turn request entries into strings without altering string entries.

    None becomes an empty line and other non-strings go through str(), so
    lines can be echoed back exactly as sent.

    Args:
        lines: List of ingredient lines

    Returns:
        List of strings, same order as the input
    """
    return ['' if line is None else line if isinstance(line, str) else str(line) for line in lines]
