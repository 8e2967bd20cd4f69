"""
Line-ending normalization for captured console text.
"""

from __future__ import annotations

import os
import re


# Platform canonical newline used for comparisons and failure messages
NEWLINE = os.linesep

_LINE_BREAK_RE = re.compile(r"\r\n|\n\r|\n|\r")


def normalize_line_endings(
    text: str,
    trim_trailing_newline: bool = False,
    newline: str = NEWLINE,
) -> str:
    """
    Rewrite every line break (\\r\\n, \\n\\r, \\n, \\r) as ``newline``.

    Args:
        text: Text to normalize
        trim_trailing_newline: Remove one trailing ``newline`` if present
        newline: Target line break, the platform newline by default

    Returns:
        The normalized text
    """
    text = _LINE_BREAK_RE.sub(newline, text)

    if trim_trailing_newline and text.endswith(newline):
        text = text[:-len(newline)]

    return text


__all__ = [
    "NEWLINE",
    "normalize_line_endings",
]
