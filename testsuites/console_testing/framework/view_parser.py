"""
================================================================================
View Parser
================================================================================

Splits a console "view" into simulated user input and expected output.

A view is what the user would see in the terminal, with the text they type
wrapped in ``<<`` and ``>>``:

    "Enter your name: <<Inigo\n>>Hello Inigo"

parses to input ``"Inigo\n"`` and expected output
``"Enter your name: Hello Inigo"``.

Malformed markers never raise. ``<<`` only opens an input section while
outside one and ``>>`` only closes one while inside, so a stray token is kept
as literal text, and an unterminated ``<<`` sends the rest of the view to the
input. The final character is never treated as half of a token.

================================================================================
"""

from __future__ import annotations

from typing import NamedTuple, Optional


INPUT_START = "<<"
INPUT_END = ">>"


class ParsedView(NamedTuple):
    """Input fed to stdin and the output expected on stdout."""
    input: str
    output: str


def parse_view(view: Optional[str]) -> ParsedView:
    """
    Parse a view string into its input and output streams.

    Args:
        view: Console view with input wrapped in ``<<`` / ``>>``

    Returns:
        ParsedView(input, output)

    Examples:
        >>> parse_view("Enter: <<5>>\\nYou entered 5")
        ParsedView(input='5', output='Enter: \\nYou entered 5')
    """
    if not view:
        return ParsedView("", "")

    input_chars = []
    output_chars = []
    is_input = False
    last = len(view) - 1
    i = 0

    while i <= last:
        if i < last:
            token = view[i:i + 2]
            if not is_input and token == INPUT_START:
                is_input = True
                i += 2
                continue
            if is_input and token == INPUT_END:
                is_input = False
                i += 2
                continue

        (input_chars if is_input else output_chars).append(view[i])
        i += 1

    return ParsedView("".join(input_chars), "".join(output_chars))


__all__ = [
    "INPUT_START",
    "INPUT_END",
    "ParsedView",
    "parse_view",
]
