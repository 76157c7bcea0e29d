"""Format-string parsing and rendering.

Functions:
    parse_format: Parse a token format string into a FormatSpec.
    tokenize_format: Scan a format string into tokens.
    render: Render CalendarFields through a FormatSpec.
    format_offset: Render a fractional-hour UTC offset.

Examples:
    >>> from epochal.convert import epoch_to_fields
    >>> from epochal.format import parse_format, render
    >>> render(epoch_to_fields(0), parse_format("mm-dd-yyyy"))
    '01-01-1970 '
"""

from __future__ import annotations

from epochal.format.render import format_offset, render
from epochal.format.spec import (
    FormatSpec,
    Token,
    TokenKind,
    parse_format,
    tokenize_format,
)

__all__: list[str] = [
    "FormatSpec",
    "Token",
    "TokenKind",
    "format_offset",
    "parse_format",
    "render",
    "tokenize_format",
]
