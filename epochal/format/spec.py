"""Format-string parsing into FormatSpec.

A format string is a case-insensitive sequence of single-character tokens.
Spaces are removed before scanning; characters outside the token table are
ignored, except that one may be captured as the date delimiter.

Token Table:
    w     - show day of week; "ww" uses full day and month names
    d     - day (order token)
    m     - numeric month (order token)
    a     - alphabetical month (order token)
    y     - year (order token)
    h i s - show time (hour, minute, second); doubled sets zero padding
    _     - 12-hour clock
    o     - show UTC offset

Order tokens are collected in the sequence they appear, then de-duplicated
keeping first occurrences; exactly three must remain. Doubling any order
token (e.g. "dd") sets zero padding for the whole spec. The character that
follows each of the first two order tokens seen (duplicates included) is
captured as the delimiter, so the second capture wins.

Examples:
    >>> spec = parse_format("mm-dd-yyyy")
    >>> spec.order, spec.delimiter, spec.fill_zeros
    ('mdy', '-', True)

    >>> parse_format("W, DD/MM/YY, HH:II:SS O UTC").show_utc_offset
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from epochal._internal.constants import DEFAULT_DELIMITER, DEFAULT_FORMAT
from epochal.errors import InvalidFormatError

logger = logging.getLogger(__name__)

ORDER_CHARS: str = "dmya"


class TokenKind(Enum):
    """Meaning of a recognised format character."""

    DAY_OF_WEEK = "day_of_week"
    ORDER = "order"
    TIME = "time"
    TWELVE_HOUR = "twelve_hour"
    UTC_OFFSET = "utc_offset"


_TOKEN_TABLE: dict[str, TokenKind] = {
    "w": TokenKind.DAY_OF_WEEK,
    "d": TokenKind.ORDER,
    "m": TokenKind.ORDER,
    "y": TokenKind.ORDER,
    "a": TokenKind.ORDER,
    "h": TokenKind.TIME,
    "i": TokenKind.TIME,
    "s": TokenKind.TIME,
    "_": TokenKind.TWELVE_HOUR,
    "o": TokenKind.UTC_OFFSET,
}


@dataclass(frozen=True)
class Token:
    """A recognised format character and the character right after it.

    Attributes:
        kind: What the character means.
        char: The lower-cased character itself.
        follower: The next character of the space-stripped format, or None
            at the end of the string.
    """

    kind: TokenKind
    char: str
    follower: str | None

    @property
    def doubled(self) -> bool:
        """True if the next character repeats this token."""
        return self.follower == self.char


@dataclass(frozen=True)
class FormatSpec:
    """Rendering configuration for calendar fields.

    A FormatSpec is usually obtained from parse_format(), but can also be
    built directly. Direct construction lower-cases the order and applies
    the same validation as the parser. Built directly, a spec shows the
    weekday, time and UTC offset with zero padding unless told otherwise;
    parsed specs only turn on what their tokens ask for.

    Attributes:
        order: Three distinct characters from "dmya" giving the field sequence.
        delimiter: Single character placed between the order fields.
        show_day_of_week: Prefix the output with the weekday name.
        show_time: Append hour:minute:second.
        show_utc_offset: Append the UTC offset followed by " UTC".
        fill_zeros: Zero-pad day, month, time fields and small offsets.
        alphabetical_month: The order contains the alphabetical month.
        use_12_hour: Render a 12-hour clock with an AM/PM marker.
        use_full_names: Use full weekday and month names.

    Examples:
        >>> FormatSpec(order="YMD", delimiter="-").order
        'ymd'
    """

    order: str = "mdy"
    delimiter: str = DEFAULT_DELIMITER
    show_day_of_week: bool = True
    show_time: bool = True
    show_utc_offset: bool = True
    fill_zeros: bool = True
    alphabetical_month: bool = False
    use_12_hour: bool = False
    use_full_names: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.order, str):
            raise InvalidFormatError(
                f"order must be a string, got {type(self.order).__name__}"
            )
        order = self.order.lower()
        _validate_order(order)
        object.__setattr__(self, "order", order)

        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise InvalidFormatError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )

    @classmethod
    def default(cls) -> FormatSpec:
        """Return the spec for DEFAULT_FORMAT."""
        return parse_format(DEFAULT_FORMAT)


def _validate_order(order: str) -> None:
    if len(order) != 3 or len(set(order)) != 3 or any(c not in ORDER_CHARS for c in order):
        raise InvalidFormatError(
            f"order must be 3 distinct characters from {ORDER_CHARS!r}, got {order!r}"
        )


def tokenize_format(fmt: str) -> list[Token]:
    """Scan a format string into recognised tokens.

    The string is lower-cased and stripped of spaces; unknown characters
    produce no token but still count as followers of the token before them.

    Args:
        fmt: The raw format string.

    Returns:
        Tokens in scan order.

    Examples:
        >>> [t.char for t in tokenize_format("D.M.Y")]
        ['d', 'm', 'y']
    """
    text = fmt.lower().replace(" ", "")
    tokens = []
    for i, char in enumerate(text):
        kind = _TOKEN_TABLE.get(char)
        if kind is None:
            continue
        follower = text[i + 1] if i + 1 < len(text) else None
        tokens.append(Token(kind, char, follower))
    return tokens


def parse_format(fmt: str) -> FormatSpec:
    """Parse a format string into a FormatSpec.

    Args:
        fmt: Format string using the token table in the module docstring.

    Returns:
        The parsed FormatSpec.

    Raises:
        InvalidFormatError: If the string does not name exactly three
            distinct order tokens.
        TypeError: If fmt is not a string.

    Examples:
        >>> parse_format("a d, y hh:ii _").use_12_hour
        True

        >>> parse_format("hh:ii:ss")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: format 'hh:ii:ss' must contain exactly 3 distinct ...
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")

    order = ""
    delimiter = DEFAULT_DELIMITER
    flags = dict.fromkeys(
        (
            "show_day_of_week",
            "show_time",
            "show_utc_offset",
            "fill_zeros",
            "alphabetical_month",
            "use_12_hour",
            "use_full_names",
        ),
        False,
    )

    for token in tokenize_format(fmt):
        if token.kind is TokenKind.DAY_OF_WEEK:
            flags["show_day_of_week"] = True
            if token.doubled:
                flags["use_full_names"] = True
        elif token.kind is TokenKind.ORDER:
            order += token.char
            if token.doubled:
                flags["fill_zeros"] = True
            if len(order) < 3 and token.follower is not None:
                delimiter = token.follower
            if token.char == "a":
                flags["alphabetical_month"] = True
        elif token.kind is TokenKind.TIME:
            flags["show_time"] = True
            if token.doubled:
                flags["fill_zeros"] = True
        elif token.kind is TokenKind.TWELVE_HOUR:
            flags["use_12_hour"] = True
        elif token.kind is TokenKind.UTC_OFFSET:
            flags["show_utc_offset"] = True

    # dict.fromkeys keeps first occurrences in order
    deduplicated = "".join(dict.fromkeys(order))
    if len(deduplicated) != 3:
        raise InvalidFormatError(
            f"format {fmt!r} must contain exactly 3 distinct order tokens "
            f"from {ORDER_CHARS!r}, found {deduplicated!r}"
        )

    spec = FormatSpec(order=deduplicated, delimiter=delimiter, **flags)
    logger.debug("parsed format %r into %r", fmt, spec)
    return spec


__all__ = [
    "ORDER_CHARS",
    "TokenKind",
    "Token",
    "FormatSpec",
    "tokenize_format",
    "parse_format",
]
