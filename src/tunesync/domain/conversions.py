"""Text converters used by UI bindings.

Malformed input never raises: it degrades to zero, so a bad edit either writes the
default or is dropped by the binding's equality check. ``parse_clock_text`` is the
strict variant for file formats, where bad input must be reported instead.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Final, TypeAlias

_INTEGER: Final = re.compile(r"[+-]?[0-9]+")
_CLOCK_UNITS: Final = ("hours", "minutes", "seconds")

TextConverters: TypeAlias = tuple[Callable[[Any], str], Callable[[str], Any]]


def parse_int(text: str) -> int:
    """Parse a plain decimal integer, or return 0."""

    if _INTEGER.fullmatch(text) is None:
        return 0
    try:
        return int(text)
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return 0


def format_int(value: int) -> str:
    return str(value)


def _clock_span(pieces: list[int]) -> timedelta:
    if not 1 <= len(pieces) <= len(_CLOCK_UNITS):
        raise ValueError(f"Expected S, M:SS or H:MM:SS, got {len(pieces)} pieces")
    units = _CLOCK_UNITS[-len(pieces) :]
    try:
        return timedelta(**dict(zip(units, pieces, strict=True)))
    except OverflowError as exc:
        raise ValueError(f"Duration out of range: {pieces}") from exc


def parse_duration(text: str) -> timedelta:
    """Parse ``S``, ``M:SS`` or ``H:MM:SS``; anything else is a zero duration.

    Empty pieces are ignored (``":59"`` is 59 seconds) and a piece that is not an
    integer counts as 0. Spans too large for ``timedelta`` are zero as well.
    """

    pieces = [parse_int(piece) for piece in text.split(":") if piece]
    try:
        return _clock_span(pieces)
    except ValueError:
        return timedelta(0)


def parse_clock_text(text: str) -> timedelta:
    """Strict form of ``parse_duration`` for typed input: malformed text raises ``ValueError``."""

    pieces: list[int] = []
    for piece in text.split(":"):
        if not piece:
            continue
        if _INTEGER.fullmatch(piece) is None:
            raise ValueError(f"Not an integer clock piece: {piece!r}")
        pieces.append(int(piece))
    return _clock_span(pieces)


def format_duration(value: timedelta) -> str:
    """Render as ``H:MM:SS`` (``0:03:59``); sub-second parts are dropped."""

    total = int(value.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"


def _identity(text: str) -> str:
    return text


def text_converters(value_type: type) -> TextConverters:
    """Return ``(to_text, from_text)`` for a field's value type."""

    if value_type is str:
        return _identity, _identity
    if value_type is int:
        return format_int, parse_int
    if value_type is timedelta:
        return format_duration, parse_duration
    raise TypeError(f"no text representation for {value_type.__name__}")
