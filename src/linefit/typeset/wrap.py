"A greedy first-fit line wrapping algorithm."
from __future__ import annotations

import logging
from functools import cache
from math import inf
from typing import Callable, Iterable, final

from ..common import Pos, Pt, check_font, check_width
from ..fonts.common import Font, MeasureMode, Measurer, measure_text
from .tokens import Kind, Token

__all__ = ["BLANK", "Blank", "Line", "wrap"]

_log = logging.getLogger(__name__)

_Width = Callable[[str], Pt]


@final
class Blank:
    """Marker for an empty line, as produced by consecutive line breaks.
    It takes up vertical space, but has no content to measure or draw.
    Use the :data:`BLANK` instance."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "BLANK"


BLANK = Blank()

Line = str | Blank  # content lines are never empty strings


def wrap(
    tokens: Iterable[Token],
    font: Font,
    max_width: Pt = inf,
    measure: Measurer | None = None,
) -> list[Line]:
    """Fill lines with tokens, starting a new line whenever the next token
    no longer fits within ``max_width``.

    Tokens wider than a whole line are split at the longest prefix that
    fits. That prefix is at least one character, so a single character
    wider than ``max_width`` ends up on a line of its own. When a wide
    character overflows, the line is split at the budget rather than
    before the overflowing character.

    Parameters
    ----------
    tokens
        As produced by :func:`~linefit.typeset.tokenize`.
    font
        Passed to ``measure`` as-is.
    max_width
        The width budget per line. Must be greater than zero.
    measure
        Measures a string in a font. Defaults to asking the font itself.
        Widths are requested in typographic mode, and each distinct string
        is measured only once per call.

    Raises
    ------
    InvalidArgument
        If ``font`` is missing or ``measure`` is not callable.
    OutOfRange
        If ``max_width`` is not greater than zero.
    """
    if measure is None:
        measure = measure_text
    check_font(font, measure)
    check_width(max_width)
    width: _Width = cache(
        lambda s: measure(s, font, MeasureMode.TYPOGRAPHIC)  # type: ignore
    )

    lines: list[Line] = []
    current = ""
    current_width: Pt = 0
    sep = ""  # what joins the next token to the current line

    for tok in tokens:
        if tok.kind is Kind.WHITESPACE:
            sep = " "
            continue
        elif tok.kind is Kind.LINEBREAK:
            lines.append(current or BLANK)
            current, current_width, sep = "", 0, ""
            continue

        if not current:
            current, current_width = _fill(tok.text, width, max_width, lines)
        elif current_width + (tw := width(sep + tok.text)) <= max_width:
            current += sep + tok.text
            current_width += tw
        elif tok.kind is Kind.WIDECHAR:
            current, current_width = _fill(
                current + sep + tok.text, width, max_width, lines
            )
        else:
            lines.append(current)
            current, current_width = _fill(tok.text, width, max_width, lines)
        sep = ""

    if current:
        lines.append(current)
    _log.debug(
        "Wrapped text into %d line(s) of width %g", len(lines), max_width
    )
    return lines


def _fill(
    s: str, width: _Width, max_width: Pt, lines: list[Line]
) -> tuple[str, Pt]:
    """Start a line with the given content. If it doesn't fit, split off
    full lines until the remainder fits (or is a single character).
    Returns the remaining content and its width."""
    w = width(s)
    while w > max_width and len(s) > 1:
        cut = _longest_fit(s, width, max_width)
        # whitespace at the cut is dropped, not carried to either line
        head, s = s[:cut].rstrip(), s[cut:].lstrip()
        _log.debug("Split %r at %d to fit width %g", head, cut, max_width)
        lines.append(head)
        if not s:
            return "", 0
        w = width(s)
    return s, w


def _longest_fit(s: str, width: _Width, max_width: Pt) -> Pos:
    """The length of the longest prefix of ``s`` which fits, but at least 1.
    Assumes ``s`` itself doesn't fit, and that widths only grow as
    characters are added."""
    lo, hi = 1, len(s) - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if width(s[:mid]) <= max_width:
            lo = mid
        else:
            hi = mid - 1
    return lo
