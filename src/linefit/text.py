from __future__ import annotations

from dataclasses import dataclass
from math import inf

from .common import (
    Align,
    Box,
    BoxLike,
    Pt,
    Size,
    add_slots,
    check_font,
    check_width,
    setattr_frozen,
)
from .draw import Brush, DrawLine, draw_lines
from .fonts.common import Font, Measurer, measure_text
from .size import measure_lines
from .style import Style, StyleLike
from .typeset import Line, tokenize, wrap

__all__ = [
    "Text",
    "draw_wrapped_string",
    "get_wrapped_lines",
    "measure_string_with_line_height",
]


def _wrap_text(
    text: str, font: Font, max_width: Pt, measure: Measurer | None
) -> list[Line]:
    if measure is None:
        measure = measure_text
    check_font(font, measure)
    check_width(max_width)
    return wrap(tokenize(text), font, max_width, measure)


def get_wrapped_lines(
    text: str,
    font: Font,
    max_width: Pt = inf,
    measure: Measurer | None = None,
) -> list[str]:
    """Wrap text into lines that fit within ``max_width``.

    Lines are returned without surrounding whitespace. Blank lines
    (from consecutive line breaks) are returned as empty strings.

    Example
    -------

    >>> from linefit.fonts import Monospace
    >>> get_wrapped_lines("The quick brown fox", Monospace(10), 60)
    ['The quick', 'brown fox']
    """
    if not text:
        return []
    return [
        ln if isinstance(ln, str) else ""
        for ln in _wrap_text(text, font, max_width, measure)
    ]


def measure_string_with_line_height(
    text: str,
    font: Font,
    max_width: Pt = inf,
    line_height: Pt = 0,
    measure: Measurer | None = None,
) -> Size:
    """The size taken up by text once wrapped to ``max_width``,
    with lines ``line_height`` apart (or further, if the font's
    natural height is larger).

    An empty string has size zero, whatever the other arguments.
    """
    if not text:
        return Size(0, 0)
    return measure_lines(
        _wrap_text(text, font, max_width, measure), font, line_height, measure
    )


def draw_wrapped_string(
    draw_line: DrawLine,
    text: str,
    font: Font,
    brush: Brush,
    max_width: Pt,
    line_height: Pt,
    layout_rect: BoxLike,
    align: Align | str = Align.LEFT,
    measure: Measurer | None = None,
) -> list[Box]:
    """Wrap text, and draw it line by line with ``draw_line``.

    See :func:`~linefit.draw.draw_lines` for how lines are positioned.
    Returns the region of each drawn line.
    """
    return draw_lines(
        draw_line,
        _wrap_text(text, font, max_width, measure),
        font,
        brush,
        line_height,
        layout_rect,
        align,
        measure,
    )


@add_slots
@dataclass(frozen=True, init=False)
class Text:
    """A piece of text with a style, which can be wrapped, measured
    and drawn at various widths.

    Parameters
    ----------
    content
        The text. May contain line breaks.
    style
        The style to apply on top of the default style.

    Example
    -------

    >>> from linefit import Text
    >>> from linefit.fonts import Monospace
    >>> t = Text("Hello world", Monospace(10))
    >>> t.lines(40)
    ['Hello', 'world']
    >>> t.size(40)
    Size(width=30.0, height=24.0)
    """

    content: str
    style: Style

    def __init__(self, content: str, style: StyleLike = Style.EMPTY):
        setattr_frozen(self, "content", content)
        setattr_frozen(self, "style", Style.parse(style))

    def lines(
        self, max_width: Pt = inf, measure: Measurer | None = None
    ) -> list[str]:
        return get_wrapped_lines(
            self.content, self.style.setdefault().font, max_width, measure
        )

    def size(
        self, max_width: Pt = inf, measure: Measurer | None = None
    ) -> Size:
        style = self.style.setdefault()
        return measure_string_with_line_height(
            self.content, style.font, max_width, style.line_height, measure
        )

    def draw(
        self,
        draw_line: DrawLine,
        brush: Brush,
        layout_rect: BoxLike,
        measure: Measurer | None = None,
    ) -> list[Box]:
        "Draw the text, wrapped to the width of the layout box"
        style = self.style.setdefault()
        box = Box.parse(layout_rect)
        return draw_wrapped_string(
            draw_line,
            self.content,
            style.font,
            brush,
            box.width,
            style.line_height,
            box,
            style.align,
            measure,
        )
