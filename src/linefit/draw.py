"Handing wrapped lines to a drawing surface, one call per line."
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from .common import XY, Align, Box, BoxLike, Pt, check_font
from .fonts.common import Font, MeasureMode, Measurer, measure_text
from .size import line_increment
from .typeset.wrap import Line

__all__ = ["DrawLine", "draw_lines"]

_log = logging.getLogger(__name__)

Brush = Any  # whatever the drawing surface paints with; passed as-is
DrawLine = Callable[[str, Font, Brush, XY], None]
"Draws one line of text with its top-left corner at the given origin."


def draw_lines(
    draw_line: DrawLine,
    lines: Iterable[Line],
    font: Font,
    brush: Brush,
    line_height: Pt,
    layout_rect: BoxLike,
    align: Align | str = Align.LEFT,
    measure: Measurer | None = None,
) -> list[Box]:
    """Draw lines top to bottom within a layout box.

    The first line is drawn at the top of the box, each next line
    ``line_height`` lower. The font's own height is a floor: a smaller
    ``line_height`` still advances by ``font.height``
    (see :func:`~linefit.size.line_increment`). Blank lines only advance.
    Lines starting at or below the bottom of the box are not drawn.

    Returns
    -------
    list[Box]
        The region taken up by each drawn line, in drawing order.
    """
    if measure is None:
        measure = measure_text
    check_font(font, measure)
    box = Box.parse(layout_rect)
    align = Align.parse(align)
    increment = line_increment(font, line_height)
    regions: list[Box] = []
    y = box.y
    for ln in lines:
        if y >= box.bottom:
            _log.debug("Clipped lines below y=%g", box.bottom)
            break
        if isinstance(ln, str):
            w = measure(ln, font, MeasureMode.DEFAULT)
            origin = XY(box.x + align.offset(box.width - w), y)
            draw_line(ln, font, brush, origin)
            regions.append(Box(origin.x, y, w, increment))
        y += increment
    return regions
