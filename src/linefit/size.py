"The bounding size of wrapped lines."
from __future__ import annotations

from typing import Sequence

from .common import Pt, Size, check_font
from .fonts.common import Font, MeasureMode, Measurer, measure_text
from .typeset.wrap import Line

__all__ = ["line_increment", "measure_lines"]


def line_increment(font: Font, line_height: Pt) -> Pt:
    "The vertical distance between lines. The font's own height is a floor."
    return max(line_height, font.height)


def measure_lines(
    lines: Sequence[Line],
    font: Font,
    line_height: Pt = 0,
    measure: Measurer | None = None,
) -> Size:
    """The width of the widest line, and the height of all lines together.

    Lines are measured in the default (display) mode. Blank lines have
    no width, but do count towards the height.
    """
    if measure is None:
        measure = measure_text
    check_font(font, measure)
    if not lines:
        return Size(0, 0)
    return Size(
        max(
            (
                measure(ln, font, MeasureMode.DEFAULT)
                for ln in lines
                if isinstance(ln, str)
            ),
            default=0,
        ),
        len(lines) * line_increment(font, line_height),
    )
