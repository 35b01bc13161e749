from __future__ import annotations

import logging

from .common import XY, Align, Box, InvalidArgument, OutOfRange, Size
from .fonts import Font, MeasureMode, Monospace, TrueType, measure_text
from .style import Style
from .text import (
    Text,
    draw_wrapped_string,
    get_wrapped_lines,
    measure_string_with_line_height,
)
from .typeset import BLANK

__version__ = __import__("importlib.metadata").metadata.version(__name__)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # wrapping, measuring & drawing
    "get_wrapped_lines",
    "measure_string_with_line_height",
    "draw_wrapped_string",
    "Text",
    "Style",
    "BLANK",
    # fonts
    "Font",
    "Monospace",
    "TrueType",
    "MeasureMode",
    "measure_text",
    # errors
    "InvalidArgument",
    "OutOfRange",
    # common
    "Align",
    "Box",
    "Size",
    "XY",
]
