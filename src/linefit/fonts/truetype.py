from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, final

from fontTools.ttLib import TTFont

from ..common import (
    Char,
    Func,
    Pt,
    add_slots,
    dictget,
    first,
    pipe,
    setattr_frozen,
)
from .common import GLYPHSPACE_PER_EM, Font, GlyphPt

__all__ = ["TrueType"]

_log = logging.getLogger(__name__)

_GlyphName = str  # name uniquely identifying a glyph in a TTF font
_REPLACEMENT_GLYPH: _GlyphName = ".notdef"


@final
@add_slots
@dataclass(frozen=True, eq=False, repr=False)
class TrueType(Font):
    """A TrueType or OpenType font, measured with its own glyph metrics.

    Use :meth:`load` to create one from a font file. The glyph advances
    are read once, after which the file is no longer needed.
    A different size of the same font can be made with
    :func:`dataclasses.replace`.

    Characters missing from the font are measured as the replacement
    glyph (``.notdef``), since that is what gets rendered for them.
    """

    name: str
    charwidth: Func[Char, GlyphPt]
    line_spacing: float  # natural line height per em
    size: Pt = 12
    padding: float = 0
    height: Pt = field(init=False)

    def __post_init__(self) -> None:
        setattr_frozen(self, "height", self.size * self.line_spacing)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, size={self.size:g})"

    @staticmethod
    def load(
        source: Path | str | BinaryIO, size: Pt = 12, padding: float = 0
    ) -> TrueType:
        """Read the metrics of a .ttf/.otf file.

        Parameters
        ----------
        source
            Path to the font file, or a binary file object.
        size
            The em size.
        padding
            Extra width added when measuring in ``DEFAULT`` mode,
            as a fraction of the size.
        """
        with TTFont(source) as ttf:
            units_per_em = ttf["head"].unitsPerEm
            scale = GLYPHSPACE_PER_EM / units_per_em
            hhea = ttf["hhea"]
            names = ttf["name"]
            # ID 4 is the full name, including a "Regular" style
            name = (
                names.getDebugName(4) or names.getBestFullName() or str(source)
            )
            charwidth = pipe(
                ord,
                dictget(ttf.getBestCmap() or {}, _REPLACEMENT_GLYPH),
                dict(ttf["hmtx"].metrics).__getitem__,
                first,
                scale.__mul__,
            )
            line_spacing = (
                hhea.ascent - hhea.descent + hhea.lineGap
            ) / units_per_em
        _log.debug("Loaded font %r (%d units/em)", name, units_per_em)
        return TrueType(name, charwidth, line_spacing, size, padding)
