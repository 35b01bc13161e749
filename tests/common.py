from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Mapping

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from linefit.common import XY, Pt
from linefit.fonts.common import Font, MeasureMode, Monospace

if TYPE_CHECKING:
    approx = float.__call__
else:
    from pytest import approx as _approx  # noqa

    approx = partial(_approx, abs=1e-6)

CHAR_WIDTH = 10.0

# narrow characters are 6 wide, wide characters 12. Lines are 12 high.
FONT = Monospace(size=10)


def count_chars(
    s: str, font: object, mode: MeasureMode = MeasureMode.DEFAULT
) -> Pt:
    """A measurer which ignores the font: every character has
    the same width, regardless of the script."""
    return len(s) * CHAR_WIDTH


@dataclass
class CountingMeasurer:
    """Test helper which records each string it measures"""

    calls: List[tuple[str, MeasureMode]] = field(default_factory=list)

    def __call__(self, s: str, font: Font, mode: MeasureMode) -> Pt:
        self.calls.append((s, mode))
        return font.width(s, mode)


@dataclass
class RecordingCanvas:
    """Test helper standing in for a drawing surface"""

    calls: List[tuple[str, Font, Any, XY]] = field(default_factory=list)

    def __call__(self, txt: str, font: Font, brush: Any, origin: XY) -> None:
        self.calls.append((txt, font, brush, origin))

    @property
    def texts(self) -> list[str]:
        return [c[0] for c in self.calls]

    @property
    def origins(self) -> list[XY]:
        return [c[3] for c in self.calls]


LOREM_IPSUM = """\
Lorem ipsum dolor sit amet, consectetur adipiscing elit. \
Integer sed aliquet justo. Donec eu ultricies velit, porta pharetra massa. \
Ut non augue a urna iaculis vulputate ut sit amet sem.

Praesent at dictum turpis. Cras dignissim \
ipsum vel commodo euismod. Sed et nisl posuere, ultrices mauris nec, \
varius nibh."""

ZEN_OF_PYTHON = """\
Beautiful is better than ugly.
Explicit is better than implicit.
Simple is better than complex.
Complex is better than complicated.
Flat is better than nested.
Sparse is better than dense.
Readability counts."""

# A line from Kenji Miyazawa's "Ame ni mo makezu", mixed with latin text
MIXED_SCRIPTS = "雨ニモマケズ 風ニモマケズ rain or wind, 丈夫ナカラダヲモチ"

# advance widths of the test font, in units of 1/1000 em
TEST_GLYPHS = {
    ".notdef": 500,
    "space": 250,
    "a": 500,
    "b": 550,
    "uni4E2D": 1000,  # 中
}

TEST_NAMES = {
    "familyName": "Linefit Test",
    "styleName": "Regular",
    "fullName": "Linefit Test Regular",
}


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.lineTo((400, 500))
    pen.lineTo((400, 0))
    pen.closePath()
    return pen.glyph()


def build_font(path: Path, names: Mapping[str, str] = TEST_NAMES) -> Path:
    "Write a tiny TrueType font with a handful of glyphs and known metrics"
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(TEST_GLYPHS))
    fb.setupCharacterMap(
        {ord(" "): "space", ord("a"): "a", ord("b"): "b", 0x4E2D: "uni4E2D"}
    )
    glyph = _box_glyph()
    fb.setupGlyf({name: glyph for name in TEST_GLYPHS})
    fb.setupHorizontalMetrics({n: (w, 0) for n, w in TEST_GLYPHS.items()})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(dict(names))
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
    )
    fb.setupPost()
    fb.save(str(path))
    return path
