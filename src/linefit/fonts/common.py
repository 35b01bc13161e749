from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, final

from ..common import Char, Pt, add_slots, is_wide, setattr_frozen

GlyphPt = float  # length unit in glyph space
GLYPHSPACE_PER_EM = 1000


class MeasureMode(enum.Enum):
    """How a string is measured.

    ``DEFAULT`` includes the font's padding: the extra room many graphics
    hosts add around a measured string. ``TYPOGRAPHIC`` is the plain sum of
    the advance widths, which is what the line wrapper accumulates.
    """

    DEFAULT = 0
    TYPOGRAPHIC = 1


class Font(abc.ABC):
    """A typeface at a specific size.

    Subclasses provide the per-character advance widths in glyph space
    (1000 units per em), the size and the natural line height.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def size(self) -> Pt:
        ...

    @property
    @abc.abstractmethod
    def height(self) -> Pt:
        """The natural distance between two consecutive baselines"""

    @property
    @abc.abstractmethod
    def padding(self) -> float:
        """Extra width in ``DEFAULT`` mode, as a fraction of the size"""

    @abc.abstractmethod
    def charwidth(self, c: Char, /) -> GlyphPt:
        ...

    def width(self, s: str, /, mode: MeasureMode = MeasureMode.DEFAULT) -> Pt:
        advance = sum(map(self.charwidth, s)) * self.size / GLYPHSPACE_PER_EM
        if s and mode is MeasureMode.DEFAULT:
            return advance + self.padding * self.size
        return advance


# The abstract properties don't mix well with dataclass inheritance.
# Deleting properties at runtime fixes the issue. It has no runtime impact.
# We rely on the type checker to ensure subclasses define the needed methods.
if not TYPE_CHECKING:  # pragma: no cover
    del Font.size
    del Font.height
    del Font.padding
    del Font.charwidth


Measurer = Callable[[str, Font, MeasureMode], Pt]


def measure_text(
    s: str, font: Font, mode: MeasureMode = MeasureMode.DEFAULT
) -> Pt:
    "The default measurer: ask the font itself"
    return font.width(s, mode)


@final
@add_slots
@dataclass(frozen=True)
class Monospace(Font):
    """A font in which every character has the same advance width,
    except wide (CJK-like) characters which take up two cells by default.

    Parameters
    ----------
    size
        The em size.
    advance
        Advance width of narrow characters, in 1/1000 em.
    wide_advance
        Advance width of wide characters, in 1/1000 em.
    line_spacing
        Natural line height, as a multiple of the size.
    padding
        Extra width added when measuring in ``DEFAULT`` mode,
        as a fraction of the size.
    """

    size: Pt = 12
    advance: GlyphPt = 600
    wide_advance: GlyphPt = 1200
    line_spacing: float = 1.2
    padding: float = 0
    height: Pt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        setattr_frozen(self, "height", self.size * self.line_spacing)

    def charwidth(self, c: Char, /) -> GlyphPt:
        return self.wide_advance if is_wide(c) else self.advance
