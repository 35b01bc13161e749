from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, TypeVar, final

from .common import Align, Pt, add_slots, setattr_frozen
from .fonts.common import Font, Monospace

__all__ = ["Style", "StyleFull", "StyleLike"]


@final
@add_slots
@dataclass(frozen=True, init=False)
class Style:
    """Settings for how text is wrapped, measured and drawn.
    All parameters are optional.

    The default style is a 12-size :class:`~linefit.fonts.Monospace` font,
    left aligned, with the font's natural line height.

    Parameters
    ----------
    font: ~linefit.fonts.Font
        The font to measure (and draw) the text in.
    line_height: float
        Distance between consecutive lines. Values below the font's
        natural height have no effect.
    align: ~linefit.Align | str
        Horizontal alignment of drawn lines, e.g. ``"center"``.

    Example
    -------

    >>> from linefit import Style
    >>> from linefit.fonts import Monospace
    >>> body = Style(font=Monospace(14), line_height=20)
    >>> centered = body | Style(align="center")
    >>> # fonts and alignments can be used directly in place of styles
    >>> small = centered | Monospace(9)
    """

    font: Font | None = None
    line_height: Pt | None = None
    align: Align | None = None

    def __init__(
        self,
        font: Font | None = None,
        line_height: Pt | None = None,
        align: Align | str | None = None,
    ) -> None:
        setattr_frozen(self, "font", font)
        setattr_frozen(self, "line_height", line_height)
        setattr_frozen(
            self, "align", None if align is None else Align.parse(align)
        )

    def __or__(self, other: StyleLike, /) -> Style:
        if isinstance(other, (Style, Font, Align, str)):
            other = Style.parse(other)
        else:
            return NotImplemented  # type: ignore[unreachable]
        new = Style.__new__(Style)
        setattr_frozen(new, "font", other.font or self.font)
        setattr_frozen(
            new, "line_height", _fallback(other.line_height, self.line_height)
        )
        setattr_frozen(new, "align", other.align or self.align)
        return new

    def __ror__(self, other: Font | Align | str, /) -> Style:
        return Style.parse(other) | self

    def __repr__(self) -> str:
        field_reprs = [
            (f.name, v)
            for f in fields(self)
            if (v := getattr(self, f.name)) is not None
        ]
        return (
            f"Style({', '.join(f'{k}={v!r}' for k, v in field_reprs)})"
            if field_reprs
            else "Style.EMPTY"
        )

    @staticmethod
    def parse(s: StyleLike) -> Style:
        if isinstance(s, Style):
            return s
        elif isinstance(s, Font):
            return Style(font=s)
        elif isinstance(s, (Align, str)):
            return Style(align=s)
        else:
            raise TypeError(f"Cannot parse style from {s!r}")

    def setdefault(self) -> StyleFull:
        return StyleFull.DEFAULT | self

    EMPTY: ClassVar[Style]


StyleLike = Style | Font | Align | str
Style.EMPTY = Style()


@add_slots
@dataclass(frozen=True)
class StyleFull:
    font: Font
    line_height: Pt
    align: Align

    def __or__(self, s: Style, /) -> StyleFull:
        return StyleFull(
            s.font or self.font,
            _fallback(s.line_height, self.line_height),
            s.align or self.align,
        )

    DEFAULT: ClassVar[StyleFull]


StyleFull.DEFAULT = StyleFull(Monospace(), 0, Align.LEFT)


_T = TypeVar("_T")


def _fallback(a: _T | None, b: _T) -> _T:
    return b if a is None else a
