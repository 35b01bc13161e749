from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, fields
from math import inf
from operator import itemgetter
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    Mapping,
    Protocol,
    Sequence,
    TypeVar,
    final,
)

Pt = float  # a length in the caller's unit (pixels, points, ...)
Char = str  # 1-character string
Pos = int  # position within a string (index)

first = itemgetter(0)

Tclass = TypeVar("Tclass", bound=type)
T = TypeVar("T")
U = TypeVar("U")

setattr_frozen = object.__setattr__


class InvalidArgument(TypeError):
    """A required collaborator (font or measurer) is missing or unusable"""


class OutOfRange(ValueError):
    """A width was given that is not strictly positive"""


def check_font(font: object, measure: object) -> None:
    if font is None:
        raise InvalidArgument("missing font: 'font' must not be None")
    if not callable(measure):
        raise InvalidArgument(f"measurer must be callable, got {measure!r}")


def check_width(max_width: Pt) -> None:
    # NaN fails this comparison too
    if not max_width > 0:
        raise OutOfRange(
            f"maximum width must be greater than zero, got {max_width!r}"
        )


def is_wide(c: Char) -> bool:
    "Whether the character belongs to a script written without spaces"
    return unicodedata.east_asian_width(c) in ("W", "F") and not c.isspace()


# adapted from github.com/ericvsmith/dataclasses
# under its Apache 2.0 license.
def add_slots(cls: Tclass) -> Tclass:  # pragma: no cover
    if "__slots__" in cls.__dict__:
        raise TypeError(f"{cls.__name__} already specifies __slots__")
    cls_dict = dict(cls.__dict__)
    field_names = tuple(f.name for f in fields(cls))
    cls_dict["__slots__"] = field_names
    for field_name in field_names:
        cls_dict.pop(field_name, None)
    cls_dict.pop("__dict__", None)
    qualname = getattr(cls, "__qualname__", None)
    cls = type(cls)(cls.__name__, cls.__bases__, cls_dict)
    if qualname is not None:
        cls.__qualname__ = qualname
    return cls


@final
@add_slots
@dataclass(frozen=True, repr=False)
class XY(Sequence[float]):
    """The top-left corner at which a line is drawn. The y-axis points down,
    as on a screen or bitmap.

    .. code-block:: python

        >>> x, y = XY(1, 2)

    """

    x: float = 0
    y: float = 0

    def __repr__(self) -> str:
        return f"XY({self.x}, {self.y})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # We don't support slices -- which is technically a Sequence protocol
    # violation. But in practice this is not an issue.
    def __getitem__(self, i: int) -> float:  # type: ignore[override]
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError(i)

    def __len__(self) -> int:
        return 2


@final
@add_slots
@dataclass(frozen=True)
class Size:
    """The bounding size of a block of text"""

    width: Pt = 0
    height: Pt = 0

    def __iter__(self) -> Iterator[Pt]:
        yield self.width
        yield self.height


@final
@add_slots
@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle, given by its top-left corner and size.

    Can be parsed from a 4-tuple ``(x, y, width, height)``, or from a
    2-tuple or :class:`XY`, which gives an unbounded box at that point.
    """

    x: Pt = 0
    y: Pt = 0
    width: Pt = inf
    height: Pt = inf

    @property
    def bottom(self) -> Pt:
        return self.y + self.height

    @staticmethod
    def parse(v: BoxLike, /) -> Box:
        if isinstance(v, Box):
            return v
        elif isinstance(v, XY):
            return Box(v.x, v.y)
        elif isinstance(v, tuple):
            if len(v) == 4:
                return Box(*v)
            elif len(v) == 2:
                return Box(v[0], v[1])
        raise TypeError(f"Cannot parse {v!r} as a box")


BoxLike = Box | XY | tuple[Pt, Pt, Pt, Pt] | tuple[Pt, Pt]


class Align(enum.Enum):
    """Horizontal alignment of lines within their layout box."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2

    @staticmethod
    def parse(align: Align | str) -> Align:
        if isinstance(align, str):
            return Align[align.upper()]
        return align

    def offset(self, space: Pt) -> Pt:
        "Horizontal offset for a line, given the space left over in its box"
        if self is Align.LEFT or space == inf:
            return 0
        return space / 2 if self is Align.CENTER else space


@add_slots
@dataclass(frozen=True)
class dictget(Generic[T, U]):
    _map: Mapping[T, U]
    default: U

    def __call__(self, k: T) -> U:
        try:
            return self._map[k]
        except KeyError:
            return self.default


def pipe(*__fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Create a new callable by piping several in succession

    Example
    -------
    >>> fn = pipe(float, lambda x: x / 4, int)
    >>> fn('9.3')
    2
    """
    return _pipe(__fs)


@dataclass(frozen=True, repr=False)
class _pipe:
    __slots__ = ("_functions",)
    _functions: tuple[Callable[[Any], Any], ...]

    def __call__(self, value: Any) -> Any:
        for f in self._functions:
            value = f(value)
        return value


T_contra = TypeVar("T_contra", contravariant=True)
T_co = TypeVar("T_co", covariant=True)


# shortcut for Callable[[T_contra], T_co]. Necessary for typing
# dataclass fields, as Callable is interpreted incorrectly.
class Func(Protocol[T_contra, T_co]):
    def __call__(self, __value: T_contra) -> T_co:
        ...
