"Logic for breaking text into wrappable units (tokens)."
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Iterator

from ..common import add_slots, is_wide

__all__ = ["Kind", "Token", "tokenize"]

# A line break, a run of other whitespace, or a run of visible characters.
# A carriage return only counts as part of a line break directly before \n.
_TOKEN_RE = re.compile(r"(\r?\n)|((?:(?!\r?\n)\s)+)|(\S+)")


class Kind(enum.Enum):
    WORD = 0
    WHITESPACE = 1
    LINEBREAK = 2
    WIDECHAR = 3


@add_slots
@dataclass(frozen=True)
class Token:
    text: str  # non-empty
    kind: Kind

    def is_space(self) -> bool:
        return self.kind is Kind.WHITESPACE or self.kind is Kind.LINEBREAK


def tokenize(text: str) -> list[Token]:
    """Split text into words, whitespace, line breaks and wide characters.

    Each wide character is a token of its own, since scripts such as CJK
    have no spaces to break at. Whitespace next to a line break, and at the
    very start or end of the text, is insignificant and left out.

    >>> [t.text for t in tokenize(" two words\\n中文 ")]
    ['two', ' ', 'words', '\\n', '中', '文']
    """
    tokens = list(_drop_space_around_breaks(_scan(text)))
    start, end = 0, len(tokens)
    while start < end and tokens[start].is_space():
        start += 1
    while end > start and tokens[end - 1].is_space():
        end -= 1
    return tokens[start:end]


def _scan(text: str) -> Iterator[Token]:
    for match in _TOKEN_RE.finditer(text):
        linebreak, space, visible = match.groups()
        if linebreak:
            yield Token(linebreak, Kind.LINEBREAK)
        elif space:
            yield Token(space, Kind.WHITESPACE)
        else:
            yield from _split_wide(visible)


def _split_wide(chunk: str) -> Iterator[Token]:
    for wide, run in groupby(chunk, key=is_wide):
        if wide:
            yield from (Token(c, Kind.WIDECHAR) for c in run)
        else:
            yield Token("".join(run), Kind.WORD)


def _drop_space_around_breaks(tokens: Iterable[Token]) -> Iterator[Token]:
    prev: Token | None = None
    pending: Token | None = None  # whitespace, held back until we know
    for tok in tokens:
        if tok.kind is Kind.WHITESPACE:
            if prev is None or prev.kind is not Kind.LINEBREAK:
                pending = tok
            continue
        if pending and tok.kind is not Kind.LINEBREAK:
            yield pending
        pending = None
        prev = tok
        yield tok
    if pending:
        yield pending
