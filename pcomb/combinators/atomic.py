# pcomb/combinators/atomic.py
from __future__ import annotations
from typing import Callable, Optional, Tuple, TypeVar
import regex as re

T = TypeVar("T")

# A matcher takes (source, pos) and returns (value, next_pos).
# value is None on no-match, and next_pos is then the input pos unchanged.
ParseResult = Tuple[Optional[T], int]
Matcher = Callable[..., ParseResult]


def text(literal: str) -> Matcher:
    """Exact, case-sensitive match of `literal` at pos."""
    length = len(literal)

    def match_text(source: str, pos: int = 0) -> ParseResult[str]:
        if source[pos:pos + length] == literal:
            return literal, pos + length
        return None, pos

    return match_text


def pattern(source: str, ignore_case: bool = False, dot_all: bool = False) -> Matcher:
    """Anchored regular expression match.

    The expression is compiled once; every call matches exactly at `pos`
    (Pattern.match with a start offset), so nothing is carried between calls.
    A zero-width match is a success with value "".
    """
    flags = 0
    if ignore_case:
        flags |= re.IGNORECASE
    if dot_all:
        flags |= re.DOTALL
    compiled = re.compile(source, flags)

    def match_pattern(src: str, pos: int = 0) -> ParseResult[str]:
        m = compiled.match(src, pos)
        if m is None:
            return None, pos
        return m.group(0), m.end()

    return match_pattern
