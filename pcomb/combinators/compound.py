# pcomb/combinators/compound.py
from __future__ import annotations
from typing import Any, List
from .atomic import Matcher, ParseResult

# Composition operators. All of them are generic over any matcher and keep
# the contract: on failure the returned position is the starting position.


def union(*matchers: Matcher) -> Matcher:
    """First alternative with a non-None value wins (ordered choice)."""

    def match_union(source: str, pos: int = 0) -> ParseResult[Any]:
        for m in matchers:
            value, end = m(source, pos)
            if value is not None:
                return value, end
        return None, pos

    return match_union


def seq(*matchers: Matcher) -> Matcher:
    """All matchers in order; the value is the list of their values."""

    def match_seq(source: str, pos: int = 0) -> ParseResult[List[Any]]:
        values: List[Any] = []
        cur = pos
        for m in matchers:
            value, cur = m(source, cur)
            if value is None:
                return None, pos
            values.append(value)
        return values, cur

    return match_seq


def rep(template: Matcher, separator: Matcher) -> Matcher:
    """One template, then greedy (separator, template) pairs.

    Separators are consumed but dropped from the value. Never fails: zero
    occurrences give ([], pos).
    """
    pair = seq(separator, template)

    def match_rep(source: str, pos: int = 0) -> ParseResult[List[Any]]:
        first, cur = template(source, pos)
        if first is None:
            return [], pos
        values = [first]
        while True:
            value, end = pair(source, cur)
            # a pair matching nothing would succeed again at the same spot
            if value is None or end == cur:
                break
            values.append(value[1])
            cur = end
        return values, cur

    return match_rep
