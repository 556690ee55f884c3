# pcomb/grammar/rule.py
from __future__ import annotations
from ..combinators import ParseResult, pattern, seq
from .ast import Rule
from .normalize import normalize_tree
from .parser import name, union_item

_rule_parser = seq(name, pattern(r":[ \t]*"), union_item)
_trailing_blank = pattern(r"[ \t]*")


def rule(source: str, pos: int = 0) -> ParseResult[Rule]:
    """`name ':' expression` at pos, with the expression normalized."""
    result, end = _rule_parser(source, pos)
    if result is None:
        return None, pos
    return Rule(result[0], normalize_tree(result[2])), end


def parse_rule(src: str) -> Rule:
    """Read `src` as exactly one rule definition; trailing blanks are allowed."""
    r, end = rule(src)
    if r is None:
        raise SyntaxError(f"not a rule definition: {src!r}")
    _, end = _trailing_blank(src, end)
    if end != len(src):
        raise SyntaxError(f"unexpected text after rule '{r.name}': {src[end:]!r}")
    return r
