# pcomb/grammar/parser.py
"""Expression parser for rule definitions, built from pcomb.combinators.

Grammar (tightest first):
    atomic    := text | pattern | ruleRef | group
    text      := "'" ( "\\" any | [^'\\] )+ "'"
    pattern   := "/" ( "\\" any | [^/\\] )+ "/" "i"?
    group     := "(" " "* unionItem " "* ")"
    rep       := atomic " "* "^" " "* repItem
    seq       := repItem WS+ seqItem
    union     := seqItem " "* "|" " "* unionItem
    name      := [_a-zA-Z] \\w+

    repItem   := rep | atomic
    seqItem   := seq | repItem
    unionItem := union | seqItem

Every production is right-recursive, so chains come out as right-nested
binary nodes (a OP (b OP c)); normalize_tree() flattens them afterwards.
Blanks are spaces and tabs only: a rule definition lives on one line.

Only `i` is read as a pattern flag. dot_all stays off for parsed patterns and
can only be set by building a Pattern node directly.
"""

from __future__ import annotations
from ..combinators import ParseResult, pattern, seq, text, union
from .ast import Group, Node, Pattern, Repetition, RuleRef, Sequence, Text, Union

_BLANK = "[ \\t]"


def _spaced(op: str):
    """Operator matcher allowing optional blanks on both sides."""
    return pattern(f"{_BLANK}*{op}{_BLANK}*")

# ---- item tiers ----
# Plain functions so that the tiers may refer to each other before all of
# them are defined; the union matchers below are built once at import time.

def atomic_item(source: str, pos: int = 0) -> ParseResult[Node]:
    return _atomic_item(source, pos)

def rep_item(source: str, pos: int = 0) -> ParseResult[Node]:
    return _rep_item(source, pos)

def seq_item(source: str, pos: int = 0) -> ParseResult[Node]:
    return _seq_item(source, pos)

def union_item(source: str, pos: int = 0) -> ParseResult[Node]:
    return _union_item(source, pos)

# ---- atomic templates ----

_quote = text("'")
_text_parser = seq(_quote, pattern(r"(?:\\.|[^'\\])+"), _quote)

def text_template(source: str, pos: int = 0) -> ParseResult[Text]:
    result, end = _text_parser(source, pos)
    if result is None:
        return None, pos
    return Text(result[1]), end


_slash = text("/")
# a second flag letter right after the first (either case) is not a flag
_pattern_parser = seq(_slash, pattern(r"(?:\\.|[^/\\])+"), _slash, pattern(r"(?:i(?![iI]))?"))

def pattern_template(source: str, pos: int = 0) -> ParseResult[Pattern]:
    result, end = _pattern_parser(source, pos)
    if result is None:
        return None, pos
    return Pattern(result[1], ignore_case=result[3] == "i"), end


_name_parser = pattern(r"[_a-zA-Z]\w+")

def name(source: str, pos: int = 0) -> ParseResult[str]:
    return _name_parser(source, pos)


def rule_ref(source: str, pos: int = 0) -> ParseResult[RuleRef]:
    result, end = name(source, pos)
    if result is None:
        return None, pos
    return RuleRef(result), end


_group_parser = seq(pattern(f"\\({_BLANK}*"), union_item, pattern(f"{_BLANK}*\\)"))

def group(source: str, pos: int = 0) -> ParseResult[Group]:
    result, end = _group_parser(source, pos)
    if result is None:
        return None, pos
    return Group(result[1]), end

# ---- operator templates ----

_rep_parser = seq(atomic_item, _spaced(r"\^"), rep_item)

def rep_template(source: str, pos: int = 0) -> ParseResult[Repetition]:
    result, end = _rep_parser(source, pos)
    if result is None:
        return None, pos
    return Repetition(template=result[0], separator=result[2]), end


_seq_parser = seq(rep_item, pattern(f"{_BLANK}+"), seq_item)

def seq_template(source: str, pos: int = 0) -> ParseResult[Sequence]:
    result, end = _seq_parser(source, pos)
    if result is None:
        return None, pos
    return Sequence((result[0], result[2])), end


_union_parser = seq(seq_item, _spaced(r"\|"), union_item)

def union_template(source: str, pos: int = 0) -> ParseResult[Union]:
    result, end = _union_parser(source, pos)
    if result is None:
        return None, pos
    return Union((result[0], result[2])), end


_atomic_item = union(text_template, pattern_template, rule_ref, group)
_rep_item = union(rep_template, atomic_item)
_seq_item = union(seq_template, rep_item)
_union_item = union(union_template, seq_item)


def parse_expression(source: str, pos: int = 0) -> ParseResult[Node]:
    """Raw (un-normalized) expression tree at pos."""
    return union_item(source, pos)
