# pcomb/grammar/reader.py
"""Line-oriented grammar reader.

A grammar text holds one rule per line:

    # comment lines and blank lines are skipped
    list: item ^ /, */          # a trailing comment is allowed
    item: 'a' | 'b'

The first rule read becomes Grammar.start. Rule references are not
resolved here; Grammar.undefined_refs() reports the dangling ones.
"""

from __future__ import annotations
from ..combinators import pattern
from .ast import Grammar
from .comment import comment
from .loader import load_grammar_text, normalize_newlines
from .rule import rule

_blank = pattern(r"[ \t]*")


def read_grammar(text: str) -> Grammar:
    g = Grammar()
    for lineno, line in enumerate(normalize_newlines(text).split("\n"), start=1):
        _, pos = _blank(line)
        if pos == len(line):
            continue
        c, _ = comment(line, pos)
        if c is not None:
            continue

        r, end = rule(line, pos)
        if r is None:
            raise SyntaxError(f"cannot read rule on line {lineno}: {line.strip()!r}")
        _, end = _blank(line, end)
        if end < len(line):
            c, end = comment(line, end)
            if c is None:
                raise SyntaxError(
                    f"unexpected text after rule '{r.name}' on line {lineno}: {line[end:]!r}"
                )
        g.add_rule(r)
    return g


def read_grammar_file(path: str) -> Grammar:
    return read_grammar(load_grammar_text(path))
