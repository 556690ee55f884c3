# pcomb/grammar/comment.py
from __future__ import annotations
from ..combinators import ParseResult, pattern, seq, text
from .ast import Comment

# '#', the rest of the line, then the line terminator or end of input
_comment_parser = seq(text("#"), pattern(r"[^\r\n]*"), pattern(r"\r\n|\r|\n|\Z"))


def comment(source: str, pos: int = 0) -> ParseResult[Comment]:
    result, end = _comment_parser(source, pos)
    if result is None:
        return None, pos
    return Comment(), end
