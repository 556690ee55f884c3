# pcomb/combinators/__init__.py
"""Parser-combinator core.

Atomic matchers (`text`, `pattern`) and composition operators (`union`,
`seq`, `rep`). A matcher is any callable `(source, pos=0) -> (value, pos)`
returning `(None, pos)` when it does not match.

This package does not depend on pcomb.grammar.
"""

from .atomic import Matcher, ParseResult, text, pattern
from .compound import union, seq, rep
