# pcomb/__init__.py
"""pcomb: parser combinators and a rule-definition reader built on them."""

from .combinators import text, pattern, union, seq, rep
from .grammar import (
    Text, Pattern, RuleRef, Repetition, Sequence, Union, Node,
    Rule, Comment, Grammar,
    rule, parse_rule, comment, normalize_tree, read_grammar, read_grammar_file,
)

__version__ = "0.1.0"
