# pcomb/grammar/__init__.py
"""Rule definition reader built on pcomb.combinators.

- ast       : expression nodes, Rule, Comment, Grammar
- parser    : expression tiers (raw tree)
- normalize : raw tree -> canonical tree
- rule      : `name: expression` reader
- comment   : `#` line comment skipper
- reader    : whole grammar text -> Grammar
"""

from .ast import (
    Text, Pattern, RuleRef, Repetition, Sequence, Union, Group, Node,
    Rule, Comment, Grammar,
)
from .parser import parse_expression
from .normalize import normalize_tree
from .rule import rule, parse_rule
from .comment import comment
from .reader import read_grammar, read_grammar_file
