# pcomb/grammar/ast.py
"""Grammar AST

Expression nodes produced by the rule reader:
- Text / Pattern / RuleRef : leaves
- Repetition               : template ^ separator (binary, right-nested)
- Sequence / Union         : n-ary after normalization
- Group                    : raw tree only, removed by normalize_tree()
"""

from __future__ import annotations
import typing
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

# ---- expression nodes ----

@dataclass(frozen=True)
class Text:
    value: str  # raw text between the quotes, escapes kept as written

@dataclass(frozen=True)
class Pattern:
    source: str
    ignore_case: bool = False
    dot_all: bool = False

@dataclass(frozen=True)
class RuleRef:
    name: str

@dataclass(frozen=True)
class Repetition:
    template: "Node"
    separator: "Node"

@dataclass(frozen=True)
class Sequence:
    items: Tuple["Node", ...]

@dataclass(frozen=True)
class Union:
    items: Tuple["Node", ...]

@dataclass(frozen=True)
class Group:
    inner: "Node"

Node = typing.Union[Text, Pattern, RuleRef, Repetition, Sequence, Union, Group]


def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk over an expression tree."""
    yield node
    if isinstance(node, (Sequence, Union)):
        for it in node.items:
            yield from iter_nodes(it)
    elif isinstance(node, Repetition):
        yield from iter_nodes(node.template)
        yield from iter_nodes(node.separator)
    elif isinstance(node, Group):
        yield from iter_nodes(node.inner)

# ---- rules ----

@dataclass(frozen=True)
class Rule:
    name: str
    expression: Node

@dataclass(frozen=True)
class Comment:
    """Marker for a skipped `#` line comment."""
    pass

@dataclass
class Grammar:
    """Rule table built from a grammar text; `start` is the first rule read."""
    rules: Dict[str, Rule] = field(default_factory=dict)
    start: Optional[str] = None

    def add_rule(self, r: Rule) -> None:
        if r.name in self.rules:
            raise SyntaxError(f"duplicate rule '{r.name}'")
        self.rules[r.name] = r
        if self.start is None:
            self.start = r.name

    def require_rule(self, name: str) -> Rule:
        try:
            return self.rules[name]
        except KeyError:
            raise SyntaxError(f"undefined rule '{name}'")

    def undefined_refs(self) -> List[str]:
        """Names referenced by some rule but never defined, in first-seen order."""
        out: List[str] = []
        for r in self.rules.values():
            for n in iter_nodes(r.expression):
                if isinstance(n, RuleRef) and n.name not in self.rules and n.name not in out:
                    out.append(n.name)
        return out
