# pcomb/grammar/normalize.py
"""Raw expression tree -> canonical tree.

- Group is transparent and disappears.
- Right-nested binary Sequence/Union chains become one n-ary node.
- Repetition keeps its binary shape; a separator that is itself a
  Repetition (a ^ b ^ c) is left nested.
"""

from __future__ import annotations
from typing import Tuple, Type
from .ast import Group, Node, Pattern, Repetition, RuleRef, Sequence, Text, Union


def _flatten(kind: Type, items: Tuple[Node, ...]) -> Tuple[Node, ...]:
    """Splice children of the same kind into the parent until none are left."""
    out = items
    while any(isinstance(it, kind) for it in out):
        spliced = []
        for it in out:
            if isinstance(it, kind):
                spliced.extend(it.items)
            else:
                spliced.append(it)
        out = tuple(spliced)
    return out


def normalize_tree(node: Node) -> Node:
    if isinstance(node, (Text, Pattern, RuleRef)):
        return node

    if isinstance(node, Group):
        return normalize_tree(node.inner)

    if isinstance(node, (Sequence, Union)):
        kind = type(node)
        # children first, so a grouped chain of the same kind is spliced too
        items = tuple(normalize_tree(it) for it in node.items)
        return kind(_flatten(kind, items))

    if isinstance(node, Repetition):
        return Repetition(
            template=normalize_tree(node.template),
            separator=normalize_tree(node.separator),
        )

    raise AssertionError(f"unknown node during tree normalization: {node!r}")
