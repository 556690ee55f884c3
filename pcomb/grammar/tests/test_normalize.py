"""Unit tests for tree normalization."""

import pytest

from pcomb.grammar.ast import Group, Pattern, Repetition, RuleRef, Sequence, Text, Union
from pcomb.grammar.normalize import normalize_tree
from pcomb.grammar.parser import parse_expression


def _norm(source):
    node, _ = parse_expression(source)
    return normalize_tree(node)


class TestNormalizeTree:
    """Flattening and group removal."""

    @pytest.mark.parametrize("leaf", [Text("a"), Pattern("a", True, True), RuleRef("ref")])
    def test_leaves_unchanged(self, leaf):
        assert normalize_tree(leaf) is leaf

    def test_sequence_flattened(self):
        assert _norm("'a' 'b' 'c'") == Sequence((Text("a"), Text("b"), Text("c")))

    def test_union_flattened(self):
        assert _norm("'a' | 'b' | /c/ | d_rule") == Union(
            (Text("a"), Text("b"), Pattern("c"), RuleRef("d_rule"))
        )

    def test_precedence_kept(self):
        assert _norm("'a' | 'b' 'c'") == Union((Text("a"), Sequence((Text("b"), Text("c")))))

    def test_repetition_not_flattened(self):
        assert _norm("'a'^'b'^'c'") == Repetition(Text("a"), Repetition(Text("b"), Text("c")))

    def test_group_removed(self):
        assert normalize_tree(Group(Group(Text("x")))) == Text("x")

    def test_grouped_chain_of_same_kind_is_spliced(self):
        assert _norm("'a' ('b' 'c') 'd'") == Sequence(
            (Text("a"), Text("b"), Text("c"), Text("d"))
        )

    def test_grouped_other_kind_is_kept(self):
        assert _norm("'a' ('b' | 'c')") == Sequence(
            (Text("a"), Union((Text("b"), Text("c"))))
        )

    def test_repetition_components_normalized(self):
        assert _norm("('a' 'b' 'c') ^ (',' | ';')") == Repetition(
            Sequence((Text("a"), Text("b"), Text("c"))),
            Union((Text(","), Text(";"))),
        )

    def test_nested_inside_union(self):
        assert _norm("'x' 'y' 'z' | 'w'") == Union(
            (Sequence((Text("x"), Text("y"), Text("z"))), Text("w"))
        )

    def test_unknown_node_is_internal_error(self):
        with pytest.raises(AssertionError):
            normalize_tree(("seq", ["a", "b"]))

    def test_unknown_node_inside_tree(self):
        with pytest.raises(AssertionError):
            normalize_tree(Sequence((Text("a"), object())))
