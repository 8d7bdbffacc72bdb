# tests/test_classifier.py
"""
Tests for the context predicates.
"""

import pytest

from existential.classifier import (
    RewriteContext, classify, has_grandparent, has_parent, is_call_target,
    result_is_consumed, scope_is_accessed,
)
from existential.errors import MissingAncestorError
from existential.path import NodePath, path_from_ancestors
from tests.conftest import assign, call, ident, member, path_to, program, stmt


class TestHasParent:

    def test_root_is_false_not_none(self):
        path = NodePath(member("a", "ex"))
        assert has_parent(path) is False
        assert has_grandparent(path) is False

    def test_child(self):
        tree = stmt(member("a", "ex"))
        path = path_to(tree, "expression")
        assert has_parent(path) is True
        assert has_grandparent(path) is False

    def test_grandchild(self):
        tree = program(stmt(member("a", "ex")))
        path = path_to(tree, ("body", 0), "expression")
        assert has_grandparent(path) is True


class TestResultIsConsumed:

    def test_bare_statement(self):
        tree = stmt(member("a", "ex"))
        assert result_is_consumed(path_to(tree, "expression")) is False

    def test_assignment(self):
        tree = stmt(assign("b", member("a", "ex")))
        assert result_is_consumed(path_to(tree, "expression", "right")) is True

    def test_argument(self):
        tree = stmt(call("f", member("a", "ex")))
        path = path_to(tree, "expression", ("arguments", 0))
        assert result_is_consumed(path) is True

    def test_callee(self):
        tree = stmt(call(member("a", "ex")))
        assert result_is_consumed(path_to(tree, "expression", "callee")) is True

    def test_root_raises(self):
        with pytest.raises(MissingAncestorError):
            result_is_consumed(NodePath(member("a", "ex")))


class TestIsCallTarget:

    def test_callee_slot(self):
        tree = stmt(call(member("a", "ex")))
        assert is_call_target(path_to(tree, "expression", "callee")) is True

    def test_argument_slot_is_not_target(self):
        tree = stmt(call("f", member("a", "ex")))
        path = path_to(tree, "expression", ("arguments", 0))
        assert is_call_target(path) is False

    def test_non_call_parent(self):
        tree = stmt(member("a", "ex"))
        assert is_call_target(path_to(tree, "expression")) is False

    def test_detached_path_falls_back_to_identity(self):
        node = member("a", "ex")
        outer = call(node)
        path = NodePath(node, NodePath(outer))
        assert path.key is None
        assert is_call_target(path) is True

    def test_root_raises(self):
        with pytest.raises(MissingAncestorError):
            is_call_target(NodePath(member("a", "ex")))


class TestScopeIsAccessed:

    def test_grandparent_member(self):
        # a.b.c -> path to ``a``: parent a.b, grandparent (a.b).c
        tree = member(member("a", "b"), "c")
        path = path_to(tree, "object", "object")
        assert scope_is_accessed(path) is True

    def test_grandparent_not_member(self):
        tree = stmt(member("a", "ex"))
        assert scope_is_accessed(path_to(tree, "expression", "object")) is False

    def test_no_grandparent(self):
        tree = member("a", "ex")
        assert scope_is_accessed(path_to(tree, "object")) is False
        assert scope_is_accessed(NodePath(tree)) is False


class TestClassify:

    def test_member(self):
        tree = stmt(assign("b", member("a", "ex")))
        path = path_to(tree, "expression", "right")
        assert classify(path) is RewriteContext.MEMBER

    def test_call(self):
        node = member("a", "ex")
        c = call(node, ident("x"))
        path = path_from_ancestors(node, [stmt(c), c])
        assert classify(path) is RewriteContext.CALL
