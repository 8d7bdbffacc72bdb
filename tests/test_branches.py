# tests/test_branches.py
"""
Tests for the member and call branch factories.
"""

import pytest

from existential.branches import (
    BRANCH_FACTORIES, Branches, base_object, call_alternate, call_branches,
    call_consequent, call_test, member_alternate, member_branches,
    member_consequent, member_test, null_subject,
)
from existential.classifier import RewriteContext
from existential.config import NullGuardTarget, RewriteConfig
from existential.errors import MalformedNodeError, MissingAncestorError
from existential.nodes import (
    BooleanLiteral, CallExpression, Identifier, LogicalExpression,
    MemberExpression,
)
from existential.path import NodePath
from tests.conftest import (
    assign, call, exists, ident, member, path_to, stmt, t, typeof_not, void0,
)

DEFAULT = RewriteConfig()
PROPERTY_GUARD = RewriteConfig(null_guard=NullGuardTarget.PROPERTY)


def statement_path():
    tree = stmt(member("a", "ex"))
    return tree, path_to(tree, "expression")


def consumed_path():
    tree = stmt(assign("b", member("a", "ex")))
    return tree, path_to(tree, "expression", "right")


def callee_path(*args, bare=True):
    c = call(member("a", "ex"), *args)
    tree = stmt(c) if bare else stmt(assign("r", c))
    slots = ("expression", "callee") if bare else ("expression", "right", "callee")
    return tree, path_to(tree, *slots)


class TestHelpers:

    def test_base_object(self):
        _, path = consumed_path()
        assert base_object(path) is path.node.object

    def test_base_object_missing(self):
        path = NodePath(MemberExpression(None, ident("ex")))
        with pytest.raises(MalformedNodeError):
            base_object(path)

    def test_null_subject_object(self):
        _, path = consumed_path()
        assert null_subject(t, path, DEFAULT) is None

    def test_null_subject_property(self):
        _, path = consumed_path()
        assert null_subject(t, path, PROPERTY_GUARD) == Identifier("ex")


class TestMemberBranch:

    def test_test_is_exists_guard(self):
        _, path = consumed_path()
        assert member_test(t, path, DEFAULT) == exists(ident("a"))

    def test_consumed_operands(self):
        _, path = consumed_path()
        assert member_consequent(t, path) is path.node.object
        assert member_alternate(t, path) == void0()

    def test_statement_operands(self):
        _, path = statement_path()
        assert member_consequent(t, path) == BooleanLiteral(True)
        assert member_alternate(t, path) == BooleanLiteral(False)

    def test_branches_tuple(self):
        _, path = statement_path()
        branches = member_branches(t, path, DEFAULT)
        assert isinstance(branches, Branches)
        assert branches == (exists(ident("a")), BooleanLiteral(True), BooleanLiteral(False))

    def test_property_null_guard(self):
        _, path = consumed_path()
        assert member_test(t, path, PROPERTY_GUARD) == exists(ident("a"), ident("ex"))

    def test_tree_untouched(self):
        tree, path = consumed_path()
        member_branches(t, path, DEFAULT)
        assert tree == stmt(assign("b", member("a", "ex")))


class TestCallBranch:

    def test_test_guards_callable(self):
        _, path = callee_path()
        assert call_test(t, path, DEFAULT) == LogicalExpression(
            "&&", exists(ident("a")), typeof_not(ident("a"), "function"),
        )

    def test_consequent_calls_base_object(self):
        _, path = callee_path(ident("x"), ident("y"))
        original = path.parent
        node = call_consequent(t, path)
        assert isinstance(node, CallExpression)
        assert node.callee is path.node.object
        assert node.arguments == original.arguments
        assert node.arguments is not original.arguments
        assert node.arguments[0] is original.arguments[0]

    def test_alternate_bare_call(self):
        _, path = callee_path()
        assert call_alternate(t, path) == BooleanLiteral(False)

    def test_alternate_consumed_call(self):
        _, path = callee_path(bare=False)
        assert call_alternate(t, path) == void0()

    def test_branches(self):
        _, path = callee_path(ident("x"), bare=False)
        branches = call_branches(t, path, DEFAULT)
        assert branches.consequent == call("a", ident("x"))
        assert branches.alternate == void0()

    def test_needs_call_parent(self):
        path = NodePath(member("a", "ex"))
        with pytest.raises(MissingAncestorError):
            call_consequent(t, path)

    def test_call_without_arguments_list(self):
        broken = CallExpression(member("a", "ex"), None)
        path = NodePath(broken.callee, NodePath(broken), "callee")
        with pytest.raises(MalformedNodeError):
            call_consequent(t, path)


class TestRegistry:

    def test_every_context_has_a_factory(self):
        assert set(BRANCH_FACTORIES) == set(RewriteContext)
        assert BRANCH_FACTORIES[RewriteContext.MEMBER] is member_branches
        assert BRANCH_FACTORIES[RewriteContext.CALL] is call_branches
