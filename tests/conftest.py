# tests/conftest.py
"""
Shared fixtures and tree helpers for the existential-access tests.
"""

import pytest

from existential.builders import NodeBuilders
from existential.nodes import Identifier, MemberExpression, iter_nodes
from existential.path import NodePath


t = NodeBuilders()


# ─── Tree construction ───────────────────────────────────────────

def ident(name):
    return t.identifier(name)


def member(obj, name, computed=False):
    """``obj.name``; ``obj`` may be a string for a bare identifier."""
    if isinstance(obj, str):
        obj = ident(obj)
    return t.member_expression(obj, ident(name), computed)


def call(callee, *args):
    if isinstance(callee, str):
        callee = ident(callee)
    return t.call_expression(callee, list(args))


def stmt(expr):
    return t.expression_statement(expr)


def assign(target, value):
    if isinstance(target, str):
        target = ident(target)
    return t.assignment_expression("=", target, value)


def program(*stmts):
    return t.program(list(stmts))


# ─── Expected output shapes ──────────────────────────────────────

def typeof_not(subject, type_name):
    return t.binary_expression(
        "!==", t.unary_expression("typeof", subject), t.string_literal(type_name)
    )


def exists(subject, null_subject=None):
    """``typeof subject !== "undefined" && subject !== null``"""
    return t.logical_expression(
        "&&",
        typeof_not(subject, "undefined"),
        t.binary_expression(
            "!==", subject if null_subject is None else null_subject, t.null_literal()
        ),
    )


def void0():
    return t.unary_expression("void", t.numeric_literal(0))


def cond(test, consequent, alternate):
    return t.conditional_expression(test, consequent, alternate)


# ─── Inspection ──────────────────────────────────────────────────

def sentinel_accesses(tree, sentinel="ex"):
    return [
        n for n in iter_nodes(tree)
        if isinstance(n, MemberExpression)
        and isinstance(n.property, Identifier)
        and n.property.name == sentinel
    ]


def path_to(root, *slots):
    """Walk ``slots`` (``"key"`` or ``("key", index)``) down from ``root``."""
    path = NodePath(root)
    for slot in slots:
        if isinstance(slot, tuple):
            path = path.get(*slot)
        else:
            path = path.get(slot)
    return path


@pytest.fixture
def builders():
    return NodeBuilders()
