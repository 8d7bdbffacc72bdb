# existential/guards.py
"""
Guard builders: boolean-valued comparisons used as conditional tests.

Every builder takes the node-builder set ``t`` first and returns a fresh
expression node.  Operand nodes are referenced, not copied.
"""

from __future__ import annotations

from typing import Optional

from existential.builders import NodeBuilders
from existential.nodes import Node

__all__ = [
    "not_equal",
    "typeof_not_equal",
    "is_not_undefined",
    "is_not_null",
    "is_not_function",
    "exists_guard",
    "exists_and_is_not_callable_guard",
    "void_zero",
]


def not_equal(t: NodeBuilders, left: Node, right: Node) -> Node:
    """``left !== right``"""
    return t.binary_expression("!==", left, right)


def typeof_not_equal(t: NodeBuilders, subject: Node, type_name: str) -> Node:
    """``typeof subject !== "<type_name>"``"""
    return not_equal(
        t,
        t.unary_expression("typeof", subject, True),
        t.string_literal(type_name),
    )


def is_not_undefined(t: NodeBuilders, subject: Node) -> Node:
    return typeof_not_equal(t, subject, "undefined")


def is_not_null(t: NodeBuilders, subject: Node) -> Node:
    return not_equal(t, subject, t.null_literal())


def is_not_function(t: NodeBuilders, subject: Node) -> Node:
    return typeof_not_equal(t, subject, "function")


def exists_guard(t: NodeBuilders, subject: Node, null_subject: Optional[Node] = None) -> Node:
    """``typeof subject !== "undefined" && subject !== null``

    ``null_subject`` replaces ``subject`` on the null side only.
    """
    return t.logical_expression(
        "&&",
        is_not_undefined(t, subject),
        is_not_null(t, subject if null_subject is None else null_subject),
    )


def exists_and_is_not_callable_guard(
    t: NodeBuilders, subject: Node, null_subject: Optional[Node] = None,
) -> Node:
    """``exists_guard(subject) && typeof subject !== "function"``"""
    return t.logical_expression(
        "&&",
        exists_guard(t, subject, null_subject),
        is_not_function(t, subject),
    )


def void_zero(t: NodeBuilders) -> Node:
    """``void 0``, the expression form of ``undefined``."""
    return t.unary_expression("void", t.numeric_literal(0), True)
