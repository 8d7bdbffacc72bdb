# existential/classifier.py
"""
Context predicates over a ``NodePath``.

They answer where a matched access sits: does its value feed anything,
is it the target of a call, is its result accessed further.
"""

from __future__ import annotations

import enum

from existential.errors import MissingAncestorError
from existential.path import NodePath

__all__ = [
    "RewriteContext",
    "has_parent",
    "has_grandparent",
    "result_is_consumed",
    "is_call_target",
    "scope_is_accessed",
    "classify",
]


class RewriteContext(enum.Enum):
    """Syntactic context a matched access is rewritten for."""

    MEMBER = "member"
    CALL = "call"


def has_parent(path: NodePath) -> bool:
    return path.parent is not None


def has_grandparent(path: NodePath) -> bool:
    return path.grandparent is not None


def _require_parent(path: NodePath):
    parent = path.parent
    if parent is None:
        raise MissingAncestorError(path.node)
    return parent


def result_is_consumed(path: NodePath) -> bool:
    """False when the node is a bare statement whose value is discarded."""
    return _require_parent(path).type != "ExpressionStatement"


def is_call_target(path: NodePath) -> bool:
    """True when the node sits in the ``callee`` slot of a call."""
    parent = _require_parent(path)
    if parent.type != "CallExpression":
        return False
    if path.key is not None:
        return path.key == "callee"
    return parent.callee is path.node


def scope_is_accessed(path: NodePath) -> bool:
    """True when the grandparent is itself a member access."""
    return (
        has_parent(path)
        and has_grandparent(path)
        and path.grandparent.type == "MemberExpression"
    )


def classify(path: NodePath) -> RewriteContext:
    if is_call_target(path):
        return RewriteContext.CALL
    return RewriteContext.MEMBER
