# existential/branches.py
"""
Branch factories for the existential conditional.

Each syntactic context has a family of three factories producing the
``test``, ``consequent`` and ``alternate`` operands of
``test ? consequent : alternate``.

In the member context the matched ``obj.ex`` path itself is replaced::

    test        exists(obj)
    consequent  obj        (or ``true`` when the access is a bare statement)
    alternate   void 0     (or ``false`` when the access is a bare statement)

In the call context the call ``obj.ex(args)`` holding the matched access in
its callee slot is replaced::

    test        exists(obj) && typeof obj !== "function"
    consequent  obj(args)
    alternate   void 0     (or ``false`` when the call is a bare statement)
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional

from existential.builders import NodeBuilders
from existential.classifier import RewriteContext, result_is_consumed
from existential.config import NullGuardTarget, RewriteConfig
from existential.errors import MalformedNodeError, MissingAncestorError
from existential.guards import exists_and_is_not_callable_guard, exists_guard, void_zero
from existential.nodes import Node
from existential.path import NodePath

__all__ = [
    "Branches",
    "base_object",
    "null_subject",
    "member_test",
    "member_consequent",
    "member_alternate",
    "member_branches",
    "call_test",
    "call_consequent",
    "call_alternate",
    "call_branches",
    "BRANCH_FACTORIES",
]


class Branches(NamedTuple):
    test: Node
    consequent: Node
    alternate: Node


def base_object(path: NodePath) -> Node:
    """The ``object`` of the matched member access."""
    obj = getattr(path.node, "object", None)
    if obj is None:
        raise MalformedNodeError(path.node, "member access has no object")
    return obj


def null_subject(t: NodeBuilders, path: NodePath, config: RewriteConfig) -> Optional[Node]:
    """Operand for the ``!== null`` comparison, or None for the base object."""
    if config.null_guard is NullGuardTarget.OBJECT:
        return None
    name = getattr(getattr(path.node, "property", None), "name", None)
    if name is None:
        raise MalformedNodeError(path.node, "property has no name")
    return t.identifier(name)


def _fallback(t: NodeBuilders, consumed: bool) -> Node:
    return void_zero(t) if consumed else t.boolean_literal(False)


# ── Member context ───────────────────────────────────────────────

def member_test(t: NodeBuilders, path: NodePath, config: RewriteConfig) -> Node:
    return exists_guard(t, base_object(path), null_subject(t, path, config))


def member_consequent(t: NodeBuilders, path: NodePath) -> Node:
    if result_is_consumed(path):
        return base_object(path)
    return t.boolean_literal(True)


def member_alternate(t: NodeBuilders, path: NodePath) -> Node:
    return _fallback(t, result_is_consumed(path))


def member_branches(t: NodeBuilders, path: NodePath, config: RewriteConfig) -> Branches:
    return Branches(
        member_test(t, path, config),
        member_consequent(t, path),
        member_alternate(t, path),
    )


# ── Call context ─────────────────────────────────────────────────
#
# ``path`` is still the matched member access; the call is its parent.

def _call_path(path: NodePath) -> NodePath:
    if path.parent_path is None:
        raise MissingAncestorError(path.node)
    return path.parent_path


def call_test(t: NodeBuilders, path: NodePath, config: RewriteConfig) -> Node:
    return exists_and_is_not_callable_guard(
        t, base_object(path), null_subject(t, path, config)
    )


def call_consequent(t: NodeBuilders, path: NodePath) -> Node:
    call = _call_path(path).node
    arguments = getattr(call, "arguments", None)
    if arguments is None:
        raise MalformedNodeError(call, "call has no argument list")
    return t.call_expression(base_object(path), list(arguments))


def call_alternate(t: NodeBuilders, path: NodePath) -> Node:
    return _fallback(t, result_is_consumed(_call_path(path)))


def call_branches(t: NodeBuilders, path: NodePath, config: RewriteConfig) -> Branches:
    return Branches(
        call_test(t, path, config),
        call_consequent(t, path),
        call_alternate(t, path),
    )


BranchFactory = Callable[[NodeBuilders, NodePath, RewriteConfig], Branches]

BRANCH_FACTORIES: Dict[RewriteContext, BranchFactory] = {
    RewriteContext.MEMBER: member_branches,
    RewriteContext.CALL: call_branches,
}
