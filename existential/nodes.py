# existential/nodes.py
"""
Expression tree node definitions.

Nodes follow the ESTree / Babel AST shape used by JavaScript tooling, so
field names (``object``, ``property``, ``callee``, ``arguments`` ...) match
what a host pipeline hands over.  Every node class carries:

* ``type``: the node-type discriminator visitors are keyed on,
* ``child_fields``: the child slots, in traversal order,
* ``loc``: an optional source location that never takes part in
  equality, so two trees compare equal when their structure does.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Union


# ── Source Location ──────────────────────────────────────────────

@dataclass(frozen=True)
class Loc:
    """Source location for diagnostics."""
    file: str = "<unknown>"
    line: int = 0
    col: int = 0

    def __str__(self):
        return f"{self.file}:{self.line}:{self.col}"


def _loc_field():
    return field(default_factory=Loc, compare=False, repr=False)


# ── Base ─────────────────────────────────────────────────────────

class Node:
    """Common behaviour for every tree node."""

    type: ClassVar[str] = "Node"
    child_fields: ClassVar[tuple[str, ...]] = ()

    def children(self) -> Iterator[tuple[str, Optional[int], Node]]:
        """Yield ``(key, index, child)`` for every child node.

        ``index`` is ``None`` for single-node slots and the list position
        for list slots.  Empty slots are skipped.
        """
        for key in self.child_fields:
            value = getattr(self, key)
            if isinstance(value, list):
                for index, item in enumerate(value):
                    if item is not None:
                        yield key, index, item
            elif value is not None:
                yield key, None, value


def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk over ``node`` and all of its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        kids = [child for _, _, child in current.children()]
        stack.extend(reversed(kids))


# ── Literals & Identifiers ───────────────────────────────────────

@dataclass
class Identifier(Node):
    type: ClassVar[str] = "Identifier"

    name: str
    loc: Loc = _loc_field()


@dataclass
class NullLiteral(Node):
    type: ClassVar[str] = "NullLiteral"

    loc: Loc = _loc_field()


@dataclass
class BooleanLiteral(Node):
    type: ClassVar[str] = "BooleanLiteral"

    value: bool
    loc: Loc = _loc_field()


@dataclass
class NumericLiteral(Node):
    type: ClassVar[str] = "NumericLiteral"

    value: Union[int, float]
    loc: Loc = _loc_field()


@dataclass
class StringLiteral(Node):
    type: ClassVar[str] = "StringLiteral"

    value: str
    loc: Loc = _loc_field()


# ── Expressions ──────────────────────────────────────────────────

@dataclass
class MemberExpression(Node):
    """``object.property`` (or ``object[property]`` when computed)."""

    type: ClassVar[str] = "MemberExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("object", "property")

    object: Node
    property: Node
    computed: bool = False
    loc: Loc = _loc_field()


@dataclass
class CallExpression(Node):
    type: ClassVar[str] = "CallExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("callee", "arguments")

    callee: Node
    arguments: list[Node] = field(default_factory=list)
    loc: Loc = _loc_field()


@dataclass
class BinaryExpression(Node):
    type: ClassVar[str] = "BinaryExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("left", "right")

    operator: str
    left: Node
    right: Node
    loc: Loc = _loc_field()


@dataclass
class LogicalExpression(Node):
    type: ClassVar[str] = "LogicalExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("left", "right")

    operator: str
    left: Node
    right: Node
    loc: Loc = _loc_field()


@dataclass
class ConditionalExpression(Node):
    """``test ? consequent : alternate``."""

    type: ClassVar[str] = "ConditionalExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("test", "consequent", "alternate")

    test: Node
    consequent: Node
    alternate: Node
    loc: Loc = _loc_field()


@dataclass
class UnaryExpression(Node):
    type: ClassVar[str] = "UnaryExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("argument",)

    operator: str
    argument: Node
    prefix: bool = True
    loc: Loc = _loc_field()


@dataclass
class AssignmentExpression(Node):
    type: ClassVar[str] = "AssignmentExpression"
    child_fields: ClassVar[tuple[str, ...]] = ("left", "right")

    operator: str
    left: Node
    right: Node
    loc: Loc = _loc_field()


# ── Statements ───────────────────────────────────────────────────

@dataclass
class ExpressionStatement(Node):
    """An expression evaluated for its effect; its value is discarded."""

    type: ClassVar[str] = "ExpressionStatement"
    child_fields: ClassVar[tuple[str, ...]] = ("expression",)

    expression: Node
    loc: Loc = _loc_field()


@dataclass
class Program(Node):
    type: ClassVar[str] = "Program"
    child_fields: ClassVar[tuple[str, ...]] = ("body",)

    body: list[Node] = field(default_factory=list)
    loc: Loc = _loc_field()


Expr = Union[
    Identifier, NullLiteral, BooleanLiteral, NumericLiteral, StringLiteral,
    MemberExpression, CallExpression, BinaryExpression, LogicalExpression,
    ConditionalExpression, UnaryExpression, AssignmentExpression,
]
