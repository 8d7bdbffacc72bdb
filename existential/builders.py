# existential/builders.py
"""
Node builders: the capability set the rewrite constructs nodes through.

A host hands one of these to the plugin (Babel calls the equivalent
object ``types``).  The rewrite never instantiates node classes
directly, so a host with its own node representation can subclass
``NodeBuilders`` and override the constructors.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from existential import nodes as N
from existential.errors import NodeBuildError

__all__ = [
    "BINARY_OPERATORS",
    "LOGICAL_OPERATORS",
    "UNARY_OPERATORS",
    "ASSIGNMENT_OPERATORS",
    "NodeBuilders",
]


BINARY_OPERATORS = frozenset({
    "==", "!=", "===", "!==", "<", "<=", ">", ">=",
    "<<", ">>", ">>>", "+", "-", "*", "/", "%", "**",
    "|", "^", "&", "in", "instanceof",
})

LOGICAL_OPERATORS = frozenset({"||", "&&", "??"})

UNARY_OPERATORS = frozenset({"-", "+", "!", "~", "typeof", "void", "delete"})

ASSIGNMENT_OPERATORS = frozenset({
    "=", "+=", "-=", "*=", "/=", "%=", "**=",
    "<<=", ">>=", ">>>=", "|=", "^=", "&=",
    "||=", "&&=", "??=",
})


def _check_operator(kind: str, operator: str, allowed: frozenset) -> None:
    if operator not in allowed:
        raise NodeBuildError(kind, f"unknown operator {operator!r}")


def _check_node(kind: str, slot: str, value: object) -> None:
    if not isinstance(value, N.Node):
        raise NodeBuildError(
            kind, f"{slot} must be a node, got {type(value).__name__}"
        )


class NodeBuilders:
    """Constructors for every node type the rewrite produces.

    Each constructor validates its operator and child slots and raises
    ``NodeBuildError`` on bad input.
    """

    # --- Expressions ---

    def binary_expression(self, operator: str, left: N.Node, right: N.Node) -> N.BinaryExpression:
        _check_operator("BinaryExpression", operator, BINARY_OPERATORS)
        _check_node("BinaryExpression", "left", left)
        _check_node("BinaryExpression", "right", right)
        return N.BinaryExpression(operator, left, right)

    def logical_expression(self, operator: str, left: N.Node, right: N.Node) -> N.LogicalExpression:
        _check_operator("LogicalExpression", operator, LOGICAL_OPERATORS)
        _check_node("LogicalExpression", "left", left)
        _check_node("LogicalExpression", "right", right)
        return N.LogicalExpression(operator, left, right)

    def conditional_expression(
        self, test: N.Node, consequent: N.Node, alternate: N.Node,
    ) -> N.ConditionalExpression:
        _check_node("ConditionalExpression", "test", test)
        _check_node("ConditionalExpression", "consequent", consequent)
        _check_node("ConditionalExpression", "alternate", alternate)
        return N.ConditionalExpression(test, consequent, alternate)

    def unary_expression(self, operator: str, argument: N.Node, prefix: bool = True) -> N.UnaryExpression:
        _check_operator("UnaryExpression", operator, UNARY_OPERATORS)
        _check_node("UnaryExpression", "argument", argument)
        return N.UnaryExpression(operator, argument, prefix)

    def call_expression(self, callee: N.Node, arguments: Iterable[N.Node] = ()) -> N.CallExpression:
        _check_node("CallExpression", "callee", callee)
        args = list(arguments)
        for arg in args:
            _check_node("CallExpression", "argument", arg)
        return N.CallExpression(callee, args)

    def member_expression(
        self, object: N.Node, property: N.Node, computed: bool = False,
    ) -> N.MemberExpression:
        _check_node("MemberExpression", "object", object)
        _check_node("MemberExpression", "property", property)
        return N.MemberExpression(object, property, computed)

    def assignment_expression(self, operator: str, left: N.Node, right: N.Node) -> N.AssignmentExpression:
        _check_operator("AssignmentExpression", operator, ASSIGNMENT_OPERATORS)
        _check_node("AssignmentExpression", "left", left)
        _check_node("AssignmentExpression", "right", right)
        return N.AssignmentExpression(operator, left, right)

    # --- Leaves ---

    def identifier(self, name: str) -> N.Identifier:
        if not isinstance(name, str) or not name:
            raise NodeBuildError("Identifier", f"invalid name {name!r}")
        return N.Identifier(name)

    def boolean_literal(self, value: bool) -> N.BooleanLiteral:
        return N.BooleanLiteral(bool(value))

    def null_literal(self) -> N.NullLiteral:
        return N.NullLiteral()

    def numeric_literal(self, value: Union[int, float]) -> N.NumericLiteral:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise NodeBuildError("NumericLiteral", f"invalid value {value!r}")
        return N.NumericLiteral(value)

    def string_literal(self, value: str) -> N.StringLiteral:
        if not isinstance(value, str):
            raise NodeBuildError("StringLiteral", f"invalid value {value!r}")
        return N.StringLiteral(value)

    # --- Statements ---

    def expression_statement(self, expression: N.Node) -> N.ExpressionStatement:
        _check_node("ExpressionStatement", "expression", expression)
        return N.ExpressionStatement(expression)

    def program(self, body: Optional[Iterable[N.Node]] = None) -> N.Program:
        stmts = list(body or ())
        for stmt in stmts:
            _check_node("Program", "body", stmt)
        return N.Program(stmts)
