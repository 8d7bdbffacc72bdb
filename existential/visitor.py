#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
existential/visitor.py
======================

Reference traversal driving a visitor mapping over an expression tree.

Provides:
- ``Traversal``: pre-order walk that hands each node's ``NodePath`` to
  the callback registered for its ``type``
- ``traverse``: convenience wrapper returning the (possibly replaced) root

When a callback replaces the node it was given, or one of that node's
ancestors, the walk resumes at the replacement: the new node is offered
to the visitor and its children are walked, while the discarded node's
remaining children are not.  Each node is therefore visited once before
being replaced and never again afterwards.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping

from existential.nodes import Node
from existential.path import NodePath

__all__ = ["Traversal", "traverse"]

logger = logging.getLogger(__name__)

Callback = Callable[[NodePath], None]


class Traversal:
    """One pass of a visitor mapping over a tree.

    ``visits`` counts callback invocations, ``replacements`` counts
    ``replace_with`` calls made through paths of this traversal.
    """

    def __init__(self, visitor: Mapping[str, Callback]) -> None:
        self.visitor: Dict[str, Callback] = dict(visitor)
        self.visits = 0
        self.replacements = 0

    def run(self, root: Node) -> Node:
        path = NodePath(root, traversal=self)
        self.visit(path)
        return path.node

    def visit(self, path: NodePath) -> None:
        """Visit ``path`` and its subtree, following replacements."""
        while True:
            node = path.node
            callback = self.visitor.get(node.type)
            if callback is not None:
                self.visits += 1
                callback(path)
                if path.node is not node:
                    continue
                if not path.is_attached:
                    # An ancestor was replaced; this subtree is gone.
                    return
            if self.visit_children(path) or not path.is_attached:
                return

    def visit_children(self, path: NodePath) -> bool:
        """Walk the children of ``path``.

        Returns False when a descendant's callback replaced ``path``'s
        node or one of its ancestors, leaving the caller to resume at
        the replacement.
        """
        node = path.node
        slots = [(key, index) for key, index, _ in node.children()]
        for key, index in slots:
            self.visit(path.get(key, index))
            if path.node is not node or not path.is_attached:
                return False
        return True

    def record_replacement(self, path: NodePath, original: Node) -> None:
        self.replacements += 1
        logger.debug("%r: %s -> %s", path, original.type, path.node.type)


def traverse(root: Node, visitor: Mapping[str, Callback]) -> Node:
    """Run ``visitor`` over ``root`` once and return the resulting root."""
    return Traversal(visitor).run(root)
