# existential/path.py
"""
Non-owning navigation handles over tree nodes.

A ``NodePath`` records where a node sits: the path of its parent and the
slot (``key`` plus, for list slots, ``index``) it occupies there.  It
never copies or frees nodes.  ``replace_with`` is the only operation
that mutates the tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from existential.errors import DetachedPathError
from existential.nodes import Node

if TYPE_CHECKING:
    from existential.visitor import Traversal

__all__ = ["NodePath", "path_from_ancestors"]


class NodePath:
    """Handle on ``node`` plus its ancestor chain."""

    __slots__ = ("node", "parent_path", "key", "index", "traversal")

    def __init__(
        self,
        node: Node,
        parent_path: Optional["NodePath"] = None,
        key: Optional[str] = None,
        index: Optional[int] = None,
        traversal: Optional["Traversal"] = None,
    ) -> None:
        self.node = node
        self.parent_path = parent_path
        self.key = key
        self.index = index
        self.traversal = traversal

    @property
    def parent(self) -> Optional[Node]:
        return self.parent_path.node if self.parent_path is not None else None

    @property
    def grandparent(self) -> Optional[Node]:
        if self.parent_path is None:
            return None
        return self.parent_path.parent

    @property
    def is_root(self) -> bool:
        return self.parent_path is None

    def get(self, key: str, index: Optional[int] = None) -> "NodePath":
        """Return the path of the child in slot ``key`` (``[index]``)."""
        value = getattr(self.node, key)
        if index is not None:
            value = value[index]
        return NodePath(value, self, key, index, self.traversal)

    def replace_with(self, replacement: Node) -> Node:
        """Swap the current node for ``replacement`` in its parent slot.

        A root path (one created by a traversal, with no parent) simply
        points at the replacement afterwards.  Paths built outside a
        traversal with no slot information raise ``DetachedPathError``.
        """
        if self.parent_path is not None:
            if self.key is None:
                raise DetachedPathError(self.node)
            container = self.parent_path.node
            if self.index is None:
                setattr(container, self.key, replacement)
            else:
                getattr(container, self.key)[self.index] = replacement
        elif self.traversal is None:
            raise DetachedPathError(self.node)

        original = self.node
        self.node = replacement
        if self.traversal is not None:
            self.traversal.record_replacement(self, original)
        return replacement

    @property
    def is_attached(self) -> bool:
        """False once this node, or any ancestor, left its parent slot."""
        current = self
        while current.parent_path is not None:
            container = current.parent_path.node
            slot = getattr(container, current.key, None) if current.key else None
            if current.index is not None:
                if not isinstance(slot, list) or current.index >= len(slot):
                    return False
                slot = slot[current.index]
            if slot is not current.node:
                return False
            current = current.parent_path
        return True

    def ancestors(self) -> list[Node]:
        """Ancestor nodes, outermost first."""
        chain = []
        current = self.parent_path
        while current is not None:
            chain.append(current.node)
            current = current.parent_path
        chain.reverse()
        return chain

    def __repr__(self) -> str:
        slot = self.key if self.index is None else f"{self.key}[{self.index}]"
        return f"NodePath({self.node.type}, slot={slot})"


def path_from_ancestors(node: Node, ancestors: Sequence[Node] = ()) -> NodePath:
    """Build a path chain for ``node`` from its ancestors (outermost first).

    Slot information is recovered by identity where the child can be
    found in its parent; otherwise the slot is left empty and
    ``replace_with`` on that path raises ``DetachedPathError``.
    """
    chain = list(ancestors) + [node]
    path = NodePath(chain[0])
    for current in chain[1:]:
        key = index = None
        for child_key, child_index, child in path.node.children():
            if child is current:
                key, index = child_key, child_index
                break
        path = NodePath(current, path, key, index)
    return path
