# existential/rewrite.py
"""
Rewrite engine: turns a matched ``obj.ex`` path into its replacement.

``build_replacement`` assembles the member-context conditional.
``plan_replacement`` additionally decides, per ``CallContextPolicy``,
which context and which path slot the replacement is for.
``rewrite_expression`` is the traversal-agnostic adapter
``(node, ancestors) -> Optional[Replacement]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from existential.branches import BRANCH_FACTORIES, member_branches
from existential.builders import NodeBuilders
from existential.classifier import RewriteContext, classify
from existential.config import CallContextPolicy, ComputedAccessPolicy, RewriteConfig
from existential.errors import MalformedNodeError
from existential.nodes import Node
from existential.path import NodePath, path_from_ancestors

__all__ = [
    "Replacement",
    "is_sentinel_access",
    "build_replacement",
    "plan_replacement",
    "rewrite_expression",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Replacement:
    """A planned substitution of ``target``'s node by ``node``."""

    context: RewriteContext
    target: NodePath
    node: Node

    def commit(self) -> Node:
        logger.debug(
            "replacing %s (%s context) with %s",
            self.target.node.type, self.context.value, self.node.type,
        )
        return self.target.replace_with(self.node)


def is_sentinel_access(node: Node, config: Optional[RewriteConfig] = None) -> bool:
    """True for an ``obj.<sentinel>`` member access.

    ``obj[<sentinel>]`` matches too unless ``config.computed`` is
    ``ComputedAccessPolicy.SKIP``.  Literal properties never match.
    """
    config = config or RewriteConfig()
    if getattr(node, "type", None) != "MemberExpression":
        return False
    prop = getattr(node, "property", None)
    if prop is None:
        raise MalformedNodeError(node, "member access has no property")
    if getattr(node, "computed", False) and config.computed is ComputedAccessPolicy.SKIP:
        return False
    return getattr(prop, "name", None) == config.sentinel


def build_replacement(
    t: NodeBuilders, path: NodePath, config: Optional[RewriteConfig] = None,
) -> Node:
    """``exists(obj) ? obj : void 0`` for the access at ``path``."""
    branches = member_branches(t, path, config or RewriteConfig())
    return t.conditional_expression(*branches)


def plan_replacement(
    t: NodeBuilders, path: NodePath, config: Optional[RewriteConfig] = None,
) -> Replacement:
    config = config or RewriteConfig()
    if config.call_context is CallContextPolicy.DISPATCH:
        context = classify(path)
    else:
        context = RewriteContext.MEMBER

    branches = BRANCH_FACTORIES[context](t, path, config)
    target = path.parent_path if context is RewriteContext.CALL else path
    return Replacement(context, target, t.conditional_expression(*branches))


def rewrite_expression(
    node: Node,
    ancestors: Sequence[Node] = (),
    types: Optional[NodeBuilders] = None,
    config: Optional[RewriteConfig] = None,
) -> Optional[Replacement]:
    """Match and plan a rewrite for ``node`` without touching the tree.

    ``ancestors`` lists the enclosing nodes, outermost first.  Returns
    None when ``node`` is not a sentinel access.
    """
    config = config or RewriteConfig()
    if not is_sentinel_access(node, config):
        return None
    path = path_from_ancestors(node, ancestors)
    return plan_replacement(types or NodeBuilders(), path, config)
