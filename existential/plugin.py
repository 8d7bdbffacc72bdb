# existential/plugin.py
"""
Plugin entry point.

``existential_access`` returns a descriptor whose visitor a host
traversal calls once for every ``MemberExpression`` it reaches.
Accesses named after the sentinel are replaced in place; every other
node is left untouched.

Usage::

    from existential import existential_access
    from existential.visitor import traverse

    tree = traverse(tree, existential_access().visitor)
    tree = traverse(tree, existential_access(options={"callContext": "dispatch"}).visitor)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from existential.builders import NodeBuilders
from existential.config import RewriteConfig
from existential.path import NodePath
from existential.rewrite import is_sentinel_access, plan_replacement

__all__ = ["PluginDescriptor", "existential_access"]

logger = logging.getLogger(__name__)

Visitor = Mapping[str, Callable[[NodePath], None]]


@dataclass(frozen=True)
class PluginDescriptor:
    name: str
    visitor: Visitor
    config: RewriteConfig


def existential_access(
    types: Optional[NodeBuilders] = None,
    options: Optional[Mapping[str, Any]] = None,
    config: Optional[RewriteConfig] = None,
) -> PluginDescriptor:
    """Create the ``ex``-sentinel rewrite plugin.

    Parameters
    ----------
    types:
        Node builders used for every node the rewrite creates.
    options:
        Host-style plugin options, see ``RewriteConfig.from_options``.
    config:
        A ready-made config; takes precedence over ``options``.
    """
    t = types or NodeBuilders()
    cfg = config or RewriteConfig.from_options(options)
    for warning in cfg.validate():
        logger.warning("RewriteConfig: %s", warning)

    def member_expression(path: NodePath) -> None:
        if is_sentinel_access(path.node, cfg):
            plan_replacement(t, path, cfg).commit()

    return PluginDescriptor(
        name="existential-access",
        visitor={"MemberExpression": member_expression},
        config=cfg,
    )
