"""existential: existential-access rewrite for ESTree-shaped expression trees.

The rewrite replaces every sentinel access ``obj.ex`` with a guarded
conditional that evaluates ``obj`` only when it is neither ``undefined``
nor ``null``::

    b = a.ex      →   b = typeof a !== "undefined" && a !== null ? a : void 0
    a.ex;         →   typeof a !== "undefined" && a !== null ? true : false;

Submodules
----------
nodes
    ESTree / Babel-shaped node dataclasses and ``iter_nodes``.
builders
    ``NodeBuilders``, the capability set all new nodes are built through.
path
    ``NodePath``, a non-owning handle with ``replace_with``.
classifier, guards, branches, rewrite
    Context predicates, guard expressions, per-context branch factories
    and the engine assembling the replacement.
plugin
    ``existential_access``, the visitor descriptor a host registers.
visitor
    ``traverse``, a reference pre-order traversal.
config, errors
    ``RewriteConfig`` and the ``ExistentialError`` hierarchy.

Usage
-----
Programmatic::

    from existential import existential_access
    from existential.visitor import traverse

    tree = traverse(tree, existential_access().visitor)

"""

from __future__ import annotations

from existential.plugin import PluginDescriptor, existential_access

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    "PluginDescriptor",
    "existential_access",
]
