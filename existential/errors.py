# existential/errors.py
"""
Error types for the existential-access rewrite.

The rewrite performs no recovery: every fault raised here propagates to
the host pipeline.  What this module adds is a *typed* failure, so that
a malformed tree surfaces as "match attempted on malformed node" instead
of an unrelated ``AttributeError`` deep inside a guard builder.

Error Hierarchy:
────────────────
    ExistentialError (base)
    ├── MalformedNodeError    - node lacks data the rewrite needs
    ├── MissingAncestorError  - predicate needs a parent/grandparent
    ├── DetachedPathError     - substitution on a path with no slot
    ├── NodeBuildError        - builder called with invalid operands
    └── ConfigError           - invalid plugin options

Error Codes:
────────────
Each error carries a code of the form ``EXA-NNNN``.

Example Usage:
──────────────
    from existential.errors import MalformedNodeError

    try:
        traverse(tree, existential_access().visitor)
    except ExistentialError as exc:
        print(exc)          # <unknown>:0:0: error: ... [EXA-0001]
        print(exc.code)     # EXA-0001
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Optional

from existential.nodes import Loc, Node


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

@unique
class ErrorCategory(Enum):
    """What kind of input the failure was sourced from."""

    MALFORMED_NODE = "malformed-node"
    MISSING_ANCESTOR = "missing-ancestor"
    DETACHED_PATH = "detached-path"
    INVALID_NODE = "invalid-node"
    INVALID_CONFIG = "invalid-config"


class ErrorCode:
    """
    Structured error code, rendered as ``PREFIX-NNNN``.
    """

    __slots__ = ("prefix", "number", "category")

    def __init__(self, prefix: str, number: int, category: ErrorCategory) -> None:
        self.prefix = prefix
        self.number = number
        self.category = category

    @property
    def code(self) -> str:
        """Get the full error code string."""
        return f"{self.prefix}-{self.number:04d}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name})"

    def __hash__(self) -> int:
        return hash((self.prefix, self.number))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.prefix == other.prefix and self.number == other.number
        if isinstance(other, str):
            return self.code == other
        return False


class ExistentialErrorCodes:
    """Predefined error codes."""

    MALFORMED_NODE = ErrorCode("EXA", 1, ErrorCategory.MALFORMED_NODE)
    MISSING_ANCESTOR = ErrorCode("EXA", 2, ErrorCategory.MISSING_ANCESTOR)
    DETACHED_PATH = ErrorCode("EXA", 3, ErrorCategory.DETACHED_PATH)
    INVALID_NODE = ErrorCode("EXA", 4, ErrorCategory.INVALID_NODE)
    INVALID_CONFIG = ErrorCode("EXA", 5, ErrorCategory.INVALID_CONFIG)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

class ExistentialError(Exception):
    """
    Base exception for all rewrite errors.

    Carries the error code, the location of the offending node (when
    there is one) and an optional hint.
    """

    default_code: ErrorCode = ExistentialErrorCodes.MALFORMED_NODE

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        node: Optional[Node] = None,
        hint: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.node = node
        self.hint = hint

    @property
    def loc(self) -> Loc:
        loc = getattr(self.node, "loc", None)
        return loc if isinstance(loc, Loc) else Loc()

    def with_hint(self, hint: str) -> "ExistentialError":
        """Add a hint to this error."""
        self.hint = hint
        return self

    def to_gcc_format(self) -> str:
        """Format as a GCC-style error message."""
        text = f"{self.loc}: error: {self.message} [{self.code}]"
        if self.hint:
            text += f"\n  = help: {self.hint}"
        return text

    def __str__(self) -> str:
        return self.to_gcc_format()


class MalformedNodeError(ExistentialError):
    """A node is missing data the rewrite requires."""

    default_code = ExistentialErrorCodes.MALFORMED_NODE

    def __init__(self, node: Any, detail: str, **kwargs: Any) -> None:
        kind = getattr(node, "type", type(node).__name__)
        super().__init__(
            message=f"match attempted on malformed {kind}: {detail}",
            node=node if isinstance(node, Node) else None,
            **kwargs,
        )


class MissingAncestorError(ExistentialError):
    """A context predicate needed an ancestor the path does not have."""

    default_code = ExistentialErrorCodes.MISSING_ANCESTOR

    def __init__(self, node: Optional[Node], ancestor: str = "parent", **kwargs: Any) -> None:
        kind = getattr(node, "type", "node")
        super().__init__(
            message=f"{kind} has no {ancestor}; its syntactic context cannot be classified",
            node=node,
            **kwargs,
        )
        self.ancestor = ancestor


class DetachedPathError(ExistentialError):
    """Substitution requested on a path that does not point into a tree."""

    default_code = ExistentialErrorCodes.DETACHED_PATH

    def __init__(self, node: Optional[Node], **kwargs: Any) -> None:
        kind = getattr(node, "type", "node")
        super().__init__(
            message=f"cannot replace {kind}: path is not attached to a parent slot",
            node=node,
            **kwargs,
        )


class NodeBuildError(ExistentialError):
    """A node builder was called with invalid arguments."""

    default_code = ExistentialErrorCodes.INVALID_NODE

    def __init__(self, kind: str, detail: str, **kwargs: Any) -> None:
        super().__init__(message=f"cannot build {kind}: {detail}", **kwargs)
        self.kind = kind


class ConfigError(ExistentialError):
    """Plugin options could not be turned into a configuration."""

    default_code = ExistentialErrorCodes.INVALID_CONFIG

    def __init__(self, option: str, detail: str, **kwargs: Any) -> None:
        super().__init__(message=f"invalid option {option!r}: {detail}", **kwargs)
        self.option = option
