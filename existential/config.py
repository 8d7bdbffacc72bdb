# existential/config.py
"""
Configuration for the existential-access rewrite.

``RewriteConfig`` holds the sentinel property name and the behaviour
switches the rewrite exposes.  ``from_options`` turns plugin options, as
a host passes them, into a config.
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from existential.errors import ConfigError

__all__ = [
    "CallContextPolicy",
    "NullGuardTarget",
    "ComputedAccessPolicy",
    "RewriteConfig",
    "DEFAULT_SENTINEL",
    "configure_logging",
]

DEFAULT_SENTINEL: str = "ex"


class CallContextPolicy(enum.Enum):
    """How an access sitting in a call's callee slot is rewritten."""

    # Always use the member-access branch; the call wraps the result.
    MEMBER_ONLY = "member-only"
    # Route call targets to the call-position branch.
    DISPATCH = "dispatch"


class NullGuardTarget(enum.Enum):
    """Which expression the ``!== null`` half of the guard compares."""

    OBJECT = "object"
    # Identifier named after the property: ``ex !== null``.
    PROPERTY = "property"


class ComputedAccessPolicy(enum.Enum):
    """Whether ``obj[ex]`` counts as a sentinel access."""

    # Match on the property identifier's name alone.
    MATCH = "match"
    # Treat ``obj[ex]`` as a read of the variable ``ex``.
    SKIP = "skip"


_OPTION_ALIASES = {
    "sentinel": "sentinel",
    "callContext": "call_context",
    "call_context": "call_context",
    "nullGuard": "null_guard",
    "null_guard": "null_guard",
    "computed": "computed",
}


def _enum_option(enum_cls: type, option: str, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(repr(m.value) for m in enum_cls)
        raise ConfigError(option, f"{value!r} is not one of {choices}") from None


@dataclass(frozen=True)
class RewriteConfig:
    """Tuning knobs for the rewrite."""
    sentinel: str = DEFAULT_SENTINEL
    call_context: CallContextPolicy = CallContextPolicy.MEMBER_ONLY
    null_guard: NullGuardTarget = NullGuardTarget.OBJECT
    computed: ComputedAccessPolicy = ComputedAccessPolicy.MATCH

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.sentinel != DEFAULT_SENTINEL:
            warnings.append(
                f"sentinel {self.sentinel!r} differs from the reserved {DEFAULT_SENTINEL!r}"
            )
        if self.null_guard is NullGuardTarget.PROPERTY:
            warnings.append(
                "null_guard='property' compares the property identifier, not the object, against null"
            )
        if (self.call_context is CallContextPolicy.DISPATCH
                and self.null_guard is NullGuardTarget.PROPERTY):
            warnings.append("call dispatch combined with null_guard='property'")
        return warnings

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "RewriteConfig":
        """Build a config from plugin options.

        Accepts camelCase (``callContext``, ``nullGuard``) and snake_case
        keys.  Unknown keys and values raise ``ConfigError``.
        """
        if not options:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                raise ConfigError(key, "unknown option")
            if name in kwargs:
                raise ConfigError(key, "given more than once")
            kwargs[name] = value

        sentinel = kwargs.get("sentinel", DEFAULT_SENTINEL)
        if not isinstance(sentinel, str) or not sentinel.isidentifier():
            raise ConfigError("sentinel", f"{sentinel!r} is not a property name")
        return cls(
            sentinel=sentinel,
            call_context=_enum_option(
                CallContextPolicy, "callContext",
                kwargs.get("call_context", CallContextPolicy.MEMBER_ONLY),
            ),
            null_guard=_enum_option(
                NullGuardTarget, "nullGuard",
                kwargs.get("null_guard", NullGuardTarget.OBJECT),
            ),
            computed=_enum_option(
                ComputedAccessPolicy, "computed",
                kwargs.get("computed", ComputedAccessPolicy.MATCH),
            ),
        )


def configure_logging(verbosity: int) -> logging.Logger:
    """Set up the ``existential`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("existential")
    root.setLevel(level)
    for existing in list(root.handlers):
        if getattr(existing, "_existential_handler", False):
            root.removeHandler(existing)
    handler._existential_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root
