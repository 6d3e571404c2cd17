"""Human-readable names for nodes that label scopes and assignments."""

from __future__ import annotations

from typing import Any

from ..tree import get_property, node_type

ANONYMOUS = "<anonymous>"


def safe_name(node: Any, default: str = ANONYMOUS) -> str:
    """Best-effort dotted name for an identifier, literal or member chain."""
    kind = node_type(node)
    if kind == "Identifier":
        return get_property(node, "name") or default
    if kind == "PrivateIdentifier":
        name = get_property(node, "name")
        return f"#{name}" if name else default
    if kind == "Literal":
        value = get_property(node, "value")
        return default if value is None else str(value)
    if kind == "ThisExpression":
        return "this"
    if kind == "MemberExpression":
        obj = safe_name(get_property(node, "object"), default)
        prop = safe_name(get_property(node, "property"), default)
        return f"{obj}.{prop}"
    return default
