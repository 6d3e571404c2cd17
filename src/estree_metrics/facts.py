"""Per-node metric facts, re-derived from the registry.

The walker only reports nodes. A consumer that wants to know what a
reported node contributes looks its type up in the same registry and
evaluates the specification against the node and the settings; this
module does exactly that and returns the result as a value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .syntax import SyntaxRegistry, default_registry
from .tree import node_type, start_line


@dataclass(frozen=True)
class NodeFacts:
    """What one node contributes to complexity metrics.

    Attributes:
        type: Node type discriminator
        line: Start line, if the parser recorded locations
        lloc: Logical lines of code
        cyclomatic: Cyclomatic complexity increment
        operators: Halstead operator identifiers, in declared order
        operands: Halstead operand identifiers, in declared order
        new_scope: True if the node opens a scope
        dependency: Dependency record ({line, type, path}) or None
        assignable_name: Name the node assigns to, if any
        method_name: Name of the method the node defines, if any
    """

    type: Optional[str]
    line: Optional[int] = None
    lloc: int = 0
    cyclomatic: int = 0
    operators: list[Any] = field(default_factory=list)
    operands: list[Any] = field(default_factory=list)
    new_scope: bool = False
    dependency: Optional[Mapping[str, Any]] = None
    assignable_name: Any = None
    method_name: Any = None


def facts_for(
    node: Any,
    settings: Mapping[str, Any],
    registry: Optional[SyntaxRegistry] = None,
) -> NodeFacts:
    """Evaluate a node's syntax specification."""
    if registry is None:
        registry = default_registry()

    kind = node_type(node)
    spec = registry.lookup(kind)
    return NodeFacts(
        type=kind,
        line=start_line(node),
        lloc=spec.lloc_for(node),
        cyclomatic=spec.cyclomatic_for(node, settings),
        operators=spec.operators_for(node),
        operands=spec.operands_for(node),
        new_scope=spec.opens_scope(node),
        dependency=spec.dependencies_for(node),
        assignable_name=spec.assignable_name_for(node),
        method_name=spec.method_name_for(node),
    )
