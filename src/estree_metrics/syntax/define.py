"""Syntax specifications: how one node type takes part in traversal and metrics.

A grammar table only states what differs from "nothing": a node type with an
empty entry has no children, contributes no logical lines or branches, opens
no scope and names no operators or operands. ``define_syntax`` fills in the
rest and normalizes the shorthand forms used in the tables:

    define_syntax({
        "lloc": 1,
        "operators": "class",                 # bare tag
        "operands": lambda node: node["id"]["name"],  # node-derived identifier
        "children": ["superClass", "body"],
    })
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Optional, Union

logger = logging.getLogger(__name__)

Node = Any
NodePredicate = Callable[[Node], bool]
Resolver = Callable[[Node], Any]
LlocValue = Union[int, Callable[[Node], int]]
CyclomaticValue = Union[int, Callable[[Node, Mapping], int]]
ScopeValue = Union[bool, None, NodePredicate]


@dataclass(frozen=True)
class IdentifierRecord:
    """An operator or operand declared by a node type.

    Attributes:
        identifier: Literal tag (e.g. "if", "()")
        resolve: Function of the node producing the identifier instead of a tag
        filter: Predicate deciding whether the record applies to a given node
    """

    identifier: Any = None
    resolve: Optional[Resolver] = None
    filter: Optional[NodePredicate] = None

    def applies_to(self, node: Node) -> bool:
        return self.filter is None or bool(self.filter(node))

    def resolve_for(self, node: Node) -> Any:
        if self.resolve is not None:
            return self.resolve(node)
        return self.identifier


@dataclass(frozen=True)
class SyntaxSpec:
    """Normalized specification of one node type.

    Attributes:
        children: Property names to descend into, in visiting order
        operators: Halstead operator records
        operands: Halstead operand records
        lloc: Logical lines contributed (int or function of the node)
        cyclomatic: Branches contributed (int or function of node and settings)
        new_scope: Whether the node opens a lexical scope (bool or function of the node)
        dependencies: Function of the node returning a dependency record or None
        assignable_name: Function of the node naming what it assigns to
        method_name: Function of the node naming the method it defines
    """

    children: tuple[str, ...] = ()
    operators: tuple[IdentifierRecord, ...] = ()
    operands: tuple[IdentifierRecord, ...] = ()
    lloc: LlocValue = 0
    cyclomatic: CyclomaticValue = 0
    new_scope: ScopeValue = None
    dependencies: Optional[Callable[[Node], Optional[Mapping]]] = None
    assignable_name: Optional[Resolver] = None
    method_name: Optional[Resolver] = None

    def lloc_for(self, node: Node) -> int:
        if callable(self.lloc):
            return self.lloc(node)
        return self.lloc

    def cyclomatic_for(self, node: Node, settings: Mapping) -> int:
        if callable(self.cyclomatic):
            return self.cyclomatic(node, settings)
        return self.cyclomatic

    def opens_scope(self, node: Node) -> bool:
        if callable(self.new_scope):
            return bool(self.new_scope(node))
        return bool(self.new_scope)

    def operators_for(self, node: Node) -> list:
        return [r.resolve_for(node) for r in self.operators if r.applies_to(node)]

    def operands_for(self, node: Node) -> list:
        return [r.resolve_for(node) for r in self.operands if r.applies_to(node)]

    def dependencies_for(self, node: Node) -> Optional[Mapping]:
        if self.dependencies is None:
            return None
        return self.dependencies(node)

    def assignable_name_for(self, node: Node) -> Any:
        if self.assignable_name is None:
            return None
        return self.assignable_name(node)

    def method_name_for(self, node: Node) -> Any:
        if self.method_name is None:
            return None
        return self.method_name(node)


DEFAULT_SPEC = SyntaxSpec()

_FIELD_NAMES = frozenset(f.name for f in fields(SyntaxSpec))

# camelCase spellings used by JavaScript grammar tables
_FIELD_ALIASES = {
    "newScope": "new_scope",
    "assignableName": "assignable_name",
    "methodName": "method_name",
}


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def to_identifier(entry: Any) -> IdentifierRecord:
    """Wrap a shorthand operator/operand entry into an IdentifierRecord."""
    if isinstance(entry, IdentifierRecord):
        return entry
    if isinstance(entry, Mapping) and ("identifier" in entry or "resolve" in entry):
        return IdentifierRecord(
            identifier=entry.get("identifier"),
            resolve=entry.get("resolve"),
            filter=entry.get("filter"),
        )
    if callable(entry):
        return IdentifierRecord(resolve=entry)
    return IdentifierRecord(identifier=entry)


def define_syntax(spec: Mapping[str, Any]) -> SyntaxSpec:
    """Build a complete SyntaxSpec from a partial description.

    Caller fields win over the defaults. ``children``, ``operators`` and
    ``operands`` accept a single entry or a list; operator/operand entries
    may be tags, callables, mappings or IdentifierRecords. Values are not
    validated: a negative ``lloc`` or a child name the node never carries
    is kept as given. ``newScope``, ``assignableName`` and ``methodName``
    are accepted for their snake_case fields; other unknown keys are dropped.
    """
    overrides: dict[str, Any] = {}
    for key, value in spec.items():
        key = _FIELD_ALIASES.get(key, key)
        if key not in _FIELD_NAMES:
            logger.debug(f"Ignoring unknown syntax field {key!r}")
            continue
        overrides[key] = value

    overrides["children"] = tuple(_as_list(spec.get("children")))
    overrides["operators"] = tuple(to_identifier(e) for e in _as_list(spec.get("operators")))
    overrides["operands"] = tuple(to_identifier(e) for e in _as_list(spec.get("operands")))

    return replace(DEFAULT_SPEC, **overrides)
