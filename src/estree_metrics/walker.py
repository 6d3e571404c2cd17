"""Syntax tree walker.

Visits an ESTree tree depth-first in pre-order, guided only by the
registry's ``children`` whitelist, and reports to a consumer:

    create_scope(node)   before the children of a scope-opening node
    process_node(node)   once per visited node, before its children
    pop_scope(node)      after the children of a scope-opening node

The program root is framing only: its ``body`` statements are walked but
the root itself is never reported. Node types the registry has no entry
for are skipped along with everything beneath them. Exceptions raised by a callback
propagate unchanged and end the walk; scopes already opened are not popped.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from .syntax import SyntaxRegistry, default_registry
from .tree import get_property, is_node, node_type

NodeCallback = Callable[[Any], Any]

# Work-stack marker: close the innermost open scope
_POP_SCOPE = object()


class WalkCallbacks(Protocol):
    """Consumer interface for ``walk``."""

    def create_scope(self, node: Any) -> Any: ...

    def process_node(self, node: Any) -> Any: ...

    def pop_scope(self, node: Any) -> Any: ...


def _ignore(node: Any) -> None:
    return None


@dataclass(frozen=True)
class Callbacks:
    """Bundle of plain callables satisfying WalkCallbacks.

    Any callback left out does nothing.
    """

    process_node: NodeCallback = _ignore
    create_scope: NodeCallback = _ignore
    pop_scope: NodeCallback = _ignore


class _Walk:
    """State of a single traversal.

    Pending work lives on an explicit stack, so tree depth is not limited
    by the interpreter's recursion limit. An entry is either a node still
    to visit or the ``_POP_SCOPE`` marker.
    """

    def __init__(self, registry: SyntaxRegistry, callbacks: WalkCallbacks) -> None:
        self._registry = registry
        self._callbacks = callbacks
        # Open scopes, innermost last
        self._scopes: list[Any] = []

    @staticmethod
    def children_of(node: Any, names: Sequence[str]) -> list[Any]:
        """Whitelisted child nodes in visiting order; non-node values are dropped."""
        found: list[Any] = []
        for name in names:
            child = get_property(node, name)
            if child is None:
                continue
            if isinstance(child, (list, tuple)):
                found.extend(item for item in child if is_node(item))
            elif is_node(child):
                found.append(child)
        return found

    def run(self, roots: Sequence[Any]) -> None:
        pending: list[Any] = [node for node in reversed(roots) if is_node(node)]
        while pending:
            node = pending.pop()
            if node is _POP_SCOPE:
                self._callbacks.pop_scope(self._scopes.pop())
                continue

            kind = node_type(node)
            if kind not in self._registry:
                continue
            spec = self._registry.lookup(kind)
            opens_scope = spec.opens_scope(node)

            if opens_scope:
                self._callbacks.create_scope(node)
                self._scopes.append(node)

            self._callbacks.process_node(node)

            if opens_scope:
                pending.append(_POP_SCOPE)
            pending.extend(reversed(self.children_of(node, spec.children)))


def walk(
    tree: Any,
    settings: Mapping[str, Any],
    callbacks: WalkCallbacks,
    registry: Optional[SyntaxRegistry] = None,
) -> None:
    """Walk a program tree, reporting nodes and scopes to ``callbacks``.

    Args:
        tree: Program root node (dict or attribute-style object)
        settings: Feature flags; only consulted by syntax specifications,
            so the walker accepts them for symmetry with its consumers
        callbacks: Object with create_scope, process_node and pop_scope
        registry: Syntax registry to consult (defaults to every grammar set)
    """
    if registry is None:
        registry = default_registry()

    body = get_property(tree, "body")
    if body is None:
        return
    if isinstance(body, (list, tuple)):
        roots = list(body)
    elif is_node(body):
        roots = [body]
    else:
        return
    _Walk(registry, callbacks).run(roots)
