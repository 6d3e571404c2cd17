"""Ready-made walk consumers.

TraceRecorder keeps the ordered event stream of a walk, annotated with
each node's facts. DependencyCollector gathers dependency records.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .facts import NodeFacts, facts_for
from .syntax import SyntaxRegistry, default_registry
from .tree import node_type
from .walker import walk

CREATE_SCOPE = "create_scope"
PROCESS_NODE = "process_node"
POP_SCOPE = "pop_scope"


@dataclass(frozen=True)
class TraceEvent:
    """One callback invocation seen during a walk.

    Attributes:
        event: CREATE_SCOPE, PROCESS_NODE or POP_SCOPE
        node: The node passed to the callback
        depth: Number of scopes open when the event fired
        facts: Node facts, only for PROCESS_NODE events
    """

    event: str
    node: Any
    depth: int
    facts: Optional[NodeFacts] = None


class TraceRecorder:
    """Records every callback of a walk in order.

    Usage:
        recorder = TraceRecorder(settings)
        walk(tree, settings, recorder)
        for event in recorder.events: ...
    """

    def __init__(
        self,
        settings: Mapping[str, Any],
        registry: Optional[SyntaxRegistry] = None,
    ) -> None:
        self.settings = settings
        self.registry = registry if registry is not None else default_registry()
        self.events: list[TraceEvent] = []
        self._depth = 0

    def create_scope(self, node: Any) -> None:
        self.events.append(TraceEvent(CREATE_SCOPE, node, self._depth))
        self._depth += 1

    def process_node(self, node: Any) -> None:
        facts = facts_for(node, self.settings, self.registry)
        self.events.append(TraceEvent(PROCESS_NODE, node, self._depth, facts))

    def pop_scope(self, node: Any) -> None:
        self._depth -= 1
        self.events.append(TraceEvent(POP_SCOPE, node, self._depth))

    @property
    def processed(self) -> list[Any]:
        """Nodes passed to process_node, in order."""
        return [e.node for e in self.events if e.event == PROCESS_NODE]

    def signature(self) -> list[tuple[str, Optional[str], int]]:
        """Comparable (event, node type, node id) triples."""
        return [(e.event, node_type(e.node), id(e.node)) for e in self.events]


class DependencyCollector:
    """Collects dependency records found while walking."""

    def __init__(self, registry: Optional[SyntaxRegistry] = None) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.dependencies: list[Mapping[str, Any]] = []

    def create_scope(self, node: Any) -> None:
        pass

    def pop_scope(self, node: Any) -> None:
        pass

    def process_node(self, node: Any) -> None:
        record = self.registry.lookup(node_type(node)).dependencies_for(node)
        if record is not None:
            self.dependencies.append(record)


def trace(
    tree: Any,
    settings: Mapping[str, Any],
    registry: Optional[SyntaxRegistry] = None,
) -> list[TraceEvent]:
    """Walk a tree and return its event stream."""
    recorder = TraceRecorder(settings, registry)
    walk(tree, settings, recorder, registry=registry)
    return recorder.events


def collect_dependencies(
    tree: Any,
    settings: Mapping[str, Any],
    registry: Optional[SyntaxRegistry] = None,
) -> list[Mapping[str, Any]]:
    """Walk a tree and return its dependency records in source order."""
    collector = DependencyCollector(registry)
    walk(tree, settings, collector, registry=registry)
    return collector.dependencies
