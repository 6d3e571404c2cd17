"""Syntax registry: node type -> SyntaxSpec, folded from layered grammar sets.

Each grammar set is either a module exposing a ``SYNTAX`` mapping or the
mapping itself. Sets are folded in order; a later set's entry for a type
replaces the earlier entry whole (fields are not merged across sets).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .define import DEFAULT_SPEC, SyntaxSpec, define_syntax

logger = logging.getLogger(__name__)


def _entries_of(module: Any) -> Mapping[str, Any]:
    if isinstance(module, Mapping):
        return module
    return getattr(module, "SYNTAX")


def _set_name(module: Any) -> str:
    return getattr(module, "__name__", type(module).__name__)


class SyntaxRegistry:
    """Immutable lookup table of syntax specifications.

    Usage:
        registry = SyntaxRegistry([es5, es2015])
        spec = registry.lookup("ForOfStatement")
    """

    def __init__(self, modules: Iterable[Any]) -> None:
        table: dict[str, SyntaxSpec] = {}
        for module in modules:
            entries = _entries_of(module)
            for node_type, partial in entries.items():
                if node_type in table:
                    logger.debug(f"{_set_name(module)} overrides syntax for {node_type}")
                if isinstance(partial, SyntaxSpec):
                    table[node_type] = partial
                else:
                    table[node_type] = define_syntax(partial)
            logger.debug(f"Folded {len(entries)} syntax entries from {_set_name(module)}")
        self._table: Mapping[str, SyntaxSpec] = MappingProxyType(table)

    def lookup(self, node_type: str | None) -> SyntaxSpec:
        """Return the spec for a node type; unknown types get DEFAULT_SPEC."""
        if node_type is None:
            return DEFAULT_SPEC
        return self._table.get(node_type, DEFAULT_SPEC)

    def node_types(self) -> list[str]:
        """Node types with an explicit entry, sorted."""
        return sorted(self._table)

    def __contains__(self, node_type: object) -> bool:
        return node_type in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)
