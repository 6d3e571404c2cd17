"""Syntax registry and grammar sets.

Maps ESTree node types to their specifications.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from . import es5, es2015, es2017, es2020, es2022
from .define import DEFAULT_SPEC, IdentifierRecord, SyntaxSpec, define_syntax
from .registry import SyntaxRegistry

if TYPE_CHECKING:
    from types import ModuleType

# Grammar layering, oldest first; later sets override earlier ones per type
SYNTAX_MODULES: list[ModuleType] = [
    es5,
    es2015,
    es2017,
    es2020,
    es2022,
]


@lru_cache(maxsize=1)
def default_registry() -> SyntaxRegistry:
    """Registry for every supported grammar generation (built once)."""
    return SyntaxRegistry(SYNTAX_MODULES)


def get_syntax(node_type: str) -> SyntaxSpec:
    """Look up a node type in the default registry."""
    return default_registry().lookup(node_type)


__all__ = [
    "DEFAULT_SPEC",
    "IdentifierRecord",
    "SYNTAX_MODULES",
    "SyntaxRegistry",
    "SyntaxSpec",
    "default_registry",
    "define_syntax",
    "get_syntax",
]
