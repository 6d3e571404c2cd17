"""
estree-metrics - traversal core for JavaScript complexity analysis.

Walks ESTree syntax trees in a fixed, scope-aware order and describes,
per node type, what each node contributes to complexity metrics
(logical lines, cyclomatic branches, Halstead operators and operands,
scopes and dependencies).
"""

__version__ = "0.1.0"

from .config import DEFAULT_SETTINGS, Settings, load_settings
from .consumers import TraceRecorder, collect_dependencies, trace
from .facts import NodeFacts, facts_for
from .syntax import SyntaxRegistry, SyntaxSpec, default_registry, define_syntax
from .walker import Callbacks, WalkCallbacks, walk

__all__ = [
    "walk",  # Main entry point
    "Callbacks",
    "WalkCallbacks",
    "SyntaxRegistry",
    "SyntaxSpec",
    "default_registry",
    "define_syntax",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "NodeFacts",
    "facts_for",
    "TraceRecorder",
    "trace",
    "collect_dependencies",
]
