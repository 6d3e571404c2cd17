"""Read-only access to ESTree nodes.

Parsers hand trees over in two shapes: JSON documents decoded into dicts
(esprima/acorn/espree `JSON.stringify` output) and attribute-style node
objects. Everything in this package reads nodes through the helpers below,
so both shapes are accepted and neither is ever mutated.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .exceptions import InvalidTreeError, TreeLoadError

logger = logging.getLogger(__name__)


def get_property(node: Any, name: str) -> Any:
    """Return ``node.<name>``, or None if the node does not carry it."""
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def node_type(node: Any) -> str | None:
    """Return the ``type`` discriminator of a node."""
    value = get_property(node, "type")
    return value if isinstance(value, str) else None


def is_node(value: Any) -> bool:
    """True if ``value`` looks like a single node rather than a sequence or scalar."""
    if value is None or isinstance(value, (str, bytes, list, tuple)):
        return False
    return node_type(value) is not None


def start_line(node: Any) -> int | None:
    """Source line a node starts on (from ``loc.start.line``), if present."""
    loc = get_property(node, "loc")
    if loc is None:
        return None
    start = get_property(loc, "start")
    if start is None:
        return None
    line = get_property(start, "line")
    return line if isinstance(line, int) else None


def parse_tree(text: str, source: str = "<string>") -> Any:
    """Decode an ESTree JSON document.

    Raises:
        TreeLoadError: If the text is not valid JSON
        InvalidTreeError: If the decoded value is not a node
    """
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeLoadError(source, f"invalid JSON: {e}")

    if not isinstance(tree, dict) or node_type(tree) is None:
        raise InvalidTreeError("top-level value has no 'type' discriminator")
    return tree


def load_tree(path: Path) -> Any:
    """Read and decode an ESTree JSON file.

    Args:
        path: JSON file produced by an ESTree-compatible parser

    Returns:
        The root node as a dict

    Raises:
        TreeLoadError: If the file cannot be read or decoded
        InvalidTreeError: If the document is not a node
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TreeLoadError(str(path), str(e))

    logger.debug(f"Loaded {len(text)} bytes of tree JSON from {path}")
    try:
        return parse_tree(text, source=str(path))
    except InvalidTreeError as e:
        raise InvalidTreeError(e.reason, filepath=path)


def get_path(node: Any, *names: str) -> Any:
    """Follow a chain of properties, e.g. ``get_path(node, "source", "value")``."""
    value = node
    for name in names:
        if value is None:
            return None
        value = get_property(value, name)
    return value
