"""ES2020 extension: optional chaining and dynamic import.

Optional member and call expressions keep their ES5 types (``optional`` is
a flag on the node); acorn and espree wrap the whole chain in a
``ChainExpression``.
"""

from ..tree import get_property, node_type, start_line


def _dynamic_import_dependency(node):
    source = get_property(node, "source")
    if node_type(source) != "Literal" or not isinstance(get_property(source, "value"), str):
        return None
    return {
        "line": start_line(node),
        "type": "Module",
        "path": get_property(source, "value"),
    }


SYNTAX = {
    "ChainExpression": {
        "operators": "?.",
        "children": ["expression"],
    },
    "ImportExpression": {
        "operators": "import()",
        "children": ["source"],
        "dependencies": _dynamic_import_dependency,
    },
}
