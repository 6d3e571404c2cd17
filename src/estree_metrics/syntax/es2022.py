"""ES2022 extension: class fields, private names and static blocks.

A field's initializer is walked like any other value, so a function
assigned to a field still opens its own scope. Static blocks do not.
"""

from ..tree import get_property
from ._names import safe_name

SYNTAX = {
    "PrivateIdentifier": {
        "operands": lambda node: f"#{get_property(node, 'name')}",
    },
    "PropertyDefinition": {
        "lloc": 1,
        "operators": {
            "identifier": "=",
            "filter": lambda node: get_property(node, "value") is not None,
        },
        "children": ["key", "value"],
        "assignable_name": lambda node: safe_name(get_property(node, "key")),
    },
    "StaticBlock": {
        "lloc": 1,
        "operators": "static",
        "children": ["body"],
    },
}
