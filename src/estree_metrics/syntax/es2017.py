"""ES2017 extension: async functions.

Async functions reuse the function entries (``async`` is a flag on the
node), so only ``await`` needs a type of its own.
"""

SYNTAX = {
    "AwaitExpression": {
        "operators": "await",
        "children": ["argument"],
    },
}
