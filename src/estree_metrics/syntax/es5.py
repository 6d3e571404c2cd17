"""Baseline grammar: ES5 node types.

Settings flags consulted here:
    logicalor: count `||` as a branch
    switchcase: count each non-default `case` as a branch
    forin: count `for...in` as a branch
    trycatch: count `catch` as a branch

LabeledStatement deliberately declares no children, so a label's body is
never visited.
"""

from ..tree import get_path, get_property, node_type, start_line
from ._names import safe_name

_INLINE_CONSTRUCTS = ("ObjectExpression", "ArrayExpression", "FunctionExpression")


def _operator(node):
    return get_property(node, "operator")


def _fix_operator(node):
    fix = "pre" if get_property(node, "prefix") else "post"
    return f"{get_property(node, 'operator')} ({fix}fix)"


def _has_test(node, settings):
    return 1 if get_property(node, "test") else 0


def _literal_operand(node):
    value = get_property(node, "value")
    if isinstance(value, str):
        return f'"{value}"'
    if get_property(node, "regex") is not None:
        return get_property(node, "raw")
    return value


def _logical_cyclomatic(node, settings):
    operator = get_property(node, "operator")
    if operator == "&&":
        return 1
    if operator == "||" and settings.get("logicalor"):
        return 1
    return 0


def _require_dependency(node):
    callee = get_property(node, "callee")
    if node_type(callee) != "Identifier" or get_property(callee, "name") != "require":
        return None

    arguments = get_property(node, "arguments") or []
    first = arguments[0] if arguments else None
    if node_type(first) == "Literal" and isinstance(get_property(first, "value"), str):
        path = get_property(first, "value")
    else:
        path = "* dynamic dependency *"
    return {"line": start_line(node), "type": "CommonJS", "path": path}


def _function_name(node):
    return get_path(node, "id", "name")


SYNTAX = {
    "ArrayExpression": {
        "operators": "[]",
        "children": ["elements"],
    },
    "AssignmentExpression": {
        "operators": _operator,
        "children": ["left", "right"],
        "assignable_name": lambda node: safe_name(get_property(node, "left")),
    },
    "BinaryExpression": {
        "operators": _operator,
        "children": ["left", "right"],
    },
    "BlockStatement": {
        "children": ["body"],
    },
    "BreakStatement": {
        "lloc": 1,
        "operators": "break",
        "children": ["label"],
    },
    "CallExpression": {
        "lloc": lambda node: 1 if node_type(get_property(node, "callee")) == "FunctionExpression" else 0,
        "operators": "()",
        "children": ["callee", "arguments"],
        "dependencies": _require_dependency,
    },
    "CatchClause": {
        "lloc": 1,
        "cyclomatic": lambda node, settings: 1 if settings.get("trycatch") else 0,
        "operators": "catch",
        "children": ["param", "body"],
    },
    "ConditionalExpression": {
        "cyclomatic": 1,
        "operators": ":?",
        "children": ["test", "consequent", "alternate"],
    },
    "ContinueStatement": {
        "lloc": 1,
        "operators": "continue",
        "children": ["label"],
    },
    "DebuggerStatement": {
        "lloc": 1,
        "operators": "debugger",
    },
    "DoWhileStatement": {
        "lloc": 2,
        "cyclomatic": _has_test,
        "operators": "dowhile",
        "children": ["body", "test"],
    },
    "EmptyStatement": {},
    "ExpressionStatement": {
        "lloc": 1,
        "children": ["expression"],
    },
    "ForInStatement": {
        "lloc": 1,
        "cyclomatic": lambda node, settings: 1 if settings.get("forin") else 0,
        "operators": "forin",
        "children": ["left", "right", "body"],
    },
    "ForStatement": {
        "lloc": 1,
        "cyclomatic": _has_test,
        "operators": "for",
        "children": ["init", "test", "update", "body"],
    },
    "FunctionDeclaration": {
        "lloc": 1,
        "operators": "function",
        "operands": _function_name,
        "children": ["params", "body"],
        "new_scope": True,
    },
    "FunctionExpression": {
        "operators": "function",
        "operands": {"resolve": _function_name, "filter": lambda node: get_property(node, "id") is not None},
        "children": ["params", "body"],
        "new_scope": True,
    },
    "Identifier": {
        "operands": lambda node: get_property(node, "name"),
    },
    "IfStatement": {
        "lloc": lambda node: 2 if get_property(node, "alternate") else 1,
        "cyclomatic": 1,
        "operators": [
            "if",
            {"identifier": "else", "filter": lambda node: get_property(node, "alternate") is not None},
        ],
        "children": ["test", "consequent", "alternate"],
    },
    "LabeledStatement": {},
    "Literal": {
        "operands": _literal_operand,
    },
    "LogicalExpression": {
        "cyclomatic": _logical_cyclomatic,
        "operators": _operator,
        "children": ["left", "right"],
    },
    "MemberExpression": {
        "lloc": lambda node: 1 if node_type(get_property(node, "object")) in _INLINE_CONSTRUCTS else 0,
        "operators": ".",
        "children": ["object", "property"],
    },
    "NewExpression": {
        "lloc": lambda node: 1 if node_type(get_property(node, "callee")) == "FunctionExpression" else 0,
        "operators": "new",
        "children": ["callee", "arguments"],
    },
    "ObjectExpression": {
        "operators": "{}",
        "children": ["properties"],
    },
    "Property": {
        "lloc": 1,
        "operators": ":",
        "children": ["key", "value"],
        "assignable_name": lambda node: safe_name(get_property(node, "key")),
    },
    "ReturnStatement": {
        "lloc": 1,
        "operators": "return",
        "children": ["argument"],
    },
    "SequenceExpression": {
        "operators": ",",
        "children": ["expressions"],
    },
    "SwitchCase": {
        "lloc": 1,
        "cyclomatic": lambda node, settings: 1 if settings.get("switchcase") and get_property(node, "test") else 0,
        "operators": lambda node: "case" if get_property(node, "test") else "default",
        "children": ["test", "consequent"],
    },
    "SwitchStatement": {
        "lloc": 1,
        "operators": "switch",
        "children": ["discriminant", "cases"],
    },
    "ThisExpression": {
        "operands": "this",
    },
    "ThrowStatement": {
        "lloc": 1,
        "operators": "throw",
        "children": ["argument"],
    },
    "TryStatement": {
        "lloc": 1,
        "operators": "try",
        "children": ["block", "handler", "finalizer"],
    },
    "UnaryExpression": {
        "operators": _fix_operator,
        "children": ["argument"],
    },
    "UpdateExpression": {
        "operators": _fix_operator,
        "children": ["argument"],
    },
    "VariableDeclaration": {
        "operators": lambda node: get_property(node, "kind"),
        "children": ["declarations"],
    },
    "VariableDeclarator": {
        "lloc": 1,
        "operators": {"identifier": "=", "filter": lambda node: get_property(node, "init") is not None},
        "children": ["id", "init"],
        "assignable_name": lambda node: safe_name(get_property(node, "id")),
    },
    "WhileStatement": {
        "lloc": 1,
        "cyclomatic": _has_test,
        "operators": "while",
        "children": ["test", "body"],
    },
    "WithStatement": {
        "lloc": 1,
        "operators": "with",
        "children": ["object", "body"],
    },
}
