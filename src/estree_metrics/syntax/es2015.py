"""ES2015 extension: loops over iterables, classes, arrows, modules, templates, patterns.

Settings flags consulted here:
    forof: count `for...of` as a branch
"""

from ..tree import get_path, get_property, start_line
from ._names import safe_name


def _import_dependency(node):
    return {
        "line": start_line(node),
        "type": "Module",
        "path": get_path(node, "source", "value"),
    }


def _class_name(node):
    return get_path(node, "id", "name")


def _has_id(node):
    return get_property(node, "id") is not None


def _renames(first, second):
    def renamed(node):
        return safe_name(get_property(node, first)) != safe_name(get_property(node, second))

    return renamed


SYNTAX = {
    "ArrayPattern": {
        "operators": "[]",
        "children": ["elements"],
    },
    "ArrowFunctionExpression": {
        "operators": "=>",
        "children": ["params", "body"],
        "new_scope": True,
    },
    "AssignmentPattern": {
        "operators": "=",
        "children": ["left", "right"],
        "assignable_name": lambda node: safe_name(get_property(node, "left")),
    },
    "ClassBody": {
        "children": ["body"],
    },
    "ClassDeclaration": {
        "lloc": 1,
        "operators": "class",
        "operands": _class_name,
        "children": ["superClass", "body"],
    },
    "ClassExpression": {
        "operators": "class",
        "operands": {"resolve": _class_name, "filter": _has_id},
        "children": ["superClass", "body"],
    },
    "ExportAllDeclaration": {
        "lloc": 1,
        "operators": "export",
        "children": ["source"],
    },
    "ExportDefaultDeclaration": {
        "lloc": 1,
        "operators": "export",
        "children": ["declaration"],
    },
    "ExportNamedDeclaration": {
        "lloc": 1,
        "operators": "export",
        "children": ["declaration", "specifiers", "source"],
    },
    "ExportSpecifier": {
        "operators": {"identifier": "as", "filter": _renames("local", "exported")},
        "children": ["local", "exported"],
    },
    "ForOfStatement": {
        "lloc": 1,
        "cyclomatic": lambda node, settings: 1 if settings.get("forof") else 0,
        "operators": "forof",
        "children": ["left", "right", "body"],
    },
    "ImportDeclaration": {
        "lloc": 1,
        "operators": "import",
        "children": ["specifiers", "source"],
        "dependencies": _import_dependency,
    },
    "ImportDefaultSpecifier": {
        "children": ["local"],
    },
    "ImportNamespaceSpecifier": {
        "operators": "* as",
        "children": ["local"],
    },
    "ImportSpecifier": {
        "operators": {"identifier": "as", "filter": _renames("imported", "local")},
        "children": ["imported", "local"],
    },
    "MetaProperty": {
        "operands": lambda node: f"{get_path(node, 'meta', 'name')}.{get_path(node, 'property', 'name')}",
    },
    "MethodDefinition": {
        "children": ["value"],
        "method_name": lambda node: safe_name(get_property(node, "key")),
    },
    "ObjectPattern": {
        "operators": "{}",
        "children": ["properties"],
    },
    "RestElement": {
        "operators": "...",
        "children": ["argument"],
    },
    "SpreadElement": {
        "operators": "...",
        "children": ["argument"],
    },
    "Super": {
        "operands": "super",
    },
    "TaggedTemplateExpression": {
        "operators": "``",
        "children": ["tag", "quasi"],
    },
    "TemplateElement": {
        "operands": lambda node: get_path(node, "value", "cooked"),
    },
    "TemplateLiteral": {
        "operators": "``",
        "children": ["quasis", "expressions"],
    },
    "YieldExpression": {
        "operators": lambda node: "yield*" if get_property(node, "delegate") else "yield",
        "children": ["argument"],
    },
}
