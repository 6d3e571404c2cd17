"""Shared test fixtures for estree-metrics tests.

Trees are built by hand in the shape esprima/acorn produce (plain dicts,
``loc`` on every node), so no JavaScript parser is needed to run the suite.
"""

from unittest.mock import Mock

import pytest

from estree_metrics.config import Settings


class ESTreeBuilder:
    """Small factory for ESTree nodes."""

    def __init__(self):
        self.line = 1

    def _node(self, type_, **props):
        node = {"type": type_}
        node.update(props)
        node["loc"] = {"start": {"line": self.line, "column": 0}, "end": {"line": self.line, "column": 1}}
        return node

    # ── Program and statements ───────────────────────────────────

    def program(self, *body, source_type="script"):
        return self._node("Program", body=list(body), sourceType=source_type)

    def expr(self, expression):
        return self._node("ExpressionStatement", expression=expression)

    def debugger(self):
        return self._node("DebuggerStatement")

    def empty(self):
        return self._node("EmptyStatement")

    def block(self, *body):
        return self._node("BlockStatement", body=list(body))

    def if_(self, test, consequent, alternate=None):
        return self._node("IfStatement", test=test, consequent=consequent, alternate=alternate)

    def labeled(self, label, body):
        return self._node("LabeledStatement", label=self.ident(label), body=body)

    def break_(self, label=None):
        return self._node("BreakStatement", label=self.ident(label) if label else None)

    def continue_(self, label=None):
        return self._node("ContinueStatement", label=self.ident(label) if label else None)

    def while_(self, test, body):
        return self._node("WhileStatement", test=test, body=body)

    def do_while(self, body, test):
        return self._node("DoWhileStatement", body=body, test=test)

    def for_(self, init, test, update, body):
        return self._node("ForStatement", init=init, test=test, update=update, body=body)

    def for_in(self, left, right, body):
        return self._node("ForInStatement", left=left, right=right, body=body)

    def for_of(self, left, right, body):
        return self._node("ForOfStatement", left=left, right=right, body=body)

    def switch(self, discriminant, *cases):
        return self._node("SwitchStatement", discriminant=discriminant, cases=list(cases))

    def case(self, test, *consequent):
        return self._node("SwitchCase", test=test, consequent=list(consequent))

    def try_(self, block, handler=None, finalizer=None):
        return self._node("TryStatement", block=block, handler=handler, finalizer=finalizer)

    def catch(self, param, body):
        return self._node("CatchClause", param=param, body=body)

    def return_(self, argument=None):
        return self._node("ReturnStatement", argument=argument)

    def throw(self, argument):
        return self._node("ThrowStatement", argument=argument)

    def with_(self, obj, body):
        return self._node("WithStatement", object=obj, body=body)

    # ── Declarations ─────────────────────────────────────────────

    def var(self, kind, *declarations):
        return self._node("VariableDeclaration", kind=kind, declarations=list(declarations))

    def declarator(self, name, init=None):
        return self._node("VariableDeclarator", id=self.ident(name), init=init)

    def function(self, name, params=(), body=None, generator=False):
        return self._node(
            "FunctionDeclaration",
            id=self.ident(name) if name else None,
            params=list(params),
            body=body if body is not None else self.block(),
            generator=generator,
        )

    def func_expr(self, name=None, params=(), body=None):
        return self._node(
            "FunctionExpression",
            id=self.ident(name) if name else None,
            params=list(params),
            body=body if body is not None else self.block(),
        )

    def arrow(self, params=(), body=None, expression=False):
        return self._node(
            "ArrowFunctionExpression",
            id=None,
            params=list(params),
            body=body if body is not None else self.block(),
            expression=expression,
        )

    def class_decl(self, name, superclass=None, *methods):
        return self._node(
            "ClassDeclaration",
            id=self.ident(name),
            superClass=superclass,
            body=self._node("ClassBody", body=list(methods)),
        )

    def method(self, key, value=None, kind="method", static=False):
        return self._node(
            "MethodDefinition",
            key=self.ident(key),
            value=value if value is not None else self.func_expr(),
            kind=kind,
            static=static,
            computed=False,
        )

    def import_decl(self, source, *specifiers):
        return self._node("ImportDeclaration", specifiers=list(specifiers), source=self.literal(source))

    def import_specifier(self, imported, local=None):
        return self._node("ImportSpecifier", imported=self.ident(imported), local=self.ident(local or imported))

    def import_default(self, local):
        return self._node("ImportDefaultSpecifier", local=self.ident(local))

    # ── Expressions ──────────────────────────────────────────────

    def ident(self, name):
        return self._node("Identifier", name=name)

    def literal(self, value, raw=None):
        return self._node("Literal", value=value, raw=raw if raw is not None else repr(value))

    def this(self):
        return self._node("ThisExpression")

    def array(self, *elements):
        return self._node("ArrayExpression", elements=list(elements))

    def object_(self, *properties):
        return self._node("ObjectExpression", properties=list(properties))

    def prop(self, key, value):
        return self._node("Property", key=key, value=value, kind="init", computed=False)

    def call(self, callee, *arguments):
        return self._node("CallExpression", callee=callee, arguments=list(arguments))

    def new(self, callee, *arguments):
        return self._node("NewExpression", callee=callee, arguments=list(arguments))

    def member(self, obj, prop, computed=False):
        return self._node("MemberExpression", object=obj, property=prop, computed=computed)

    def binary(self, operator, left, right):
        return self._node("BinaryExpression", operator=operator, left=left, right=right)

    def logical(self, operator, left, right):
        return self._node("LogicalExpression", operator=operator, left=left, right=right)

    def assign(self, operator, left, right):
        return self._node("AssignmentExpression", operator=operator, left=left, right=right)

    def unary(self, operator, argument, prefix=True):
        return self._node("UnaryExpression", operator=operator, argument=argument, prefix=prefix)

    def update(self, operator, argument, prefix=False):
        return self._node("UpdateExpression", operator=operator, argument=argument, prefix=prefix)

    def conditional(self, test, consequent, alternate):
        return self._node("ConditionalExpression", test=test, consequent=consequent, alternate=alternate)

    def sequence(self, *expressions):
        return self._node("SequenceExpression", expressions=list(expressions))

    def spread(self, argument):
        return self._node("SpreadElement", argument=argument)

    def template(self, quasis, expressions=()):
        elements = [
            self._node("TemplateElement", value={"raw": q, "cooked": q}, tail=i == len(quasis) - 1)
            for i, q in enumerate(quasis)
        ]
        return self._node("TemplateLiteral", quasis=elements, expressions=list(expressions))

    def await_(self, argument):
        return self._node("AwaitExpression", argument=argument)

    def yield_(self, argument=None, delegate=False):
        return self._node("YieldExpression", argument=argument, delegate=delegate)

    def chain(self, expression):
        return self._node("ChainExpression", expression=expression)

    def import_expr(self, source):
        return self._node("ImportExpression", source=source)

    def private(self, name):
        return self._node("PrivateIdentifier", name=name)

    def property_def(self, key, value=None, static=False):
        return self._node("PropertyDefinition", key=key, value=value, computed=False, static=static)

    def static_block(self, *body):
        return self._node("StaticBlock", body=list(body))

    def unknown(self, **props):
        return self._node("JSXElement", **props)


@pytest.fixture
def estree():
    """ESTree node builder."""
    return ESTreeBuilder()


@pytest.fixture
def callbacks():
    """Mock consumer; ``callbacks.mock_calls`` keeps the global call order."""
    return Mock(spec=["create_scope", "process_node", "pop_scope"])


@pytest.fixture
def default_settings():
    """Settings with every default flag."""
    return Settings()


def processed(mock_callbacks):
    """Nodes passed to process_node, in order."""
    return [c.args[0] for c in mock_callbacks.process_node.call_args_list]


@pytest.fixture
def processed_nodes():
    """Helper turning a mock consumer into the list of processed nodes."""
    return processed
