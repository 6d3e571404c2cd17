"""Tests for TraceRecorder and DependencyCollector."""

from estree_metrics.consumers import (
    CREATE_SCOPE,
    POP_SCOPE,
    PROCESS_NODE,
    DependencyCollector,
    TraceRecorder,
    collect_dependencies,
    trace,
)
from estree_metrics.syntax import SyntaxRegistry, es5
from estree_metrics.walker import walk


class TestTraceRecorder:
    def test_events_and_depth(self, estree, default_settings):
        fn = estree.function("foo", body=estree.block(estree.return_(estree.literal(1))))
        events = trace(estree.program(fn), default_settings)

        assert [(e.event, e.node["type"], e.depth) for e in events] == [
            (CREATE_SCOPE, "FunctionDeclaration", 0),
            (PROCESS_NODE, "FunctionDeclaration", 1),
            (PROCESS_NODE, "BlockStatement", 1),
            (PROCESS_NODE, "ReturnStatement", 1),
            (PROCESS_NODE, "Literal", 1),
            (POP_SCOPE, "FunctionDeclaration", 0),
        ]

    def test_facts_only_on_processed_nodes(self, estree, default_settings):
        events = trace(estree.program(estree.function("foo")), default_settings)
        assert events[0].facts is None
        assert events[1].facts.operands == ["foo"]
        assert events[-1].facts is None

    def test_processed(self, estree, default_settings):
        statement = estree.debugger()
        recorder = TraceRecorder(default_settings)
        walk(estree.program(statement), default_settings, recorder)
        assert recorder.processed == [statement]

    def test_settings_reach_facts(self, estree):
        loop = estree.for_in(estree.ident("k"), estree.ident("o"), estree.block())
        counted = trace(estree.program(loop), {"forin": True})
        ignored = trace(estree.program(loop), {"forin": False})
        assert counted[0].facts.cyclomatic == 1
        assert ignored[0].facts.cyclomatic == 0

    def test_custom_registry(self, estree):
        """Types missing from a restricted registry never show up."""
        registry = SyntaxRegistry([es5])
        loop = estree.for_of(estree.ident("v"), estree.ident("items"), estree.block())
        assert trace(estree.program(loop, estree.debugger()), {}, registry)[0].node["type"] == "DebuggerStatement"


class TestDependencies:
    def test_collects_in_source_order(self, estree):
        estree.line = 1
        first = estree.import_decl("./a")
        estree.line = 2
        second = estree.var("var", estree.declarator("b", estree.call(estree.ident("require"), estree.literal("b"))))
        program = estree.program(first, second, source_type="module")

        assert collect_dependencies(program, {}) == [
            {"line": 1, "type": "Module", "path": "./a"},
            {"line": 2, "type": "CommonJS", "path": "b"},
        ]

    def test_nested_in_function(self, estree):
        body = estree.block(estree.expr(estree.call(estree.ident("require"), estree.literal("fs"))))
        program = estree.program(estree.function("load", body=body))
        assert [d["path"] for d in collect_dependencies(program, {})] == ["fs"]

    def test_pruned_subtree_hides_dependency(self, estree):
        label = estree.labeled("x", estree.expr(estree.call(estree.ident("require"), estree.literal("fs"))))
        assert collect_dependencies(estree.program(label), {}) == []

    def test_collector_ignores_scopes(self, estree):
        collector = DependencyCollector()
        collector.create_scope({})
        collector.pop_scope({})
        assert collector.dependencies == []

    def test_inside_optional_chain(self, estree):
        """`a?.b(function(){ require("x") })` keeps the callback's dependency."""
        estree.line = 2
        require = estree.call(estree.ident("require"), estree.literal("x"))
        callback = estree.func_expr(body=estree.block(estree.expr(require)))
        chained = estree.chain(estree.call(estree.member(estree.ident("a"), estree.ident("b")), callback))

        assert collect_dependencies(estree.program(estree.expr(chained)), {}) == [
            {"line": 2, "type": "CommonJS", "path": "x"},
        ]

    def test_dynamic_import(self, estree):
        lazy = estree.expr(estree.import_expr(estree.literal("./lazy")))
        program = estree.program(lazy, source_type="module")
        assert [d["path"] for d in collect_dependencies(program, {})] == ["./lazy"]
