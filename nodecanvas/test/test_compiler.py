import pytest

from nodecanvas.core.GraphStore import GraphStore
from nodecanvas.core.Node import Node
from nodecanvas.compiler import compile_nodes, compile_program, order_nodes
from nodecanvas.compiler.emitter import emit, emit_statement, format_literal
from nodecanvas.compiler.ir import Bind, Output, IRBuilder
from nodecanvas.noderegistry import PrintNode, VariableNode


@Node.register("test-constant")
class ConstantNode(Node):
    """Same priority as Print; used to check tie ordering."""
    title = "Constant"
    priority = 1

    def emit(self, builder):
        builder.bind(self.identifier, 0)


class TestEmitter:

    def test_format_literal(self):
        assert format_literal("x") == '"x"'
        assert format_literal(5) == "5"
        assert format_literal([1, "a"]) == '[1, "a"]'
        assert format_literal(object()).startswith("<object")

    def test_emit_statements(self):
        assert emit_statement(Bind("nd0", 42)) == "const nd0 = 42;"
        assert emit_statement(Output("nd0")) == "console.log(nd0);"
        assert emit([Bind("a", "b"), Output("a")]) == 'const a = "b";\nconsole.log(a);'

    def test_unknown_statement(self):
        with pytest.raises(TypeError):
            emit_statement("not a statement")

    def test_builder_collects(self):
        builder = IRBuilder().bind("x", 1).output("x")
        assert len(builder) == 2
        assert builder.statements == [Bind("x", 1), Output("x")]


class TestGraphCompiler:

    def setup_method(self):
        self.store = GraphStore()

    def test_empty_graph(self):
        assert compile_nodes(self.store.all()) == ""

    def test_variable_precedes_print_regardless_of_insertion(self):
        printer = self.store.add(PrintNode(220, 10))
        variable = self.store.add(VariableNode(10, 10, value="hi"))
        printer.connect_from(variable)

        text = compile_nodes(self.store.all())
        assert text == 'const nd1 = "hi";\nconsole.log(nd1);'
        assert text.index("const nd1") < text.index("console.log(nd1)")

    def test_empty_outputs_still_take_a_line(self):
        self.store.add(VariableNode(0, 0, value=1))
        self.store.add(PrintNode(0, 0))
        self.store.add(PrintNode(0, 0))
        assert compile_nodes(self.store.all()) == "const nd0 = 1;\n\n"

    def test_equal_priority_is_stable(self):
        first = self.store.add(PrintNode(0, 0))
        second = self.store.add(ConstantNode(0, 0))
        third = self.store.add(PrintNode(0, 0))
        v = self.store.add(VariableNode(0, 0, value=3))
        first.connect_from(v)
        third.connect_from(v)

        expected = "const nd3 = 3;\nconsole.log(nd3);\nconst nd1 = 0;\nconsole.log(nd3);"
        for _ in range(5):
            assert compile_nodes(self.store.all()) == expected
        assert order_nodes(self.store.all()) == [v, first, second, third]

    def test_compile_does_not_reorder_store(self):
        self.store.add(PrintNode(0, 0))
        self.store.add(VariableNode(0, 0))
        before = self.store.all()
        compile_nodes(self.store.all())
        assert self.store.all() == before

    def test_priority_is_not_dependency_order(self):
        # A priority-1 source read by a priority-1 sink inserted earlier is
        # emitted after its reader.
        printer = self.store.add(PrintNode(0, 0))
        constant = self.store.add(ConstantNode(0, 0))
        printer.connect_from(constant)
        assert compile_nodes(self.store.all()) == "console.log(nd1);\nconst nd1 = 0;"

    def test_compile_program(self):
        printer = self.store.add(PrintNode(0, 0))
        variable = self.store.add(VariableNode(0, 0, value=42))
        printer.connect_from(variable)
        assert compile_program(self.store.all()) == [[Bind("nd1", 42)], [Output("nd1")]]
