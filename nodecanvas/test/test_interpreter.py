import pytest

from nodecanvas.compiler.emitter import emit
from nodecanvas.compiler.interpreter import EvaluationError, StatementInterpreter, parse
from nodecanvas.compiler.ir import Bind, Output


class TestParse:

    def test_parse_both_forms(self):
        text = 'const nd0 = "a;b";\n\nconsole.log(nd0);\n'
        assert parse(text) == [Bind("nd0", "a;b"), Output("nd0")]

    def test_parse_literals(self):
        assert parse("const x = 42;") == [Bind("x", 42)]
        assert parse("const x = 4.5;") == [Bind("x", 4.5)]
        assert parse("const x = true;") == [Bind("x", True)]
        assert parse("const x = null;") == [Bind("x", None)]
        assert parse("const x = [1, 2];") == [Bind("x", [1, 2])]

    def test_rejects_arbitrary_code(self):
        with pytest.raises(EvaluationError, match="unsupported statement"):
            parse("__import__('os').system('true')")

    def test_rejects_non_literal_binding(self):
        with pytest.raises(EvaluationError, match="line 1"):
            parse("const x = other;")


class TestStatementInterpreter:

    def test_runs_compiled_output(self):
        seen = []
        interpreter = StatementInterpreter(on_output=seen.append)
        outputs = interpreter.evaluate("const nd0 = 42;\nconsole.log(nd0);")
        assert outputs == [42]
        assert seen == [42]

    def test_blank_lines_are_skipped(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        assert interpreter.evaluate("const a = 1;\n\n\n") == []

    def test_undefined_name(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        with pytest.raises(EvaluationError, match="not defined"):
            interpreter.evaluate("console.log(nd7);")

    def test_redeclaration(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        with pytest.raises(EvaluationError, match="already been declared"):
            interpreter.evaluate("const a = 1;\nconst a = 2;")

    def test_each_run_is_isolated(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        interpreter.evaluate("const a = 1;")
        with pytest.raises(EvaluationError):
            interpreter.evaluate("console.log(a);")

    def test_empty_log(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        assert interpreter.evaluate("console.log();") == [None]

    def test_default_output_goes_to_logger(self, caplog):
        interpreter = StatementInterpreter()
        with caplog.at_level("INFO", logger="nodecanvas.compiler.interpreter"):
            interpreter.evaluate('const s = "hello";\nconsole.log(s);')
        assert "[console] hello" in caplog.text

    @pytest.mark.parametrize("value", ["a\u2028b", "a\u2029b", "a\x85b"])
    def test_string_with_unicode_line_separator(self, value):
        text = emit([Bind("nd0", value), Output("nd0")])
        interpreter = StatementInterpreter(on_output=lambda v: None)
        assert interpreter.evaluate(text) == [value]

    def test_crlf_line_endings(self):
        interpreter = StatementInterpreter(on_output=lambda v: None)
        assert interpreter.evaluate("const a = 1;\r\nconsole.log(a);\r\n") == [1]
