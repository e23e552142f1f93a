from nodecanvas.demo import main


class TestDemo:

    def test_compile_only(self, capsys):
        assert main(["--value", "42"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["const nd0 = 42;", "console.log(nd0);"]

    def test_string_value_and_run(self, capsys):
        assert main(["--value", "hello", "--run"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ['const nd0 = "hello";', "console.log(nd0);", "> hello"]
