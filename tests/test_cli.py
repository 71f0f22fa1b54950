import pytest

from stepwise.__main__ import main

DEFINE_C = (
    "(define (C x y) (cond ((= y 0) 0) ((= x 0) (* 2 y)) ((= y 1) 2) "
    "(else (C (- x 1) (C x (- y 1))))))"
)


def test_eval_mode(capsys):
    assert main(["(+ 1 (- 1 1))", "(* 2 (+ 1 1))"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "4"]


def test_explain_mode(capsys):
    assert main(["--mode", "explain", "(+ 1 (- 1 1))"]) == 0
    assert capsys.readouterr().out.splitlines() == ["(+ 1 (- 1 1))", "(+ 1 0)", "1"]


def test_expand_mode(capsys):
    assert main(["-m", "expand", "-d", DEFINE_C, "(C 1 10)"]) == 0
    assert capsys.readouterr().out.strip() == "(C (- 1 1) (C 1 (- 10 1)))"


def test_trace_mode(capsys):
    assert main(["-m", "trace", "-d", DEFINE_C, "(C 1 2)"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "(C 1 2)",
        "(C (- 1 1) (C 1 (- 2 1)))",
        "(C 0 (C 1 1))",
        "(C 0 2)",
        "(* 2 2)",
        "4",
    ]


def test_prelude_file(tmp_path, capsys):
    prelude = tmp_path / "defs.scm"
    prelude.write_text("(define k 3)\n(define (A x y) (+ x y))\n")
    assert main(["-p", str(prelude), "(A k 4)"]) == 0
    assert capsys.readouterr().out.strip() == "7"


@pytest.mark.parametrize("argv", [["(foo 1)"], ["(+ 1 1"], ["-p", "/nonexistent/defs.scm", "1"]])
def test_errors_exit_nonzero(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_deep_call(capsys):
    assert main(["-d", DEFINE_C, "(C 1 300)"]) == 0
    assert capsys.readouterr().out.strip() == str(2 ** 300)
