import io

import pytest

from deskcalc import session as session_module
from deskcalc.errors import BufferFullError
from deskcalc.session import Session, main


def run(code: str) -> tuple[list[str], list[str]]:
    output, errors = io.StringIO(), io.StringIO()
    Session(io.StringIO(code), output=output, errors=errors).calculate()
    results = output.getvalue().replace("> ", "").splitlines()
    return results, errors.getvalue().splitlines()


def test_output_format() -> None:
    output, errors = io.StringIO(), io.StringIO()
    Session(io.StringIO("1; 2;"), output=output, errors=errors).calculate()
    assert output.getvalue() == "> = 1\n> = 2\n> "
    assert errors.getvalue() == ""


@pytest.mark.parametrize(
    "code, expected_results, expected_errors",
    [
        pytest.param("1 + 2 * 3;", ["= 7"], [], id="precedence"),
        pytest.param("(1 + 2) * 3;", ["= 9"], [], id="parentheses"),
        pytest.param("10 % 3;", ["= 1"], [], id="remainder"),
        pytest.param("- - 5;", ["= 5"], [], id="double-negation"),
        pytest.param("pi;", ["= 3.141592653589793"], [], id="constant"),
        pytest.param("2+2", ["= 4"], [], id="no-terminator"),
        pytest.param("x = 5; x + 1;", ["= 5", "= 6"], [], id="assignment"),
        pytest.param("x = 3; x; x; x;", ["= 3", "= 3", "= 3", "= 3"], [], id="repeated-lookup"),
        pytest.param("1; q; 2;", ["= 1"], [], id="quit"),
        pytest.param("1/0; 2+2;", ["= 4"], ["divide by zero"], id="divide-by-zero"),
        pytest.param("5 % 0; 3;", ["= 3"], ["divide by zero"], id="remainder-by-zero"),
        pytest.param("y; 1;", ["= 1"], ["undefined symbol: y"], id="undefined"),
        pytest.param("(1 + 2; 4;", ["= 4"], ["')' expected"], id="missing-paren"),
        pytest.param("1 + ; 2;", ["= 2"], ["primary expected"], id="missing-primary"),
        pytest.param("pi = 1; 2;", ["= 2"], ["invalid assignment target"], id="assign-constant"),
        pytest.param("1 # 2; 3;", ["= 3"], ["Bad token '#'"], id="bad-token"),
        pytest.param("1 +", [], ["primary expected"], id="truncated-input"),
        pytest.param("y; z; 1;", ["= 1"], ["undefined symbol: y", "undefined symbol: z"], id="consecutive-errors"),
    ],
)
def test_calculate(code: str, expected_results: list[str], expected_errors: list[str]) -> None:
    results, errors = run(code)
    assert results == expected_results
    assert errors == expected_errors


def test_failed_assignment_keeps_previous_value() -> None:
    results, errors = run("x = 1; x = 1/0; x;")
    assert results == ["= 1", "= 1"]
    assert errors == ["divide by zero"]


def test_buffer_full_is_not_recovered(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_expression(self) -> float:
        raise BufferFullError()

    monkeypatch.setattr(session_module.Parser, "expression", broken_expression)
    with pytest.raises(BufferFullError):
        run("1;")


def test_main_quits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x = 2; x * 3; q"))
    assert main() == 0
    captured = capsys.readouterr()
    assert captured.out == "> = 2\n> = 6\n> "
    assert captured.err == ""


def test_main_reports_user_errors(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1/0;"))
    assert main() == 0
    captured = capsys.readouterr()
    assert captured.err == "divide by zero\n"


def test_main_fatal_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    def broken_expression(self) -> float:
        raise BufferFullError()

    monkeypatch.setattr(session_module.Parser, "expression", broken_expression)
    monkeypatch.setattr("sys.stdin", io.StringIO("1;"))
    assert main() == 2
    assert "exception" in capsys.readouterr().err


def test_output_format_after_error() -> None:
    output, errors = io.StringIO(), io.StringIO()
    Session(io.StringIO("1/0; 2+2;"), output=output, errors=errors).calculate()
    assert output.getvalue() == "> > = 4\n> "
    assert errors.getvalue() == "divide by zero\n"


@pytest.mark.parametrize(
    "code, expected_results",
    [
        pytest.param("(" * 50 + "1" + ")" * 50 + "; 2;", ["= 1", "= 2"], id="nested-parentheses"),
        pytest.param("-" * 1200 + "5; 2;", ["= 5", "= 2"], id="even-sign-chain"),
        pytest.param("-" * 1201 + "5; 2;", ["= -5", "= 2"], id="odd-sign-chain"),
    ],
)
def test_deep_statements(code: str, expected_results: list[str]) -> None:
    results, errors = run(code)
    assert results == expected_results
    assert errors == []


def test_too_deep_nesting_is_recovered() -> None:
    results, errors = run("(" * 1000 + "1" + ")" * 1000 + "; 2;")
    assert results == ["= 2"]
    assert errors == ["expression too deeply nested"]
