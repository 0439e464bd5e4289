import ast
import io

import pytest

from bgvtoy.cli import main, parse_integers


def test_parse_integers_skips_bad_entries():
    assert parse_integers("1, 2,x,3") == [1, 2, 3]


def test_parse_integers_rejects_negative_and_overflow():
    assert parse_integers(f"-1,+4,{2**64}") == [4]


def test_parse_integers_empty():
    assert parse_integers("") == []


def _result_lines(out, label):
    prefix = f"Decrypted {label}: "
    return [ast.literal_eval(line[len(prefix):]) for line in out.splitlines()
            if line.startswith(prefix)]


def test_main_runs_operations(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nadd\nfoo\nmultiply\n"))
    assert main(["-i", "1,1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("How many operations do you want to perform?")
    assert out.count("Choose operation: add or multiply") == 3
    assert "Invalid operation. Please choose 'add' or 'multiply'." in out
    for label in ("Sum", "Product"):
        (coeffs,) = _result_lines(out, label)
        assert len(coeffs) == 4
        assert set(coeffs) <= {0, 1}


def test_main_defaults_to_one_operation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Choose operation: add or multiply") == 1
    assert "Invalid operation" in out


def test_main_without_integers_fails_on_operation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nadd\n"))
    assert main(["-i", "x"]) == 1
    assert "No integers" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "1.0" in capsys.readouterr().out