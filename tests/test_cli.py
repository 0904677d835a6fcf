import io

import pytest

from onelex.cli import main, process_file
from onelex.lexer import TokenType, tokenize


def expected_lines(tokens):
    return [f"TOK [{t.type.value}][L:{t.line}][{t.lexeme}]" for t in tokens]


def test_process_file_prints_every_token(tmp_path):
    source = "VAR a = 4\nPRINT a"
    path = tmp_path / "prog.101d"
    path.write_text(source)
    out = io.StringIO()
    process_file(str(path), out)
    assert out.getvalue().splitlines() == expected_lines(tokenize(source))


def test_process_file_stops_at_error(tmp_path):
    path = tmp_path / "bad.101d"
    path.write_text("VAR @ PRINT")
    out = io.StringIO()
    process_file(str(path), out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[-1] == f"TOK [{TokenType.ERROR.value}][L:1][Unexpected character.]"


def test_process_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        process_file(str(tmp_path / "missing.101d"), io.StringIO())


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Error: Specify input files" in capsys.readouterr().err


def test_main_reports_missing_file_and_continues(tmp_path, capsys):
    good = tmp_path / "good.101d"
    good.write_text("RET 0")
    missing = tmp_path / "missing.101d"
    assert main([str(missing), str(good)]) == 0
    captured = capsys.readouterr()
    assert f"Could not open file [{missing}]" in captured.err
    assert f"Error: Cannot process file [{missing}]" in captured.err
    assert captured.out.splitlines() == expected_lines(tokenize("RET 0"))


def test_main_handles_several_files(tmp_path, capsys):
    first = tmp_path / "a.101d"
    first.write_text("IF")
    second = tmp_path / "b.101d"
    second.write_text("ELSE")
    assert main([str(first), str(second)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == expected_lines(tokenize("IF")) + expected_lines(tokenize("ELSE"))