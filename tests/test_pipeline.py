import pytest

from termwrap.pipeline import RunConfig, run


def test_run_writes_output_file(tmp_path):
    src = tmp_path / "message.txt"
    src.write_text("alpha beta gamma delta", encoding="utf-8")
    out = tmp_path / "out" / "wrapped.txt"

    result = run(RunConfig(source=src, output=out, width=11))

    assert result == "alpha beta\ngamma delta"
    assert out.read_text(encoding="utf-8") == "alpha beta\ngamma delta\n"


def test_run_echoes_to_stdout(tmp_path, capsys):
    src = tmp_path / "message.txt"
    src.write_text("* one\n  two", encoding="utf-8")

    run(RunConfig(source=src))

    assert capsys.readouterr().out == "* one two\n"


def test_run_missing_source_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        run(RunConfig(source=tmp_path / "missing.txt"))
    assert exc.value.code == 1


def test_run_undecodable_source_exits(tmp_path):
    src = tmp_path / "latin1.txt"
    src.write_bytes("caf\xe9".encode("latin-1"))
    with pytest.raises(SystemExit) as exc:
        run(RunConfig(source=src, encoding="utf-8"))
    assert exc.value.code == 1


def test_run_empty_source_emits_nothing(tmp_path, capsys):
    src = tmp_path / "empty.txt"
    src.write_text("\n\n\n", encoding="utf-8")
    out = tmp_path / "wrapped.txt"

    assert run(RunConfig(source=src)) == ""
    assert capsys.readouterr().out == ""

    run(RunConfig(source=src, output=out))
    assert out.read_bytes() == b""
