from asciigrid.sink import write_output


def test_prints_without_extra_newline(capsys):
    write_output(". @ \n")
    assert capsys.readouterr().out == ". @ \n"


def test_writes_utf8_file(tmp_path):
    path = tmp_path / "grid.txt"
    write_output("░ █ \n", path)
    assert path.read_text(encoding="utf-8") == "░ █ \n"


def test_accepts_string_path(tmp_path):
    path = tmp_path / "grid.txt"
    write_output("a \n", str(path))
    assert path.read_bytes() == b"a \n"
