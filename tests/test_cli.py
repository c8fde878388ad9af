from clist2html.cli import default_output_path, main

SOURCE = "sw_checklist:id:Preflight\nsw_item:BATTERY|ON\n"


def _write(tmp_path, text=SOURCE, name="list.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_default_output_replaces_extension():
    assert default_output_path("list.txt") == "list.html"


def test_default_output_appends_when_no_dot():
    assert default_output_path("list") == "list.html"


def test_default_output_uses_last_dot():
    assert default_output_path("a.b.c") == "a.b.html"


def test_main_writes_default_output(tmp_path):
    source = _write(tmp_path)
    assert main([str(source)]) == 0
    html = (tmp_path / "list.html").read_text(encoding="utf-8")
    assert "Preflight" in html
    assert "column-count: 2;" in html


def test_main_options(tmp_path):
    source = _write(tmp_path)
    target = tmp_path / "out.htm"
    assert main(["--columns", "4", "-t", "Title", "-o", str(target), str(source)]) == 0
    html = target.read_text(encoding="utf-8")
    assert "column-count: 4;" in html
    assert '<h1 class="title">Title</h1>' in html


def test_main_options_after_filename(tmp_path):
    source = _write(tmp_path)
    target = tmp_path / "x.html"
    assert main([str(source), "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8").endswith("</html>")


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "Usage:" in capsys.readouterr().err


def test_main_no_file(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_bad_option(capsys):
    assert main(["--nonsense", "x"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_unknown_command(tmp_path, capsys):
    source = _write(tmp_path, "whatever:1\n")
    assert main([str(source)]) == 1
    assert "Unknown command: whatever" in capsys.readouterr().err


def test_main_unwritable_output(tmp_path, capsys):
    source = _write(tmp_path)
    target = tmp_path / "missing_dir" / "out.html"
    assert main(["-o", str(target), str(source)]) == 1
    assert "Failed to create output file" in capsys.readouterr().err