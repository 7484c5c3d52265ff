from __future__ import annotations

import importlib

from curly_quotes.cli import main


SOURCE = "const b = \"say 'hi'\";\n"


def test_cli_without_command_shows_help(capsys):
    exit_code = main([])
    captured = capsys.readouterr()
    assert exit_code == 1
    assert "curly-quotes" in captured.err


def test_module_main_imports_cli_main():
    module = importlib.import_module("curly_quotes.__main__")
    assert module.main is main


def test_cli_check_reports_issues(project, capsys):
    src = project / "src"
    src.mkdir()
    (src / "app.js").write_text(SOURCE, encoding="utf-8")

    exit_code = main(["check", str(src)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "app.js" in captured.out
    assert "[no-straight-quotes] 1:11" in captured.out


def test_cli_fix_updates_files(project, capsys):
    src = project / "src"
    src.mkdir()
    path = src / "app.js"
    path.write_text(SOURCE, encoding="utf-8")

    exit_code = main(["fix", str(src)])
    captured_fix = capsys.readouterr()

    assert exit_code == 0
    assert "Fixed:" in captured_fix.out
    assert path.read_text(encoding="utf-8") == "const b = \"say ‘hi’\";\n"

    exit_code_check = main(["check", str(src)])
    captured_check = capsys.readouterr()
    assert exit_code_check == 0
    assert "No straight quotes found." in captured_check.out


def test_cli_fix_reports_no_changes(project, capsys):
    (project / "ok.js").write_text("const a = 'plain';\n", encoding="utf-8")

    exit_code = main(["fix"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "No changes applied" in captured.out


def test_cli_skips_dependencies_and_unsupported_files(project, capsys):
    vendored = project / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text(SOURCE, encoding="utf-8")
    (project / "dist").mkdir()
    (project / "dist" / "bundle.js").write_text(SOURCE, encoding="utf-8")
    (project / "notes.txt").write_text(SOURCE, encoding="utf-8")

    exit_code = main(["check", str(project)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "index.js" not in captured.out
    assert "bundle.js" not in captured.out


def test_cli_applies_extensions_to_named_files(project, capsys):
    config = project / "quotes.yml"
    config.write_text("extensions: [.js]\n", encoding="utf-8")
    path = project / "app.mjs"
    path.write_text(SOURCE, encoding="utf-8")

    exit_code = main(["check", "--config", str(config), str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "No straight quotes found." in captured.out


def test_cli_check_missing_path(project, capsys):
    exit_code = main(["check", str(project / "absent")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Path not found" in captured.err


def test_cli_reports_parse_errors_and_continues(project, capsys):
    (project / "bad.js").write_text("const = ;\n", encoding="utf-8")
    (project / "good.js").write_text(SOURCE, encoding="utf-8")

    exit_code = main(["fix", str(project)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "bad.js: parse error" in captured.err
    assert "(line 1, column" in captured.err
    assert "‘hi’" in (project / "good.js").read_text(encoding="utf-8")


def test_cli_uses_config_file(project, capsys):
    config = project / "quotes.yml"
    config.write_text(
        "options:\n  single-opening: «\n  single-closing: »\n", encoding="utf-8"
    )
    path = project / "app.js"
    path.write_text(SOURCE, encoding="utf-8")

    exit_code = main(["fix", "--config", str(config), str(path)])
    capsys.readouterr()

    assert exit_code == 0
    assert path.read_text(encoding="utf-8") == "const b = \"say «hi»\";\n"


def test_cli_rejects_invalid_config(project, capsys):
    config = project / "quotes.yml"
    config.write_text("options:\n  quadruple: x\n", encoding="utf-8")

    exit_code = main(["check", "--config", str(config)])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "quadruple" in captured.err


def test_cli_convert_prints_fragment(project, capsys):
    exit_code = main(["convert", "\"She said 'hi'\""])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "\"She said ‘hi’\"\n"


def test_cli_convert_text_kind_keeps_no_delimiters(project, capsys):
    exit_code = main(["convert", "--kind", "JSXText", '"quoted"'])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "“quoted”\n"


def test_cli_check_summary(project, capsys):
    (project / "app.js").write_text(SOURCE, encoding="utf-8")

    exit_code = main(["check", "--summary"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Straight quotes summary" in captured.out
