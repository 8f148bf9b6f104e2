"""Integration tests for the build and convert commands"""

from typer.testing import CliRunner

from gfma.cli.cli import app


runner = CliRunner()


def test_build_cmd_styles_pages_with_admonitions(tmp_path, monkeypatch):
    """build writes one HTML page per document and styles only those with admonitions."""
    monkeypatch.chdir(tmp_path)
    site = tmp_path / "site"
    site.mkdir()
    (site / "guide.md").write_text("# Guide\n\n> [!NOTE]\n> Read me.\n")
    (site / "plain.md").write_text("# Plain\n")

    result = runner.invoke(app, ["build", "site", "--out-dir", str(tmp_path / "dist")])

    assert result.exit_code == 0, result.output
    assert "2 document(s), 1 with admonitions, 1 styled" in result.output
    guide = (tmp_path / "dist" / "guide.html").read_text()
    assert '<div class="markdown-alert markdown-alert-note">' in guide
    assert "<style>" in guide
    assert "<style>" not in (tmp_path / "dist" / "plain.html").read_text()


def test_build_cmd_bare_skips_injection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "note.md").write_text("> [!TIP]\n> x\n")

    result = runner.invoke(app, ["build", "note.md", "--out-dir", "out", "--bare"])

    assert result.exit_code == 0, result.output
    html = (tmp_path / "out" / "note.html").read_text()
    assert "markdown-alert-tip" in html
    assert "<style>" not in html


def test_build_cmd_unknown_preset_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.md").write_text("> [!NOTE]\n> x\n")

    result = runner.invoke(app, ["build", "a.md", "--parser-config", "bogus"])

    assert result.exit_code == 1
    assert "Markdown converter not found" in result.output


def test_build_cmd_missing_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["build", "nowhere"])
    assert result.exit_code == 1
    assert "Path not found" in result.output


def test_build_cmd_empty_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "empty").mkdir()
    result = runner.invoke(app, ["build", "empty"])
    assert result.exit_code == 0
    assert "No markdown files found." in result.output


def test_convert_cmd_prints_rewritten_body(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    f = tmp_path / "doc.md"
    f.write_text("---\ntitle: Doc\n---\n> [!WARNING]\n> Hot *surface*.\n")

    result = runner.invoke(app, ["convert", str(f)])

    assert result.exit_code == 0, result.output
    assert '<div class="markdown-alert markdown-alert-warning">' in result.output
    assert "<em>surface</em>" in result.output
    assert "title: Doc" not in result.output


def test_build_cmd_custom_stylesheet_options(tmp_path, monkeypatch):
    """--stylesheet with --no-minify lands verbatim in <head>; --jobs and --verbose are accepted."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "alerts.css").write_text("/* custom */\n.markdown-alert { border: 0; }\n")
    (tmp_path / "a.md").write_text("> [!NOTE]\n> x\n")

    result = runner.invoke(app, [
        "build", "a.md", "--out-dir", "out",
        "--stylesheet", "alerts.css", "--no-minify", "--jobs", "2", "--verbose",
    ])

    assert result.exit_code == 0, result.output
    head = (tmp_path / "out" / "a.html").read_text().split("</head>")[0]
    assert "<style>/* custom */\n.markdown-alert { border: 0; }\n</style>" in head
    assert "Converting note admonition." in result.output
