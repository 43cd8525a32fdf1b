"""
Tests for the command-line interface.
"""

import json

import pytest

from oodesign.interfaces.cli import EXIT_ERROR, EXIT_LINT_FAILED, EXIT_OK, main

CONFIG_ENV = (
    "DEBUG", "LOG_LEVEL", "CATALOG_PATH", "DOCS_PATH", "HANDBOOK_TITLE",
    "RENDER_TOC", "RENDER_GLOSSARY", "LINT_DISABLE", "LINT_STRICT", "LINT_PYTHON_LANGUAGES",
)

BROKEN_DOC = "## SRP\n### Violations\n- v\n### Before\n```python\nx = 1\n```\n"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)


class TestCatalogCommands:
    """Test list, show and demo."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_OK
        assert "usage: oodesign" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["list"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "DESIGN PRINCIPLES" in out
        assert out.index("TDA") < out.index("DIP")
        assert "Liskov Substitution Principle (solid)" in out

    def test_show(self, capsys):
        assert main(["show", "isp"]) == EXIT_OK

        assert capsys.readouterr().out.startswith("## ISP: Interface Segregation Principle")

    def test_show_unknown_principle(self, capsys):
        assert main(["show", "nope"]) == EXIT_ERROR

        assert "[ERROR]" in capsys.readouterr().err

    def test_demo(self, capsys):
        assert main(["demo", "lsp"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "--- BEFORE (oodesign.examples.lsp.before) ---" in out
        assert "--- AFTER (oodesign.examples.lsp.after) ---" in out
        assert "expected 12" in out

    def test_demo_one_side(self, capsys):
        assert main(["demo", "dip", "--side", "after"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "AFTER" in out
        assert "BEFORE" not in out

    def test_custom_catalog(self, capsys, write_catalog, principle_data):
        catalog = write_catalog({"demo": principle_data})

        assert main(["--catalog", str(catalog), "list"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "DEMO" in out
        assert "SRP" not in out

    def test_invalid_catalog(self, capsys, write_catalog):
        catalog = write_catalog({"broken": "id: [unclosed\n"})

        assert main(["--catalog", str(catalog), "list"]) == EXIT_ERROR
        assert "invalid YAML" in capsys.readouterr().err


class TestRenderCommand:
    """Test render."""

    def test_render_to_stdout(self, capsys):
        assert main(["render", "--no-toc"]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith("# Object-Oriented Design Principles")
        assert "## Contents" not in out
        assert "## Glossary" in out

    def test_render_to_file(self, capsys, tmp_path):
        output = tmp_path / "principles.md"

        assert main(["render", "-o", str(output)]) == EXIT_OK
        assert f"wrote {output}" in capsys.readouterr().out
        assert output.read_text(encoding="utf-8").startswith("# ")

    def test_render_split(self, tmp_path):
        assert main(["render", "-o", str(tmp_path), "--split"]) == EXIT_OK

        assert (tmp_path / "index.md").exists()
        assert (tmp_path / "yagni.md").exists()

    def test_split_requires_output(self, capsys):
        assert main(["render", "--split"]) == EXIT_ERROR

        assert "--split requires --output" in capsys.readouterr().err

    def test_title_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("HANDBOOK_TITLE", "Team Handbook")

        assert main(["render"]) == EXIT_OK
        assert capsys.readouterr().out.startswith("# Team Handbook\n")


class TestLintCommand:
    """Test lint."""

    @pytest.mark.integration
    def test_rendered_handbook_passes(self, capsys, tmp_path):
        output = tmp_path / "principles.md"
        main(["render", "-o", str(output)])
        capsys.readouterr()

        assert main(["lint", str(output), "--strict"]) == EXIT_OK
        assert "[OK] 1 file(s), 0 error(s), 0 warning(s)" in capsys.readouterr().out

    def test_failure(self, capsys, tmp_path):
        path = tmp_path / "srp.md"
        path.write_text(BROKEN_DOC, encoding="utf-8")

        assert main(["lint", str(path)]) == EXIT_LINT_FAILED
        out = capsys.readouterr().out
        assert f"{path}:1: error: [missing-after]" in out
        assert "[FAILED] 1 file(s), 1 error(s), 0 warning(s)" in out

    def test_disable(self, tmp_path):
        path = tmp_path / "srp.md"
        path.write_text(BROKEN_DOC, encoding="utf-8")

        assert main(["lint", str(path), "-d", "missing-after"]) == EXIT_OK

    def test_disable_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LINT_DISABLE", "missing-after")
        path = tmp_path / "srp.md"
        path.write_text(BROKEN_DOC, encoding="utf-8")

        assert main(["lint", str(path)]) == EXIT_OK

    def test_unknown_rule(self, capsys, tmp_path):
        path = tmp_path / "srp.md"
        path.write_text(BROKEN_DOC, encoding="utf-8")

        assert main(["lint", str(path), "--disable", "bogus"]) == EXIT_ERROR
        assert "Unknown lint rules: bogus" in capsys.readouterr().err

    def test_strict_fails_on_warnings(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("```python\n```\n", encoding="utf-8")

        assert main(["lint", str(path)]) == EXIT_OK
        assert main(["lint", str(path), "--strict"]) == EXIT_LINT_FAILED

    def test_json_format(self, capsys, tmp_path):
        path = tmp_path / "srp.md"
        path.write_text(BROKEN_DOC, encoding="utf-8")

        assert main(["lint", str(path), "--format", "json"]) == EXIT_LINT_FAILED
        result = json.loads(capsys.readouterr().out)
        assert result["passed"] is False
        assert result["reports"][0]["issues"][0]["rule"] == "missing-after"

    def test_missing_path(self, capsys, tmp_path):
        assert main(["lint", str(tmp_path / "missing.md")]) == EXIT_ERROR
        assert "not found" in capsys.readouterr().err


class TestStatusCommand:
    """Test status."""

    def test_status(self, capsys, monkeypatch):
        monkeypatch.setenv("LINT_DISABLE", "unlabeled-fence")

        assert main(["status"]) == EXIT_OK
        out = capsys.readouterr().out
        assert '"strict": false' in out
        assert "[x] unlabeled-fence (info)" in out
        assert "[ ] syntax-error (error)" in out
