"""
Tests for the command line entry point and path helpers.
"""

import json
from pathlib import Path

import pytest

from helpers import create_test_project, write_rules
from uniformity.main import main
from uniformity.utils.path_utils import PathHelper, make_recursive


RULES = {"backend": {"structure": {"required_folders": ["routes"], "required_files": ["server.js"]}}}


class TestMain:
    """Test suite for exit codes and CLI arguments."""

    def test_exit_zero_on_perfect_score(self, capsys):
        with create_test_project({"backend/server.js": ""}, folders=["backend/routes"]) as project_path:
            rules_path = write_rules(project_path, RULES)
            with pytest.raises(SystemExit) as exc_info:
                main([str(project_path), "--rules", str(rules_path), "--no-color"])

        assert exc_info.value.code == 0
        assert "PROJECT UNIFORMITY: 100%" in capsys.readouterr().out

    def test_exit_one_on_failures(self, capsys):
        with create_test_project({"backend/server.js": ""}) as project_path:
            rules_path = write_rules(project_path, RULES)
            with pytest.raises(SystemExit) as exc_info:
                main([str(project_path), "--rules", str(rules_path), "--no-color"])

        assert exc_info.value.code == 1
        assert "backend/routes" in capsys.readouterr().out

    def test_exit_one_when_a_single_check_fails_among_many(self, capsys):
        """One missing file out of 200 still fails the run and is listed."""
        names = [f"f{i:03}.js" for i in range(200)]
        rules = {"backend": {"structure": {"required_files": names}}}
        files = {f"backend/{name}": "" for name in names[:-1]}

        with create_test_project(files) as project_path:
            rules_path = write_rules(project_path, rules)
            with pytest.raises(SystemExit) as exc_info:
                main([str(project_path), "--rules", str(rules_path), "--no-color"])

        out = capsys.readouterr().out
        assert exc_info.value.code == 1
        assert "PROJECT UNIFORMITY: 99%" in out
        assert "backend/f199.js" in out

    def test_bad_rule_file_aborts_before_checks(self, capsys):
        with create_test_project({"rules.json": "[1, 2"}) as project_path:
            with pytest.raises(SystemExit) as exc_info:
                main([str(project_path), "--rules", str(project_path / "rules.json")])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert captured.err.startswith("Error:")
        assert "UNIFORMITY" not in captured.out

    def test_project_path_defaults_to_cwd(self, capsys, monkeypatch):
        with create_test_project({"backend/server.js": ""}, folders=["backend/routes"]) as project_path:
            rules_path = write_rules(project_path, RULES)
            monkeypatch.chdir(project_path)
            with pytest.raises(SystemExit) as exc_info:
                main(["--rules", str(rules_path), "--format", "json"])
            expected_path = project_path.resolve()
            monkeypatch.undo()

        data = json.loads(capsys.readouterr().out)
        assert exc_info.value.code == 0
        assert Path(data["project_path"]).resolve() == expected_path


class TestPathHelper:
    """Test suite for section paths and glob expansion."""

    @pytest.mark.parametrize("pattern,expected", [
        ("src/contexts/*.js", "src/contexts/**/*.js"),
        ("*.js", "**/*.js"),
        ("src/*/index.js", "src/**/*/index.js"),
        ("src/**/*.js", "src/**/*.js"),
        ("src/App.js", "src/App.js"),
    ])
    def test_make_recursive(self, pattern, expected):
        assert make_recursive(pattern) == expected

    def test_unknown_section(self):
        with pytest.raises(ValueError):
            PathHelper(".").section_path("mobile")

    def test_missing_base_directory_matches_nothing(self, tmp_path):
        assert PathHelper(str(tmp_path)).find_matching_files(tmp_path / "frontend", "*.js") == []

    def test_hidden_files_need_an_explicit_dot_pattern(self, tmp_path):
        (tmp_path / "ctx" / ".drafts").mkdir(parents=True)
        for name in ["ctx/Auth.js", "ctx/.Draft.js", "ctx/.drafts/Old.js"]:
            (tmp_path / name).write_text("", encoding="utf-8")
        helper = PathHelper(str(tmp_path))

        assert [p.name for p in helper.find_matching_files(tmp_path, "ctx/*.js")] == ["Auth.js"]
        assert [p.name for p in helper.find_matching_files(tmp_path, "ctx/.*.js")] == [".Draft.js"]
        assert [p.name for p in helper.find_matching_files(tmp_path, "ctx/.drafts/*.js")] == ["Old.js"]
