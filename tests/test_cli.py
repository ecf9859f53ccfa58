"""命令行与输入加载测试"""
import json

import pytest

from tidy_reporter import ReportInputError, load_report
from tidy_reporter.cli import main


def run_cli(*argv) -> int:
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    return exc.value.code


class TestLoadReport:
    def test_loads_json(self, results_file, nested_report):
        assert load_report(results_file) == nested_report

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReportInputError, match="File not found"):
            load_report(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        p = tmp_path / "broken.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(ReportInputError, match="Failed to parse"):
            load_report(p)


class TestGenerate:
    def test_success(self, results_file, tmp_path, capsys):
        # Arrange
        out = tmp_path / "html-report"
        # Act
        code = run_cli("generate", str(results_file), "--output", str(out))
        # Assert
        assert code == 0
        assert (out / "index.html").exists()
        assert (out / "style.css").exists()
        assert (out / "app.js").exists()
        stdout = capsys.readouterr().out
        assert "通过率: 40%" in stdout

    def test_default_paths(self, results_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert run_cli("generate") == 0
        assert (tmp_path / "html-report" / "index.html").exists()

    def test_missing_input(self, tmp_path, capsys):
        code = run_cli("generate", str(tmp_path / "absent.json"), "-o", str(tmp_path / "out"))
        assert code == 1
        assert "File not found" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_unparseable_input(self, tmp_path):
        p = tmp_path / "results.json"
        p.write_text("[1, 2", encoding="utf-8")
        assert run_cli("generate", str(p), "-o", str(tmp_path / "out")) == 1

    def test_missing_template(self, results_file, template_dir, tmp_path, capsys):
        (template_dir / "app.js").unlink()
        code = run_cli("generate", str(results_file), "-o", str(tmp_path / "out"),
                       "--template-dir", str(template_dir))
        assert code == 1
        assert "app.js" in capsys.readouterr().err

    def test_broken_template_syntax(self, results_file, template_dir, tmp_path, capsys):
        (template_dir / "index.html").write_text("<html><body>{% if %}</body></html>", encoding="utf-8")
        code = run_cli("generate", str(results_file), "-o", str(tmp_path / "out"),
                       "--template-dir", str(template_dir))
        assert code == 1
        assert "index.html" in capsys.readouterr().err

    def test_report_without_suites(self, tmp_path):
        p = tmp_path / "results.json"
        p.write_text(json.dumps({"config": {}}), encoding="utf-8")
        out = tmp_path / "out"
        assert run_cli("generate", str(p), "-o", str(out)) == 0
        assert '"total": 0' in (out / "index.html").read_text(encoding="utf-8")


class TestSummary:
    def test_failures_exit_nonzero(self, results_file, capsys):
        code = run_cli("summary", str(results_file))
        stdout = capsys.readouterr().out
        assert code == 1
        assert '"passRate": "40%"' in stdout
        assert "✗ child > c1" in stdout
        assert "expected 1 to be 2" in stdout

    def test_all_passed_exit_zero(self, tmp_path):
        p = tmp_path / "results.json"
        p.write_text(json.dumps({"suites": [{"title": "S", "specs": [{"title": "t", "ok": True}]}]}),
                     encoding="utf-8")
        assert run_cli("summary", str(p)) == 0

    @pytest.mark.parametrize("status", ["timedOut", "interrupted", "flaky"])
    def test_non_passing_statuses_exit_nonzero(self, status, tmp_path, capsys):
        # Arrange - 没有 failed，但用例未通过
        p = tmp_path / "results.json"
        p.write_text(json.dumps({"suites": [{"title": "S", "specs": [
            {"title": "t", "results": [{"status": status}]},
        ]}]}), encoding="utf-8")
        # Act
        code = run_cli("summary", str(p))
        # Assert
        assert code == 1
        assert "✗ S > t" in capsys.readouterr().out

    def test_skipped_only_exit_zero(self, tmp_path):
        p = tmp_path / "results.json"
        p.write_text(json.dumps({"suites": [{"title": "S", "specs": [
            {"title": "t", "results": [{"status": "skipped"}]},
        ]}]}), encoding="utf-8")
        assert run_cli("summary", str(p)) == 0

    def test_missing_input(self, tmp_path):
        assert run_cli("summary", str(tmp_path / "absent.json")) == 1


def test_no_command_prints_help(capsys):
    assert run_cli() == 1
    assert "generate" in capsys.readouterr().out
