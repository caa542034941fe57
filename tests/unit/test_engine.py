"""Tests for the analysis entry point and the file engine."""

from __future__ import annotations

from pathlib import Path

from cosacode.analyzer.engine import AnalysisEngine, analyze, split_lines
from cosacode.analyzer.models import Finding, Severity
from cosacode.config import CosaCodeConfig


class TestAnalyze:
    def test_empty_text(self):
        assert analyze("") == []

    def test_non_string_input(self):
        assert analyze(None) == []
        assert analyze(42) == []
        assert analyze(b"import os\n") == []

    def test_clean_code(self, clean_code: str):
        assert analyze(clean_code) == []

    def test_idempotent(self, messy_code: str):
        assert analyze(messy_code) == analyze(messy_code)

    def test_findings_are_well_formed(self, messy_code: str):
        findings = analyze(messy_code)
        assert findings
        for f in findings:
            assert isinstance(f, Finding)
            assert f.rule
            assert isinstance(f.severity, Severity)
            assert f.line is None or f.line >= 1
            if f.snippet is not None:
                assert "\r" not in f.snippet

    def test_messy_code_hits_many_rules(self, messy_code: str):
        rules = {f.rule for f in analyze(messy_code)}
        assert {
            "Duplicate Import",
            "Possibly Unused Import",
            "Missing Colon",
            "Shadowing Builtin",
            "Indentation",
            "Trailing Whitespace",
            "Is Comparison to Literal",
            "Use of eval/exec",
            "Bare Except",
            "Unreachable Code",
            "Unmatched Bracket",
            "TODO/FIXME",
            "Missing Final Newline",
            "Unused Variable",
        } <= rules

    def test_line_findings_precede_file_findings(self):
        rules = [f.rule for f in analyze("import os\nx = 1")]
        assert rules == [
            "Possibly Unused Import",
            "Missing Final Newline",
            "Unused Variable",
        ]

    def test_crlf_snippets(self):
        found = [f for f in analyze("if x\r\n    pass\r\n") if f.rule == "Missing Colon"]
        assert found[0].snippet == "if x"

    def test_split_lines(self):
        assert split_lines("a\r\nb\n") == ["a", "b", ""]
        assert split_lines("") == [""]


class TestAnalysisEngine:
    def test_analyze_directory(self, project_dir: Path, config: CosaCodeConfig):
        result = AnalysisEngine(config).analyze_path(project_dir)
        assert result.files_scanned == 2
        paths = [Path(r.path).name for r in result.files]
        assert paths == ["clean.py", "messy.py"]
        clean, messy = result.files
        assert clean.findings == []
        assert clean.score == 100
        assert messy.findings
        assert messy.score < 100
        assert result.findings == messy.findings

    def test_analyze_single_file(self, project_dir: Path, config: CosaCodeConfig):
        result = AnalysisEngine(config).analyze_path(project_dir / "clean.py")
        assert result.files_scanned == 1
        assert result.files[0].findings == []

    def test_skips_vcs_and_caches(self, tmp_path: Path, config: CosaCodeConfig):
        for skipped in (".git", "__pycache__", ".venv"):
            (tmp_path / skipped).mkdir()
            (tmp_path / skipped / "junk.py").write_text("import os\n")
        result = AnalysisEngine(config).analyze_path(tmp_path)
        assert result.files_scanned == 0
        assert result.files == []

    def test_exclude(self, project_dir: Path, config: CosaCodeConfig):
        engine = AnalysisEngine(config, exclude_patterns=["pkg"])
        result = engine.analyze_path(project_dir)
        assert [Path(r.path).name for r in result.files] == ["clean.py"]

    def test_oversized_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "big.py").write_text("x = 1\n" * 100)
        engine = AnalysisEngine(CosaCodeConfig(max_file_size=10))
        result = engine.analyze_path(tmp_path)
        assert result.files_scanned == 0
        assert result.files_skipped == 1

    def test_custom_extensions(self, project_dir: Path):
        engine = AnalysisEngine(CosaCodeConfig(extensions=[".txt"]))
        result = engine.analyze_path(project_dir)
        assert [Path(r.path).name for r in result.files] == ["notes.txt"]
        rules = [f.rule for f in result.findings]
        assert "TypeError-like" in rules

    def test_analyze_text_scores(self, config: CosaCodeConfig):
        report = AnalysisEngine(config).analyze_text("x = 5\n")
        assert report.path == "<stdin>"
        assert [f.rule for f in report.findings] == ["Unused Variable"]
        assert report.score == 95
