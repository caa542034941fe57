"""Analysis engine — runs every pass over a text and walks files on disk."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from cosacode.analyzer.aggregators import AGGREGATORS
from cosacode.analyzer.brackets import scan_brackets
from cosacode.analyzer.models import (
    AnalysisResult,
    FileReport,
    Finding,
    ScanContext,
)
from cosacode.analyzer.rules import (
    LINE_RULES,
    collect_assignment,
    collect_imports,
    track_indentation,
)
from cosacode.analyzer.scoring import health_score
from cosacode.config import CosaCodeConfig

logger = logging.getLogger(__name__)

# Directories to always skip
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".venv",
    "venv",
    ".env",
    "env",
    "dist",
    "build",
    ".tox",
    ".eggs",
}


def split_lines(text: str) -> list[str]:
    """Split on line feeds, dropping one trailing carriage return per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def analyze(text: object) -> list[Finding]:
    """Run every heuristic over ``text`` and return the findings in order.

    Per-line findings come first, in line order; file-scoped checks
    follow in the fixed ``AGGREGATORS`` sequence. Anything that is not a
    string yields no findings.
    """
    if not isinstance(text, str):
        return []

    ctx = ScanContext(text=text, lines=split_lines(text))

    for line_num, line in enumerate(ctx.lines, start=1):
        for rule in LINE_RULES:
            rule.apply(ctx, line, line_num)
        track_indentation(ctx.state, line)
        collect_imports(ctx.state, line, line_num)
        collect_assignment(ctx.state, line, line_num)
        scan_brackets(ctx, line, line_num)

    for check in AGGREGATORS:
        check(ctx)

    return ctx.sink.findings


class AnalysisEngine:
    """Analyzes a single file or every matching file under a directory."""

    def __init__(
        self,
        config: CosaCodeConfig | None = None,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        self._config = config or CosaCodeConfig.load()
        self._exclude = set(exclude_patterns or [])

    def analyze_path(self, path: str | Path) -> AnalysisResult:
        """Analyze a file or directory and return aggregated results."""
        path = Path(path).resolve()
        start = time.time()

        result = AnalysisResult(root=str(path))
        files = [path] if path.is_file() else self._walk(path)

        for file_path in files:
            report = self.analyze_file(file_path)
            if report is None:
                result.files_skipped += 1
                continue
            result.files_scanned += 1
            result.files.append(report)

        result.duration = time.time() - start
        return result

    def analyze_file(self, file_path: str | Path) -> FileReport | None:
        """Analyze one file; ``None`` when it is unreadable or too large."""
        file_path = Path(file_path)
        try:
            if file_path.stat().st_size > self._config.max_file_size:
                logger.debug("Skipping %s: larger than limit", file_path)
                return None
            content = file_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.debug("Skipping %s: %s", file_path, e)
            return None
        return self.analyze_text(content, str(file_path))

    def analyze_text(self, content: str, label: str = "<stdin>") -> FileReport:
        findings = analyze(content)
        return FileReport(path=label, findings=findings, score=health_score(findings))

    def _walk(self, directory: Path):
        """Walk directory yielding analyzable files."""
        for root, dirs, files in os.walk(directory):
            # Prune skipped directories in-place
            dirs[:] = sorted(
                d
                for d in dirs
                if d not in _SKIP_DIRS
                and not d.endswith(".egg-info")
                and d not in self._exclude
            )

            for name in sorted(files):
                path = Path(root) / name
                if path.suffix not in self._config.extensions:
                    continue
                if name in self._exclude:
                    continue
                yield path
