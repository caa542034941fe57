"""Analyzer data models — findings, scan state and analysis results."""

from __future__ import annotations

import enum
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class Severity(enum.Enum):
    """Finding severity level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Finding:
    """A single heuristic finding.

    ``line`` and ``snippet`` are ``None`` for file-scoped findings.
    """

    rule: str = "Unknown"
    severity: Severity = Severity.LOW
    message: str = ""
    line: int | None = None
    snippet: str | None = None

    @property
    def file_scoped(self) -> bool:
        return self.line is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "snippet": self.snippet,
        }


class FindingSink:
    """Collects findings for one analysis call.

    ``push`` is the only way rules emit: unspecified fields keep the
    ``Finding`` defaults, so every record is fully populated.
    """

    def __init__(self) -> None:
        self.findings: list[Finding] = []

    def push(self, **fields: Any) -> Finding:
        severity = fields.get("severity", Severity.LOW)
        if not isinstance(severity, Severity):
            fields["severity"] = Severity(severity)
        finding = Finding(**fields)
        self.findings.append(finding)
        return finding


@dataclass
class BracketRecord:
    """An open bracket waiting for its closer."""

    char: str
    line: int
    col: int


@dataclass
class ScanState:
    """Mutable accumulator shared by the per-line pass and the aggregators."""

    has_tabs: bool = False
    has_spaces: bool = False
    indent_levels: set[int] = field(default_factory=set)
    # insertion-ordered set
    imported_names: dict[str, None] = field(default_factory=dict)
    import_lines: dict[str, list[int]] = field(default_factory=dict)
    bracket_stack: list[BracketRecord] = field(default_factory=list)
    assigned: dict[str, int] = field(default_factory=dict)


@dataclass
class FileReport:
    """Findings and health score for one analyzed file."""

    path: str
    findings: list[Finding] = field(default_factory=list)
    score: int = 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "score": self.score,
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass
class AnalysisResult:
    """Aggregate result of analyzing a file or directory."""

    root: str
    files: list[FileReport] = field(default_factory=list)
    files_scanned: int = 0
    files_skipped: int = 0
    duration: float = 0.0
    timestamp: float = field(default_factory=time.time)

    @property
    def findings(self) -> list[Finding]:
        return [f for report in self.files for f in report.findings]

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "files_scanned": self.files_scanned,
            "files_skipped": self.files_skipped,
            "duration": round(self.duration, 4),
            "files": [r.to_dict() for r in self.files],
        }


def severity_of(item: Finding | Mapping[str, Any]) -> Severity | None:
    """Severity of a ``Finding`` or of a plain mapping with a ``severity`` key."""
    if isinstance(item, Finding):
        return item.severity
    raw = item.get("severity") if isinstance(item, Mapping) else None
    if isinstance(raw, Severity):
        return raw
    try:
        return Severity(raw)
    except ValueError:
        return None


@dataclass
class ScanContext:
    """Everything one ``analyze`` call shares between its passes."""

    text: str
    lines: list[str]
    state: ScanState = field(default_factory=ScanState)
    sink: FindingSink = field(default_factory=FindingSink)
