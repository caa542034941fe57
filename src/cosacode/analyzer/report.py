"""Plain-text report rendering for a list of findings."""

from __future__ import annotations

from collections.abc import Sequence

from cosacode.analyzer.models import Finding

CLEAN_REPORT = "No issues found.\nYour Python code looks clean! (100/100)\n"


def format_report(findings: Sequence[Finding]) -> str:
    if not findings:
        return CLEAN_REPORT

    parts = ["Python Static Analysis Report\n\n", f"Total issues: {len(findings)}\n\n"]
    for idx, finding in enumerate(findings, start=1):
        parts.append(f"{idx}. [{finding.rule}] {finding.message}")
        if not finding.file_scoped:
            parts.append(f"  (line {finding.line})")
        parts.append("\n")
        if finding.snippet:
            parts.append(f"    {finding.snippet.strip()}\n")
        parts.append("\n")
    return "".join(parts)
