"""Health score — severity-weighted deduction from 100."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cosacode.analyzer.models import Finding, Severity, severity_of

SEVERITY_WEIGHTS = {
    Severity.HIGH: 20,
    Severity.MEDIUM: 10,
    Severity.LOW: 5,
}


def health_score(findings: Iterable[Finding | Mapping[str, Any]]) -> int:
    """Map findings to a 0–100 score; unknown severities cost nothing."""
    penalty = sum(SEVERITY_WEIGHTS.get(severity_of(f), 0) for f in findings)
    return max(0, min(100, round(100 - penalty)))
