"""Rule-based analysis engine: findings, scoring and text reports."""

from cosacode.analyzer.engine import AnalysisEngine, analyze
from cosacode.analyzer.models import Finding, Severity
from cosacode.analyzer.report import format_report
from cosacode.analyzer.scoring import health_score

__all__ = [
    "AnalysisEngine",
    "Finding",
    "Severity",
    "analyze",
    "format_report",
    "health_score",
]
