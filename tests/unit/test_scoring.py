"""Tests for the health score."""

from __future__ import annotations

from cosacode.analyzer.engine import analyze
from cosacode.analyzer.models import Finding, Severity
from cosacode.analyzer.scoring import health_score


def test_no_findings():
    assert health_score([]) == 100


def test_single_high():
    assert health_score([Finding(severity=Severity.HIGH)]) == 80


def test_floors_at_zero():
    assert health_score([Finding(severity=Severity.HIGH)] * 5) == 0
    assert health_score([Finding(severity=Severity.HIGH)] * 9) == 0


def test_weights():
    findings = [
        Finding(severity=Severity.LOW),
        Finding(severity=Severity.MEDIUM),
        Finding(severity=Severity.HIGH),
    ]
    assert health_score(findings) == 65


def test_plain_mappings():
    assert health_score([{"severity": "high"}]) == 80
    assert health_score([{"severity": "medium"}, {"severity": "low"}]) == 85


def test_unknown_severity_costs_nothing():
    assert health_score([{"severity": "critical"}, {}]) == 100


def test_score_of_analysis():
    assert health_score(analyze("x = 5\n")) == 95
