"""Tests for bracket matching."""

from __future__ import annotations

from cosacode.analyzer.engine import analyze
from cosacode.analyzer.models import Severity


def _brackets(code: str):
    return [f for f in analyze(code) if f.rule == "Unmatched Bracket"]


class TestBracketMatcher:
    def test_lone_opener(self):
        found = _brackets("(")
        assert len(found) == 1
        assert found[0].line == 1
        assert found[0].severity == Severity.HIGH
        assert found[0].message == "Unmatched opening bracket '('."
        assert found[0].snippet is None

    def test_lone_closer(self):
        found = _brackets(")")
        assert len(found) == 1
        assert found[0].line == 1
        assert found[0].message == "Unmatched bracket ')'."
        assert found[0].snippet == ")"

    def test_balanced(self):
        assert _brackets("()") == []
        assert _brackets("x = {'a': [f(1), (2, 3)]}\nprint(x)\n") == []

    def test_spans_lines(self):
        code = "call(\n    1,\n    [2,\n     3],\n)\n"
        assert _brackets(code) == []

    def test_mismatched_closer_reported_immediately(self):
        found = _brackets("(]\n")
        assert [f.message for f in found] == [
            "Unmatched bracket ']'.",
            "Unmatched opening bracket '('.",
        ]

    def test_leftovers_reported_innermost_first(self):
        found = _brackets("a = ([\nb = {\n")
        assert [(f.message, f.line) for f in found] == [
            ("Unmatched opening bracket '{'.", 2),
            ("Unmatched opening bracket '['.", 1),
            ("Unmatched opening bracket '('.", 1),
        ]
