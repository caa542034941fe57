"""Stack-based bracket matching shared across the whole file."""

from __future__ import annotations

from cosacode.analyzer.models import BracketRecord, ScanContext, Severity

OPENERS = frozenset("([{")
PAIRS = {")": "(", "]": "[", "}": "{"}


def scan_brackets(ctx: ScanContext, line: str, line_num: int) -> None:
    """Push openers and match closers for one line.

    A closer that does not match the top of the stack is reported right
    away; the stack itself is left untouched in that case.
    """
    stack = ctx.state.bracket_stack
    for col, ch in enumerate(line, start=1):
        if ch in OPENERS:
            stack.append(BracketRecord(char=ch, line=line_num, col=col))
        elif ch in PAIRS:
            if not stack or stack[-1].char != PAIRS[ch]:
                ctx.sink.push(
                    rule="Unmatched Bracket",
                    severity=Severity.HIGH,
                    message=f"Unmatched bracket '{ch}'.",
                    line=line_num,
                    snippet=line,
                )
            else:
                stack.pop()


def flush_unmatched_openers(ctx: ScanContext) -> None:
    """Report every opener still on the stack, innermost first."""
    stack = ctx.state.bracket_stack
    while stack:
        top = stack.pop()
        ctx.sink.push(
            rule="Unmatched Bracket",
            severity=Severity.HIGH,
            message=f"Unmatched opening bracket '{top.char}'.",
            line=top.line,
        )
