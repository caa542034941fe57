"""Whole-file checks that run once the per-line pass has finished."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from cosacode.analyzer.brackets import flush_unmatched_openers
from cosacode.analyzer.models import ScanContext, Severity
from cosacode.analyzer.rules import indent_width

logger = logging.getLogger(__name__)

MAX_INDENT_LEVELS = 6
MAX_NESTING = 4
MAX_PRINT_CALLS = 10

_PRINT_CALL_RE = re.compile(r"\bprint\s*\(")
_RETURN_RE = re.compile(r"^return\b")
_CODE_TOKEN_RE = re.compile(
    r"\b(?:def|class|import|from|if|for|while|return)\b|:"
)
_PLAIN_TEXT_RE = re.compile(r"""^[A-Za-z0-9\s.,'":;!?()\-]+$""")
_WORD_RE = re.compile(r"\b[A-Za-z_]{3,}\b")
_NON_CODE_WORDS = 50
_NON_CODE_SNIPPET_LENGTH = 120


def _count_word(name: str, text: str) -> int | None:
    """Whole-word occurrences of ``name`` in ``text``.

    Names come straight from import lines, so fragments like ``*`` or
    ``(a`` show up; anything that is not an identifier returns ``None``.
    """
    if not name.isidentifier():
        logger.debug("Skipping usage count for %r: not an identifier", name)
        return None
    try:
        return len(re.findall(rf"\b{name}\b", text))
    except (re.error, OverflowError, RecursionError) as e:
        logger.debug("Skipping usage count for %r: %s", name, e)
        return None


def check_mixed_indentation(ctx: ScanContext) -> None:
    if ctx.state.has_tabs and ctx.state.has_spaces:
        ctx.sink.push(
            rule="Mixed Tabs/Spaces",
            severity=Severity.HIGH,
            message="Mixed use of tabs and spaces for indentation detected.",
        )


def check_indent_levels(ctx: ScanContext) -> None:
    if len(ctx.state.indent_levels) > MAX_INDENT_LEVELS:
        ctx.sink.push(
            rule="Inconsistent Indentation Levels",
            severity=Severity.MEDIUM,
            message=(
                "Many distinct indentation levels detected "
                "(may indicate inconsistency)."
            ),
        )


def check_duplicate_imports(ctx: ScanContext) -> None:
    for statement, line_nums in ctx.state.import_lines.items():
        if len(line_nums) > 1:
            ctx.sink.push(
                rule="Duplicate Import",
                severity=Severity.LOW,
                message=f"Import appears multiple times ({len(line_nums)}).",
                line=line_nums[0],
                snippet=statement,
            )


def check_unused_imports(ctx: ScanContext) -> None:
    for name in ctx.state.imported_names:
        count = _count_word(name, ctx.text)
        if count is not None and count <= 1:
            ctx.sink.push(
                rule="Possibly Unused Import",
                severity=Severity.LOW,
                message=f"Imported name '{name}' may be unused.",
            )


def check_final_newline(ctx: ScanContext) -> None:
    if ctx.text and not ctx.text.endswith("\n"):
        ctx.sink.push(
            rule="Missing Final Newline",
            severity=Severity.LOW,
            message="File does not end with a newline.",
        )


def check_deep_nesting(ctx: ScanContext) -> None:
    """Approximate block depth from indentation steps between lines."""
    nesting = max_nesting = prev = 0
    for line in ctx.lines:
        width = indent_width(line)
        if width > prev:
            nesting += 1
        elif width < prev:
            nesting = max(0, nesting - 1)
        prev = width
        max_nesting = max(max_nesting, nesting)

    if max_nesting > MAX_NESTING:
        ctx.sink.push(
            rule="Deep Nesting",
            severity=Severity.MEDIUM,
            message=(
                f"Deep nesting detected ({max_nesting} levels). "
                "Consider simplifying or refactoring."
            ),
        )


def check_debug_prints(ctx: ScanContext) -> None:
    count = len(_PRINT_CALL_RE.findall(ctx.text))
    if count > MAX_PRINT_CALLS:
        ctx.sink.push(
            rule="Debug Prints",
            severity=Severity.LOW,
            message=(
                f"Many print() calls found ({count}). "
                "Consider removing or using logging."
            ),
        )


def check_unreachable_code(ctx: ScanContext) -> None:
    """Flag the first code line after each ``return``.

    Indentation is not considered, so a ``return`` closing one block
    followed by a sibling block is reported too.
    """
    armed = False
    for line_num, line in enumerate(ctx.lines, start=1):
        stripped = line.strip()
        if _RETURN_RE.match(stripped):
            armed = True
        elif armed and stripped and not stripped.startswith("#"):
            ctx.sink.push(
                rule="Unreachable Code",
                severity=Severity.MEDIUM,
                message=(
                    "Code detected after 'return' (possible unreachable "
                    f"code) at line {line_num}."
                ),
                line=line_num,
                snippet=line,
            )
            armed = False


def check_non_code(ctx: ScanContext) -> None:
    """Flag input that reads like prose rather than Python."""
    if _CODE_TOKEN_RE.search(ctx.text):
        return
    body = ctx.text.strip()
    if not body or not _PLAIN_TEXT_RE.match(body):
        return

    words = " ".join(_WORD_RE.findall(ctx.text)[:_NON_CODE_WORDS])
    ctx.sink.push(
        rule="TypeError-like",
        severity=Severity.HIGH,
        message=(
            "No Python syntax detected: input looks like plain text, "
            "not Python code."
        ),
        snippet=words[:_NON_CODE_SNIPPET_LENGTH] or None,
    )


def check_unused_variables(ctx: ScanContext) -> None:
    for name, line_num in ctx.state.assigned.items():
        count = _count_word(name, ctx.text)
        if count is not None and count <= 1:
            ctx.sink.push(
                rule="Unused Variable",
                severity=Severity.LOW,
                message=f"Variable '{name}' assigned but never used.",
                line=line_num,
                snippet=ctx.lines[line_num - 1],
            )


# Order matters: findings are emitted in this sequence.
AGGREGATORS: list[Callable[[ScanContext], None]] = [
    check_mixed_indentation,
    check_indent_levels,
    check_duplicate_imports,
    check_unused_imports,
    check_final_newline,
    flush_unmatched_openers,
    check_deep_nesting,
    check_debug_prints,
    check_unreachable_code,
    check_non_code,
    check_unused_variables,
]
