"""Per-line heuristic rules and the scan-state collectors that run beside them."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from cosacode.analyzer.models import ScanContext, ScanState, Severity

MAX_LINE_LENGTH = 88
TAB_WIDTH = 4

BUILTINS = frozenset(
    {
        "list",
        "dict",
        "set",
        "str",
        "int",
        "float",
        "input",
        "len",
        "open",
        "print",
        "map",
        "filter",
        "sum",
        "min",
        "max",
    }
)

_INDENT_RE = re.compile(r"^(\s*)")
_COMMENT_LINE_RE = re.compile(r"^\s*#")
_ASSIGN_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*=(?!=)")
_IMPORT_FROM_RE = re.compile(r"^\s*from\s+([a-zA-Z0-9_.]+)\s+import\s+(.+)")
_IMPORT_RE = re.compile(r"^\s*import\s+(.+)")
_ALIAS_RE = re.compile(r"\s+as\s+")


@dataclass
class LineRule:
    """A heuristic evaluated against every line of the input.

    ``when`` narrows a regex match further; ``message`` is either fixed
    text or built from the match and the line.
    """

    name: str
    regex: re.Pattern[str]
    severity: Severity
    message: str | Callable[[re.Match[str], str], str]
    when: Callable[[re.Match[str], str], bool] | None = None

    def apply(self, ctx: ScanContext, line: str, line_num: int) -> None:
        match = self.regex.search(line)
        if not match:
            return
        if self.when and not self.when(match, line):
            return
        if isinstance(self.message, str):
            message = self.message
        else:
            message = self.message(match, line)
        ctx.sink.push(
            rule=self.name,
            severity=self.severity,
            message=message,
            line=line_num,
            snippet=line,
        )


def _misaligned_indent(m: re.Match[str], line: str) -> bool:
    indent = m.group(1)
    return bool(indent) and "\t" not in indent and len(indent) % TAB_WIDTH != 0


def _header_without_colon(m: re.Match[str], line: str) -> bool:
    if _COMMENT_LINE_RE.match(line):
        return False
    code = line.split("#", 1)[0].strip()
    return not code.endswith(":")


def _is_builtin(m: re.Match[str], line: str) -> bool:
    return m.group(1) in BUILTINS


def _shadow_message(kind: str) -> Callable[[re.Match[str], str], str]:
    def build(m: re.Match[str], line: str) -> str:
        return f"{kind} '{m.group(1)}' shadows a Python builtin."

    return build


LINE_RULES: list[LineRule] = [
    LineRule(
        name="Trailing Whitespace",
        regex=re.compile(r"[ \t]+$"),
        severity=Severity.LOW,
        message="Trailing whitespace found.",
    ),
    LineRule(
        name="Indentation",
        regex=_INDENT_RE,
        severity=Severity.MEDIUM,
        message="Indentation not a multiple of 4 spaces (PEP8 recommends 4).",
        when=_misaligned_indent,
    ),
    LineRule(
        name="Missing Colon",
        regex=re.compile(
            r"^\s*(def|class|if|elif|else|for|while|try|except|with)\b"
        ),
        severity=Severity.HIGH,
        message="Block header missing ':' at the end.",
        when=_header_without_colon,
    ),
    LineRule(
        name="Bare Except",
        regex=re.compile(r"^\s*except\s*:\s*(#.*)?$"),
        severity=Severity.HIGH,
        message=(
            "Bare 'except:' used. Prefer 'except Exception:' "
            "or specific exceptions."
        ),
    ),
    LineRule(
        name="TODO/FIXME",
        regex=re.compile(r"\b(TODO|FIXME)\b"),
        severity=Severity.LOW,
        message=(
            "TODO/FIXME marker found. Complete pending work "
            "or remove marker before release."
        ),
    ),
    LineRule(
        name="Use of eval/exec",
        regex=re.compile(r"\b(eval|exec)\s*\("),
        severity=Severity.HIGH,
        message="Use of eval/exec detected; this can be insecure and error-prone.",
    ),
    LineRule(
        name="Is Comparison to Literal",
        regex=re.compile(r"""\bis\s+(-?\d+|'.*'|".*")"""),
        severity=Severity.MEDIUM,
        message="Using 'is' to compare to literal detected; use '==' for value equality.",
    ),
    LineRule(
        name="Line Too Long",
        regex=re.compile(rf"^.{{{MAX_LINE_LENGTH + 1},}}$"),
        severity=Severity.LOW,
        message=lambda m, line: (
            f"Line length {len(line)} exceeds recommended "
            f"{MAX_LINE_LENGTH} characters."
        ),
    ),
    LineRule(
        name="Shadowing Builtin",
        regex=_ASSIGN_RE,
        severity=Severity.MEDIUM,
        message=_shadow_message("Variable"),
        when=_is_builtin,
    ),
    LineRule(
        name="Shadowing Builtin",
        regex=re.compile(r"^\s*def\s+([A-Za-z_]\w*)\s*\("),
        severity=Severity.MEDIUM,
        message=_shadow_message("Function"),
        when=_is_builtin,
    ),
    LineRule(
        name="Shadowing Builtin",
        regex=re.compile(r"^\s*class\s+([A-Za-z_]\w*)\s*[:(]"),
        severity=Severity.MEDIUM,
        message=_shadow_message("Class"),
        when=_is_builtin,
    ),
]


def leading_indent(line: str) -> str:
    return _INDENT_RE.match(line).group(1)


def indent_width(line: str) -> int:
    """Indentation width in columns, counting a tab as four."""
    return len(leading_indent(line).replace("\t", " " * TAB_WIDTH))


def track_indentation(state: ScanState, line: str) -> None:
    indent = leading_indent(line)
    if "\t" in indent:
        state.has_tabs = True
    if " " in indent:
        state.has_spaces = True
    width = indent_width(line)
    if width > 0:
        state.indent_levels.add(width)


def collect_imports(state: ScanState, line: str, line_num: int) -> None:
    """Record import statements and the top-level names they bind.

    ``from m import a, b as c`` binds ``a`` and ``b``; ``import x.y as z``
    binds ``x``. The alias name itself is never recorded.
    """
    m = _IMPORT_FROM_RE.match(line)
    if m:
        names = _split_names(m.group(2))
    else:
        m = _IMPORT_RE.match(line)
        if not m:
            return
        names = [n.split(".")[0] for n in _split_names(m.group(1))]

    state.import_lines.setdefault(line, []).append(line_num)
    for name in names:
        if name:
            state.imported_names.setdefault(name, None)


def _split_names(rest: str) -> list[str]:
    rest = rest.split("#", 1)[0].strip()
    return [_ALIAS_RE.split(part.strip())[0] for part in rest.split(",")]


def collect_assignment(state: ScanState, line: str, line_num: int) -> None:
    m = _ASSIGN_RE.match(line)
    if m:
        state.assigned.setdefault(m.group(1), line_num)
