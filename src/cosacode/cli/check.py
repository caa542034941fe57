"""CLI command: cosacode check <path>... — analyze files and show findings."""

from __future__ import annotations

import json
import sys

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cosacode.analyzer.engine import AnalysisEngine
from cosacode.analyzer.models import AnalysisResult, FileReport, Severity
from cosacode.config import CosaCodeConfig

console = Console()
err_console = Console(stderr=True)

_SEVERITY_COLORS = {
    Severity.LOW: "green",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
}


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, allow_dash=True),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--fail-under",
    type=click.IntRange(0, 100),
    default=0,
    show_default=True,
    help="Exit with status 1 if any file scores below this.",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="File or directory names to skip.",
)
def check(
    paths: tuple[str, ...],
    output_format: str,
    fail_under: int,
    exclude: tuple[str, ...],
) -> None:
    """Analyze Python files (or '-' for stdin) for common code smells."""
    engine = AnalysisEngine(CosaCodeConfig.load(), exclude_patterns=list(exclude))

    results: list[AnalysisResult] = []
    for path in paths:
        if path == "-":
            result = AnalysisResult(root="<stdin>", files_scanned=1)
            content = click.get_text_stream("stdin").read()
            result.files.append(engine.analyze_text(content))
        else:
            result = engine.analyze_path(path)
        results.append(result)

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump([r.to_dict() for r in results], sort_keys=False))
    else:
        for result in results:
            _print_result(result)

    failing = [
        report.path
        for result in results
        for report in result.files
        if report.score < fail_under
    ]
    if failing:
        err_console.print(
            f"\n[red]{len(failing)} file(s) scored below {fail_under}[/red]"
        )
        sys.exit(1)


def _print_result(result: AnalysisResult) -> None:
    for report in result.files:
        _print_file(report)
    if result.files_skipped:
        console.print(f"[dim]{result.files_skipped} file(s) skipped[/dim]")


def _print_file(report: FileReport) -> None:
    console.print(f"[bold]{escape(report.path)}[/bold]")
    if not report.findings:
        console.print("[green]No issues found.[/green]")
    else:
        table = Table(show_lines=False)
        table.add_column("Severity", style="bold", width=8)
        table.add_column("Line", justify="right")
        table.add_column("Rule")
        table.add_column("Message")

        for finding in report.findings:
            color = _SEVERITY_COLORS.get(finding.severity, "white")
            table.add_row(
                f"[{color}]{finding.severity.value}[/{color}]",
                "-" if finding.file_scoped else str(finding.line),
                escape(finding.rule),
                escape(finding.message),
            )
        console.print(table)

    console.print(
        f"Total issues: {len(report.findings)}  "
        f"Health score: {report.score}/100\n"
    )
