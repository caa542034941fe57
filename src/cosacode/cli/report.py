"""CLI command: cosacode report <file> — write the plain-text report."""

from __future__ import annotations

import click

from cosacode.analyzer.engine import analyze
from cosacode.analyzer.report import format_report


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8", errors="ignore"))
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write the report (default: stdout).",
)
def report(source, output) -> None:
    """Write a plain-text analysis report for SOURCE ('-' for stdin)."""
    findings = analyze(source.read())
    output.write(format_report(findings))
