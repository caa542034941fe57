"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from cosacode import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cosacode")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(verbose: bool) -> None:
    """CosaCode — heuristic static analysis for Python code."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from cosacode.cli.check import check  # noqa: F811
    from cosacode.cli.report import report  # noqa: F811
    from cosacode.cli.server import server  # noqa: F811

    main.add_command(check)
    main.add_command(report)
    main.add_command(server)


_register_commands()
