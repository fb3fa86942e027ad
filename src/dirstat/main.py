from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import click
import typer
import yaml

from .config import ReportConfig
from .models import Options
from .report import report_command
from .scan import scan_tree

PROG_NAME: str = "dirstat"
USAGE: str = f"Usage: {PROG_NAME} [directory] [options]"

app: typer.Typer = typer.Typer(
    help="dirstat: summarize the contents of a directory tree",
    add_completion=False,
    # -h selects human readable sizes, so help is only available as --help
    context_settings={"help_option_names": ["--help"]},
)


def package_version() -> str:
    try:
        return version(distribution_name=PROG_NAME)
    except PackageNotFoundError:
        return "unknown (package not installed)"


def print_version(is_version: bool) -> None:
    """
    Callback for the --version / -V option.

    Prints the installed version of 'dirstat' and stops before any
    directory is scanned.
    """
    if not is_version:
        return

    typer.echo(package_version())
    raise typer.Exit()


@app.command()
def main(
    path: Annotated[str, typer.Argument(help="Directory to scan.")] = ".",
    types: Annotated[bool, typer.Option("--types", "-t", help="Show file type counts.")] = False,
    size: Annotated[bool, typer.Option("--size", "-s", help="Show min/max/average file sizes.")] = False,
    permissions: Annotated[bool, typer.Option("--permissions", "-p", help="Reserved.")] = False,
    dates: Annotated[bool, typer.Option("--dates", "-d", help="Show oldest and newest files.")] = False,
    links: Annotated[bool, typer.Option("--links", "-l", help="Show link counts.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Report unreadable paths.")] = False,
    human: Annotated[bool, typer.Option("--human", "-h", help="Human readable sizes.")] = False,
    all_sections: Annotated[bool, typer.Option("--all", "-a", help="Show every section.")] = False,
    config: Annotated[Path | None, typer.Option("--config", help="YAML file with default options.")] = None,
    save_config: Annotated[
        Path | None, typer.Option("--save-config", help="Write the effective options to a YAML file.")
    ] = None,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=print_version,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Recursively scan a directory and report statistics about its contents."""
    options: Options = Options(
        types=types,
        size=size,
        permissions=permissions,
        dates=dates,
        links=links,
        verbose=verbose,
        human=human,
        all=all_sections,
    )

    if config is not None:
        try:
            options = ReportConfig.load(config).merge(options)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    if save_config is not None:
        try:
            ReportConfig.from_options(options).save(save_config)
        except OSError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Config written to {save_config}", err=True)

    report_command(scan_tree(path, options), options)


def run(argv: list[str] | None = None) -> int:
    """
    Console entry point.

    Any command-line usage error prints a single usage line to stderr
    and exits with status 1, without producing a report.
    """
    try:
        result: object = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError:
        typer.echo(USAGE, err=True)
        return 1

    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(run())
