import logging
from pathlib import Path

import click

from .cases import InvalidName, all_cases, detect, render, validate_name
from .models import RenameOptions
from .rename import RenameError, rename_project


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every file operation.")
def cli(verbose: bool):
    """Rename a project and every spelling of its name."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command("rename")
@click.option(
    "--input",
    "-i",
    "input_",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Input path to the project, e.g. "path/to/old-project".',
)
@click.option("--name", "-n", required=True, help='New name of the project, e.g. "new-project".')
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: next to the input, named after --name).",
)
@click.option("--dry-run", is_flag=True, help="Report what would change without writing anything.")
@click.option("--overwrite", is_flag=True, help="Overwrite files that already exist in the output.")
@click.option(
    "--detect-encoding",
    is_flag=True,
    help="Rewrite non UTF-8 text files using a detected encoding.",
)
def rename(input_: Path, name: str, output, dry_run: bool, overwrite: bool, detect_encoding: bool):
    options = RenameOptions(dry_run=dry_run, overwrite=overwrite, detect_encoding=detect_encoding)
    try:
        report = rename_project(input_, name, output, options)
    except (InvalidName, RenameError) as e:
        raise click.ClickException(str(e))

    counts = ", ".join(f"{k}={v}" for k, v in report.counts.items() if v)
    prefix = "[dry-run] " if report.dry_run else ""
    click.echo(f"{prefix}{report.output}: {counts or 'nothing to do'}")


@cli.command("detect")
@click.argument("name")
def detect_cmd(name: str):
    try:
        case_info, normalized = detect(name)
    except InvalidName as e:
        raise click.ClickException(str(e))
    click.echo(f"separator: {case_info.separator!r}")
    click.echo(f"style: {case_info.style.value}")
    click.echo(f"parts: {', '.join(normalized.parts)}")


@cli.command("cases")
@click.argument("name")
def cases_cmd(name: str):
    try:
        _, normalized = detect(name)
        validate_name(normalized)
    except InvalidName as e:
        raise click.ClickException(str(e))
    for case_info in all_cases():
        click.echo(render(case_info, normalized))


def main():
    cli()
