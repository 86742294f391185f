"""Main CLI entrypoint for Quill.

Provides commands for extracting scopes, listing declared scopes and linting
scope markers.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from quill import __version__
from quill.config import get_config
from quill.errors import QuillError
from quill.loader import LoadedDocument, read_document, restore_newlines, write_document

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging with rich output on stderr."""
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format=config.logging.format,
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


def _load(path: Path) -> LoadedDocument:
    try:
        return read_document(path)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error reading {escape(str(path))}:[/] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="quill")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Quill – scoped sections for TOML files.

    Mark lines with @scope headers and extract one scope at a time.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        get_config().logging.level = "DEBUG"

    setup_logging()


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--scope",
    "-s",
    default=None,
    help="Scope to extract (default: from config, 'global' unless set)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the extracted document to this file instead of stdout",
)
def extract(path: Path, scope: str | None, output: Path | None) -> None:
    """Extract a scope from a document.

    PATH: Document containing @scope headers.
    """
    from quill.extract import extract_scope

    scope = scope or get_config().defaults.scope
    document = _load(path)

    try:
        result = extract_scope(document.text, scope)
    except QuillError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    if output:
        write_document(output, result, newline=document.newline, encoding=document.encoding)
        err_console.print(f"[green]✓[/] Wrote scope [cyan]{escape(scope)}[/] to [cyan]{escape(str(output))}[/]")
    else:
        if get_config().io.preserve_newlines:
            result = restore_newlines(result, document.newline)
        click.echo(result, nl=False)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def scopes(path: Path, output_json: bool) -> None:
    """List the scopes declared in a document.

    PATH: Document containing @scope headers.
    """
    from quill.extract import count_scope_lines

    counts = count_scope_lines(_load(path).text)
    logger.debug("Found %d named scopes in %s", len(counts) - 1, path)

    if output_json:
        click.echo(json.dumps([{"scope": name, "lines": n} for name, n in counts.items()], indent=2))
        return

    if len(counts) == 1:
        console.print("[yellow]No scope headers found; the whole document is global.[/]")

    from rich.table import Table

    table = Table(title=f"Scopes ({path.name})")
    table.add_column("Scope", style="cyan")
    table.add_column("Content lines", justify="right", style="green")

    for name, line_count in counts.items():
        table.add_row(name, str(line_count))

    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Exit with status 1 when issues are found")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def lint(path: Path, strict: bool, output_json: bool) -> None:
    """Report scope markers that are not recognized as headers.

    PATH: Document containing @scope headers.
    """
    from dataclasses import asdict

    from quill.lint import lint_markers

    issues = lint_markers(_load(path).text)
    strict = strict or get_config().lint.fail_on_issues

    if output_json:
        click.echo(json.dumps([asdict(issue) for issue in issues], indent=2))
    elif not issues:
        console.print("[green]✓[/] No marker issues found.")
    else:
        for issue in issues:
            console.print(
                f"[cyan]{escape(path.name)}:{issue.line}:{issue.column}[/] "
                f"[yellow]{issue.code}[/] {escape(issue.message)}"
            )
        console.print(f"\n[bold]{len(issues)}[/] issue(s) found.")

    if issues and strict:
        sys.exit(1)


if __name__ == "__main__":
    cli()
