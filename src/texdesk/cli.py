"""Typer CLI entrypoint for texdesk."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from texdesk.config import load_config
from texdesk.files import DirectoryEntry, list_directory, read_document
from texdesk.logger import configure_logging
from texdesk.orchestrator import DocumentCompiler, compile_document

app = typer.Typer(help="Compile LaTeX documents to PDF with Tectonic.", no_args_is_help=True)


@app.callback()
def main() -> None:
    """texdesk command group."""


@app.command("compile")
def compile_command(
    source: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    scratch: bool = typer.Option(False, help="Compile the file's text in the shared scratch directory."),
    output: Path | None = typer.Option(None, dir_okay=False, help="Copy the PDF here on success."),
    compiler: str | None = typer.Option(None, help="Compiler executable (default: tectonic)."),
    verbose: bool = typer.Option(False, "--verbose/--quiet"),
) -> None:
    """Compile SOURCE and report diagnostics on failure."""

    configure_logging("DEBUG" if verbose else "WARNING")

    try:
        config = load_config()
        if compiler is not None:
            config = config.model_copy(update={"compiler": compiler})
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    source = source.resolve()
    outcome = compile_document(
        read_document(source),
        None if scratch else source,
        compiler=DocumentCompiler(config),
    )

    if not outcome.ok:
        typer.echo(f"Compilation failed: {source}", err=True)
        for diagnostic in outcome.diagnostics:
            typer.echo(f"line {diagnostic.line}: {diagnostic.message}", err=True)
        raise typer.Exit(code=1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(outcome.artifact)
        typer.echo(f"Output: {output}")
    typer.echo(f"Compiled {source.name}: {len(outcome.artifact)} bytes.")


def _echo_entries(entries: list[DirectoryEntry], indent: int = 0) -> None:
    for entry in entries:
        suffix = "/" if entry.is_dir else ""
        typer.echo(f"{'  ' * indent}{entry.name}{suffix}")
        _echo_entries(entry.children, indent + 1)


@app.command("ls")
def list_command(
    root: Path = typer.Argument(Path("."), exists=True, file_okay=False),
    depth: int = typer.Option(1, min=1, help="Levels to descend."),
    all_levels: bool = typer.Option(False, "--all", help="Descend without a depth limit."),
) -> None:
    """List ROOT with directories first."""

    _echo_entries(list_directory(root, None if all_levels else depth))
