"""
CLI Entry Point: Exposes the vcfstream functionality via command line.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape

from . import __version__
from .errors import VcfError
from .io.input import sample_ids
from .models.core import ParserConfig
from .pipeline import Pipeline
from .utils.logging import console, setup_logging

app = typer.Typer(help="vcfstream: streaming VCF 4.2 variant parser")


@app.callback()
def main():
    """
    vcfstream: streaming VCF 4.2 variant parser
    """
    pass


@app.command()
def version():
    """
    Show the vcfstream version.
    """
    typer.echo(f"vcfstream {__version__}")


@app.command()
def parse(
    variant_file: Path = typer.Option(..., "--variants", "-v", help="Path to a VCF (optionally gzipped)"),
    output_file: Path | None = typer.Option(
        None, "--output", "-o", help="TSV file for parsed variants"
    ),
    invalid_file: Path | None = typer.Option(
        None, "--invalid", "-i", help="TSV file for lines that could not be parsed"
    ),
    queue_size: int = typer.Option(
        1000, "--queue-size", help="Capacity of the variant and invalid-line buffers"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable verbose debug logging"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """
    Parse a VCF into one record per alternate allele.
    """
    setup_logging(verbose=verbose, log_file=str(log_file) if log_file else None)

    try:
        config = ParserConfig(
            variant_file=variant_file,
            output_file=output_file,
            invalid_file=invalid_file,
            queue_size=queue_size,
        )
    except ValidationError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    try:
        result = Pipeline(config).run()
    except (VcfError, OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    typer.echo(f"valid\t{result.valid}")
    typer.echo(f"invalid\t{result.invalid}")


@app.command()
def samples(
    variant_file: Path = typer.Option(..., "--variants", "-v", help="Path to a VCF (optionally gzipped)"),
):
    """
    Print the sample IDs declared in the VCF header, one per line.
    """
    if not variant_file.exists():
        console.print(f"[bold red]Error: File not found: {variant_file}[/bold red]")
        raise typer.Exit(code=1)

    try:
        ids = sample_ids(variant_file)
    except (VcfError, OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    for sample in ids or []:
        typer.echo(sample)


if __name__ == "__main__":
    app()
