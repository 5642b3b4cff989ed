"""Convert command implementation."""

from pathlib import Path
from typing import Optional

import typer

from msaio import FormatKind, MSAError, WriteOptions, read_alignment, write
from msaio.io.detect import format_from_extension


def run_convert(
    alignment: Path,
    output: Optional[Path],
    from_format: Optional[str],
    to_format: Optional[str],
    wrap: Optional[int],
    emit_descriptions: bool,
    alphabet: str,
    quiet: bool,
):
    """Convert one alignment file."""
    # Resolve output format
    if to_format is None:
        if output is None:
            typer.echo("Error: --to is required when writing to stdout", err=True)
            raise typer.Exit(code=1)
        kind = format_from_extension(output)
        if kind == FormatKind.UNKNOWN:
            typer.echo(f"Error: Cannot determine output format from {output.name}; use --to", err=True)
            raise typer.Exit(code=1)
        to_format = kind.value

    allowed = None if alphabet == "any" else alphabet

    # Load data
    try:
        aln = read_alignment(alignment, format=from_format, alphabet=allowed)
    except MSAError as e:
        typer.echo(f"Error: Could not load alignment from {alignment}", err=True)
        typer.echo(f"Details: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        data = write(
            aln,
            to_format,
            WriteOptions(wrap_width=wrap, emit_descriptions=emit_descriptions),
            alphabet=allowed,
        )
    except MSAError as e:
        typer.echo(f"Error: Could not write alignment as {to_format}", err=True)
        typer.echo(f"Details: {e}", err=True)
        raise typer.Exit(code=1)

    # Write output
    if output:
        output.write_bytes(data)
        if not quiet:
            typer.echo(
                f"Wrote {len(aln)} sequences x {aln.width} columns to {output} ({to_format})",
                err=True,
            )
    else:
        typer.echo(data.decode("utf-8"), nl=False)
