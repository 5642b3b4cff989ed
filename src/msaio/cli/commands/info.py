"""Detect and info command implementations."""

from pathlib import Path
from typing import Optional

import typer

from msaio import MSAError, detect, read_alignment
from msaio.io.alphabet import infer_sequence_type
from msaio.io.detect import FormatKind


def run_detect(alignment: Path):
    """Print the detected format name."""
    try:
        kind = detect(alignment)
    except MSAError as e:
        typer.echo(f"Error: Could not read {alignment}", err=True)
        typer.echo(f"Details: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(kind.value)
    if kind == FormatKind.UNKNOWN:
        raise typer.Exit(code=1)


def run_info(alignment: Path, format: Optional[str], alphabet: str):
    """Print a summary of one alignment."""
    try:
        aln = read_alignment(alignment, format=format, alphabet=None if alphabet == "any" else alphabet)
    except MSAError as e:
        typer.echo(f"Error: Could not load alignment from {alignment}", err=True)
        typer.echo(f"Details: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"File:      {alignment}")
    typer.echo(f"Format:    {(format or detect(alignment).value)}")
    typer.echo(f"Sequences: {len(aln)}")
    typer.echo(f"Columns:   {aln.width}")
    typer.echo(f"Type:      {infer_sequence_type(aln.sequences).value}")
    typer.echo("")
    typer.echo(str(aln))
