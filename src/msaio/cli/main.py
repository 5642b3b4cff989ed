"""Main CLI application for msaio."""

import typer
from pathlib import Path
from typing import Optional
from enum import Enum

app = typer.Typer(
    name="msaio",
    help="Read, validate and convert multiple sequence alignment files",
    no_args_is_help=True,
)


class FormatChoice(str, Enum):
    """Alignment file format."""
    FASTA = "fasta"
    CLUSTAL = "clustal"
    STOCKHOLM = "stockholm"
    MSF = "msf"


class AlphabetChoice(str, Enum):
    """Residue alphabet enforced while reading and writing."""
    ANY = "any"
    NUCLEOTIDE = "nucleotide"
    PROTEIN = "protein"


@app.command()
def detect(
    alignment: Path = typer.Argument(
        ...,
        help="Alignment file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Print the detected format of an alignment file.

    Exits with status 1 when the format is not recognised.

    Example:
        msaio detect family.aln
    """
    from .commands.info import run_detect

    run_detect(alignment=alignment)


@app.command()
def info(
    alignment: Path = typer.Argument(
        ...,
        help="Alignment file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    format: Optional[FormatChoice] = typer.Option(
        None,
        "--format", "-f",
        help="Input format (default: detect)",
    ),
    alphabet: AlphabetChoice = typer.Option(
        AlphabetChoice.ANY,
        "--alphabet", "-a",
        help="Residue alphabet to enforce",
    ),
):
    """
    Summarise an alignment: rows, columns, sequence type and first rows.

    Example:
        msaio info family.sto
    """
    from .commands.info import run_info

    run_info(
        alignment=alignment,
        format=format.value if format else None,
        alphabet=alphabet.value,
    )


@app.command()
def convert(
    alignment: Path = typer.Argument(
        ...,
        help="Input alignment file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: stdout)",
    ),
    from_format: Optional[FormatChoice] = typer.Option(
        None,
        "--from",
        help="Input format (default: detect)",
    ),
    to_format: Optional[FormatChoice] = typer.Option(
        None,
        "--to",
        help="Output format (default: from the output file extension)",
    ),
    wrap: Optional[int] = typer.Option(
        None,
        "--wrap", "-w",
        help="Residues per line or block (default: format convention)",
        min=1,
    ),
    no_descriptions: bool = typer.Option(
        False,
        "--no-descriptions",
        help="Do not write sequence descriptions",
    ),
    alphabet: AlphabetChoice = typer.Option(
        AlphabetChoice.ANY,
        "--alphabet", "-a",
        help="Residue alphabet to enforce",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Convert an alignment to another format.

    Example:
        msaio convert family.aln -o family.sto
        msaio convert family.fasta --to clustal --wrap 50
    """
    from .commands.convert import run_convert

    run_convert(
        alignment=alignment,
        output=output,
        from_format=from_format.value if from_format else None,
        to_format=to_format.value if to_format else None,
        wrap=wrap,
        emit_descriptions=not no_descriptions,
        alphabet=alphabet.value,
        quiet=quiet,
    )


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
