"""
Format detection from the first lines of an input.
"""

from enum import Enum
from pathlib import Path

from .source import LineSource


class FormatKind(str, Enum):
    """Supported alignment formats."""
    FASTA = "fasta"
    CLUSTAL = "clustal"
    STOCKHOLM = "stockholm"
    MSF = "msf"
    UNKNOWN = "unknown"


# Banners written by ClustalW and by aligners that emit Clustal-style output
CLUSTAL_BANNERS = ("CLUSTAL", "PROBCONS", "MUSCLE", "MSAPROBS", "Kalign")

# Number of lines inspected; MSF headers can carry a few lines of free text
# before the line holding the ``MSF:`` field
DETECT_PREFIX = 20

_EXTENSIONS = {
    ".fa": FormatKind.FASTA,
    ".fas": FormatKind.FASTA,
    ".fasta": FormatKind.FASTA,
    ".afa": FormatKind.FASTA,
    ".aln": FormatKind.CLUSTAL,
    ".clustal": FormatKind.CLUSTAL,
    ".sto": FormatKind.STOCKHOLM,
    ".stk": FormatKind.STOCKHOLM,
    ".stockholm": FormatKind.STOCKHOLM,
    ".msf": FormatKind.MSF,
}


def detect(source: LineSource) -> FormatKind:
    """
    Classify an input by the signature of its first meaningful lines.

    Only peeks at the source; the lines remain available to the parser.

    Parameters
    ----------
    source : LineSource
        Input to inspect

    Returns
    -------
    FormatKind
        Detected format, ``FormatKind.UNKNOWN`` when nothing matches
    """
    prefix = [line for line in source.peek(DETECT_PREFIX) if line.strip()]
    if not prefix:
        return FormatKind.UNKNOWN

    first = prefix[0]
    if first.startswith(">"):
        return FormatKind.FASTA
    if first.split()[0] in CLUSTAL_BANNERS:
        return FormatKind.CLUSTAL
    if first.startswith("# STOCKHOLM"):
        return FormatKind.STOCKHOLM
    if any("MSF:" in line for line in prefix):
        return FormatKind.MSF
    return FormatKind.UNKNOWN


def format_from_extension(filepath: Path | str) -> FormatKind:
    """Map a file name suffix to a format (``UNKNOWN`` if not recognised)."""
    return _EXTENSIONS.get(Path(filepath).suffix.lower(), FormatKind.UNKNOWN)
