"""
Per-format parsers and writers.

Each format module exposes ``parse(source) -> Alignment`` and
``write(alignment, options) -> str``. ``FORMATS`` maps every concrete
``FormatKind`` to a ``FormatHandler`` bundling those functions with the
format's conventions; the engine facade dispatches through it.
"""

from typing import Callable, Dict, NamedTuple, Optional

from ..io.detect import FormatKind
from ..io.sequences import Alignment
from ..io.source import LineSource
from ..io.validate import IdentifierCheck
from . import clustal, fasta, msf, stockholm
from .options import WriteOptions


class FormatHandler(NamedTuple):
    """Parser, writer and conventions of one format."""
    parse: Callable[[LineSource], Alignment]
    write: Callable[[Alignment, WriteOptions], str]
    default_wrap: int
    extra_gaps: str = ""
    identifier_check: Optional[IdentifierCheck] = None
    reserved: str = ""


FORMATS: Dict[FormatKind, FormatHandler] = {
    FormatKind.FASTA: FormatHandler(
        fasta.parse,
        fasta.write,
        fasta.DEFAULT_WRAP,
        reserved=fasta.RESERVED,
    ),
    FormatKind.CLUSTAL: FormatHandler(clustal.parse, clustal.write, clustal.DEFAULT_WRAP),
    FormatKind.STOCKHOLM: FormatHandler(
        stockholm.parse,
        stockholm.write,
        stockholm.DEFAULT_WRAP,
        identifier_check=stockholm.check_identifier,
    ),
    FormatKind.MSF: FormatHandler(msf.parse, msf.write, msf.DEFAULT_WRAP, extra_gaps=msf.EXTRA_GAPS),
}


def get_handler(format: FormatKind | str) -> FormatHandler:
    """
    Look up the handler for a format.

    Raises
    ------
    ValueError
        For ``UNKNOWN`` or a name that is not a supported format
    """
    try:
        kind = format if isinstance(format, FormatKind) else FormatKind(format.lower())
    except (ValueError, AttributeError):
        raise ValueError(
            f"Unknown format '{format}'. Valid formats: {', '.join(k.value for k in FORMATS)}"
        ) from None
    if kind not in FORMATS:
        raise ValueError(f"No parser or writer for format '{kind.value}'")
    return FORMATS[kind]


__all__ = ["FORMATS", "FormatHandler", "WriteOptions", "get_handler"]
