"""
Aligned FASTA.

    >seq1 optional description
    ACGT--AC
    >seq2
    ACGTTTAC
"""

from typing import List, Optional

from ..io.errors import ParseError, ParseReason
from ..io.sequences import Alignment, SequenceRecord
from ..io.source import LineSource
from .options import WriteOptions

DEFAULT_WRAP = 60

# A wrapped line starting with one of these would read back as a header or
# a comment
RESERVED = ">;"


def parse(source: LineSource) -> Alignment:
    """
    Parse an aligned FASTA input.

    Header lines start with ``>``; the first token after it is the
    identifier and the rest of the line the description. Body lines are
    concatenated verbatim with all whitespace removed. Blank lines and ``;``
    comment lines are ignored. Repeated identifiers are kept so the
    validator can report them.

    Parameters
    ----------
    source : LineSource
        Input lines

    Returns
    -------
    Alignment
        Candidate alignment, not yet validated

    Raises
    ------
    ParseError
        On a sequence line before the first header or an empty identifier
    """
    records: List[SequenceRecord] = []
    identifier: Optional[str] = None
    description: Optional[str] = None
    chunks: List[str] = []

    for line_no, line in source:
        stripped = line.strip()
        if not stripped or stripped.startswith(";"):
            continue

        if stripped.startswith(">"):
            # Save previous record if exists
            if identifier is not None:
                records.append(SequenceRecord(identifier, "".join(chunks), description))

            fields = stripped[1:].strip().split(None, 1)
            if not fields:
                raise ParseError(line_no, ParseReason.MALFORMED_HEADER, "Missing FASTA identifier")
            identifier = fields[0]
            description = fields[1].strip() if len(fields) > 1 else None
            chunks = []
        else:
            if identifier is None:
                raise ParseError(
                    line_no,
                    ParseReason.SEQUENCE_BEFORE_HEADER,
                    "FASTA sequence line without a preceding header",
                )
            chunks.append("".join(stripped.split()))

    # Don't forget last record
    if identifier is not None:
        records.append(SequenceRecord(identifier, "".join(chunks), description))

    return Alignment(records=tuple(records))


def write(alignment: Alignment, options: WriteOptions) -> str:
    """Serialise an alignment as FASTA, wrapping sequences at the wrap width."""
    wrap = options.width_for(DEFAULT_WRAP)
    lines = []
    for record in alignment:
        header = f">{record.identifier}"
        if options.emit_descriptions and record.description:
            header += f" {record.description}"
        lines.append(header)

        seq = record.sequence
        for i in range(0, len(seq), wrap):
            lines.append(seq[i:i + wrap])

    return "".join(line + "\n" for line in lines)
