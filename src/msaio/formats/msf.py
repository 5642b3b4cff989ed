"""
GCG Multiple Sequence Format (MSF).

    !!NA_MULTIPLE_ALIGNMENT 1.0

     example.msf  MSF: 8  Type: N  Check: 4908  ..

     Name: seq1  Len:     8  Check: 2245  Weight: 1.00
     Name: seq2  Len:     8  Check: 2663  Weight: 1.00

    //

            1      8
    seq1  ACGT..AC
    seq2  ACGTTTAC
"""

import re
import warnings
from typing import Callable, List, NamedTuple, Optional

import numpy as np

from ..io.alphabet import SequenceType, infer_sequence_type
from ..io.errors import FormatWarning, ParseError, ParseReason
from ..io.sequences import Alignment
from ..io.source import LineSource
from .interleaved import BlockAccumulator, block_ranges, fragment_line
from .options import WriteOptions

DEFAULT_WRAP = 50

# Residues per space-separated group inside a block line
GROUP_SIZE = 10

# GCG treats '~' as a gap as well
EXTRA_GAPS = "~"

SEPARATOR = "//"

_BANNER_RE = re.compile(r"^!!(NA|AA)_MULTIPLE_ALIGNMENT\s*(\S*)")
_MSF_RE = re.compile(r"MSF:\s*(\d+)")
_TYPE_RE = re.compile(r"Type:\s*(\S+)")
_CHECK_RE = re.compile(r"Check:\s*(\d+)")
_NAME_RE = re.compile(r"^\s*Name:\s*(\S+)")
_LEN_RE = re.compile(r"Len:\s*(\d+)")

Checksum = Callable[[str], int]


def gcg_checksum(sequence: str) -> int:
    """
    GCG checksum of one sequence.

    Sum over positions of ``((i mod 57) + 1) * ord(char)`` for the upper-cased
    sequence (``i`` 0-based), modulo 10000. Gap characters are included as
    they appear in the alignment.

    Examples
    --------
    >>> gcg_checksum("ACGT")
    748
    """
    if not sequence:
        return 0
    codes = np.fromiter((ord(char) for char in sequence.upper()), dtype=np.int64, count=len(sequence))
    weights = np.arange(len(sequence), dtype=np.int64) % 57 + 1
    return int((codes * weights).sum() % 10000)


class _NameEntry(NamedTuple):
    identifier: str
    length: int
    check: Optional[int]
    line_no: int


def parse(source: LineSource, checksum: Optional[Checksum] = gcg_checksum) -> Alignment:
    """
    Parse an MSF alignment.

    The header (everything up to the ``//`` line) must contain the ``MSF:``
    line and one ``Name:`` line per sequence. Body blocks hold ruler lines of
    column numbers, which are skipped, and ``identifier fragment...`` lines,
    whose space-separated residue groups are joined.

    Parameters
    ----------
    source : LineSource
        Input lines
    checksum : callable or None
        Function used to verify declared ``Check:`` values; None skips
        checksum verification

    Returns
    -------
    Alignment
        Candidate alignment with ``name`` and ``type`` annotations when the
        header provides them

    Raises
    ------
    ParseError
        On a malformed or truncated header, inconsistent blocks, or when the
        reconstructed sequences disagree with declared lengths or checksums
    """
    annotations = {}
    declared_length: Optional[int] = None
    declared_total: Optional[int] = None
    msf_line = 0
    names: List[_NameEntry] = []

    for line_no, line in source:
        stripped = line.strip()
        if stripped == SEPARATOR:
            break

        banner = _BANNER_RE.match(stripped)
        if banner:
            version = banner.group(2)
            if version and version != "1.0":
                warnings.warn(
                    f"MSF banner declares version {version}; only 1.0 is known",
                    FormatWarning,
                )
            continue

        # Name lines first: an identifier may itself contain "MSF:"
        name = _NAME_RE.match(line)
        if name:
            if declared_length is None:
                raise ParseError(line_no, ParseReason.MALFORMED_HEADER, "Name: line before the MSF: line")
            fields = line[name.end():]
            length = _LEN_RE.search(fields)
            if not length:
                raise ParseError(line_no, ParseReason.MALFORMED_HEADER, "Name: line without Len:")
            check = _CHECK_RE.search(fields)
            names.append(_NameEntry(
                name.group(1),
                int(length.group(1)),
                int(check.group(1)) if check else None,
                line_no,
            ))
            continue

        if "MSF:" in stripped:
            match = _MSF_RE.search(stripped)
            if not match:
                raise ParseError(line_no, ParseReason.MALFORMED_HEADER, "MSF: field without a length")
            declared_length = int(match.group(1))
            msf_line = line_no
            first = stripped.split()[0]
            if first != "MSF:":
                annotations["name"] = first
            seq_type = _TYPE_RE.search(stripped)
            if seq_type:
                annotations["type"] = seq_type.group(1)
            total = _CHECK_RE.search(stripped)
            if total:
                declared_total = int(total.group(1))
    else:
        if source.line_no == 0:
            raise ParseError(0, ParseReason.EMPTY_INPUT, "Empty MSF input")
        raise ParseError(
            source.line_no,
            ParseReason.TRUNCATED,
            "Unexpected end of input: missing '//' after the MSF header",
        )

    if declared_length is None:
        raise ParseError(source.line_no, ParseReason.MALFORMED_HEADER, "Missing MSF: header line")

    blocks = BlockAccumulator([entry.identifier for entry in names])
    known = set(blocks.identifiers)
    for line_no, line in source:
        if not line.strip():
            blocks.end_block(line_no)
            continue
        fields = line.split()
        if all(field.isdigit() for field in fields) and (line[0].isspace() or fields[0] not in known):
            # Ruler line with column numbers
            continue
        blocks.add(fields[0], "".join(fields[1:]), line_no)

    records = blocks.records(source.line_no)

    for entry, record in zip(names, records):
        if len(record) != entry.length:
            raise ParseError(
                entry.line_no,
                ParseReason.LENGTH_MISMATCH,
                f"Sequence {entry.identifier} has length {len(record)}, header declares {entry.length}",
            )
        if len(record) != declared_length:
            raise ParseError(
                msf_line,
                ParseReason.LENGTH_MISMATCH,
                f"Sequence {entry.identifier} has length {len(record)}, MSF: declares {declared_length}",
            )
        if checksum is not None and entry.check is not None:
            actual = checksum(record.sequence)
            if actual != entry.check:
                raise ParseError(
                    entry.line_no,
                    ParseReason.CHECKSUM_MISMATCH,
                    f"Sequence {entry.identifier} has checksum {actual}, header declares {entry.check}",
                )

    if checksum is not None and declared_total is not None and records:
        actual = sum(checksum(record.sequence) for record in records) % 10000
        if actual != declared_total:
            raise ParseError(
                msf_line,
                ParseReason.CHECKSUM_MISMATCH,
                f"Alignment checksum is {actual}, header declares {declared_total}",
            )

    return Alignment(records=tuple(records), annotations=annotations)


def _grouped(fragment: str) -> str:
    return " ".join(fragment[i:i + GROUP_SIZE] for i in range(0, len(fragment), GROUP_SIZE))


def _ruler(start: int, stop: int, span: int) -> str:
    left, right = str(start + 1), str(stop)
    padding = span - len(left) - len(right)
    if stop > start + 1 and padding >= 1:
        return left + " " * padding + right
    return left


def write(alignment: Alignment, options: WriteOptions, checksum: Checksum = gcg_checksum) -> str:
    """
    Serialise an alignment as MSF.

    Header metadata is regenerated from the alignment: the global length,
    the sequence type (``N`` for nucleotides, ``P`` otherwise), per-sequence
    lengths and freshly computed checksums.
    """
    wrap = options.width_for(DEFAULT_WRAP)
    nucleotide = infer_sequence_type(alignment.sequences) == SequenceType.NUCLEOTIDE
    checks = [checksum(seq) for seq in alignment.sequences]
    total = sum(checks) % 10000
    name = alignment.annotations.get("name", "alignment")

    lines = [
        f"!!{'NA' if nucleotide else 'AA'}_MULTIPLE_ALIGNMENT 1.0",
        "",
        f" {name}  MSF: {alignment.width}  Type: {'N' if nucleotide else 'P'}  Check: {total}  ..",
        "",
    ]

    name_width = max((len(identifier) for identifier in alignment.identifiers), default=0)
    for record, check in zip(alignment, checks):
        lines.append(
            f" Name: {record.identifier:<{name_width}}  Len: {alignment.width:>5}"
            f"  Check: {check:>4}  Weight: 1.00"
        )
    lines += ["", SEPARATOR]

    if alignment.records:
        id_width = name_width + 2
        for start, stop in list(block_ranges(alignment.width, wrap)) or [(0, 0)]:
            fragments = [_grouped(seq[start:stop]) for seq in alignment.sequences]
            lines.append("")
            if stop > start:
                lines.append(" " * id_width + _ruler(start, stop, len(fragments[0])))
            for record, fragment in zip(alignment, fragments):
                lines.append(fragment_line(record.identifier, fragment, id_width))

    return "".join(line + "\n" for line in lines)
