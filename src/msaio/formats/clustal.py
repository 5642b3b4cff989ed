"""
Clustal alignment format (``.aln``).

    CLUSTAL W (1.83) multiple sequence alignment


    seq1      ACGT--AC
    seq2      ACGTTTAC
              ****  **
"""

import re
import warnings

from ..io.detect import CLUSTAL_BANNERS
from ..io.errors import FormatWarning, ParseError, ParseReason
from ..io.sequences import Alignment
from ..io.source import LineSource
from .interleaved import BlockAccumulator, block_ranges, fragment_line
from .options import WriteOptions

DEFAULT_WRAP = 60

# Classic Clustal readers truncate longer names
MAX_IDENTIFIER_LENGTH = 30

_VERSION_RE = re.compile(r"(\d+(?:\.\d+)+)")


def parse(source: LineSource) -> Alignment:
    """
    Parse a Clustal alignment.

    The first non-blank line must be a Clustal banner. Blocks of
    ``identifier fragment [count]`` lines follow, separated by blank lines;
    lines starting with whitespace are consensus lines and are discarded.

    Parameters
    ----------
    source : LineSource
        Input lines

    Returns
    -------
    Alignment
        Candidate alignment with ``program`` (and ``version`` when present)
        annotations taken from the banner
    """
    annotations = {}
    for line_no, line in source:
        if not line.strip():
            continue
        program = line.split()[0]
        if program not in CLUSTAL_BANNERS:
            raise ParseError(
                line_no,
                ParseReason.MISSING_BANNER,
                f"Not a recognised Clustal header (expected one of: {', '.join(CLUSTAL_BANNERS)})",
            )
        annotations["program"] = program
        version = _VERSION_RE.search(line)
        if version:
            annotations["version"] = version.group(1)
        break
    else:
        raise ParseError(source.line_no, ParseReason.EMPTY_INPUT, "Empty Clustal input")

    blocks = BlockAccumulator()
    for line_no, line in source:
        if not line.strip() or line[0].isspace():
            # Blank separator or consensus line
            blocks.end_block(line_no)
            continue

        fields = line.split()
        if len(fields) == 1:
            fragment = ""
        elif len(fields) == 2 or (len(fields) == 3 and fields[2].isdigit()):
            fragment = fields[1]
        else:
            raise ParseError(
                line_no,
                ParseReason.MALFORMED_LINE,
                f"Expected 'identifier sequence', got {len(fields)} fields",
            )
        blocks.add(fields[0], fragment, line_no)

    return Alignment(records=tuple(blocks.records(source.line_no)), annotations=annotations)


def _consensus(alignment: Alignment, start: int, stop: int) -> str:
    marks = []
    for i in range(start, stop):
        column = alignment.column(i).upper()
        conserved = column[0] not in "-." and column.count(column[0]) == len(column)
        marks.append("*" if conserved else " ")
    return "".join(marks)


def write(alignment: Alignment, options: WriteOptions) -> str:
    """
    Serialise an alignment in Clustal format.

    Identifiers are padded to a common column. Each block is followed by a
    consensus line marking fully conserved columns with ``*`` when it marks
    any column.
    """
    wrap = options.width_for(DEFAULT_WRAP)

    version = alignment.annotations.get("version")
    banner = f"CLUSTAL {version} multiple sequence alignment" if version else \
        "CLUSTAL multiple sequence alignment"
    lines = [banner, "", ""]

    if not alignment.records:
        return "".join(line + "\n" for line in lines)

    for identifier in alignment.identifiers:
        if len(identifier) > MAX_IDENTIFIER_LENGTH:
            warnings.warn(
                f"Identifier {identifier!r} is longer than {MAX_IDENTIFIER_LENGTH} "
                "characters and may be truncated by other Clustal readers",
                FormatWarning,
            )

    id_width = max(len(identifier) for identifier in alignment.identifiers) + 6
    ranges = list(block_ranges(alignment.width, wrap)) or [(0, 0)]
    for n, (start, stop) in enumerate(ranges):
        if n > 0:
            lines.append("")
        for record in alignment:
            lines.append(fragment_line(record.identifier, record.sequence[start:stop], id_width))
        consensus = _consensus(alignment, start, stop)
        if consensus.strip():
            lines.append((" " * id_width + consensus).rstrip())

    return "".join(line + "\n" for line in lines)
