"""
Stockholm alignment format (Pfam/Rfam).

    # STOCKHOLM 1.0
    #=GS seq1 DE optional description

    seq1  ACGT--AC
    seq2  ACGTTTAC
    //
"""

from typing import Dict, Optional

from ..io.errors import ParseError, ParseReason
from ..io.sequences import Alignment, SequenceRecord
from ..io.source import LineSource
from .interleaved import BlockAccumulator, block_ranges, fragment_line
from .options import WriteOptions

DEFAULT_WRAP = 80

BANNER = "# STOCKHOLM"
TERMINATOR = "//"


def check_identifier(identifier: str) -> Optional[str]:
    """Stockholm names cannot look like markup or the record terminator."""
    if identifier.startswith("#"):
        return "Stockholm identifiers cannot start with '#'"
    if identifier.startswith(TERMINATOR):
        return "Stockholm identifiers cannot start with '//'"
    return None


def parse(source: LineSource) -> Alignment:
    """
    Parse one Stockholm record.

    Sequence lines are ``identifier fragment``. ``#=GS <id> DE <text>``
    lines provide record descriptions; every other ``#`` line (``#=GF``,
    ``#=GC``, ``#=GR`` and comments) is discarded. Parsing stops at the
    ``//`` terminator, leaving any following record in the source.

    Raises
    ------
    ParseError
        When the marker line is missing, a line is malformed, blocks are
        inconsistent, or the input ends before ``//``
    """
    annotations = {}
    for line_no, line in source:
        if not line.strip():
            continue
        if not line.startswith(BANNER):
            raise ParseError(line_no, ParseReason.MISSING_BANNER, "Missing '# STOCKHOLM' marker line")
        fields = line.split()
        if len(fields) > 2:
            annotations["version"] = fields[2]
        break
    else:
        raise ParseError(source.line_no, ParseReason.EMPTY_INPUT, "Empty Stockholm input")

    blocks = BlockAccumulator()
    descriptions: Dict[str, str] = {}

    for line_no, line in source:
        stripped = line.strip()
        if stripped == TERMINATOR:
            records = [
                SequenceRecord(record.identifier, record.sequence, descriptions.get(record.identifier))
                for record in blocks.records(line_no)
            ]
            return Alignment(records=tuple(records), annotations=annotations)

        if not stripped:
            blocks.end_block(line_no)
        elif stripped.startswith("#=GS"):
            fields = stripped.split(None, 3)
            if len(fields) == 4 and fields[2] == "DE":
                identifier = fields[1]
                if identifier in descriptions:
                    descriptions[identifier] += " " + fields[3]
                else:
                    descriptions[identifier] = fields[3]
        elif stripped.startswith("#"):
            continue
        else:
            fields = stripped.split()
            if len(fields) > 2:
                raise ParseError(
                    line_no,
                    ParseReason.MALFORMED_LINE,
                    f"Expected 'identifier sequence', got {len(fields)} fields",
                )
            blocks.add(fields[0], fields[1] if len(fields) == 2 else "", line_no)

    raise ParseError(
        source.line_no,
        ParseReason.TRUNCATED,
        "Unexpected end of input: missing '//' terminator",
    )


def write(alignment: Alignment, options: WriteOptions) -> str:
    """Serialise an alignment as a single Stockholm record."""
    wrap = options.width_for(DEFAULT_WRAP)
    lines = [f"{BANNER} 1.0"]

    if not alignment.records:
        lines.append(TERMINATOR)
        return "".join(line + "\n" for line in lines)

    name_width = max(len(identifier) for identifier in alignment.identifiers)
    if options.emit_descriptions:
        for record in alignment:
            if record.description:
                lines.append(f"#=GS {record.identifier:<{name_width}} DE {record.description}")

    id_width = name_width + 2
    for start, stop in list(block_ranges(alignment.width, wrap)) or [(0, 0)]:
        lines.append("")
        for record in alignment:
            lines.append(fragment_line(record.identifier, record.sequence[start:stop], id_width))

    lines.append(TERMINATOR)
    return "".join(line + "\n" for line in lines)
