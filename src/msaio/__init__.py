"""
msaio: read and write multiple sequence alignment formats.

Parses FASTA-alignment, Clustal, Stockholm and MSF files into one
format-agnostic ``Alignment``, validates it, and writes it back out in any
of those formats.

Quick Start
-----------
Read an alignment, detecting its format:

>>> import msaio
>>> aln = msaio.read_alignment("family.aln")
>>> print(aln)
>>> aln.width, len(aln)

Convert between formats:

>>> text = open("family.aln").read()
>>> data = msaio.convert(text, to="stockholm")

Examples
--------
>>> # Parse in-memory text and re-wrap it
>>> aln = msaio.parse(">seq1\\nACGT--AC\\n>seq2\\nACGTTTAC\\n")
>>> msaio.write(aln, "fasta", msaio.WriteOptions(wrap_width=4)).decode()
'>seq1\\nACGT\\n--AC\\n>seq2\\nACGT\\nTTAC\\n'

>>> # Restrict residues to nucleotides
>>> aln = msaio.parse(data, alphabet=msaio.SequenceType.NUCLEOTIDE)
"""

__version__ = "0.1.0"

# High-level API
from .api import (
    detect,
    parse,
    write,
    convert,
    read_alignment,
    write_alignment,
)

# Configuration
from .formats import WriteOptions

# Data model and input
from .io.sequences import Alignment, SequenceRecord
from .io.source import LineSource
from .io.detect import FormatKind
from .io.alphabet import SequenceType
from .io.validate import validate

# Errors
from .io.errors import (
    MSAError,
    UnknownFormatError,
    ParseError,
    ParseReason,
    ValidationError,
    ValidationKind,
    FormatWarning,
)

__all__ = [
    # Facade - Start here!
    "detect",
    "parse",
    "write",
    "convert",
    "read_alignment",
    "write_alignment",

    # Configuration
    "WriteOptions",

    # Data model
    "Alignment",
    "SequenceRecord",
    "LineSource",
    "FormatKind",
    "SequenceType",
    "validate",

    # Errors
    "MSAError",
    "UnknownFormatError",
    "ParseError",
    "ParseReason",
    "ValidationError",
    "ValidationKind",
    "FormatWarning",

    # Version
    "__version__",
]
