"""
Core building blocks shared by all alignment formats.

This module provides:

- **Data model**: ``Alignment`` and ``SequenceRecord``
- **Input**: ``LineSource`` and format detection
- **Checks**: the alphabet/gap policy and the alignment validator
- **Errors**: ``ParseError``, ``ValidationError``, ``UnknownFormatError``
"""

from msaio.io.alphabet import SequenceType, infer_sequence_type, is_gap
from msaio.io.detect import FormatKind, detect, format_from_extension
from msaio.io.errors import (
    FormatWarning,
    MSAError,
    ParseError,
    ParseReason,
    UnknownFormatError,
    ValidationError,
    ValidationKind,
)
from msaio.io.sequences import Alignment, SequenceRecord
from msaio.io.source import LineSource
from msaio.io.validate import validate

__all__ = [
    "Alignment",
    "SequenceRecord",
    "SequenceType",
    "infer_sequence_type",
    "is_gap",
    "FormatKind",
    "detect",
    "format_from_extension",
    "LineSource",
    "validate",
    "MSAError",
    "ParseError",
    "ParseReason",
    "UnknownFormatError",
    "ValidationError",
    "ValidationKind",
    "FormatWarning",
]
