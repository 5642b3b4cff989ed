"""
High-level API for reading and writing alignments.

This module is the engine facade: ``detect`` classifies an input, ``parse``
runs detection, the format parser and the validator, and ``write`` runs the
validator and the format writer. The path helpers wrap them for files.
"""

from pathlib import Path
from typing import Optional

from .formats import WriteOptions, get_handler
from .io.alphabet import Alphabet
from .io.detect import FormatKind, detect as _detect, format_from_extension
from .io.errors import UnknownFormatError
from .io.sequences import Alignment
from .io.source import LineSource
from .io.validate import validate


def detect(source) -> FormatKind:
    """
    Detect the format of an input without consuming it.

    Parameters
    ----------
    source : LineSource, str, bytes, Path or re-iterable sequence of lines
        Input to classify. A one-shot stream (an open file, a generator)
        cannot be peeked at directly: wrap it in a ``LineSource`` first and
        pass that same object to ``parse``.

    Returns
    -------
    FormatKind
        Detected format, ``FormatKind.UNKNOWN`` if nothing matched

    Raises
    ------
    TypeError
        If ``source`` is a one-shot iterator rather than a ``LineSource``

    Examples
    --------
    >>> detect(">seq1\\nACGT\\n")
    <FormatKind.FASTA: 'fasta'>
    """
    if not isinstance(source, (LineSource, str, bytes, bytearray, Path)) and iter(source) is source:
        raise TypeError(
            "detect() would consume lines of a one-shot stream; "
            "wrap it in LineSource(stream) and reuse that source for parse()"
        )
    return _detect(LineSource.coerce(source))


def parse(
    source,
    format: Optional[FormatKind | str] = None,
    alphabet: Alphabet = None,
) -> Alignment:
    """
    Parse and validate an alignment.

    Parameters
    ----------
    source : LineSource, str, bytes, Path or iterable of lines
        Input; a ``str`` is the alignment text itself, not a file name
    format : FormatKind or str, optional
        Input format; detected from the first lines when omitted
    alphabet : SequenceType, str, set or None
        Allowed residues (default: any printable non-whitespace character)

    Returns
    -------
    Alignment
        Validated alignment

    Raises
    ------
    UnknownFormatError
        If no format was given and detection failed
    ParseError
        If the input does not follow the format's grammar
    ValidationError
        If the parsed alignment violates an alignment invariant

    Examples
    --------
    >>> aln = parse(">seq1\\nACGT--AC\\n>seq2\\nACGTTTAC\\n")
    >>> aln.width
    8
    """
    source = LineSource.coerce(source)
    if format is None:
        format = _detect(source)
        if format == FormatKind.UNKNOWN:
            raise UnknownFormatError(
                "Could not detect alignment format; pass format= explicitly"
            )

    handler = get_handler(format)
    candidate = handler.parse(source)
    return validate(
        candidate,
        alphabet=alphabet,
        extra_gaps=handler.extra_gaps,
        identifier_check=handler.identifier_check,
        reserved=handler.reserved,
    )


def write(
    alignment: Alignment,
    format: FormatKind | str,
    options: Optional[WriteOptions] = None,
    alphabet: Alphabet = None,
) -> bytes:
    """
    Validate an alignment and serialise it.

    Parameters
    ----------
    alignment : Alignment
        Alignment to write
    format : FormatKind or str
        Output format
    options : WriteOptions, optional
        Wrap width and description output (format defaults when omitted)
    alphabet : SequenceType, str, set or None
        Allowed residues, checked before writing

    Returns
    -------
    bytes
        UTF-8 encoded file contents, every line newline-terminated

    Raises
    ------
    ValidationError
        If the alignment violates an invariant or has an identifier the
        format cannot carry
    """
    handler = get_handler(format)
    options = options or WriteOptions()
    validate(
        alignment,
        alphabet=alphabet,
        extra_gaps=handler.extra_gaps,
        identifier_check=handler.identifier_check,
        reserved=handler.reserved,
    )
    return handler.write(alignment, options).encode("utf-8")


def convert(
    source,
    to: FormatKind | str,
    from_format: Optional[FormatKind | str] = None,
    options: Optional[WriteOptions] = None,
    alphabet: Alphabet = None,
) -> bytes:
    """Parse ``source`` and write it back in format ``to``."""
    alignment = parse(source, format=from_format, alphabet=alphabet)
    return write(alignment, to, options=options, alphabet=alphabet)


def read_alignment(
    filepath: Path | str,
    format: Optional[FormatKind | str] = None,
    alphabet: Alphabet = None,
) -> Alignment:
    """
    Read an alignment file.

    Examples
    --------
    >>> aln = read_alignment("family.sto")
    >>> print(aln)
    """
    return parse(LineSource.from_path(filepath), format=format, alphabet=alphabet)


def write_alignment(
    alignment: Alignment,
    filepath: Path | str,
    format: Optional[FormatKind | str] = None,
    options: Optional[WriteOptions] = None,
    alphabet: Alphabet = None,
) -> None:
    """
    Write an alignment file.

    The format is taken from the file extension when not given.

    Raises
    ------
    ValueError
        If no format was given and the extension is not recognised
    """
    filepath = Path(filepath)
    if format is None:
        format = format_from_extension(filepath)
        if format == FormatKind.UNKNOWN:
            raise ValueError(
                f"Cannot determine alignment format from file name: {filepath.name}"
            )
    filepath.write_bytes(write(alignment, format, options=options, alphabet=alphabet))
