"""
Exceptions and warnings raised while reading and writing alignments.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple


class ParseReason(str, Enum):
    """Why a parser rejected its input."""
    EMPTY_INPUT = "empty-input"
    MISSING_BANNER = "missing-banner"
    MALFORMED_HEADER = "malformed-header"
    MALFORMED_LINE = "malformed-line"
    SEQUENCE_BEFORE_HEADER = "sequence-before-header"
    TRUNCATED = "truncated"
    INCONSISTENT_BLOCK = "inconsistent-block"
    FRAGMENT_LENGTH = "fragment-length"
    LENGTH_MISMATCH = "length-mismatch"
    CHECKSUM_MISMATCH = "checksum-mismatch"


class ValidationKind(str, Enum):
    """Which alignment invariant a candidate alignment violates."""
    WIDTH_MISMATCH = "width-mismatch"
    DUPLICATE_IDENTIFIER = "duplicate-identifier"
    INVALID_IDENTIFIER = "invalid-identifier"
    INVALID_CHARACTER = "invalid-character"


class MSAError(ValueError):
    """Base class for all alignment reading and writing errors."""


class UnknownFormatError(MSAError):
    """The input could not be classified as any supported format."""

    def __init__(self, message: str = "Could not detect alignment format"):
        super().__init__(message)


class ParseError(MSAError):
    """
    Input does not follow the grammar of the selected format.

    Attributes
    ----------
    line : int
        1-based number of the offending line. For errors raised at end of
        input this is the last line that was read (0 for empty input).
    reason : ParseReason
        Machine-readable reason code.
    message : str
        Human readable explanation.
    """

    def __init__(self, line: int, reason: ParseReason, message: str):
        self.line = line
        self.reason = ParseReason(reason)
        self.message = message
        super().__init__(f"line {line}: {message} [{self.reason.value}]")


class ValidationError(MSAError):
    """
    A parsed or caller-built alignment violates an alignment invariant.

    Attributes
    ----------
    kind : ValidationKind
        The violated invariant.
    identifiers : tuple of str
        Identifiers of the offending records.
    expected, actual : int or None
        Expected and actual widths for ``WIDTH_MISMATCH``.
    details : str
        Human readable explanation.
    """

    def __init__(
        self,
        kind: ValidationKind,
        details: str,
        identifiers: Iterable[str] = (),
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.kind = ValidationKind(kind)
        self.details = details
        self.identifiers: Tuple[str, ...] = tuple(identifiers)
        self.expected = expected
        self.actual = actual
        super().__init__(f"{details} [{self.kind.value}]")

    @classmethod
    def duplicate(cls, identifier: str) -> "ValidationError":
        return cls(
            ValidationKind.DUPLICATE_IDENTIFIER,
            f"Duplicate sequence identifier: {identifier!r}",
            identifiers=[identifier],
        )


class FormatWarning(UserWarning):
    """Input or output that is accepted but unusual for its format."""
