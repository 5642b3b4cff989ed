"""
Alignment invariant checks shared by every reader and writer.
"""

from typing import Callable, Optional

from .alphabet import Alphabet, is_valid_char, residue_set
from .errors import ValidationError, ValidationKind
from .sequences import Alignment

# Returns a reason string when an identifier cannot be carried by a format
IdentifierCheck = Callable[[str], Optional[str]]


def validate(
    alignment: Alignment,
    alphabet: Alphabet = None,
    extra_gaps: str = "",
    identifier_check: Optional[IdentifierCheck] = None,
    reserved: str = "",
) -> Alignment:
    """
    Check that a candidate alignment is well formed.

    Checks identifiers (non-empty, no whitespace, ``identifier_check``),
    identifier uniqueness, equal row widths and finally the residue alphabet.
    Record order is carried by the alignment itself and is never changed.

    Parameters
    ----------
    alignment : Alignment
        Candidate alignment
    alphabet : SequenceType, str, set or None
        Allowed residues; None accepts any printable non-whitespace character
    extra_gaps : str
        Gap symbols accepted in addition to ``-`` and ``.``
    identifier_check : callable, optional
        Format-specific identifier rule returning an error reason or None
    reserved : str
        Characters the target format cannot carry inside a sequence; they
        are rejected whatever the alphabet

    Returns
    -------
    Alignment
        The same alignment object, unchanged

    Raises
    ------
    ValidationError
        On the first violated invariant
    """
    seen = set()
    for record in alignment.records:
        identifier = record.identifier
        if not identifier or any(char.isspace() for char in identifier):
            raise ValidationError(
                ValidationKind.INVALID_IDENTIFIER,
                f"Invalid sequence identifier: {identifier!r}",
                identifiers=[identifier],
            )
        if identifier_check is not None:
            problem = identifier_check(identifier)
            if problem:
                raise ValidationError(
                    ValidationKind.INVALID_IDENTIFIER,
                    f"Invalid sequence identifier {identifier!r}: {problem}",
                    identifiers=[identifier],
                )
        if identifier in seen:
            raise ValidationError.duplicate(identifier)
        seen.add(identifier)

    width = alignment.width
    offending = [record for record in alignment.records if len(record) != width]
    if offending:
        first = offending[0]
        raise ValidationError(
            ValidationKind.WIDTH_MISMATCH,
            f"Sequence {first.identifier} has length {len(first)}, expected {width}",
            identifiers=[record.identifier for record in offending],
            expected=width,
            actual=len(first),
        )

    residues = residue_set(alphabet)
    for record in alignment.records:
        for position, char in enumerate(record.sequence, start=1):
            if char in reserved or not is_valid_char(char, residues, extra_gaps):
                raise ValidationError(
                    ValidationKind.INVALID_CHARACTER,
                    f"Sequence {record.identifier} has invalid character "
                    f"{char!r} at column {position}",
                    identifiers=[record.identifier],
                )

    return alignment
