"""
Gap symbols and residue alphabets.

Pure classification rules, no state. Residue sets follow the IUPAC codes and
accept both cases, since case is preserved verbatim by every parser.
"""

from enum import Enum
from typing import AbstractSet, Iterable, Optional, Union


class SequenceType(str, Enum):
    """Kind of residues an alignment holds."""
    NUCLEOTIDE = "nucleotide"
    PROTEIN = "protein"
    UNKNOWN = "unknown"


GAP_SYMBOLS = frozenset("-.")

# IUPAC nucleotide codes (DNA and RNA)
NUCLEOTIDES = "ACGTURYKMSWBDHVN"
NUCLEOTIDE_RESIDUES = frozenset(NUCLEOTIDES + NUCLEOTIDES.lower())

# 20 standard amino acids plus ambiguity codes, selenocysteine,
# pyrrolysine and the stop symbol
AMINO_ACIDS = "ACDEFGHIKLMNPQRSTVWYBZXJUO*"
PROTEIN_RESIDUES = frozenset(AMINO_ACIDS + AMINO_ACIDS.lower())

_UNAMBIGUOUS_NUCLEOTIDES = frozenset("ACGTUN")

Alphabet = Union[SequenceType, str, AbstractSet[str], None]


def is_gap(char: str, extra: str = "") -> bool:
    """Return True if ``char`` marks a column with no residue."""
    return char in GAP_SYMBOLS or char in extra


def residue_set(alphabet: Alphabet) -> Optional[AbstractSet[str]]:
    """
    Resolve an alphabet argument to a set of allowed residues.

    Parameters
    ----------
    alphabet : SequenceType, str, set or None
        ``None`` or ``SequenceType.UNKNOWN`` means unrestricted. A
        ``SequenceType`` (or its string value) selects the IUPAC set. Any
        other string or set is taken as the explicit set of residues.

    Returns
    -------
    set or None
        Allowed residue characters, or None when every printable,
        non-whitespace character is accepted.
    """
    if alphabet is None:
        return None
    if isinstance(alphabet, str):
        try:
            alphabet = SequenceType(alphabet)
        except ValueError:
            return frozenset(alphabet)
    if alphabet == SequenceType.NUCLEOTIDE:
        return NUCLEOTIDE_RESIDUES
    if alphabet == SequenceType.PROTEIN:
        return PROTEIN_RESIDUES
    if alphabet == SequenceType.UNKNOWN:
        return None
    return frozenset(alphabet)


def is_valid_char(
    char: str,
    residues: Optional[AbstractSet[str]] = None,
    extra_gaps: str = "",
) -> bool:
    """Return True if ``char`` may appear in an aligned sequence."""
    if is_gap(char, extra_gaps):
        return True
    if residues is None:
        return char.isprintable() and not char.isspace()
    return char in residues


def infer_sequence_type(sequences: Iterable[str]) -> SequenceType:
    """
    Guess whether aligned sequences are nucleotides or proteins.

    Gaps are ignored. More than 90% unambiguous nucleotide letters means
    nucleotide; otherwise letters that are all amino acid codes mean protein.
    """
    residues = "".join(
        char for seq in sequences for char in seq.upper() if not is_gap(char, "~")
    )
    if not residues:
        return SequenceType.UNKNOWN

    nuc_count = sum(1 for char in residues if char in _UNAMBIGUOUS_NUCLEOTIDES)
    if nuc_count / len(residues) > 0.9:
        return SequenceType.NUCLEOTIDE
    if all(char in PROTEIN_RESIDUES for char in residues):
        return SequenceType.PROTEIN
    return SequenceType.UNKNOWN
