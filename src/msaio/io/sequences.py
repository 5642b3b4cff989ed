"""
Format-agnostic alignment data model.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class SequenceRecord:
    """
    One aligned sequence.

    Attributes
    ----------
    identifier : str
        Sequence name, a single whitespace-free token
    sequence : str
        Aligned residues including gap symbols, case preserved
    description : str, optional
        Free text that followed the identifier (FASTA header, Stockholm
        ``#=GS DE`` line)
    """

    identifier: str
    sequence: str
    description: Optional[str] = None

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class Alignment:
    """
    Multiple sequence alignment.

    An ordered, immutable collection of ``SequenceRecord`` objects. The
    constructor does not check the alignment invariants (equal widths,
    unique identifiers); ``msaio.io.validate.validate`` does, and every
    alignment returned by ``msaio.parse`` has been validated.

    Attributes
    ----------
    records : tuple of SequenceRecord
        Records in source order
    annotations : dict
        Alignment-level metadata recovered by a parser (for example the
        Clustal program and version). Not part of equality.

    Examples
    --------
    >>> aln = Alignment.from_pairs([("seq1", "ACGT--AC"), ("seq2", "ACGTTTAC")])
    >>> aln.width
    8
    >>> aln["seq2"].sequence
    'ACGTTTAC'
    """

    records: Tuple[SequenceRecord, ...] = ()
    annotations: Dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, str]], annotations: Optional[Dict[str, str]] = None
    ) -> "Alignment":
        """Build an alignment from ``(identifier, sequence)`` pairs."""
        records = [SequenceRecord(identifier, sequence) for identifier, sequence in pairs]
        return cls(records=tuple(records), annotations=dict(annotations or {}))

    @property
    def width(self) -> int:
        """Number of alignment columns (0 for an empty alignment)."""
        return len(self.records[0]) if self.records else 0

    @property
    def identifiers(self) -> list[str]:
        return [record.identifier for record in self.records]

    @property
    def sequences(self) -> list[str]:
        return [record.sequence for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[SequenceRecord]:
        return iter(self.records)

    def __contains__(self, identifier: object) -> bool:
        return any(record.identifier == identifier for record in self.records)

    def __getitem__(self, key: Union[int, str]) -> SequenceRecord:
        if isinstance(key, str):
            for record in self.records:
                if record.identifier == key:
                    return record
            raise KeyError(key)
        return self.records[key]

    def column(self, index: int) -> str:
        """Characters of one column, top to bottom."""
        return "".join(record.sequence[index] for record in self.records)

    def iter_columns(self) -> Iterator[str]:
        for i in range(self.width):
            yield self.column(i)

    def to_array(self) -> np.ndarray:
        """
        Character matrix of the alignment.

        Returns
        -------
        ndarray, shape (n_sequences, width)
            Array of single-character strings (dtype ``'<U1'``)
        """
        if not self.records:
            return np.empty((0, 0), dtype="<U1")
        return np.array([list(seq) for seq in self.sequences], dtype="<U1").reshape(
            len(self.records), self.width
        )

    def slice_columns(self, start: Optional[int] = None, stop: Optional[int] = None) -> "Alignment":
        """Return a new alignment restricted to columns ``start:stop``."""
        records = tuple(
            replace(record, sequence=record.sequence[start:stop]) for record in self.records
        )
        return Alignment(records=records, annotations=dict(self.annotations))

    def append(self, record: SequenceRecord) -> "Alignment":
        """Return a new alignment with ``record`` added at the end."""
        return Alignment(records=self.records + (record,), annotations=dict(self.annotations))

    def __str__(self) -> str:
        if not self.records:
            return "No sequence in alignment"

        n_rows = len(self.records)
        n_cols = self.width
        header = (
            f"Alignment with {n_rows} row{'' if n_rows == 1 else 's'}"
            f" and {n_cols} column{'' if n_cols == 1 else 's'}"
        )

        lines = [header]
        for record in self.records[:10]:
            seq = record.sequence
            shown = seq[:30] + "..." if len(seq) > 30 else seq
            lines.append(f"{record.identifier}\t{shown}")
        if n_rows > 10:
            lines.append("...")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Alignment(n_sequences={len(self.records)}, width={self.width})"
