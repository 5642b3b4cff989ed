"""
Fragment accumulation shared by the block-interleaved formats.

Clustal, Stockholm and MSF split every sequence into fragments spread over
repeating blocks. A ``BlockAccumulator`` lives for one parse call and keeps
an ordered mapping from identifier to its fragments so far.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..io.errors import ParseError, ParseReason, ValidationError
from ..io.sequences import SequenceRecord


class BlockAccumulator:
    """
    Collect per-identifier fragments across interleaved blocks.

    The first block (or the ``identifiers`` given up front, as MSF declares
    them in its header) fixes which identifiers exist and their order. Every
    later block must contain exactly those identifiers once each, and all
    fragments of one block must have the same length.

    Parameters
    ----------
    identifiers : sequence of str, optional
        Identifiers declared before the first block
    """

    def __init__(self, identifiers: Optional[Sequence[str]] = None):
        self._fragments: Dict[str, List[str]] = {}
        self._fixed = identifiers is not None
        self._current: List[str] = []
        self._block_width: Optional[int] = None
        self._block_start = 0

        for identifier in identifiers or ():
            if identifier in self._fragments:
                raise ValidationError.duplicate(identifier)
            self._fragments[identifier] = []

    @property
    def identifiers(self) -> List[str]:
        return list(self._fragments)

    def add(self, identifier: str, fragment: str, line_no: int) -> None:
        """Append one fragment line of the current block."""
        if not self._current:
            self._block_start = line_no

        if identifier in self._current:
            if not self._fixed:
                raise ValidationError.duplicate(identifier)
            raise ParseError(
                line_no,
                ParseReason.INCONSISTENT_BLOCK,
                f"Identifier {identifier!r} appears twice in the block "
                f"starting at line {self._block_start}",
            )
        if identifier not in self._fragments:
            if self._fixed:
                raise ParseError(
                    line_no,
                    ParseReason.INCONSISTENT_BLOCK,
                    f"Identifier {identifier!r} was not present in the first block",
                )
            self._fragments[identifier] = []

        if self._block_width is None:
            self._block_width = len(fragment)
        elif len(fragment) != self._block_width:
            raise ParseError(
                line_no,
                ParseReason.FRAGMENT_LENGTH,
                f"Fragment for {identifier!r} has length {len(fragment)}, "
                f"expected {self._block_width} as in the rest of the block",
            )

        self._current.append(identifier)
        self._fragments[identifier].append(fragment)

    def end_block(self, line_no: int) -> None:
        """Close the current block; a no-op if it is empty."""
        if not self._current:
            return
        if self._fixed:
            missing = [i for i in self._fragments if i not in self._current]
            if missing:
                raise ParseError(
                    line_no,
                    ParseReason.INCONSISTENT_BLOCK,
                    f"Block starting at line {self._block_start} is missing "
                    f"identifiers: {', '.join(missing)}",
                )
        self._fixed = True
        self._current = []
        self._block_width = None

    def records(self, line_no: int) -> List[SequenceRecord]:
        """Close any open block and return the assembled records."""
        self.end_block(line_no)
        return [
            SequenceRecord(identifier, "".join(fragments))
            for identifier, fragments in self._fragments.items()
        ]


def block_ranges(width: int, wrap_width: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(start, stop)`` column ranges of consecutive output blocks."""
    for start in range(0, width, wrap_width):
        yield start, min(start + wrap_width, width)


def fragment_line(identifier: str, fragment: str, id_width: int) -> str:
    """Identifier padded to ``id_width`` followed by its fragment."""
    return f"{identifier:<{id_width}}{fragment}".rstrip()
