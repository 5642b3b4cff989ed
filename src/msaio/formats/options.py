"""
Writer configuration.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WriteOptions:
    """
    Layout options for the alignment writers.

    Attributes
    ----------
    wrap_width : int, optional
        Residues per output line (per block for interleaved formats). None
        selects the format's conventional width.
    emit_descriptions : bool
        Write record descriptions where the format can carry them
    """

    wrap_width: Optional[int] = None
    emit_descriptions: bool = True

    def __post_init__(self):
        if self.wrap_width is not None:
            if isinstance(self.wrap_width, bool) or not isinstance(self.wrap_width, int):
                raise ValueError(f"wrap_width must be an integer, got {self.wrap_width!r}")
            if self.wrap_width < 1:
                raise ValueError(f"wrap_width must be positive, got {self.wrap_width}")

    def width_for(self, default: int) -> int:
        """Effective wrap width given a format default."""
        return self.wrap_width if self.wrap_width is not None else default
