"""
Line source consumed by the format parsers.
"""

from collections import deque
from pathlib import Path
from typing import Deque, Iterable, Iterator, List, Tuple, Union

from .errors import ParseError, ParseReason


class LineSource:
    """
    Ordered, peekable stream of text lines.

    Lines may be given as ``str`` or ``bytes``; bytes are decoded with
    ``encoding`` one line at a time, so undecodable input fails as a
    ``ParseError`` naming its line. Line terminators are stripped.
    Iterating yields ``(line_number, text)`` pairs with 1-based line numbers.
    ``peek`` buffers lines without consuming them, so a detector can look
    ahead and the chosen parser still sees the whole input.

    A source is single-use: once a parser has consumed it, it is exhausted.

    Examples
    --------
    >>> source = LineSource.from_text(">seq1\\nACGT\\n")
    >>> source.peek(1)
    ['>seq1']
    >>> next(source)
    (1, '>seq1')
    """

    def __init__(self, lines: Iterable[Union[str, bytes]], encoding: str = "utf-8"):
        self._lines = iter(lines)
        self._encoding = encoding
        self._buffer: Deque[str] = deque()
        self._line_no = 0

    @classmethod
    def from_text(cls, text: str) -> "LineSource":
        """Create a source over the lines of an in-memory string."""
        return cls(text.splitlines())

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = "utf-8") -> "LineSource":
        """Create a source over the lines of an in-memory byte string."""
        return cls(data.splitlines(), encoding=encoding)

    @classmethod
    def from_path(cls, filepath: Path | str, encoding: str = "utf-8") -> "LineSource":
        """Create a source over the lines of a text file (read eagerly)."""
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Alignment file not found: {filepath}")
        return cls.from_bytes(filepath.read_bytes(), encoding=encoding)

    @classmethod
    def coerce(cls, source) -> "LineSource":
        """
        Turn any supported input into a ``LineSource``.

        Accepts an existing ``LineSource`` (returned as is), a ``str`` holding
        the file contents, ``bytes``, a ``pathlib.Path`` or an iterable of
        lines (for example an open text file).
        """
        if isinstance(source, LineSource):
            return source
        if isinstance(source, str):
            return cls.from_text(source)
        if isinstance(source, (bytes, bytearray)):
            return cls.from_bytes(bytes(source))
        if isinstance(source, Path):
            return cls.from_path(source)
        return cls(source)

    @property
    def line_no(self) -> int:
        """Number of the last line handed out (0 before the first)."""
        return self._line_no

    def _decode(self, raw: Union[str, bytes], line_no: int) -> str:
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(self._encoding)
            except UnicodeDecodeError as e:
                raise ParseError(
                    line_no,
                    ParseReason.MALFORMED_LINE,
                    f"Line is not valid {self._encoding} text: {e.reason} at byte {e.start}",
                ) from None
        return raw.rstrip("\r\n")

    def _fill(self, n: int) -> None:
        while len(self._buffer) < n:
            try:
                raw = next(self._lines)
            except StopIteration:
                return
            line_no = self._line_no + len(self._buffer) + 1
            self._buffer.append(self._decode(raw, line_no))

    def peek(self, n: int = 1) -> List[str]:
        """Return up to ``n`` upcoming lines without consuming them."""
        self._fill(n)
        return [self._buffer[i] for i in range(min(n, len(self._buffer)))]

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self

    def __next__(self) -> Tuple[int, str]:
        self._fill(1)
        if not self._buffer:
            raise StopIteration
        self._line_no += 1
        return self._line_no, self._buffer.popleft()
