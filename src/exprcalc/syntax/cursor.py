"""Character-stream cursor for the expression grammar.

One SourceCursor is created per evaluation and owned by it exclusively.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Source text is fixed at construction
    - Position only moves forward, never past the end of the source
    - End of input is a sentinel character (EOF), not an exception
    - expect() is the single place that reports a one-character mismatch
"""

from exprcalc.constants import WHITESPACE_CHARS
from exprcalc.diagnostics import ErrorTemplate, ParseError

__all__ = ["EOF", "SourceCursor"]

# Returned by peek()/advance() at end of input. NUL never reaches the grammar
# as a valid character: it is neither digit, letter, operator nor whitespace.
EOF: str = "\0"


class SourceCursor:
    """Mutable scan position over an immutable source string.

    Invariant: ``0 <= pos <= len(source)``.

    Example:
        >>> cursor = SourceCursor("ab")
        >>> cursor.peek()
        'a'
        >>> cursor.advance()
        'a'
        >>> cursor.advance()
        'b'
        >>> cursor.advance() == EOF
        True
        >>> cursor.pos
        2
    """

    __slots__ = ("_pos", "_source")

    def __init__(self, source: str, pos: int = 0) -> None:
        """Create cursor over source.

        Args:
            source: Text to scan
            pos: Starting offset (default: 0)

        Raises:
            ValueError: If pos is outside ``[0, len(source)]``
        """
        if not 0 <= pos <= len(source):
            msg = f"Cursor position {pos} outside source of length {len(source)}"
            raise ValueError(msg)
        self._source = source
        self._pos = pos

    @property
    def source(self) -> str:
        """The scanned text."""
        return self._source

    @property
    def pos(self) -> int:
        """Current offset into the source."""
        return self._pos

    @property
    def is_eof(self) -> bool:
        """True when every character has been consumed."""
        return self._pos >= len(self._source)

    def peek(self) -> str:
        """Return the current character without advancing.

        Returns:
            Current character, or EOF at end of input
        """
        if self.is_eof:
            return EOF
        return self._source[self._pos]

    def advance(self) -> str:
        """Return the current character and move past it.

        Returns:
            The consumed character, or EOF (position unchanged) at end of input
        """
        char = self.peek()
        if not self.is_eof:
            self._pos += 1
        return char

    def skip_whitespace(self) -> None:
        """Advance past consecutive space, tab, carriage return and newline.

        Example:
            >>> cursor = SourceCursor(" \\t\\r\\n 1")
            >>> cursor.skip_whitespace()
            >>> cursor.peek()
            '1'
        """
        while self.peek() in WHITESPACE_CHARS:
            self._pos += 1

    def expect(self, expected: str) -> ParseError | None:
        """Consume expected if it is the current character.

        Args:
            expected: Required character (single character string)

        Returns:
            None on success; ParseError at the current position otherwise
            (the position is left unchanged)

        Example:
            >>> cursor = SourceCursor(")")
            >>> cursor.expect(")") is None
            True
            >>> cursor.expect(")").message
            "Expected ')'"
        """
        if self.peek() != expected:
            return ErrorTemplate.unexpected_character(expected, self._pos)
        self._pos += 1
        return None

    def slice_from(self, start_pos: int) -> str:
        """Extract source text consumed since start_pos.

        Args:
            start_pos: Earlier offset (inclusive)

        Returns:
            Source substring from start_pos to the current position
        """
        return self._source[start_pos : self._pos]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"SourceCursor(pos={self._pos}, length={len(self._source)})"
