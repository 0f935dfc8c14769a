"""Character-by-character traversal of a string with line and column tracking."""

from __future__ import annotations

__all__ = ["StringFeederError", "StringFeeder"]


class StringFeederError(ValueError):
    """Raised when a feeder is read past its end or a required text is absent."""


class StringFeeder:
    """Walks a private copy of a string, tracking line and column.

    Lines start at 1 and columns at 0; consuming a newline moves to the next
    line and resets the column.
    """

    def __init__(self, s: str) -> None:
        self._s = str(s)
        self._pos = 0
        self._line = 1
        self._col = 0

    @property
    def line(self) -> int:
        """The current line number (1-based)."""
        return self._line

    @property
    def column(self) -> int:
        """The column within the current line."""
        return self._col

    @property
    def position(self) -> int:
        """The number of characters consumed so far."""
        return self._pos

    def has_next(self) -> bool:
        """True if at least one more character can be read."""
        return self._pos < len(self._s)

    def next(self) -> str:
        """Consume and return the next character."""
        if not self.has_next():
            raise StringFeederError("read past the end of the string")
        c = self._s[self._pos]
        self._pos += 1
        if c == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        return c

    def _clamp(self, length: int) -> int:
        if length < 0:
            raise ValueError("length must be non-negative")
        return min(length, len(self._s) - self._pos)

    def next_length(self, length: int) -> str:
        """Consume and return up to ``length`` characters."""
        return "".join(self.next() for _ in range(self._clamp(length)))

    def peek(self) -> str:
        """The next character without consuming it, or ``""`` at the end."""
        return self._s[self._pos : self._pos + 1]

    def peek_length(self, length: int) -> str:
        """Up to ``length`` upcoming characters, without consuming them."""
        return self._s[self._pos : self._pos + self._clamp(length)]

    def starts_with(self, s: str) -> bool:
        """True if the remaining text begins with ``s``."""
        return self._s.startswith(s, self._pos)

    def require(self, s: str) -> None:
        """Consume ``s``, raising if the upcoming text does not match it."""
        for expected in s:
            c = self.next()
            if c != expected:
                raise StringFeederError(
                    f"expected {expected!r} but found {c!r} at line "
                    f"{self._line}, column {self._col}"
                )