"""A growable text buffer that is built up one piece at a time."""

from __future__ import annotations

__all__ = ["StringBuffer"]


class StringBuffer:
    """Accumulates characters and strings; ``str()`` gives the contents."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def _text(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def append(self, c: str) -> None:
        """Append a single character."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._parts.append(c)
        self._size += 1

    def append_string(self, s: str) -> None:
        """Append a whole string."""
        if s:
            self._parts.append(s)
            self._size += len(s)

    def appendf(self, fmt: str, *args: object) -> None:
        """Append ``fmt`` formatted printf-style with ``args``."""
        self.append_string(fmt % args if args else fmt % ())

    def pop_back(self) -> str:
        """Remove and return the last character, or ``""`` if empty."""
        if self._size == 0:
            return ""
        text = self._text()
        self._parts = [text[:-1]]
        self._size -= 1
        return text[-1]

    def ends_with(self, s: str) -> bool:
        """True if the contents end with ``s``; an empty ``s`` always matches."""
        return self._text().endswith(s)

    def reset(self) -> None:
        """Discard the contents."""
        self._parts = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return self._text()

    def __repr__(self) -> str:
        return f"StringBuffer({self._text()!r})"