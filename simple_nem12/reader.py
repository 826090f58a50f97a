"""
Line cursor for simple-nem12.

``LineCursor`` wraps a text stream and hands out one record at a time as
a list of fields.  It keeps at most one line buffered ahead, so a consumer
can look at the next record (``peek_next()``) before deciding whether to
consume it (``read_next()``).  Memory use does not depend on file size.

Splitting is a literal ``str.split(separator)`` on the line with its
terminator removed.  There is no quoting or escaping.

Read errors from the stream (``OSError``, ``UnicodeDecodeError``) are
raised as ``Nem12IOError`` with the original error chained.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from simple_nem12.config import DEFAULT_SEPARATOR, ParserConfig
from simple_nem12.exceptions import Nem12IOError

logger = logging.getLogger(__name__)

# Stands for "not peeked yet"; None already means end of input.
_EMPTY = object()


class LineCursor:
    """Peekable, line-by-line field reader over a text stream.

    Attributes:
        separator: Literal delimiter used to split each line.
        lines_read: Number of lines consumed through ``read_next()``.
            Peeks and end-of-input reads are not counted.
    """

    def __init__(self, stream: TextIO, separator: str = DEFAULT_SEPARATOR) -> None:
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self._stream = stream
        self.separator = separator
        self.lines_read = 0
        self._pending: list[str] | None | object = _EMPTY

    def __repr__(self) -> str:
        return f"LineCursor(separator={self.separator!r}, lines_read={self.lines_read})"

    def __iter__(self) -> Iterator[list[str]]:
        return self

    def __next__(self) -> list[str]:
        fields = self.read_next()
        if fields is None:
            raise StopIteration
        return fields

    def read_next(self) -> list[str] | None:
        """Consume and return the next record's fields, or ``None`` at end of input."""
        fields = self.peek_next()
        self._pending = _EMPTY
        if fields is not None:
            self.lines_read += 1
        return fields

    def peek_next(self) -> list[str] | None:
        """Return what the next ``read_next()`` will return, without consuming it."""
        if self._pending is _EMPTY:
            self._pending = self._read_line()
        return self._pending  # type: ignore[return-value]

    def _read_line(self) -> list[str] | None:
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # ValueError: I/O operation on closed file
            raise Nem12IOError(
                f"Failed to read line {self.lines_read + 1}: {e}"
            ) from e
        if not line:
            return None
        return line.rstrip("\r\n").split(self.separator)


@contextmanager
def open_cursor(
    path: str | Path,
    config: ParserConfig | None = None,
) -> Iterator[LineCursor]:
    """Open *path* and yield a ``LineCursor`` over it; the file is closed on exit.

    Raises:
        Nem12IOError: If the file cannot be opened.
    """
    config = config or ParserConfig()
    path = Path(path)
    try:
        f = open(path, "r", encoding=config.encoding, newline="")
    except OSError as e:
        raise Nem12IOError(f"Cannot open {path}: {e}") from e
    logger.debug("Opened %s (encoding=%s)", path, config.encoding)
    with f:
        yield LineCursor(f, separator=config.separator)
