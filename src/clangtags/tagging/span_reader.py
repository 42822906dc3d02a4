"""Recover the source text a tag points at."""

from __future__ import annotations

from typing import BinaryIO

from ..config import SpanStrategy
from ..errors import SpanReadError
from ..provider.cursor import Cursor


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class SpanReader:
    """Reads tag text from an open source file.

    Two strategies are supported:
    - "byte_range": seek to the cursor's extent and read it, keeping only
      the first physical line. A span that starts before the cursor's own
      line is read from the start of that line. Cost depends on the span,
      not the line number.
    - "line_count": rewind and read lines until the cursor's line. Each call
      is independent of the previous one.

    Every failure raises SpanReadError; the reader never returns partial text.
    """

    def __init__(self, srcfile: BinaryIO, path: str, strategy: SpanStrategy = "byte_range"):
        self._srcfile = srcfile
        self._path = path
        self.strategy = strategy

    def read(self, cursor: Cursor) -> str:
        """Return the tag text for a cursor using the configured strategy."""
        if self.strategy == "line_count":
            return self.read_line(cursor.location.line)
        location = cursor.location
        extent = cursor.extent
        start = extent.start
        if location.column >= 1:
            # The extent may begin on an earlier line ("static int\nhelper(void)")
            start = max(start, location.offset - (location.column - 1))
        return self.read_extent(start, extent.end)

    def read_line(self, line: int) -> str:
        """
        Return the text of a 1-based line, trailing CR/LF stripped.

        Raises:
            SpanReadError: If the line does not exist or the file can't be read.
        """
        if line < 1:
            raise SpanReadError(self._path, f"invalid line number {line}")

        try:
            self._srcfile.seek(0)
            data = b""
            for _ in range(line):
                data = self._srcfile.readline()
                if not data:
                    raise SpanReadError(self._path, f"line {line} is past end of file")
        except OSError as e:
            raise SpanReadError(self._path, str(e)) from e

        return _decode(data.rstrip(b"\r\n"))

    def read_extent(self, start: int, end: int) -> str:
        """
        Return the first physical line of the inclusive byte span [start, end].

        Raises:
            SpanReadError: On an empty span, a short read, or an I/O error.
        """
        length = end - start + 1
        if start < 0 or length <= 0:
            raise SpanReadError(self._path, f"invalid extent {start}-{end}")

        try:
            self._srcfile.seek(start)
            data = self._srcfile.read(length)
        except OSError as e:
            raise SpanReadError(self._path, str(e)) from e

        if len(data) < length:
            raise SpanReadError(
                self._path, f"short read at offset {start}: {len(data)} of {length} bytes"
            )

        # Only the first physical line of a multi-line extent is kept
        for i, byte in enumerate(data):
            if byte in (0x0D, 0x0A):
                data = data[:i]
                break

        return _decode(data)
