"""Reader/writer bundle for command-line sessions."""

import sys
from typing import Any, Optional, TextIO


class ReaderWriter:
    """
    Bundles the already-open streams of a command-line session.

    The streams stay owned by the caller; nothing here closes them.
    """

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        error_writer: Optional[TextIO] = None,
    ):
        if reader is None or writer is None:
            raise ValueError("reader and writer are required")
        self._reader = reader
        self._writer = writer
        self._error_writer = error_writer if error_writer is not None else writer

    @classmethod
    def std(cls) -> "ReaderWriter":
        """Build a bundle over the process's standard streams."""
        return cls(sys.stdin, sys.stdout, sys.stderr)

    def reader(self) -> TextIO:
        return self._reader

    def writer(self) -> TextIO:
        return self._writer

    def error_writer(self) -> TextIO:
        return self._error_writer

    @staticmethod
    def _write(stream: TextIO, values: tuple[Any, ...], end: str = "") -> None:
        stream.write("".join(str(v) for v in values) + end)
        stream.flush()

    def output(self, *values: Any) -> None:
        """Write values to the writer."""
        self._write(self._writer, values)

    def outputln(self, *values: Any) -> None:
        """Write values to the writer followed by a newline."""
        self._write(self._writer, values, "\n")

    def output_err(self, *values: Any) -> None:
        """Write values to the error writer."""
        self._write(self._error_writer, values)

    def output_errln(self, *values: Any) -> None:
        """Write values to the error writer followed by a newline."""
        self._write(self._error_writer, values, "\n")
