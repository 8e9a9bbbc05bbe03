"""Line scanner over a text stream."""

from typing import Optional, TextIO

from config import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_LINE_LENGTH = 64 * 1024


class LineTooLongError(ValueError):
    """A line exceeded the scanner's maximum length."""


class LineScanner:
    """
    Reads a stream one line at a time.

    ``scan()`` advances to the next line and reports whether one was read;
    ``text()`` returns it without its line terminator. A read failure is
    recorded rather than raised, stops the scan, and is available from
    ``error()``. Reaching the end of input is not a failure.

    ``max_line_length`` counts decoded characters, not bytes, so a line of
    multi-byte text may hold more than ``max_line_length`` bytes.
    """

    def __init__(self, stream: TextIO, max_line_length: int = DEFAULT_MAX_LINE_LENGTH):
        if max_line_length <= 0:
            raise ValueError("max_line_length must be positive")
        self._stream = stream
        self._max_line_length = max_line_length
        self._text = ""
        self._error: Optional[Exception] = None
        self._done = False

    def scan(self) -> bool:
        """Advance to the next line."""
        if self._done:
            return False

        try:
            # Room for a CRLF terminator after a full-length line
            line = self._stream.readline(self._max_line_length + 2)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            return self._fail(e)

        if not line:
            self._done = True
            self._text = ""
            return False

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        elif line.endswith("\r"):
            line = line[:-1]

        if len(line) > self._max_line_length:
            return self._fail(
                LineTooLongError(f"line exceeds {self._max_line_length} characters")
            )

        self._text = line
        return True

    def _fail(self, error: Exception) -> bool:
        logger.warning("reader_error", error=str(error), error_type=type(error).__name__)
        self._error = error
        self._done = True
        self._text = ""
        return False

    def text(self) -> str:
        """Return the most recently scanned line."""
        return self._text

    def error(self) -> Optional[Exception]:
        """Return the recorded read failure, if any."""
        return self._error
