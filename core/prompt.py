"""Interactive prompt session for command-line shells."""

from typing import Optional

from pydantic import BaseModel, Field

from config import get_logger
from config.settings import Settings
from core.outcome import Continue, Fail, Handler, Outcome, Status, Terminate
from core.rwi import ReaderWriter
from core.scanner import DEFAULT_MAX_LINE_LENGTH, LineScanner
from core.terminal import is_terminal

logger = get_logger(__name__)

# Horizontal whitespace stripped from both ends of every line
LINE_TRIM_CHARS = "\t "


class PromptOptions(BaseModel):
    """Session configuration. Empty strings disable the matching output."""

    header_message: str = Field(default="", description="Written once before the first read")
    prompt_string: str = Field(default="", description="Written before every read")
    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        gt=0,
        description="Longest accepted input line",
    )

    @classmethod
    def from_settings(cls, settings: Settings, interactive: bool = True) -> "PromptOptions":
        """Build options from application settings.

        The prompt string is dropped for non-interactive streams when
        ``settings.prompt_only_on_terminal`` is set.
        """
        prompt_string = settings.prompt_string
        if settings.prompt_only_on_terminal and not interactive:
            prompt_string = ""
        return cls(
            header_message=settings.header_message,
            prompt_string=prompt_string,
            max_line_length=settings.max_line_length,
        )


class Prompt:
    """
    Read-evaluate-print loop over a reader/writer bundle.

    Each input line, stripped of surrounding tabs and spaces, is passed to the
    handler and the handler's text is written back. A session is driven by a
    single call to ``run()`` or ``once()`` and is not reused afterwards.
    """

    def __init__(
        self,
        rw: ReaderWriter,
        handler: Handler,
        options: Optional[PromptOptions] = None,
    ):
        if rw is None:
            raise ValueError("rw is required")
        if handler is None:
            raise ValueError("handler is required")
        self.options = options or PromptOptions()
        self._rw = rw
        self._scanner = LineScanner(rw.reader(), self.options.max_line_length)
        self._used = False
        self._handler = handler

    def is_terminal(self) -> bool:
        """Report whether both the reader and the writer are an interactive terminal."""
        return is_terminal(self._rw.reader()) and is_terminal(self._rw.writer())

    def run(self) -> Status:
        """
        Handle lines until input is exhausted or the handler ends the session.

        Returns:
            Status.COMPLETED, or Status.TERMINATED for a session that cannot run

        Raises:
            OSError: Writing the header or a result failed
            Exception: The cause of a handler ``Fail``, or a recorded read failure
        """
        if not self._start():
            return Status.TERMINATED

        while True:
            line = self._get()
            if line is None:
                break
            if not self._dispatch(line):
                return Status.COMPLETED

        self._raise_reader_error()
        logger.debug("session_completed")
        return Status.COMPLETED

    def once(self) -> Status:
        """
        Handle a single line.

        Returns:
            Status.COMPLETED after the line is handled, or Status.TERMINATED
            when no line can be read (end of input or a read failure)

        Raises:
            OSError: Writing the header or the result failed
            Exception: The cause of a handler ``Fail``, or a recorded read failure
        """
        if not self._start():
            return Status.TERMINATED

        line = self._get()
        if line is None:
            logger.debug("session_terminated", reason="no_line")
            return Status.TERMINATED

        self._dispatch(line)
        self._raise_reader_error()
        return Status.COMPLETED

    def _start(self) -> bool:
        """Claim the session and write the header. False if the session cannot run."""
        if getattr(self, "_handler", None) is None or self._used:
            logger.debug("session_unavailable")
            return False
        self._used = True

        logger.debug(
            "session_started",
            header=bool(self.options.header_message),
            prompt=bool(self.options.prompt_string),
        )
        if self.options.header_message:
            self._rw.outputln(self.options.header_message)
        return True

    def _get(self) -> Optional[str]:
        """Show the prompt and read the next line. None when no line is available."""
        if self.options.prompt_string:
            try:
                self._rw.output(self.options.prompt_string)
            except OSError as e:
                logger.debug("prompt_write_failed", error=str(e))
        if not self._scanner.scan():
            return None
        return self._scanner.text().strip(LINE_TRIM_CHARS)

    def _dispatch(self, line: str) -> bool:
        """Pass a line to the handler and write its text. False ends the session."""
        outcome: Outcome = self._handler(line)

        if isinstance(outcome, Continue):
            self._rw.outputln(outcome.text)
            return True

        if isinstance(outcome, Terminate):
            self._write_best_effort(outcome.text)
            logger.debug("session_terminated", reason="handler")
            return False
        if isinstance(outcome, Fail):
            self._write_best_effort(outcome.text)
            logger.info(
                "handler_failed",
                error=str(outcome.cause),
                error_type=type(outcome.cause).__name__,
            )
            raise outcome.cause
        raise TypeError(f"handler returned {type(outcome).__name__}, expected an outcome")

    def _write_best_effort(self, text: str) -> None:
        try:
            self._rw.outputln(text)
        except OSError as e:
            logger.warning("result_write_failed", error=str(e))

    def _raise_reader_error(self) -> None:
        error = self._scanner.error()
        if error is not None:
            raise error
