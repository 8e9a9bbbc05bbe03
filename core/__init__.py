"""Core module - interactive session loop and its collaborators."""

from core.outcome import (
    TERMINATE,
    Continue,
    Fail,
    Handler,
    Outcome,
    SessionTerminated,
    Status,
    Terminate,
    from_result,
)
from core.prompt import Prompt, PromptOptions
from core.rwi import ReaderWriter
from core.scanner import LineScanner, LineTooLongError
from core.terminal import is_cygwin_terminal, is_terminal

__all__ = [
    "Prompt",
    "PromptOptions",
    "ReaderWriter",
    "LineScanner",
    "LineTooLongError",
    "Continue",
    "Terminate",
    "Fail",
    "Outcome",
    "Handler",
    "Status",
    "SessionTerminated",
    "TERMINATE",
    "from_result",
    "is_terminal",
    "is_cygwin_terminal",
]
