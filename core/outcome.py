"""Handler outcomes and session status."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union


class SessionTerminated(Exception):
    """Graceful end of an interactive session."""


# Single instance for handlers that still report through an error channel
TERMINATE = SessionTerminated("session terminated")


class Status(str, Enum):
    """Result of driving a session."""

    COMPLETED = "completed"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Continue:
    """Print the text and read the next line."""

    text: str = ""


@dataclass(frozen=True)
class Terminate:
    """Print the text and end the session successfully."""

    text: str = ""


@dataclass(frozen=True)
class Fail:
    """Print the text and end the session with ``cause``."""

    text: str
    cause: Exception


Outcome = Union[Continue, Terminate, Fail]
Handler = Callable[[str], Outcome]


def from_result(text: str, error: Optional[Exception] = None) -> Outcome:
    """Convert a ``(text, error)`` pair into an outcome."""
    if error is None:
        return Continue(text)
    if error is TERMINATE:
        return Terminate(text)
    return Fail(text, error)
