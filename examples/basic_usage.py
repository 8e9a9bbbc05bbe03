#!/usr/bin/env python3
"""
Basic usage example for the interactive prompt.

Runs a small shell on the standard streams:

    upper <text>   echo text in upper case
    lower <text>   echo text in lower case
    fail           end the session with an error
    quit / exit    end the session
    anything else  echoed back unchanged
"""

import sys
from typing import Optional

from config import Settings, get_logger, load_settings, setup_logging
from core import (
    Continue,
    Fail,
    Outcome,
    Prompt,
    PromptOptions,
    ReaderWriter,
    Terminate,
    is_terminal,
)

logger = get_logger(__name__)


def handle(line: str) -> Outcome:
    """Evaluate one command line."""
    command, _, rest = line.partition(" ")
    if command in ("quit", "exit"):
        return Terminate("Bye!")
    if command == "upper":
        return Continue(rest.upper())
    if command == "lower":
        return Continue(rest.lower())
    if command == "fail":
        return Fail("Error: failure requested", RuntimeError("failure requested"))
    return Continue(line)


def build_prompt(rw: ReaderWriter, app_settings: Settings) -> Prompt:
    """Create a prompt configured from the user's settings."""
    interactive = is_terminal(rw.reader()) and is_terminal(rw.writer())
    options = PromptOptions.from_settings(app_settings, interactive)
    return Prompt(rw, handle, options)


def main(app_name: Optional[str] = None) -> int:
    app_settings = load_settings(app_name)
    setup_logging(app_settings.log_level, app_settings.log_format)
    session = build_prompt(ReaderWriter.std(), app_settings)
    try:
        session.run()
    except Exception as e:
        logger.error("session_failed", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
