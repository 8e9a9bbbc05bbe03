"""Shared pytest fixtures and configuration."""

import importlib.util
import io
import logging
from pathlib import Path

import pytest
import structlog

from core import Prompt, PromptOptions, ReaderWriter

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class FailingWriter(io.StringIO):
    """Text sink whose writes fail once armed, or only for chosen texts."""

    def __init__(self, fail_all: bool = False, fail_on: tuple[str, ...] = ()):
        super().__init__()
        self.fail_all = fail_all
        self.fail_on = fail_on

    def write(self, s):
        if self.fail_all or s in self.fail_on:
            raise OSError("write failed")
        return super().write(s)


class FailingReader(io.StringIO):
    """Text source that raises after its initial content is consumed."""

    def readline(self, size=-1):
        line = super().readline(size)
        if not line:
            raise OSError("read failed")
        return line


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the stream handler and level set by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog output out of test captures."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_prompt():
    """Build a prompt over in-memory streams."""

    def _make(text, handler, writer=None, **options):
        rw = ReaderWriter(io.StringIO(text), writer if writer is not None else io.StringIO())
        return Prompt(rw, handler, PromptOptions(**options)), rw

    return _make


@pytest.fixture
def basic_usage():
    """Load the example shell module."""
    spec = importlib.util.spec_from_file_location(
        "basic_usage", EXAMPLES_DIR / "basic_usage.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
