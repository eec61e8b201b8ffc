"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from promptis.config import reset_config
from promptis.terminal import Terminal


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_terminal():
    """Build a Terminal fed from the given input lines.

    Returns a factory ``make_terminal(*lines) -> (terminal, output)`` where
    ``output`` is the StringIO the console writes to.
    """

    def _make(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        output = io.StringIO()
        console = Console(file=output, force_terminal=False, color_system=None, width=200)
        return Terminal(console=console, stdin=stdin), output

    return _make
