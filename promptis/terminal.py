"""Line-oriented terminal I/O used by every prompt.

Output goes through a rich Console; user-supplied text is never interpreted
as markup, so prompts like ``Continue? [y/n]`` print verbatim.
"""

import os
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from .exit_codes import ExitCode, exit_with_code

ERROR_STYLE = "red"
CANCEL_STYLE = "dim"


def make_console() -> Console:
    """Create a Console that respects NO_COLOR and works well for CLIs."""
    force_terminal = None
    if os.environ.get("NO_COLOR"):
        force_terminal = False
    return Console(force_terminal=force_terminal, highlight=False)


class Terminal:
    """A console for output paired with a stream for line input.

    Both default to the process's stdout and stdin, looked up at use time so
    redirected streams are honoured.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console if console is not None else make_console()
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def write(self, text: str) -> None:
        """Write text with no trailing newline and flush it.

        Raises:
            OSError: If the output stream rejects the write or flush
        """
        self.console.print(Text(text), end="", soft_wrap=True)
        self.console.file.flush()

    def print_line(self, text: str = "") -> None:
        self.console.print(Text(text), soft_wrap=True)

    def error(self, text: str) -> None:
        self.console.print(Text(text, style=ERROR_STYLE), soft_wrap=True)

    def read_line(self) -> str:
        """Read one line, including its newline if present.

        End of input and Ctrl+C cancel the program the same way the rest of
        the CLI does.

        Raises:
            OSError: If the input stream fails
            UnicodeDecodeError: If the line is not valid in the stream's encoding
        """
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            self._cancel(ExitCode.INTERRUPTED)
        if not line:
            self._cancel(ExitCode.SUCCESS)
        return line

    def _cancel(self, code: ExitCode) -> None:
        try:
            self._print_cancelled()
        finally:
            exit_with_code(code)

    def _print_cancelled(self) -> None:
        self.console.print()
        self.console.print(Text("Cancelled", style=CANCEL_STYLE))
