"""Builder-style helper for asking the user for typed input.

Example:
    >>> ask = Prompter().set_quit("quit").set_error_message("Not a number")
    >>> count = ask.set_prompt("How many? ").read_until_valid(int)
"""

import copy
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from .errors import EmptyOptionsError, ParseError
from .exit_codes import ExitCode, exit_with_code
from .logging import get_logger
from .parsing import Char, Target, parse_value
from .terminal import Terminal

logger = get_logger(__name__)

T = TypeVar("T")

CONFIRM_SUFFIX = "[y/n] "


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of a single prompt-and-read."""

    line: str
    value: Optional[T]
    parsed: bool


class Prompter:
    """Prompts for, reads and parses one line of terminal input at a time.

    Setters change this instance and return it, so configuration chains:

        Prompter().set_prompt("Quantity: ").set_quit("quit").read_until_valid(float)

    Use ``copy()`` to derive a variant without touching the original.
    """

    def __init__(self, terminal: Optional[Terminal] = None):
        self.prompt_text = ""
        self.quit_sentinel: Optional[str] = None
        self.error_message: Optional[str] = None
        self.terminal = terminal if terminal is not None else Terminal()

    def __repr__(self) -> str:
        return (
            f"Prompter(prompt_text={self.prompt_text!r}, "
            f"quit_sentinel={self.quit_sentinel!r}, "
            f"error_message={self.error_message!r})"
        )

    # --- Configuration ---

    def set_prompt(self, text: str) -> "Prompter":
        """Set the text shown before each read."""
        self.prompt_text = text
        return self

    def set_quit(self, text: str) -> "Prompter":
        """Set a phrase that ends the program when entered."""
        self.quit_sentinel = text
        return self

    def set_error_message(self, text: str) -> "Prompter":
        """Set the message shown after invalid input in retrying reads."""
        self.error_message = text
        return self

    def copy(self) -> "Prompter":
        """Return an independent copy sharing the same terminal."""
        return copy.copy(self)

    # --- Reading ---

    def read_raw(self, target: Target[T] = str) -> ReadResult[T]:
        """Prompt once, read a line and try to parse it as ``target``.

        Stream errors are shown to the user and the line is treated as empty.
        If the trimmed line matches the quit sentinel the process exits with
        status 0 before any parsing happens.
        """
        try:
            self.terminal.write(self.prompt_text)
            line = self.terminal.read_line().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Terminal I/O failed", error=str(e))
            self._show(f"Failed to read input: {e}", error=True)
            line = ""

        if self.quit_sentinel is not None and line == self.quit_sentinel:
            exit_with_code(ExitCode.SUCCESS)

        try:
            value = parse_value(line, target)
        except ParseError:
            return ReadResult(line=line, value=None, parsed=False)
        return ReadResult(line=line, value=value, parsed=True)

    def read_once(self, target: Target[T]) -> Optional[T]:
        """Read a single line; return the parsed value, or None if it didn't parse.

        Never retries and never shows the error message.
        """
        return self.read_raw(target).value

    def read_until_valid(self, target: Target[T]) -> T:
        """Keep prompting until the input parses as ``target``.

        The error message, if set, is shown after every invalid line. There is
        no retry limit; the quit sentinel is the only other way out.
        """
        while True:
            result = self.read_raw(target)
            if result.parsed:
                return result.value  # type: ignore[return-value]
            if self.error_message is not None:
                self._show(self.error_message, error=True)

    def choose_from_options(self, options: Sequence[T], prompt_text: str) -> T:
        """Show a numbered list and return a copy of the option picked.

        Args:
            options: Items to choose from, listed using ``str(item)``
            prompt_text: Prompt shown for each attempt

        Returns:
            A shallow copy of the chosen item

        Raises:
            EmptyOptionsError: If ``options`` is empty
        """
        if not options:
            raise EmptyOptionsError("Cannot choose from an empty list of options")

        count = len(options)
        for i, option in enumerate(options, start=1):
            self._show(f"{i}. {option}")

        chooser = self.copy().set_prompt(prompt_text)
        if chooser.error_message is None:
            chooser.set_error_message(f"Please enter a number between 1 and {count}.")

        while True:
            choice = chooser.read_until_valid(int)
            if 1 <= choice <= count:
                return copy.copy(options[choice - 1])
            self._show(
                f"{choice} is out of range. Please enter a number between 1 and {count}.",
                error=True,
            )

    def confirm(self, prompt_text: str) -> bool:
        """Ask a yes/no question; ``y`` gives True and ``n`` gives False.

        Anything else re-asks without an error message.
        """
        asker = self.copy().set_prompt(f"{prompt_text} {CONFIRM_SUFFIX}")
        while True:
            answer = asker.read_once(Char)
            if answer is None:
                continue
            if answer.lower() == "y":
                return True
            if answer.lower() == "n":
                return False

    def _show(self, text: str, error: bool = False) -> None:
        """Print a line for the user, or log it if stdout itself has failed."""
        try:
            if error:
                self.terminal.error(text)
            else:
                self.terminal.print_line(text)
        except OSError as e:
            logger.warning("Terminal output failed", message=text, error=str(e))
