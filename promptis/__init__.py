"""promptis: typed terminal input for command-line programs.

Ask for a value, keep asking until it parses, offer a numbered menu or a
yes/no question, and let the user bail out with a quit phrase.

Quick Start:
    >>> from promptis import Prompter
    >>> age = Prompter().set_prompt("Age: ").set_error_message("Try again").read_until_valid(int)
    >>> if Prompter().confirm("Continue?"):
    ...     print("continuing")
"""

# Version
__version__ = "0.3.0"

from promptis.errors import EmptyOptionsError, ParseError, PromptisError
from promptis.exit_codes import ExitCode
from promptis.parsing import Char, Count, parse_value, try_parse
from promptis.prompter import Prompter, ReadResult
from promptis.terminal import Terminal, make_console

__all__ = [
    # Version
    "__version__",
    # Prompting
    "Prompter",
    "ReadResult",
    "Terminal",
    "make_console",
    # Parsing
    "Char",
    "Count",
    "parse_value",
    "try_parse",
    # Errors
    "EmptyOptionsError",
    "ParseError",
    "PromptisError",
    "ExitCode",
]
