#!/usr/bin/env python3
"""
Error types for promptis.
"""


class PromptisError(Exception):
    """Base exception for promptis-specific errors."""

    pass


class ParseError(PromptisError, ValueError):
    """Raised when a line of input cannot be converted to the requested type."""

    def __init__(self, text: str, target: type, reason: str = ""):
        self.text = text
        self.target = target
        self.reason = reason
        name = getattr(target, "__name__", repr(target))
        message = f"Cannot parse {text!r} as {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyOptionsError(PromptisError, ValueError):
    """Raised when a multiple-choice prompt is given nothing to choose from."""

    pass
