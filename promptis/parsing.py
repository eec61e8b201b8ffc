"""Conversion of a line of terminal input into a requested Python type.

Any of the following can be used as a read target:

- ``str`` (the text itself) and ``Char`` (exactly one character)
- ``Count``, a whole number that cannot be negative
- ``bool``, written as ``true`` or ``false``
- ``Enum`` subclasses, by member name (any case) or by value
- classes with a ``from_str(text)`` classmethod
- any other callable taking the text, e.g. ``int``, ``float``, ``Decimal``

A parser signals bad input by raising ``ValueError``, ``TypeError`` or
``ArithmeticError``; these are reported as ``ParseError``.
"""

from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar, Union

from .errors import ParseError

T = TypeVar("T")

Target = Union[Type[T], Callable[[str], T]]

__all__ = [
    "Char",
    "Count",
    "Target",
    "parse_value",
    "try_parse",
]


class Char(str):
    """A string holding exactly one character."""

    def __new__(cls, value: str) -> "Char":
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)}")
        return super().__new__(cls, value)

    @classmethod
    def from_str(cls, text: str) -> "Char":
        return cls(text)


class Count(int):
    """A whole number of zero or more, for quantities and repeat counts."""

    @classmethod
    def from_str(cls, text: str) -> "Count":
        if text.startswith("-"):
            raise ValueError("expected zero or a positive whole number")
        return cls(int(text))


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("expected 'true' or 'false'")


def _parse_enum(text: str, target: Type[Enum]) -> Enum:
    lowered = text.lower()
    for member in target:
        if member.name.lower() == lowered:
            return member
    for member in target:
        if str(member.value) == text:
            return member
    names = ", ".join(member.name for member in target)
    raise ValueError(f"expected one of: {names}")


def parse_value(text: str, target: Target[T]) -> T:
    """Parse ``text`` as ``target``.

    Args:
        text: Input with surrounding whitespace already removed
        target: Type (or callable) to convert to

    Returns:
        The converted value

    Raises:
        ParseError: If ``text`` is not a valid rendering of ``target``
    """
    try:
        if target is str:
            return text  # type: ignore[return-value]
        if target is bool:
            return _parse_bool(text)  # type: ignore[return-value]

        from_str: Optional[Callable[[str], Any]] = getattr(target, "from_str", None)
        if callable(from_str):
            return from_str(text)
        if isinstance(target, type) and issubclass(target, Enum):
            return _parse_enum(text, target)  # type: ignore[return-value]
        return target(text)  # type: ignore[call-arg]
    except ParseError:
        raise
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ParseError(text, target, str(e)) from e  # type: ignore[arg-type]


def try_parse(text: str, target: Target[T]) -> Optional[T]:
    """Parse ``text`` as ``target``, returning None instead of raising."""
    try:
        return parse_value(text, target)
    except ParseError:
        return None
