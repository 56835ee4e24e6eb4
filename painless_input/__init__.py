"""Painless terminal input.

Typed, validated line input and arrow-key selection that repaint in place:

    from painless_input import input, input_array, multiselect, select

    age = input("Age: ", int)
    scores = input_array("Scores: ", float)
    color = select("Color: ", ["red", "green", "blue"])
    extras = multiselect("Extras:", "Done", ["Cheese", "Olives"])

Parse failures and rejected values are shown inline and the user tries
again; these functions only return valid values. The cursor is left right
after the drawn input, so callers usually print a newline next.

Logging:
    Set PAINLESS_INPUT_LOG_FILE (and PAINLESS_INPUT_LOG_LEVEL) to record
    prompt state transitions to a file.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from .elements import (
    ArrayPrompt,
    CheckboxSelect,
    ElementManager,
    MenuSelect,
    TextPrompt,
)
from .logs import configure_logging
from .validation import (
    ParseError,
    Parser,
    Validation,
    ValidationError,
    Validator,
    as_check,
)

T = TypeVar("T")

configure_logging()


def _manager(manager: ElementManager | None) -> ElementManager:
    return manager if manager is not None else ElementManager()


def input(
    prompt: str,
    parse: Parser[T] = str,  # type: ignore[assignment]
    *,
    manager: ElementManager | None = None,
) -> T:
    """Read one value, re-asking until it parses.

    Example:
        number = input("Enter a number: ", int)
    """
    return input_with_validation(prompt, None, parse, manager=manager)


def input_with_validation(
    prompt: str,
    validation: Validation[T] | None,
    parse: Parser[T] = str,  # type: ignore[assignment]
    *,
    manager: ElementManager | None = None,
) -> T:
    """Read one value that parses and passes ``validation``.

    ``validation`` returns None to accept the value or a message to show.

    Example:
        small = input_with_validation(
            "Enter a number: ",
            lambda n: None if n < 10 else "Please enter a number less than 10",
            int,
        )
    """
    element: TextPrompt[T] = TextPrompt(
        prompt=prompt, parse=parse, validate=as_check(validation)
    )
    return _manager(manager).run(element)


def input_array(
    prompt: str,
    parse: Parser[T] = str,  # type: ignore[assignment]
    *,
    manager: ElementManager | None = None,
) -> list[T]:
    """Read a list, one element per Enter; Enter on an empty element ends it.

    Example:
        numbers = input_array("Enter numbers: ", int)
    """
    return input_array_with_validation(prompt, None, parse, manager=manager)


def input_array_with_validation(
    prompt: str,
    validation: Validation[list[T]] | None,
    parse: Parser[T] = str,  # type: ignore[assignment]
    *,
    manager: ElementManager | None = None,
) -> list[T]:
    """Read a list whose elements parse and which passes ``validation``.

    A rejected list is cleared and entered again from the start.

    Example:
        triple = input_array_with_validation(
            "Enter 3 numbers: ",
            lambda xs: None if len(xs) == 3 else "Please enter 3 numbers",
            int,
        )
    """
    element: ArrayPrompt[T] = ArrayPrompt(
        prompt=prompt, parse=parse, validate=as_check(validation)
    )
    return _manager(manager).run(element)


def select(
    prompt: str,
    options: Sequence[Any],
    *,
    manager: ElementManager | None = None,
) -> int:
    """Pick one of ``options`` with the arrow keys; returns its index."""
    return _manager(manager).run(MenuSelect(prompt=prompt, options=options))


def multiselect(
    prompt: str,
    submit_label: str,
    options: Sequence[str],
    *,
    manager: ElementManager | None = None,
) -> list[bool]:
    """Toggle any of ``options``; returns one boolean per option."""
    element = CheckboxSelect(prompt=prompt, submit_label=submit_label, options=options)
    return _manager(manager).run(element)


select_input = select
multiselect_input = multiselect

__all__ = [
    "input",
    "input_with_validation",
    "input_array",
    "input_array_with_validation",
    "select",
    "select_input",
    "multiselect",
    "multiselect_input",
    "ElementManager",
    "Parser",
    "Validator",
    "Validation",
    "ParseError",
    "ValidationError",
    "configure_logging",
]
