"""Parsing and validation capabilities shared by the input prompts.

A parser is any callable turning text into a value (``int``, ``float``,
``Decimal``, a constructor, ...). It signals bad input by raising one of
``PARSE_ERRORS``.

A validator either is a callable or has a ``validate`` method. It returns
``None`` to accept a candidate, or a message explaining the rejection.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Parser = Callable[[str], T]

# Exceptions a parser may raise on malformed text. decimal.InvalidOperation
# is an ArithmeticError, not a ValueError. Lookup parsers such as
# SomeEnum.__getitem__ or dict.__getitem__ raise KeyError.
PARSE_ERRORS: tuple[type[BaseException], ...] = (
    ValueError,
    TypeError,
    ArithmeticError,
    LookupError,
)


@runtime_checkable
class Validator(Protocol[T_contra]):
    """Object form of a validation predicate."""

    def validate(self, candidate: T_contra) -> str | None:
        ...


Validation = Union[Validator[T], Callable[[T], Union[str, None]]]


class ParseError(ValueError):
    """Raw text could not be converted to the target type."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid input: '{raw}'; try again")

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(ValueError):
    """A parsed value was rejected by the caller's predicate."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def always_valid(candidate: Any) -> None:
    """Default predicate: accepts everything."""
    return None


def as_check(validation: Validation[T] | None) -> Callable[[T], str | None]:
    """Normalize a validator object or callable into a plain callable."""
    if validation is None:
        return always_valid
    if isinstance(validation, Validator):
        return validation.validate
    if callable(validation):
        return validation
    raise TypeError(
        f"validation must be callable or define validate(), got {type(validation).__name__}"
    )


def parse_text(parse: Parser[T], raw: str) -> T:
    """Run ``parse`` on ``raw``, raising ParseError on failure."""
    try:
        return parse(raw)
    except PARSE_ERRORS as exc:
        raise ParseError(raw) from exc


def check(validate: Callable[[T], str | None], candidate: T) -> None:
    """Run a normalized predicate, raising ValidationError on rejection."""
    message = validate(candidate)
    if message is not None:
        raise ValidationError(str(message))
