"""Ok and Err: the success/failure channel for every fallible conversion.

INVARIANT: Fallible operations return a Result; they never raise.
The only error kind is a human-readable message string.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ConversionError(ValueError):
    """Raised by :meth:`Err.get` and at library boundaries that require exceptions."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful conversion carrying *value*."""

    value: T

    @property
    def error(self) -> None:
        return None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))

    def flat_map(self, func: Callable[[T], Result[U]]) -> Result[U]:
        return func(self.value)

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed conversion carrying a human-readable *message*."""

    message: str

    @property
    def error(self) -> str:
        return self.message

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Err:
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> Err:
        return self

    def get(self) -> Any:
        raise ConversionError(self.message)

    def get_or_else(self, default: U) -> U:
        return default


Result = Ok[T] | Err
