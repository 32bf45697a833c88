"""Native JSON formats for primitive types.

Error messages use the host framework's ``error.expected.*`` keys so that
failures from these readers can be told apart from wrapper-rule failures.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from valuewrap.converters.binders import UUID_PATTERN
from valuewrap.converters.protocols import JsonValue
from valuewrap.domain.result import Err, Ok, Result

T = TypeVar("T")

EXPECTED_NUMBER = "error.expected.jsnumber"
EXPECTED_INT = "error.expected.int"
EXPECTED_STRING = "error.expected.jsstring"
EXPECTED_BOOLEAN = "error.expected.jsboolean"
EXPECTED_UUID = "error.expected.uuid"


def _is_number(json_value: JsonValue) -> bool:
    # bool is an int subclass but a distinct JSON type
    return isinstance(json_value, int | float) and not isinstance(json_value, bool)


def read_int(json_value: JsonValue) -> Result[int]:
    if not _is_number(json_value):
        return Err(EXPECTED_NUMBER)
    if isinstance(json_value, float):
        if not json_value.is_integer():
            return Err(EXPECTED_INT)
        return Ok(int(json_value))
    return Ok(json_value)


def read_float(json_value: JsonValue) -> Result[float]:
    if not _is_number(json_value):
        return Err(EXPECTED_NUMBER)
    try:
        return Ok(float(json_value))
    except OverflowError:
        return Err(EXPECTED_NUMBER)


def read_str(json_value: JsonValue) -> Result[str]:
    if not isinstance(json_value, str):
        return Err(EXPECTED_STRING)
    return Ok(json_value)


def read_bool(json_value: JsonValue) -> Result[bool]:
    if not isinstance(json_value, bool):
        return Err(EXPECTED_BOOLEAN)
    return Ok(json_value)


def read_uuid(json_value: JsonValue) -> Result[uuid.UUID]:
    if not isinstance(json_value, str) or not UUID_PATTERN.fullmatch(json_value):
        return Err(EXPECTED_UUID)
    return Ok(uuid.UUID(json_value))


@dataclass(frozen=True)
class PrimitiveFormat(Generic[T]):
    """JSON format for one primitive type, built from a reader and a writer."""

    type_name: str
    read: Callable[[JsonValue], Result[T]]
    write: Callable[[T], JsonValue]

    def reads(self, json_value: JsonValue) -> Result[T]:
        return self.read(json_value)

    def writes(self, value: T) -> JsonValue:
        return self.write(value)


def _identity(value: T) -> T:
    return value


INT_FORMAT: PrimitiveFormat[int] = PrimitiveFormat("int", read_int, _identity)
FLOAT_FORMAT: PrimitiveFormat[float] = PrimitiveFormat("float", read_float, _identity)
STR_FORMAT: PrimitiveFormat[str] = PrimitiveFormat("str", read_str, _identity)
BOOL_FORMAT: PrimitiveFormat[bool] = PrimitiveFormat("bool", read_bool, _identity)
UUID_FORMAT: PrimitiveFormat[uuid.UUID] = PrimitiveFormat("UUID", read_uuid, str)
