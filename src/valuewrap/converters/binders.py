"""Native path and query-string binders for primitive types.

Binders parse the text of a URL path segment or query parameter. Parse
failures come back as ``Err`` with a message naming the parameter.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar
from urllib.parse import urlencode

from valuewrap.converters.protocols import QueryParams
from valuewrap.domain.result import Err, Ok, Result

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

TRUE_TOKENS = frozenset({"true", "1"})
FALSE_TOKENS = frozenset({"false", "0"})


def parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f'For input string: "{text}"')
    return int(text)


def parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f'For input string: "{text}"')
    return float(text)


def parse_bool(text: str) -> bool:
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    raise ValueError("should be true, false, 0 or 1")


def parse_uuid(text: str) -> uuid.UUID:
    if not UUID_PATTERN.fullmatch(text):
        raise ValueError(f'Invalid UUID string: "{text}"')
    return uuid.UUID(text)


def render_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class PathBinder(Generic[T]):
    """Path-segment binder for one primitive type."""

    type_name: str
    parse: Callable[[str], T]
    render: Callable[[T], str] = str

    def bind(self, key: str, segment: str) -> Result[T]:
        try:
            return Ok(self.parse(segment))
        except ValueError as exc:
            return Err(f"Cannot parse parameter {key} as {self.type_name}: {exc}")

    def unbind(self, key: str, value: T) -> str:
        return self.render(value)


@dataclass(frozen=True)
class QueryBinder(Generic[T]):
    """Query-parameter binder for one primitive type.

    Only the first value given for a key is bound. A missing key, or a key
    with no values, is absent. With *empty_is_absent* an empty string is
    absent as well, which suits every type except ``str``.
    """

    path: PathBinder[T]
    empty_is_absent: bool = True

    @property
    def type_name(self) -> str:
        return self.path.type_name

    def bind(self, key: str, params: QueryParams) -> Result[T] | None:
        values = params.get(key)
        if not values:
            return None
        first = values[0]
        if first == "" and self.empty_is_absent:
            return None
        return self.path.bind(key, first)

    def unbind(self, key: str, value: T) -> str:
        return urlencode({key: self.path.unbind(key, value)})


INT_PATH: PathBinder[int] = PathBinder("int", parse_int)
FLOAT_PATH: PathBinder[float] = PathBinder("float", parse_float)
STR_PATH: PathBinder[str] = PathBinder("str", str)
BOOL_PATH: PathBinder[bool] = PathBinder("bool", parse_bool, render_bool)
UUID_PATH: PathBinder[uuid.UUID] = PathBinder("UUID", parse_uuid)


def query_binder(path: PathBinder[T], *, empty_is_absent: bool = True) -> QueryBinder[T]:
    """Build the query binder matching *path*.

    Strings always bind empty values, since ``""`` is a valid ``str``.
    """
    if path.type_name == "str":
        empty_is_absent = False
    return QueryBinder(path, empty_is_absent=empty_is_absent)
