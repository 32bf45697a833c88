"""Converter capability shapes offered by the host framework.

JSON values are the plain objects produced by :func:`json.loads`.
Query parameters arrive as a mapping of key to every value given for it,
the shape :func:`urllib.parse.parse_qs` returns.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar

from valuewrap.domain.result import Result

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

JsonValue = Any
QueryParams = Mapping[str, Sequence[str]]


class JsonReads(Protocol[T_co]):
    """Reads a JSON value into a ``T``."""

    def reads(self, json_value: JsonValue) -> Result[T_co]: ...


class JsonWrites(Protocol[T_contra]):
    """Writes a ``T`` as a JSON value. Never fails."""

    def writes(self, value: T_contra) -> JsonValue: ...


class JsonFormat(JsonReads[T], JsonWrites[T], Protocol[T]):
    """Both JSON directions in one object."""


class PathBindable(Protocol[T]):
    """Converts a ``T`` to and from a URL path segment."""

    def bind(self, key: str, segment: str) -> Result[T]: ...

    def unbind(self, key: str, value: T) -> str: ...


class QueryStringBindable(Protocol[T]):
    """Converts a ``T`` to and from URL query parameters.

    ``bind`` returns None when the parameter is absent, and a Result when
    it is present (``Err`` if present but malformed).
    """

    def bind(self, key: str, params: QueryParams) -> Result[T] | None: ...

    def unbind(self, key: str, value: T) -> str: ...
