"""Derive wrapper-type converters from a ValueWrapper and primitive converters.

Each factory takes the rule and the primitive converter explicitly and
returns a converter of the same shape for the wrapper type:

- ``reads``: JSON value -> ``W``
- ``writes``: ``W`` -> JSON value
- ``formats``: both of the above
- ``path_bindable``: ``W`` <-> URL path segment
- ``query_string_bindable``: ``W`` <-> URL query parameter

Failures from the primitive converter pass through unchanged. ``wrap`` runs
only after the primitive converter succeeds, and its ``Err`` becomes the
converter's ``Err``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from valuewrap.converters.native import DEFAULT_NATIVES, NativeConverters
from valuewrap.converters.protocols import (
    JsonReads,
    JsonValue,
    JsonWrites,
    PathBindable,
    QueryParams,
    QueryStringBindable,
)
from valuewrap.domain.result import Result
from valuewrap.domain.wrapper import ValueWrapper

logger = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")


# ── JSON ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class WrappedReads(Generic[V, W]):
    rule: ValueWrapper[V, W]
    underlying: JsonReads[V]

    def reads(self, json_value: JsonValue) -> Result[W]:
        return self.underlying.reads(json_value).flat_map(self.rule.wrap)


@dataclass(frozen=True)
class WrappedWrites(Generic[V, W]):
    rule: ValueWrapper[V, W]
    underlying: JsonWrites[V]

    def writes(self, value: W) -> JsonValue:
        return self.underlying.writes(self.rule.unwrap(value))


@dataclass(frozen=True)
class WrappedFormat(Generic[V, W]):
    """Reader and writer for ``W`` in one object."""

    reader: WrappedReads[V, W]
    writer: WrappedWrites[V, W]

    def reads(self, json_value: JsonValue) -> Result[W]:
        return self.reader.reads(json_value)

    def writes(self, value: W) -> JsonValue:
        return self.writer.writes(value)


def reads(rule: ValueWrapper[V, W], underlying: JsonReads[V]) -> WrappedReads[V, W]:
    """Derive a JSON reader for ``W`` from a reader for ``V``."""
    logger.debug("Derived reads for %s", rule.name)
    return WrappedReads(rule, underlying)


def writes(rule: ValueWrapper[V, W], underlying: JsonWrites[V]) -> WrappedWrites[V, W]:
    """Derive a JSON writer for ``W`` from a writer for ``V``."""
    logger.debug("Derived writes for %s", rule.name)
    return WrappedWrites(rule, underlying)


def formats(
    rule: ValueWrapper[V, W],
    underlying_reads: JsonReads[V],
    underlying_writes: JsonWrites[V] | None = None,
) -> WrappedFormat[V, W]:
    """Derive a JSON format for ``W``.

    A single object implementing both directions may be passed as
    *underlying_reads* alone.
    """
    if underlying_writes is None:
        underlying_writes = underlying_reads  # type: ignore[assignment]
    return WrappedFormat(reads(rule, underlying_reads), writes(rule, underlying_writes))


# ── URL binders ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class WrappedPathBindable(Generic[V, W]):
    rule: ValueWrapper[V, W]
    underlying: PathBindable[V]

    def bind(self, key: str, segment: str) -> Result[W]:
        return self.underlying.bind(key, segment).flat_map(self.rule.wrap)

    def unbind(self, key: str, value: W) -> str:
        return self.underlying.unbind(key, self.rule.unwrap(value))


@dataclass(frozen=True)
class WrappedQueryStringBindable(Generic[V, W]):
    """Query binder for ``W``. Absence (None) is passed through untouched."""

    rule: ValueWrapper[V, W]
    underlying: QueryStringBindable[V]

    def bind(self, key: str, params: QueryParams) -> Result[W] | None:
        bound = self.underlying.bind(key, params)
        if bound is None:
            return None
        return bound.flat_map(self.rule.wrap)

    def unbind(self, key: str, value: W) -> str:
        return self.underlying.unbind(key, self.rule.unwrap(value))


def path_bindable(
    rule: ValueWrapper[V, W], underlying: PathBindable[V]
) -> WrappedPathBindable[V, W]:
    """Derive a path-segment binder for ``W`` from a binder for ``V``."""
    logger.debug("Derived path binder for %s", rule.name)
    return WrappedPathBindable(rule, underlying)


def query_string_bindable(
    rule: ValueWrapper[V, W], underlying: QueryStringBindable[V]
) -> WrappedQueryStringBindable[V, W]:
    """Derive a query-parameter binder for ``W`` from a binder for ``V``."""
    logger.debug("Derived query binder for %s", rule.name)
    return WrappedQueryStringBindable(rule, underlying)


# ── Bundle ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DerivedConverters(Generic[V, W]):
    """Every derived converter for one rule."""

    format: WrappedFormat[V, W]
    path: WrappedPathBindable[V, W]
    query: WrappedQueryStringBindable[V, W]


def derive_all(
    rule: ValueWrapper[V, W],
    primitive: type[V],
    natives: NativeConverters = DEFAULT_NATIVES,
) -> DerivedConverters[V, W]:
    """Derive the JSON format and both URL binders for ``W``.

    The primitive converters come from *natives*. Raises ``KeyError`` if
    *primitive* has none.
    """
    native = natives.for_type(primitive)
    return DerivedConverters(
        format=formats(rule, native.format),
        path=path_bindable(rule, native.path),
        query=query_string_bindable(rule, native.query),
    )
