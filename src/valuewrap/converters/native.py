"""Native converters grouped per primitive type.

``NativeConverters`` is the set of host-provided instances that the
derivation layer delegates to. Lookup is explicit: callers pass the
primitive type they wrap.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from valuewrap.converters.binders import (
    BOOL_PATH,
    FLOAT_PATH,
    INT_PATH,
    STR_PATH,
    UUID_PATH,
    PathBinder,
    QueryBinder,
    query_binder,
)
from valuewrap.converters.formats import (
    BOOL_FORMAT,
    FLOAT_FORMAT,
    INT_FORMAT,
    STR_FORMAT,
    UUID_FORMAT,
    PrimitiveFormat,
)

if TYPE_CHECKING:
    from valuewrap.config.settings import ValueWrapSettings

T = TypeVar("T")


@dataclass(frozen=True)
class Native(Generic[T]):
    """The JSON format, path binder and query binder for one primitive type."""

    format: PrimitiveFormat[T]
    path: PathBinder[T]
    query: QueryBinder[T]


def _native(fmt: PrimitiveFormat[T], path: PathBinder[T], empty_is_absent: bool) -> Native[T]:
    return Native(fmt, path, query_binder(path, empty_is_absent=empty_is_absent))


def _defaults(empty_is_absent: bool) -> dict[type, Native[Any]]:
    return {
        int: _native(INT_FORMAT, INT_PATH, empty_is_absent),
        float: _native(FLOAT_FORMAT, FLOAT_PATH, empty_is_absent),
        str: _native(STR_FORMAT, STR_PATH, empty_is_absent),
        bool: _native(BOOL_FORMAT, BOOL_PATH, empty_is_absent),
        uuid.UUID: _native(UUID_FORMAT, UUID_PATH, empty_is_absent),
    }


@dataclass(frozen=True)
class NativeConverters:
    """Native converters keyed by primitive type."""

    empty_query_is_absent: bool = True
    _by_type: dict[type, Native[Any]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_type", _defaults(self.empty_query_is_absent))

    @classmethod
    def from_settings(cls, settings: ValueWrapSettings) -> NativeConverters:
        return cls(empty_query_is_absent=settings.binders.empty_query_is_absent)

    @property
    def types(self) -> tuple[type, ...]:
        return tuple(self._by_type)

    def for_type(self, primitive: type[T]) -> Native[T]:
        """Return the converters for *primitive*.

        Raises ``KeyError`` if no native converters exist for it.
        """
        try:
            return self._by_type[primitive]
        except KeyError:
            raise KeyError(f"No native converters for {primitive.__name__}") from None


DEFAULT_NATIVES = NativeConverters()
