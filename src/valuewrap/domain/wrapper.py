"""ValueWrapper: the conversion rule binding a primitive type to its wrapper.

A rule takes a primitive value ``V`` and wraps it in a ``W``, and takes a
``W`` and unwraps it back to a ``V``. For example, given::

    @dataclass(frozen=True)
    class PositiveInt:
        value: int

the rule can be built from two plain functions::

    POSITIVE_INT = value_wrapper(
        wrap=lambda v: Ok(PositiveInt(v)) if v > 0 else Err("must be positive"),
        unwrap=lambda w: w.value,
        name="PositiveInt",
    )

``wrap`` returns a Result so that primitives which are not a valid
representation of ``W`` (out of range, malformed) are rejected with a message.

INVARIANT: ``unwrap(wrap(v).get()) == v`` whenever ``wrap(v)`` succeeds.
Rules are created once, usually as module constants, and never mutated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from valuewrap.domain.result import Err, Ok, Result

V = TypeVar("V")
W = TypeVar("W")


class ValueWrapper(ABC, Generic[V, W]):
    """Abstract conversion rule between primitive ``V`` and wrapper ``W``."""

    @property
    def name(self) -> str:
        """Label used in log records and CLI metavars."""
        return type(self).__name__

    @abstractmethod
    def wrap(self, value: V) -> Result[W]:
        """Return ``Ok`` with the wrapped value, or ``Err`` if *value* cannot be wrapped.

        Must be pure and must not raise.
        """
        ...

    @abstractmethod
    def unwrap(self, wrapped: W) -> V:
        """Project *wrapped* back to its primitive. Pure and total."""
        ...

    def check(self, samples: Iterable[V]) -> list[str]:
        """Check the embedding law against *samples*.

        Returns one message per violation. Samples that ``wrap`` rejects are
        skipped; the law only constrains successful wraps.
        """
        violations: list[str] = []
        for value in samples:
            result = self.wrap(value)
            if isinstance(result, Err):
                continue
            back = self.unwrap(result.value)
            if back != value:
                violations.append(f"{self.name}: unwrap(wrap({value!r})) gave {back!r}")
            rewrapped = self.wrap(back)
            if not isinstance(rewrapped, Ok) or rewrapped.value != result.value:
                violations.append(f"{self.name}: wrap(unwrap(w)) differs for {result.value!r}")
        return violations


@dataclass(frozen=True)
class FunctionWrapper(ValueWrapper[V, W]):
    """Rule assembled from a pair of plain functions."""

    wrap_func: Callable[[V], Result[W]]
    unwrap_func: Callable[[W], V]
    label: str = "FunctionWrapper"

    @property
    def name(self) -> str:
        return self.label

    def wrap(self, value: V) -> Result[W]:
        return self.wrap_func(value)

    def unwrap(self, wrapped: W) -> V:
        return self.unwrap_func(wrapped)


def value_wrapper(
    *,
    wrap: Callable[[V], Result[W]],
    unwrap: Callable[[W], V],
    name: str | None = None,
) -> FunctionWrapper[V, W]:
    """Build a rule from *wrap* and *unwrap* functions."""
    return FunctionWrapper(wrap_func=wrap, unwrap_func=unwrap, label=name or "FunctionWrapper")


def always_wrap(
    constructor: Callable[[V], W],
    unwrap: Callable[[W], V],
    *,
    name: str | None = None,
) -> FunctionWrapper[V, W]:
    """Build a rule for a wrapper that accepts every primitive value."""
    return value_wrapper(
        wrap=lambda v: Ok(constructor(v)),
        unwrap=unwrap,
        name=name or getattr(constructor, "__name__", None),
    )
