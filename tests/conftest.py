"""Shared wrapper types and conversion rules for valuewrap tests."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from valuewrap.domain.result import Err, Ok, Result
from valuewrap.domain.wrapper import always_wrap, value_wrapper


@dataclass(frozen=True)
class PositiveInt:
    value: int


@dataclass(frozen=True)
class UserName:
    value: str


@dataclass(frozen=True)
class Percentage:
    value: float


@dataclass(frozen=True)
class OrderId:
    value: uuid.UUID


def _wrap_positive(v: int) -> Result[PositiveInt]:
    if v > 0:
        return Ok(PositiveInt(v))
    return Err("must be positive")


def _wrap_percentage(v: float) -> Result[Percentage]:
    if 0.0 <= v <= 100.0:
        return Ok(Percentage(v))
    return Err(f"{v} is not between 0 and 100")


POSITIVE_INT = value_wrapper(wrap=_wrap_positive, unwrap=lambda w: w.value, name="PositiveInt")
USER_NAME = always_wrap(UserName, lambda w: w.value)
PERCENTAGE = value_wrapper(wrap=_wrap_percentage, unwrap=lambda w: w.value, name="Percentage")
ORDER_ID = always_wrap(OrderId, lambda w: w.value)
