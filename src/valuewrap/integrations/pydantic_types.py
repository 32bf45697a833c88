"""Pydantic field support for wrapper types.

Annotate a field with :class:`WrappedValue` to validate it through the
derived JSON reader and serialize it through the derived writer::

    class Order(BaseModel):
        quantity: Annotated[PositiveInt, WrappedValue(POSITIVE_INT, INT_FORMAT, PositiveInt)]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from valuewrap.converters.protocols import JsonFormat
from valuewrap.derivation import WrappedFormat, formats
from valuewrap.domain.result import Err
from valuewrap.domain.wrapper import ValueWrapper

V = TypeVar("V")
W = TypeVar("W")


@dataclass(frozen=True)
class WrappedValue(Generic[V, W]):
    """``Annotated`` marker binding a pydantic field to a ValueWrapper.

    Attributes:
        rule: The conversion rule for the field's wrapper type.
        primitive: JSON format of the wrapped primitive.
        wrapper_type: Instances of this type are accepted as-is.
        json_schema: JSON schema reported for the field (default: any value).
    """

    rule: ValueWrapper[V, W]
    primitive: JsonFormat[V]
    wrapper_type: type[W] | None = None
    json_schema: dict[str, Any] | None = field(default=None, compare=False)
    format: WrappedFormat[V, W] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", formats(self.rule, self.primitive))

    def validate(self, value: Any) -> W:
        """Read *value* into the wrapper type, raising ``ValueError`` on ``Err``."""
        if self.wrapper_type is not None and isinstance(value, self.wrapper_type):
            return value
        result = self.format.reads(value)
        if isinstance(result, Err):
            raise ValueError(result.message)
        return result.value

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(self.format.writes),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return dict(self.json_schema or {})
