"""Tests for the pydantic WrappedValue annotation."""

from __future__ import annotations

import json
from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from tests.conftest import POSITIVE_INT, USER_NAME, PositiveInt, UserName
from valuewrap.converters.formats import INT_FORMAT, STR_FORMAT
from valuewrap.integrations.pydantic_types import WrappedValue

PositiveIntField = Annotated[
    PositiveInt,
    WrappedValue(
        POSITIVE_INT,
        INT_FORMAT,
        PositiveInt,
        json_schema={"type": "integer", "exclusiveMinimum": 0},
    ),
]
UserNameField = Annotated[UserName, WrappedValue(USER_NAME, STR_FORMAT, UserName)]


class Order(BaseModel):
    quantity: PositiveIntField
    owner: UserNameField


class TestValidation:
    def test_python_input(self) -> None:
        order = Order.model_validate({"quantity": 3, "owner": "ada"})
        assert order.quantity == PositiveInt(3)
        assert order.owner == UserName("ada")

    def test_json_input(self) -> None:
        order = Order.model_validate_json('{"quantity": 7, "owner": "bob"}')
        assert order.quantity == PositiveInt(7)

    def test_wrapper_instances_pass_through(self) -> None:
        order = Order(quantity=PositiveInt(2), owner=UserName("eve"))
        assert order.quantity == PositiveInt(2)

    def test_wrap_failure(self) -> None:
        with pytest.raises(ValidationError, match="must be positive"):
            Order.model_validate({"quantity": -1, "owner": "ada"})

    def test_underlying_failure(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Order.model_validate_json('{"quantity": "abc", "owner": "ada"}')
        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("quantity",)
        assert "error.expected.jsnumber" in errors[0]["msg"]
        assert "must be positive" not in errors[0]["msg"]


class TestSerialization:
    def test_model_dump(self) -> None:
        order = Order(quantity=PositiveInt(4), owner=UserName("ada"))
        assert order.model_dump() == {"quantity": 4, "owner": "ada"}

    def test_model_dump_json(self) -> None:
        order = Order(quantity=PositiveInt(4), owner=UserName("ada"))
        assert json.loads(order.model_dump_json()) == {"quantity": 4, "owner": "ada"}

    def test_json_schema(self) -> None:
        props = Order.model_json_schema()["properties"]
        assert props["quantity"]["type"] == "integer"
        assert props["quantity"]["exclusiveMinimum"] == 0
