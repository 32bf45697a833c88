"""Tests for the native JSON formats."""

import json
import uuid

import pytest

from valuewrap.converters.formats import (
    BOOL_FORMAT,
    EXPECTED_BOOLEAN,
    EXPECTED_INT,
    EXPECTED_NUMBER,
    EXPECTED_STRING,
    EXPECTED_UUID,
    FLOAT_FORMAT,
    INT_FORMAT,
    STR_FORMAT,
    UUID_FORMAT,
)
from valuewrap.domain.result import Err, Ok


class TestIntFormat:
    @pytest.mark.parametrize("json_value,expected", [(5, 5), (-1, -1), (3.0, 3)])
    def test_reads_numbers(self, json_value: object, expected: int) -> None:
        result = INT_FORMAT.reads(json_value)
        assert result == Ok(expected)
        assert type(result.value) is int

    @pytest.mark.parametrize("json_value", ["abc", "5", None, True, [1], {"a": 1}])
    def test_rejects_non_numbers(self, json_value: object) -> None:
        assert INT_FORMAT.reads(json_value) == Err(EXPECTED_NUMBER)

    def test_rejects_fractional(self) -> None:
        assert INT_FORMAT.reads(1.5) == Err(EXPECTED_INT)

    def test_writes(self) -> None:
        assert INT_FORMAT.writes(42) == 42


class TestFloatFormat:
    def test_reads_int_as_float(self) -> None:
        result = FLOAT_FORMAT.reads(2)
        assert result == Ok(2.0)
        assert isinstance(result.value, float)

    def test_rejects_bool(self) -> None:
        assert FLOAT_FORMAT.reads(False) == Err(EXPECTED_NUMBER)

    def test_int_too_large_for_float(self) -> None:
        huge = json.loads("1" + "0" * 400)
        assert FLOAT_FORMAT.reads(huge) == Err(EXPECTED_NUMBER)


class TestStrFormat:
    def test_reads(self) -> None:
        assert STR_FORMAT.reads("") == Ok("")

    def test_rejects_number(self) -> None:
        assert STR_FORMAT.reads(5) == Err(EXPECTED_STRING)


class TestBoolFormat:
    def test_reads(self) -> None:
        assert BOOL_FORMAT.reads(True) == Ok(True)

    @pytest.mark.parametrize("json_value", [0, 1, "true"])
    def test_rejects_non_bool(self, json_value: object) -> None:
        assert BOOL_FORMAT.reads(json_value) == Err(EXPECTED_BOOLEAN)


class TestUuidFormat:
    def test_reads_and_writes(self) -> None:
        raw = "12345678-1234-5678-1234-567812345678"
        result = UUID_FORMAT.reads(raw)
        assert result == Ok(uuid.UUID(raw))
        assert UUID_FORMAT.writes(result.value) == raw

    @pytest.mark.parametrize(
        "json_value",
        [
            "not-a-uuid",
            12,
            None,
            "{12345678-1234-5678-1234-567812345678}",
            "urn:uuid:12345678-1234-5678-1234-567812345678",
            "12345678123456781234567812345678",
        ],
    )
    def test_rejects_invalid(self, json_value: object) -> None:
        assert UUID_FORMAT.reads(json_value) == Err(EXPECTED_UUID)
