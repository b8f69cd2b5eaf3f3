"""
Tests for zodform.types.Result.
"""

import dataclasses

import pytest

from zodform import Result, SchemaValidationError, StringSchema, ZodformError


class TestResult:
    def test_success(self):
        result = Result.success("hello")
        assert result.is_success
        assert result.data == "hello"
        assert result.errors is None
        assert result.error_message is None

    def test_failure(self):
        result = Result.failure({"value": "Too short"})
        assert not result.is_success
        assert result.data is None
        assert result.errors == {"value": "Too short"}
        assert result.error_message == "Too short"

    def test_error_message_is_first_inserted(self):
        result = Result.failure({"b": "second key, first value", "a": "other"})
        assert result.error_message == "second key, first value"

    def test_failure_copies_errors(self):
        errors = {"value": "Bad"}
        result = Result.failure(errors)
        errors["value"] = "Changed"
        assert result.error_message == "Bad"

    def test_frozen(self):
        result = Result.success("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.data = "y"  # type: ignore[misc]

    def test_bool(self):
        assert Result.success("")
        assert not Result.failure({"value": "Bad"})

    def test_errors_are_read_only(self):
        result = StringSchema().min(5, "Too short").parse("hi")
        with pytest.raises(TypeError):
            result.errors["value"] = "Changed"  # type: ignore[index]
        assert result.error_message == "Too short"


class TestVariants:
    def test_success_with_errors_rejected(self):
        with pytest.raises(ValueError):
            Result(is_success=True, data="x", errors={"value": "bad"})

    def test_failure_without_errors_rejected(self):
        with pytest.raises(ValueError):
            Result(is_success=False)

    def test_failure_with_data_rejected(self):
        with pytest.raises(ValueError):
            Result(is_success=False, data="x", errors={"value": "bad"})

    def test_direct_construction(self):
        assert Result(is_success=True, data="x").data == "x"
        assert Result(is_success=False, errors={"value": "bad"}).error_message == "bad"


class TestUnwrap:
    def test_unwrap_success(self):
        assert Result.success("ok").unwrap() == "ok"

    def test_unwrap_failure(self):
        result = Result.failure({"value": "Invalid email"})
        with pytest.raises(SchemaValidationError) as exc_info:
            result.unwrap()
        assert exc_info.value.errors == {"value": "Invalid email"}
        assert str(exc_info.value) == "Invalid email"

    def test_error_hierarchy(self):
        err = SchemaValidationError({"value": "x"})
        assert isinstance(err, ZodformError)
        assert isinstance(err, ValueError)
