"""Error class hierarchy tests."""

import pytest

from pysqljson._errors import (
    InvalidCastTypeError,
    InvalidFieldNameError,
    InvalidIndexError,
    InvalidJSONPathError,
    InvalidOperatorError,
    MaxPathDepthExceededError,
    SQLJSONError,
    UnterminatedIndexError,
    UnterminatedQuoteError,
)


class TestSQLJSONErrorBase:
    def test_str_returns_user_message(self):
        err = SQLJSONError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = SQLJSONError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = SQLJSONError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = SQLJSONError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        InvalidCastTypeError,
        InvalidJSONPathError,
        UnterminatedQuoteError,
        UnterminatedIndexError,
        InvalidIndexError,
        MaxPathDepthExceededError,
        InvalidFieldNameError,
        InvalidOperatorError,
    ]

    PATH_ERROR_CLASSES = [
        UnterminatedQuoteError,
        UnterminatedIndexError,
        InvalidIndexError,
        MaxPathDepthExceededError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_base(self, cls):
        assert issubclass(cls, SQLJSONError)

    @pytest.mark.parametrize("cls", PATH_ERROR_CLASSES)
    def test_path_errors_are_json_path_errors(self, cls):
        assert issubclass(cls, InvalidJSONPathError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"
