"""
Tests for the error taxonomy and surfacing failures as exceptions.
"""

import pytest

from rulekit.errors import (
    AppError,
    ErrorCode,
    RuleKitError,
    ValidationException,
    configuration_error,
)
from rulekit.validation import NotEmptyValidator, Severity, ValidationFailure, raise_for_failures


class TestErrorCode:

    @pytest.mark.parametrize("code,category", [
        (ErrorCode.E2000_VALIDATION_GENERIC, "validation"),
        (ErrorCode.E7003_INVALID_ARGUMENT, "configuration"),
        (ErrorCode.E8000_CANCELLED, "cancellation"),
    ])
    def test_category(self, code, category):
        assert code.category == category


class TestAppError:

    def test_to_dict(self):
        error = AppError(ErrorCode.E7000_CONFIGURATION_GENERIC, "bad", origin="options", metadata={"a": 1})
        payload = error.to_dict()["error"]

        assert payload["code"] == "E7000_CONFIGURATION_GENERIC"
        assert payload["code_num"] == 7000
        assert payload["category"] == "configuration"
        assert payload["metadata"] == {"a": 1}

    def test_to_dict_includes_cause_when_present(self):
        cause = ValueError("root")
        error = AppError(ErrorCode.E7003_INVALID_ARGUMENT, "bad", cause=cause)

        assert error.to_dict()["error"]["cause"] == repr(cause)
        assert "cause" not in AppError(ErrorCode.E7003_INVALID_ARGUMENT, "bad").to_dict()["error"]

    def test_builder_keeps_cause(self):
        cause = ValueError("root")
        exc = configuration_error("bad", cause=cause)
        assert exc.error.cause is cause
        assert exc.error.metadata == {}

    def test_builder_drops_none_metadata(self):
        exc = configuration_error("bad", field=None, other=1)
        assert isinstance(exc, RuleKitError)
        assert exc.error.metadata == {"other": 1}
        assert str(exc) == "[E7000_CONFIGURATION_GENERIC] bad"


class TestRaiseForFailures:

    def test_no_failures_no_exception(self):
        raise_for_failures(())

    def test_failures_raise(self, make_context):
        failures = NotEmptyValidator().validate(make_context("", "Name"))

        with pytest.raises(ValidationException) as exc_info:
            raise_for_failures(failures)

        exc = exc_info.value
        assert exc.failures == failures
        assert exc.code is ErrorCode.E2000_VALIDATION_GENERIC
        assert exc.error.metadata["properties"] == ["Name"]
        assert "Name: 'Name' must not be empty." in str(exc)


class TestValidationFailure:

    def test_to_dict(self):
        failure = ValidationFailure(
            "Age", "too young", 3, {"PropertyName": "Age"}, error_code="GreaterThanValidator",
            custom_state={"min": 18}, severity=Severity.WARNING,
        )
        assert failure.to_dict() == {
            "property": "Age",
            "message": "too young",
            "code": "GreaterThanValidator",
            "severity": "warning",
            "value": 3,
            "state": {"min": 18},
        }
        assert str(failure) == "too young"

    def test_legacy_arguments_are_a_tuple_copy(self):
        args = ["a"]
        failure = ValidationFailure("P", "m", formatted_message_arguments=args)
        args.append("b")
        assert failure.formatted_message_arguments == ("a",)
