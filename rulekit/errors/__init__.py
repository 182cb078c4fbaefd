"""Error Handling

Usage:
    from rulekit.errors import ValidatorConfigurationError, ErrorCode

    try:
        LengthValidator(10, 2)
    except ValidatorConfigurationError as e:
        log.error(e.error.message, code=e.code.name)
"""
from .types import AppError, ErrorCode
from .exceptions import (
    RuleKitError,
    ValidatorConfigurationError,
    ValidationCancelledError,
    ValidationException,
    configuration_error,
    cancelled,
    validation_failed,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "RuleKitError",
    "ValidatorConfigurationError",
    "ValidationCancelledError",
    "ValidationException",
    "configuration_error",
    "cancelled",
    "validation_failed",
]
