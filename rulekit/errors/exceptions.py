"""Exceptions raised by rulekit.

Each exception wraps an AppError so callers get a typed code and structured
metadata regardless of which layer raised it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .types import AppError, ErrorCode

if TYPE_CHECKING:
    from rulekit.validation.failure import ValidationFailure


class RuleKitError(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class ValidatorConfigurationError(RuleKitError):
    """A validator, its options or one of its hooks is misconfigured."""


class ValidationCancelledError(RuleKitError):
    """Cooperative cancellation observed by an asynchronous predicate."""


class ValidationException(RuleKitError):
    """Raised when a caller asks for failures to be surfaced as an exception."""

    def __init__(self, error: AppError, failures: Sequence[ValidationFailure]):
        self.failures = tuple(failures)
        super().__init__(error)

    def __str__(self) -> str:
        lines = [self.error.message]
        lines.extend(f" -- {f.property_name}: {f.error_message}" for f in self.failures)
        return "\n".join(lines)


# =============================================================================
# Builders
# =============================================================================

def configuration_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_CONFIGURATION_GENERIC,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> ValidatorConfigurationError:
    """Create a configuration error ready to raise."""
    return ValidatorConfigurationError(AppError(
        code=code,
        message=message,
        origin=origin,
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


def cancelled(operation: str = "validation", origin: str = "") -> ValidationCancelledError:
    return ValidationCancelledError(AppError(
        code=ErrorCode.E8000_CANCELLED,
        message=f"Operation '{operation}' was cancelled",
        origin=origin,
        metadata={"operation": operation},
    ))


def validation_failed(failures: Sequence[ValidationFailure], origin: str = "") -> ValidationException:
    failures = tuple(failures)
    return ValidationException(
        AppError(
            code=ErrorCode.E2000_VALIDATION_GENERIC,
            message=f"Validation failed: {len(failures)} error(s)",
            origin=origin,
            metadata={"properties": sorted({f.property_name for f in failures})},
        ),
        failures,
    )
