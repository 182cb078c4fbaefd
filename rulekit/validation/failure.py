"""Validation Failure

The output record of a failing property validator. Immutable once built;
the core never keeps a reference to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from rulekit.errors import validation_failed


class Severity(str, Enum):
    """How serious a failure is. Informational only; the core never filters on it."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """A single failed property check.

    ``formatted_message_arguments`` is a compatibility copy of the
    formatter's legacy positional arguments taken at construction time.
    ``formatted_message_placeholder_values`` is the source of truth for
    what was substituted into ``error_message``.
    """
    property_name: str | None
    error_message: str
    attempted_value: Any = None
    formatted_message_placeholder_values: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )
    formatted_message_arguments: tuple[Any, ...] = ()
    error_code: str | None = None
    custom_state: Any = None
    severity: Severity = Severity.ERROR

    def __post_init__(self):
        object.__setattr__(
            self,
            "formatted_message_placeholder_values",
            MappingProxyType(dict(self.formatted_message_placeholder_values)),
        )
        object.__setattr__(self, "formatted_message_arguments", tuple(self.formatted_message_arguments))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses and structured logs."""
        result = {
            "property": self.property_name,
            "message": self.error_message,
            "code": self.error_code,
            "severity": self.severity.value,
            "value": self.attempted_value,
        }
        if self.custom_state is not None:
            result["state"] = self.custom_state
        return result

    def __str__(self) -> str:
        return self.error_message


def raise_for_failures(failures: Iterable[ValidationFailure], origin: str = "") -> None:
    """Raise ValidationException if ``failures`` is non-empty."""
    failures = tuple(failures)
    if failures:
        raise validation_failed(failures, origin=origin)
