"""Validator Options

Per-validator configuration bag. Frozen: built once per validator
instance and shared read-only by every invocation of that instance.
The ``with_*`` helpers return changed copies.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from rulekit.errors import ErrorCode, configuration_error
from .failure import Severity
from .messages import NO_DEFAULT_MESSAGE
from .sources import LanguageStringSource, StaticStringSource, StringSource, as_string_source

if TYPE_CHECKING:
    from .context import CancellationToken, ValidationContext

Condition = Callable[["ValidationContext"], bool]
AsyncCondition = Callable[["ValidationContext", "CancellationToken"], Awaitable[bool]]
StateProvider = Callable[["ValidationContext"], Any]
SeverityProvider = Callable[["ValidationContext"], Severity]


@dataclass(frozen=True, slots=True)
class ValidatorOptions:
    message_source: StringSource | str | Callable | None = None
    condition: Condition | None = None
    async_condition: AsyncCondition | None = None
    error_code_source: StringSource | str | Callable | None = None
    custom_state_provider: StateProvider | None = None
    severity_provider: SeverityProvider | None = None

    def __post_init__(self):
        message_source = as_string_source(self.message_source) or StaticStringSource(NO_DEFAULT_MESSAGE)
        error_code_source = as_string_source(self.error_code_source, field_name="error_code_source")
        if isinstance(message_source, LanguageStringSource):
            message_source = message_source.bind_error_code_source(error_code_source)
        object.__setattr__(self, "message_source", message_source)
        object.__setattr__(self, "error_code_source", error_code_source)

        for name in ("condition", "async_condition", "custom_state_provider", "severity_provider"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise configuration_error(
                    f"{name} must be callable, got {type(hook).__name__}",
                    code=ErrorCode.E7002_INVALID_PROVIDER,
                    origin="options",
                    field=name,
                )

    def with_message(self, message: StringSource | str | Callable) -> ValidatorOptions:
        return replace(self, message_source=message)

    def with_error_code(self, code: StringSource | str | Callable) -> ValidatorOptions:
        return replace(self, error_code_source=code)

    def with_state(self, provider: StateProvider) -> ValidatorOptions:
        return replace(self, custom_state_provider=provider)

    def with_severity(self, severity: Severity | SeverityProvider) -> ValidatorOptions:
        if isinstance(severity, Severity):
            fixed = severity
            return replace(self, severity_provider=lambda _ctx: fixed)
        return replace(self, severity_provider=severity)

    def apply_condition(self, condition: Condition) -> ValidatorOptions:
        """AND ``condition`` with any condition already configured."""
        if self.condition is None:
            return replace(self, condition=condition)
        original = self.condition
        return replace(self, condition=lambda ctx: original(ctx) and condition(ctx))

    def apply_async_condition(self, condition: AsyncCondition) -> ValidatorOptions:
        """AND an asynchronous ``condition`` with any already configured."""
        if self.async_condition is None:
            return replace(self, async_condition=condition)
        original = self.async_condition

        async def combined(ctx: ValidationContext, cancellation: CancellationToken) -> bool:
            return await original(ctx, cancellation) and await condition(ctx, cancellation)

        return replace(self, async_condition=combined)
