"""Property Validator

The contract every concrete rule satisfies: evaluate one predicate against
one property value and, on failure, compose exactly one ValidationFailure
from the message source, the rule's message builder, the error-code
source/resolver, the custom-state provider and the severity provider.

Synchronous and asynchronous entry points produce identical results when a
validator has no asynchronous predicate of its own: the default
``is_valid_async`` calls ``is_valid`` and returns without suspending.
"""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable

from rulekit.logging import validation_logger
from .context import CancellationToken, MessageBuilderContext, ValidationContext
from .failure import Severity, ValidationFailure
from .formatter import COLLECTION_INDEX
from .options import AsyncCondition, Condition, SeverityProvider, StateProvider, ValidatorOptions
from .sources import LanguageStringSource, StringSource

log = validation_logger()

Failures = tuple[ValidationFailure, ...]


class PropertyValidator(ABC):
    """Base class for property validators.

    Subclasses implement ``is_valid`` and may override ``is_valid_async``
    when the check genuinely needs to await something. Placeholders a
    subclass wants in its message are appended to
    ``context.message_formatter`` from inside ``is_valid``.
    """

    __slots__ = ("options",)

    def __init__(
        self,
        message: StringSource | str | Callable | None = None,
        *,
        options: ValidatorOptions | None = None,
    ):
        if options is None:
            options = ValidatorOptions(message_source=message if message is not None else self.default_message_source())
        elif message is not None:
            options = options.with_message(message)
        self.options = options

    @property
    def name(self) -> str:
        """Identity used by the default error-code resolver and message lookup."""
        return type(self).__name__

    def default_message_source(self) -> StringSource | None:
        return None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def validate(self, context: ValidationContext) -> Failures:
        if self.is_valid(context):
            return ()

        self.prepare_message_formatter_for_validation_error(context)
        return (self.create_validation_error(context),)

    async def validate_async(
        self, context: ValidationContext, cancellation: CancellationToken | None = None
    ) -> Failures:
        if cancellation is None:
            cancellation = CancellationToken()
        if await self.is_valid_async(context, cancellation):
            return ()

        self.prepare_message_formatter_for_validation_error(context)
        return (self.create_validation_error(context),)

    def should_validate_asynchronously(self, context: ValidationContext) -> bool:
        # An attached async condition forces the async path even for a sync predicate.
        return self.options.async_condition is not None

    @abstractmethod
    def is_valid(self, context: ValidationContext) -> bool:
        """The predicate. True means the value passes."""

    async def is_valid_async(self, context: ValidationContext, cancellation: CancellationToken) -> bool:
        return self.is_valid(context)

    # ------------------------------------------------------------------
    # Failure composition
    # ------------------------------------------------------------------

    def prepare_message_formatter_for_validation_error(self, context: ValidationContext) -> None:
        """Register the standard placeholders on the context's formatter."""
        formatter = context.message_formatter
        formatter.append_property_name(context.display_name)
        formatter.append_property_value(context.property_value)

        # Index flowed down from an enclosing for-each. A placeholder the
        # validator set itself is kept.
        index = context.root.collection_index
        if index is not None and COLLECTION_INDEX not in formatter.placeholder_values:
            formatter.append_argument(COLLECTION_INDEX, index)

    def create_validation_error(self, context: ValidationContext) -> ValidationFailure:
        """Build the failure for a predicate that returned False."""
        builder_context = MessageBuilderContext(context, self.options.message_source, self)

        message_builder = getattr(context.rule, "message_builder", None)
        if message_builder is not None:
            error_message = message_builder(builder_context)
        else:
            error_message = builder_context.get_default_message()

        options = self.options
        if options.error_code_source is not None:
            error_code = options.error_code_source.get_string(context)
        else:
            error_code = context.configuration.error_code_resolver(self)

        custom_state = options.custom_state_provider(context) if options.custom_state_provider else None
        severity = options.severity_provider(context) if options.severity_provider else Severity.ERROR

        formatter = context.message_formatter
        failure = ValidationFailure(
            property_name=context.property_name,
            error_message=error_message,
            attempted_value=context.property_value,
            formatted_message_placeholder_values=formatter.placeholder_values,
            formatted_message_arguments=formatter.additional_arguments,
            error_code=error_code,
            custom_state=custom_state,
            severity=severity,
        )
        log.debug(
            "validation_failed",
            property_name=failure.property_name,
            validator=self.name,
            error_code=failure.error_code,
            severity=failure.severity.value,
        )
        return failure

    # ------------------------------------------------------------------
    # Configuration copies
    # ------------------------------------------------------------------

    def _with_options(self, options: ValidatorOptions) -> PropertyValidator:
        clone = copy.copy(self)
        clone.options = options
        return clone

    def with_message(self, message: StringSource | str | Callable) -> PropertyValidator:
        return self._with_options(self.options.with_message(message))

    def with_error_code(self, code: StringSource | str | Callable) -> PropertyValidator:
        return self._with_options(self.options.with_error_code(code))

    def with_state(self, provider: StateProvider) -> PropertyValidator:
        return self._with_options(self.options.with_state(provider))

    def with_severity(self, severity: Severity | SeverityProvider) -> PropertyValidator:
        return self._with_options(self.options.with_severity(severity))

    def when(self, condition: Condition) -> PropertyValidator:
        return self._with_options(self.options.apply_condition(condition))

    def when_async(self, condition: AsyncCondition) -> PropertyValidator:
        return self._with_options(self.options.apply_async_condition(condition))

    def __repr__(self) -> str:
        return f"{self.name}()"


class LocalizedPropertyValidator(PropertyValidator):
    """Validator whose default message comes from the message catalog, keyed by class name."""

    __slots__ = ()

    def default_message_source(self) -> StringSource:
        return LanguageStringSource(self.name)
