"""Built-in Property Validators

Concrete rules on top of PropertyValidator. Each one appends the
placeholders its default message needs from inside ``is_valid`` and takes
its default message from the catalog entry named after its class.

Features:
- Compiled regex caching (bounded LRU)
- Comparison values that can be constants or callables of the instance
- Null-tolerant checks: only the null/empty validators fail on None
"""
from __future__ import annotations

import asyncio
import operator
import re
from collections.abc import Sized
from functools import lru_cache
from typing import Any, Awaitable, Callable

from rulekit.errors import ErrorCode, configuration_error
from .context import CancellationToken, ValidationContext
from .property_validator import LocalizedPropertyValidator

Predicate = Callable[[Any, ValidationContext], bool]
AsyncPredicate = Callable[[Any, ValidationContext, CancellationToken], Awaitable[bool]]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


# ============================================================================
# Null / Empty Validators
# ============================================================================

class NotNullValidator(LocalizedPropertyValidator):
    """Value must not be None."""

    __slots__ = ()

    def is_valid(self, context: ValidationContext) -> bool:
        return context.property_value is not None


class NullValidator(LocalizedPropertyValidator):
    """Value must be None."""

    __slots__ = ()

    def is_valid(self, context: ValidationContext) -> bool:
        return context.property_value is None


class NotEmptyValidator(LocalizedPropertyValidator):
    """Value must not be None, a blank string or an empty collection."""

    __slots__ = ()

    def is_valid(self, context: ValidationContext) -> bool:
        return not _is_empty(context.property_value)


class EmptyValidator(LocalizedPropertyValidator):
    __slots__ = ()

    def is_valid(self, context: ValidationContext) -> bool:
        return _is_empty(context.property_value)


# ============================================================================
# String Validators
# ============================================================================

class LengthValidator(LocalizedPropertyValidator):
    """Validate length constraints. ``max_length=None`` means unbounded."""

    __slots__ = ("min_length", "max_length")

    def __init__(self, min_length: int = 0, max_length: int | None = None, message=None, **kwargs):
        if max_length is not None and max_length < min_length:
            raise configuration_error(
                f"max_length ({max_length}) must be greater than or equal to min_length ({min_length})",
                code=ErrorCode.E7003_INVALID_ARGUMENT,
                origin=type(self).__name__,
                min_length=min_length,
                max_length=max_length,
            )
        self.min_length, self.max_length = min_length, max_length
        super().__init__(message, **kwargs)

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        length = len(value) if isinstance(value, Sized) else len(str(value))
        if length < self.min_length or (self.max_length is not None and length > self.max_length):
            context.message_formatter \
                .append_argument("MinLength", self.min_length) \
                .append_argument("MaxLength", self.max_length) \
                .append_argument("TotalLength", length)
            return False
        return True


class MinimumLengthValidator(LengthValidator):
    __slots__ = ()

    def __init__(self, min_length: int, message=None, **kwargs):
        super().__init__(min_length, None, message, **kwargs)


class MaximumLengthValidator(LengthValidator):
    __slots__ = ()

    def __init__(self, max_length: int, message=None, **kwargs):
        super().__init__(0, max_length, message, **kwargs)


class ExactLengthValidator(LengthValidator):
    __slots__ = ()

    def __init__(self, length: int, message=None, **kwargs):
        super().__init__(length, length, message, **kwargs)


class RegularExpressionValidator(LocalizedPropertyValidator):
    """Validate against a regex (search semantics, like ``re.search``)."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: str | re.Pattern, flags: int = 0, message=None, **kwargs):
        self.pattern = pattern if isinstance(pattern, re.Pattern) else _compile(pattern, flags)
        super().__init__(message, **kwargs)

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None:
            return True
        if not self.pattern.search(str(value)):
            context.message_formatter.append_argument("RegularExpression", self.pattern.pattern)
            return False
        return True


@lru_cache(maxsize=256)
def _compile(pattern: str, flags: int) -> re.Pattern:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise configuration_error(
            f"Invalid regular expression: {e}",
            code=ErrorCode.E7003_INVALID_ARGUMENT,
            origin="RegularExpressionValidator",
            cause=e,
            pattern=pattern,
        ) from e


class EmailValidator(LocalizedPropertyValidator):
    """Loose email check: exactly one '@', neither first nor last.

    Deliverability is the mail server's business, not the validator's.
    """

    __slots__ = ()

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None:
            return True
        if not isinstance(value, str):
            return False
        index = value.find("@")
        return 0 < index < len(value) - 1 and value.find("@", index + 1) == -1


# ============================================================================
# Predicate Validators
# ============================================================================

class PredicateValidator(LocalizedPropertyValidator):
    """Custom check from a function.

    Usage:
        even = PredicateValidator(lambda value, ctx: value % 2 == 0)

    When ``async_predicate`` is given it replaces ``predicate`` on the
    asynchronous path; the synchronous path always uses ``predicate``.
    """

    __slots__ = ("predicate", "async_predicate")

    def __init__(self, predicate: Predicate, async_predicate: AsyncPredicate | None = None, message=None, **kwargs):
        self.predicate, self.async_predicate = predicate, async_predicate
        super().__init__(message, **kwargs)

    def is_valid(self, context: ValidationContext) -> bool:
        return bool(self.predicate(context.property_value, context))

    async def is_valid_async(self, context: ValidationContext, cancellation: CancellationToken) -> bool:
        if self.async_predicate is None:
            return self.is_valid(context)
        return bool(await self.async_predicate(context.property_value, context, cancellation))


class AsyncPredicateValidator(LocalizedPropertyValidator):
    """Custom check that can only be answered asynchronously (e.g. a remote uniqueness check).

    Always asks to be run on the async path. Run synchronously, it drives
    the coroutine to completion itself, which is impossible from inside a
    running event loop.
    """

    __slots__ = ("async_predicate",)

    def __init__(self, async_predicate: AsyncPredicate, message=None, **kwargs):
        self.async_predicate = async_predicate
        super().__init__(message, **kwargs)

    def should_validate_asynchronously(self, context: ValidationContext) -> bool:
        return True

    def is_valid(self, context: ValidationContext) -> bool:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            loop_running = False
        else:
            loop_running = True
        if not loop_running:
            return asyncio.run(self.is_valid_async(context, CancellationToken()))
        raise configuration_error(
            "AsyncPredicateValidator cannot run synchronously inside a running event loop; use validate_async",
            code=ErrorCode.E7004_SYNC_OVER_ASYNC,
            origin=self.name,
            property_name=context.property_name,
        )

    async def is_valid_async(self, context: ValidationContext, cancellation: CancellationToken) -> bool:
        return bool(await self.async_predicate(context.property_value, context, cancellation))


# ============================================================================
# Comparison Validators
# ============================================================================

class ComparisonValidator(LocalizedPropertyValidator):
    """Compare the value against a constant or a value taken from the instance.

    ``value_to_compare`` may be a callable; it then receives
    ``context.instance_to_validate``. ``comparison_property`` names that
    member for the ``ComparisonProperty`` placeholder.
    """

    __slots__ = ("value_to_compare", "comparison_property")

    comparison: Callable[[Any, Any], bool] = staticmethod(operator.eq)
    allow_none = True

    def __init__(self, value_to_compare: Any, *, comparison_property: str | None = None, message=None, **kwargs):
        self.value_to_compare, self.comparison_property = value_to_compare, comparison_property
        super().__init__(message, **kwargs)

    def _resolve(self, context: ValidationContext) -> Any:
        if callable(self.value_to_compare):
            return self.value_to_compare(context.instance_to_validate)
        return self.value_to_compare

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None and self.allow_none:
            return True

        expected = self._resolve(context)
        if self.comparison(value, expected):
            return True

        formatter = context.message_formatter
        formatter.append_argument("ComparisonValue", expected)
        if self.comparison_property:
            formatter.append_argument("ComparisonProperty", self.comparison_property)
        return False


class GreaterThanValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.gt)


class GreaterThanOrEqualValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.ge)


class LessThanValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.lt)


class LessThanOrEqualValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.le)


class EqualValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.eq)
    allow_none = False


class NotEqualValidator(ComparisonValidator):
    __slots__ = ()
    comparison = staticmethod(operator.ne)
    allow_none = False


class InclusiveBetweenValidator(LocalizedPropertyValidator):
    """``from_value <= value <= to_value``. None passes."""

    __slots__ = ("from_value", "to_value")

    def __init__(self, from_value: Any, to_value: Any, message=None, **kwargs):
        if to_value < from_value:
            raise configuration_error(
                f"to_value ({to_value}) must be greater than or equal to from_value ({from_value})",
                code=ErrorCode.E7003_INVALID_ARGUMENT,
                origin=type(self).__name__,
            )
        self.from_value, self.to_value = from_value, to_value
        super().__init__(message, **kwargs)

    def in_range(self, value: Any) -> bool:
        return self.from_value <= value <= self.to_value

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None or self.in_range(value):
            return True
        context.message_formatter \
            .append_argument("From", self.from_value) \
            .append_argument("To", self.to_value)
        return False


class ExclusiveBetweenValidator(InclusiveBetweenValidator):
    """``from_value < value < to_value``. None passes."""

    __slots__ = ()

    def in_range(self, value: Any) -> bool:
        return self.from_value < value < self.to_value
