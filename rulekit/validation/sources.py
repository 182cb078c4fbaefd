"""String Sources

A string source produces text for a given ValidationContext. Options use
them for the message template and for the per-instance error code.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from rulekit.errors import ErrorCode, configuration_error
from .messages import NO_DEFAULT_MESSAGE, MessageCatalog

if TYPE_CHECKING:
    from .context import ValidationContext

# Used only when no context is supplied; it carries no culture or overrides.
_BUILTIN_CATALOG = MessageCatalog()


@runtime_checkable
class StringSource(Protocol):
    def get_string(self, context: ValidationContext | None) -> str | None: ...


@dataclass(frozen=True, slots=True)
class StaticStringSource:
    """Fixed text, independent of the context."""
    message: str

    def get_string(self, context: ValidationContext | None) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class LazyStringSource:
    """Text computed from the context on every call."""
    factory: Callable[[ValidationContext | None], str]

    def get_string(self, context: ValidationContext | None) -> str:
        return self.factory(context)


@dataclass(frozen=True, slots=True)
class LanguageStringSource:
    """Text looked up in the configured LanguageManager.

    When ``error_code_source`` yields a code that the catalog knows, that
    message wins over ``resource_name``. The owning ValidatorOptions fills
    ``error_code_source`` with its own only when the caller left it empty,
    and keeps it in step on later option copies. ``pinned`` opts out of
    that entirely.

    Without a context there is no configuration to ask, so the built-in
    English catalog answers.
    """
    resource_name: str
    error_code_source: StringSource | None = None
    pinned: bool = False
    bound_by_options: bool = False

    def bind_error_code_source(self, source: StringSource | None) -> LanguageStringSource:
        if self.pinned or source is self.error_code_source:
            return self
        if self.error_code_source is not None and not self.bound_by_options:
            return self
        return replace(self, error_code_source=source, bound_by_options=source is not None)

    def get_string(self, context: ValidationContext | None) -> str:
        if context is None:
            manager, culture = _BUILTIN_CATALOG, None
        else:
            manager = context.configuration.language_manager
            culture = context.configuration.culture

        if self.error_code_source is not None:
            code = self.error_code_source.get_string(context)
            if code and (message := manager.get_string(code, culture)):
                return message

        return manager.get_string(self.resource_name, culture) or NO_DEFAULT_MESSAGE


def as_string_source(value: Any, *, field_name: str = "message_source") -> StringSource | None:
    """Normalize str / callable / StringSource into a StringSource."""
    if value is None or isinstance(value, StringSource):
        return value
    if isinstance(value, str):
        return StaticStringSource(value)
    if callable(value):
        return LazyStringSource(value)
    raise configuration_error(
        f"{field_name} must be a str, a callable or a StringSource, got {type(value).__name__}",
        code=ErrorCode.E7001_INVALID_MESSAGE_SOURCE,
        origin="options",
        field=field_name,
    )
