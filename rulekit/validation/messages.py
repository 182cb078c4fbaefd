"""Default Message Catalog

Message templates keyed by resource name (the built-in validator class
name) per culture. Only English ships with the library; callers supply
their own LanguageManager for anything else.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable

NO_DEFAULT_MESSAGE = "No default error message has been specified."

ENGLISH_MESSAGES: Mapping[str, str] = MappingProxyType({
    "NotNullValidator": "'{PropertyName}' must not be empty.",
    "NullValidator": "'{PropertyName}' must be empty.",
    "NotEmptyValidator": "'{PropertyName}' must not be empty.",
    "EmptyValidator": "'{PropertyName}' must be empty.",
    "LengthValidator": "'{PropertyName}' must be between {MinLength} and {MaxLength} characters. You entered {TotalLength} characters.",
    "MinimumLengthValidator": "The length of '{PropertyName}' must be at least {MinLength} characters. You entered {TotalLength} characters.",
    "MaximumLengthValidator": "The length of '{PropertyName}' must be {MaxLength} characters or fewer. You entered {TotalLength} characters.",
    "ExactLengthValidator": "'{PropertyName}' must be {MaxLength} characters in length. You entered {TotalLength} characters.",
    "RegularExpressionValidator": "'{PropertyName}' is not in the correct format.",
    "EmailValidator": "'{PropertyName}' is not a valid email address.",
    "PredicateValidator": "The specified condition was not met for '{PropertyName}'.",
    "AsyncPredicateValidator": "The specified condition was not met for '{PropertyName}'.",
    "GreaterThanValidator": "'{PropertyName}' must be greater than '{ComparisonValue}'.",
    "GreaterThanOrEqualValidator": "'{PropertyName}' must be greater than or equal to '{ComparisonValue}'.",
    "LessThanValidator": "'{PropertyName}' must be less than '{ComparisonValue}'.",
    "LessThanOrEqualValidator": "'{PropertyName}' must be less than or equal to '{ComparisonValue}'.",
    "EqualValidator": "'{PropertyName}' must be equal to '{ComparisonValue}'.",
    "NotEqualValidator": "'{PropertyName}' must not be equal to '{ComparisonValue}'.",
    "InclusiveBetweenValidator": "'{PropertyName}' must be between {From} and {To}. You entered {PropertyValue}.",
    "ExclusiveBetweenValidator": "'{PropertyName}' must be between {From} and {To} (exclusive). You entered {PropertyValue}.",
})


@runtime_checkable
class LanguageManager(Protocol):
    """Lookup of a message template by resource key and culture."""

    def get_string(self, key: str, culture: str | None = None) -> str | None: ...


class MessageCatalog:
    """Read-only per-culture message lookup.

    Resolution order: exact culture ("en-GB"), neutral culture ("en"),
    then the fallback culture.
    """

    __slots__ = ("_translations", "fallback_culture")

    def __init__(
        self,
        translations: Mapping[str, Mapping[str, str]] | None = None,
        fallback_culture: str = "en",
    ):
        merged = {"en": dict(ENGLISH_MESSAGES)}
        for culture, messages in (translations or {}).items():
            merged.setdefault(culture.lower(), {}).update(messages)
        self._translations = MappingProxyType(
            {culture: MappingProxyType(messages) for culture, messages in merged.items()}
        )
        self.fallback_culture = fallback_culture.lower()

    @property
    def cultures(self) -> tuple[str, ...]:
        return tuple(self._translations)

    def get_string(self, key: str, culture: str | None = None) -> str | None:
        for candidate in self._candidates(culture):
            if (messages := self._translations.get(candidate)) and key in messages:
                return messages[key]
        return None

    def _candidates(self, culture: str | None) -> list[str]:
        candidates = []
        if culture:
            culture = culture.lower()
            candidates.append(culture)
            if "-" in culture:
                candidates.append(culture.split("-", 1)[0])
        if self.fallback_culture not in candidates:
            candidates.append(self.fallback_culture)
        return candidates
