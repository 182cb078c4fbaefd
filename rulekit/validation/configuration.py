"""Validator Configuration

Run-wide, read-only configuration owned by the orchestration layer and
handed to the core on each ValidationContext: error-code resolution,
message lookup and display-name resolution.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Callable

from rulekit.config import Settings, get_settings
from .messages import LanguageManager, MessageCatalog

if TYPE_CHECKING:
    from .property_validator import PropertyValidator

_PASCAL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def default_error_code_resolver(validator: PropertyValidator) -> str:
    """Error code derived from the validator's identity (its class name)."""
    return validator.name


def split_pascal_case(name: str | None) -> str | None:
    """'FirstName' -> 'First Name', 'HTTPStatus' -> 'HTTP Status'."""
    if not name:
        return name
    return _PASCAL_BOUNDARY.sub(" ", name)


def identity_display_name(name: str | None) -> str | None:
    return name


@dataclass(frozen=True, slots=True)
class ValidatorConfiguration:
    """Immutable configuration shared by every validation in a run.

    Concurrent reads are safe. To change behavior, build a new instance
    and pass it on the contexts of the next run.
    """
    error_code_resolver: Callable[[PropertyValidator], str] = default_error_code_resolver
    language_manager: LanguageManager = field(default_factory=MessageCatalog)
    culture: str | None = "en"
    display_name_resolver: Callable[[str | None], str | None] = split_pascal_case

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> ValidatorConfiguration:
        settings = settings or get_settings()
        values = {
            "culture": settings.CULTURE,
            "display_name_resolver": (
                split_pascal_case if settings.SPLIT_PASCAL_CASE_DISPLAY_NAMES else identity_display_name
            ),
        }
        values.update(overrides)
        return cls(**values)


@lru_cache
def get_default_configuration() -> ValidatorConfiguration:
    """Process default, built once from settings and never mutated."""
    return ValidatorConfiguration.from_settings()
