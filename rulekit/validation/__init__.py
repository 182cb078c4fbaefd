"""Property Validation Core

Runs one rule against one property value and composes the failure record.

Usage:
    from rulekit.validation import NotEmptyValidator, ValidationContext, get_default_configuration

    validator = NotEmptyValidator().with_error_code("NAME_REQUIRED")
    context = ValidationContext("", property_name="Name", configuration=get_default_configuration())
    failures = validator.validate(context)
    # failures[0].error_message == "'Name' must not be empty."

    # Inside an event loop
    failures = await validator.validate_async(context, CancellationToken())
"""
from .formatter import MessageFormatter, PROPERTY_NAME, PROPERTY_VALUE, COLLECTION_INDEX
from .messages import LanguageManager, MessageCatalog, ENGLISH_MESSAGES, NO_DEFAULT_MESSAGE
from .sources import StringSource, StaticStringSource, LazyStringSource, LanguageStringSource
from .failure import Severity, ValidationFailure, raise_for_failures
from .configuration import (
    ValidatorConfiguration,
    get_default_configuration,
    default_error_code_resolver,
    split_pascal_case,
)
from .context import (
    CancellationToken,
    RootContextData,
    Rule,
    StaticRule,
    ValidationContext,
    MessageBuilderContext,
)
from .options import ValidatorOptions
from .property_validator import PropertyValidator, LocalizedPropertyValidator
from .validators import (
    NotNullValidator,
    NullValidator,
    NotEmptyValidator,
    EmptyValidator,
    LengthValidator,
    MinimumLengthValidator,
    MaximumLengthValidator,
    ExactLengthValidator,
    RegularExpressionValidator,
    EmailValidator,
    PredicateValidator,
    AsyncPredicateValidator,
    ComparisonValidator,
    GreaterThanValidator,
    GreaterThanOrEqualValidator,
    LessThanValidator,
    LessThanOrEqualValidator,
    EqualValidator,
    NotEqualValidator,
    InclusiveBetweenValidator,
    ExclusiveBetweenValidator,
)

__all__ = [
    # Formatting
    "MessageFormatter",
    "PROPERTY_NAME",
    "PROPERTY_VALUE",
    "COLLECTION_INDEX",
    # Messages
    "LanguageManager",
    "MessageCatalog",
    "ENGLISH_MESSAGES",
    "NO_DEFAULT_MESSAGE",
    "StringSource",
    "StaticStringSource",
    "LazyStringSource",
    "LanguageStringSource",
    # Results
    "Severity",
    "ValidationFailure",
    "raise_for_failures",
    # Configuration
    "ValidatorConfiguration",
    "get_default_configuration",
    "default_error_code_resolver",
    "split_pascal_case",
    "ValidatorOptions",
    # Context
    "CancellationToken",
    "RootContextData",
    "Rule",
    "StaticRule",
    "ValidationContext",
    "MessageBuilderContext",
    # Core
    "PropertyValidator",
    "LocalizedPropertyValidator",
    # Built-ins
    "NotNullValidator",
    "NullValidator",
    "NotEmptyValidator",
    "EmptyValidator",
    "LengthValidator",
    "MinimumLengthValidator",
    "MaximumLengthValidator",
    "ExactLengthValidator",
    "RegularExpressionValidator",
    "EmailValidator",
    "PredicateValidator",
    "AsyncPredicateValidator",
    "ComparisonValidator",
    "GreaterThanValidator",
    "GreaterThanOrEqualValidator",
    "LessThanValidator",
    "LessThanOrEqualValidator",
    "EqualValidator",
    "NotEqualValidator",
    "InclusiveBetweenValidator",
    "ExclusiveBetweenValidator",
]
