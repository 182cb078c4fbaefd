# rulekit exports
from rulekit.config import Settings, get_settings
from rulekit.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    validation_logger,
)
from rulekit.errors import (
    AppError,
    ErrorCode,
    RuleKitError,
    ValidatorConfigurationError,
    ValidationCancelledError,
    ValidationException,
)
from rulekit.validation import *  # noqa: F401,F403
from rulekit.validation import __all__ as _validation_all

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "unbind_context",
    "validation_logger",
    "AppError",
    "ErrorCode",
    "RuleKitError",
    "ValidatorConfigurationError",
    "ValidationCancelledError",
    "ValidationException",
    *_validation_all,
]
