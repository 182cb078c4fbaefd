"""Error Types

Typed error codes and an immutable error record shared by every exception
the library raises. Data-driven validation outcomes are never errors; they
are returned as ValidationFailure records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation outcomes surfaced as exceptions
    E7xxx: Validator configuration (programmer) errors
    E8xxx: Cooperative cancellation
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000

    # Configuration (E7xxx)
    E7000_CONFIGURATION_GENERIC = 7000
    E7001_INVALID_MESSAGE_SOURCE = 7001
    E7002_INVALID_PROVIDER = 7002
    E7003_INVALID_ARGUMENT = 7003
    E7004_SYNC_OVER_ASYNC = 7004

    # Cancellation (E8xxx)
    E8000_CANCELLED = 8000

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 7000 <= code < 8000:
            return "configuration"
        return "cancellation"


@dataclass(frozen=True, slots=True)
class AppError:
    """Base error record.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata for debugging
    - Optional cause for error chaining
    """
    code: ErrorCode
    message: str
    origin: str = ""
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def to_dict(self) -> dict:
        """Serialize error for logs and API responses."""
        payload = {
            "code": self.code.name,
            "code_num": self.code.value,
            "message": self.message,
            "category": self.code.category,
            "origin": self.origin,
            "metadata": self.metadata,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return {"error": payload}

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"
