"""Validation Context

Per-attempt carrier of the value under test plus references to run-wide
data. One ValidationContext belongs to exactly one validation attempt and
is never shared between concurrent attempts.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterator, Protocol, runtime_checkable

from rulekit.errors import cancelled
from .configuration import ValidatorConfiguration
from .formatter import MessageFormatter
from .messages import NO_DEFAULT_MESSAGE

if TYPE_CHECKING:
    from .property_validator import PropertyValidator
    from .sources import StringSource


class CancellationToken:
    """Advisory, cooperative cancellation signal.

    Checked by asynchronous predicates; never checked by the core itself.
    Safe to cancel from another thread.
    """

    __slots__ = ("_event",)

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, operation: str = "validation") -> None:
        if self._event.is_set():
            raise cancelled(operation, origin="cancellation_token")

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


@dataclass(slots=True)
class RootContextData:
    """Data shared across a whole validation run.

    ``collection_index`` is written by the for-each iteration collaborator
    and read by leaf validators to fill the ``CollectionIndex`` placeholder.
    """
    collection_index: int | str | None = None
    items: dict[str, Any] = field(default_factory=dict)

    @contextmanager
    def collection_index_scope(self, index: int | str) -> Iterator[RootContextData]:
        previous = self.collection_index
        self.collection_index = index
        try:
            yield self
        finally:
            self.collection_index = previous


@runtime_checkable
class Rule(Protocol):
    """The owning rule as seen by the core. Read-only."""
    message_builder: Callable[[MessageBuilderContext], str] | None


@dataclass(frozen=True, slots=True)
class StaticRule:
    """Minimal Rule for callers that don't bring their own."""
    message_builder: Callable[[MessageBuilderContext], str] | None = None


_NO_RULE = StaticRule()


@dataclass(slots=True)
class ValidationContext:
    """``configuration`` is required: the caller running the validation
    decides which one applies (``get_default_configuration()`` when it has
    no opinion). The core never looks one up on its own.
    """
    property_value: Any
    property_name: str | None = None
    display_name: str | None = None
    rule: Rule = _NO_RULE
    root: RootContextData = field(default_factory=RootContextData)
    message_formatter: MessageFormatter = field(default_factory=MessageFormatter)
    instance_to_validate: Any = None
    configuration: ValidatorConfiguration = field(kw_only=True)

    def __post_init__(self):
        if self.display_name is None:
            self.display_name = self.configuration.display_name_resolver(self.property_name)


@dataclass(frozen=True, slots=True)
class MessageBuilderContext:
    """What a rule's custom message builder gets to inspect."""
    property_context: ValidationContext
    message_source: StringSource
    property_validator: PropertyValidator

    @property
    def property_name(self) -> str | None:
        return self.property_context.property_name

    @property
    def display_name(self) -> str | None:
        return self.property_context.display_name

    @property
    def property_value(self) -> Any:
        return self.property_context.property_value

    @property
    def instance_to_validate(self) -> Any:
        return self.property_context.instance_to_validate

    @property
    def message_formatter(self) -> MessageFormatter:
        return self.property_context.message_formatter

    def build_message(self, template: str) -> str:
        return self.message_formatter.build_message(template)

    def get_default_message(self) -> str:
        template = self.message_source.get_string(self.property_context)
        return self.build_message(template or NO_DEFAULT_MESSAGE)
