"""Message Formatter

Per-attempt placeholder substitution for failure messages. Templates use
``{Name}`` or ``{Name:format_spec}``; the spec is passed to ``format()``.
Unknown placeholders are left in the output untouched.
"""
from __future__ import annotations

import re
import warnings
from typing import Any

PROPERTY_NAME = "PropertyName"
PROPERTY_VALUE = "PropertyValue"
COLLECTION_INDEX = "CollectionIndex"

_PLACEHOLDER = re.compile(r"\{([^{}:]+)(?::([^{}]+))?\}")


class MessageFormatter:
    """Holds placeholder values and renders them into a message template.

    Created fresh for every ValidationContext, filled while a validator runs
    and consumed once when the failure message is built.
    """

    __slots__ = ("placeholder_values", "additional_arguments")

    def __init__(self):
        self.placeholder_values: dict[str, Any] = {}
        # Deprecated positional {0}, {1}... arguments.
        self.additional_arguments: list[Any] = []

    def append_argument(self, name: str, value: Any) -> MessageFormatter:
        self.placeholder_values[name] = value
        return self

    def append_property_name(self, name: str | None) -> MessageFormatter:
        return self.append_argument(PROPERTY_NAME, name)

    def append_property_value(self, value: Any) -> MessageFormatter:
        return self.append_argument(PROPERTY_VALUE, value)

    def append_additional_arguments(self, *args: Any) -> MessageFormatter:
        """Append positional arguments. Deprecated, use named placeholders."""
        warnings.warn(
            "append_additional_arguments is deprecated; use append_argument with a named placeholder",
            DeprecationWarning,
            stacklevel=2,
        )
        self.additional_arguments.extend(args)
        return self

    def build_message(self, template: str) -> str:
        """Substitute every known placeholder in ``template``."""
        return _PLACEHOLDER.sub(self._replace, template)

    def _replace(self, match: re.Match) -> str:
        key, spec = match.group(1), match.group(2)
        if key in self.placeholder_values:
            value = self.placeholder_values[key]
        elif key.isdigit() and int(key) < len(self.additional_arguments):
            value = self.additional_arguments[int(key)]
        else:
            return match.group(0)
        return _render(value, spec)

    def __repr__(self) -> str:
        return f"MessageFormatter({self.placeholder_values!r})"


def _render(value: Any, spec: str | None) -> str:
    if value is None:
        return ""
    if spec:
        try:
            return format(value, spec)
        except (TypeError, ValueError):
            # Specs that don't apply to the value's type fall back to plain text.
            return str(value)
    return str(value)
