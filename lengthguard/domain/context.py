"""Validation context and message formatting consumed by length rules."""

import re
from dataclasses import dataclass, field
from typing import Any, Self

from .constants import PROPERTY_NAME_ARG

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class MessageFormatter:
    """Collects named arguments and renders message templates with them."""

    def __init__(self):
        self._placeholder_values: dict[str, Any] = {}

    def append_argument(self, name: str, value: Any) -> Self:
        """Add or replace a named argument."""
        self._placeholder_values[name] = value
        return self

    def append_property_name(self, name: str) -> Self:
        return self.append_argument(PROPERTY_NAME_ARG, name)

    @property
    def placeholder_values(self) -> dict[str, Any]:
        return dict(self._placeholder_values)

    def build_message(self, template: str) -> str:
        """Replace {Name} placeholders with appended arguments.

        Placeholders without a matching argument are left as they are.
        """

        def _replace(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in self._placeholder_values:
                return str(self._placeholder_values[key])
            return match.group(0)

        return _PLACEHOLDER.sub(_replace, template)

    def reset(self) -> None:
        self._placeholder_values.clear()


@dataclass
class ValidationContext:
    """State of one validation pass over an instance."""

    instance_to_validate: Any
    property_name: str | None = None
    message_formatter: MessageFormatter = field(default_factory=MessageFormatter)
