"""Length measurement under a counting policy."""

from collections.abc import Callable
from dataclasses import dataclass

import regex

from .constants import CountingPolicy

# One match per extended grapheme cluster
_TEXT_ELEMENT = regex.compile(r"\X")


@dataclass
class LengthOptions:
    """Mutable options handed to a rule's configure callback."""

    policy: CountingPolicy = CountingPolicy.RAW

    @property
    def use_length_in_text_elements(self) -> bool:
        return self.policy is CountingPolicy.TEXT_ELEMENTS

    @use_length_in_text_elements.setter
    def use_length_in_text_elements(self, value: bool) -> None:
        self.policy = CountingPolicy.TEXT_ELEMENTS if value else CountingPolicy.RAW


def raw_length(value: str) -> int:
    """Count code points."""
    return len(value)


def text_element_length(value: str) -> int:
    """Count user-perceived characters (extended grapheme clusters).

    A base letter followed by a combining mark, a regional-indicator flag
    pair and an emoji ZWJ sequence each count as one.
    """
    return sum(1 for _ in _TEXT_ELEMENT.finditer(value))


def build_policy(
    configure: Callable[[LengthOptions], None] | None,
    default: CountingPolicy = CountingPolicy.RAW,
) -> CountingPolicy:
    """Run the caller's configure callback against fresh options.

    Args:
        configure: Optional callback that mutates the options
        default: Policy the fresh options start from

    Returns:
        The policy selected once the callback has run
    """
    options = LengthOptions(policy=default)
    if configure is not None:
        configure(options)
    return CountingPolicy(options.policy)


def measure(value: str, policy: CountingPolicy) -> int:
    """Measure value under the given policy."""
    if policy is CountingPolicy.TEXT_ELEMENTS:
        return text_element_length(value)
    return raw_length(value)
