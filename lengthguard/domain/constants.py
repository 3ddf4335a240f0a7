"""Domain rules and constants for length validation."""

from enum import StrEnum
from typing import Final

# Upper bound meaning "no maximum"
UNBOUNDED: Final = -1

# Message formatter argument names
MIN_LENGTH_ARG: Final = "MinLength"
MAX_LENGTH_ARG: Final = "MaxLength"
TOTAL_LENGTH_ARG: Final = "TotalLength"
PROPERTY_NAME_ARG: Final = "PropertyName"

# Language of the built-in message templates
DEFAULT_LANGUAGE: Final = "en"


class CountingPolicy(StrEnum):
    """How the length of a string is measured."""

    RAW = "raw"
    TEXT_ELEMENTS = "text_elements"


class RuleKind(StrEnum):
    """Identity of a length rule preset, valued by its reported name."""

    LENGTH = "LengthValidator"
    EXACT = "ExactLengthValidator"
    MAXIMUM = "MaximumLengthValidator"
    MINIMUM = "MinimumLengthValidator"
