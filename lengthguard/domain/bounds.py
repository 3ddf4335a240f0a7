"""Static and instance-derived length bounds."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .constants import UNBOUNDED
from .exceptions import InvalidConfigurationError

BoundFunc = Callable[[Any], int]


@dataclass(frozen=True)
class FixedBounds:
    """Bounds known when the rule is defined."""

    min: int
    max: int

    def __post_init__(self):
        if self.max != UNBOUNDED and self.max < self.min:
            raise InvalidConfigurationError("max", "max should be larger than min.")


@dataclass(frozen=True)
class DynamicBounds:
    """Bounds computed from the instance being validated.

    Both functions are called on every evaluation. Their results are not
    checked against each other: a computed max below the computed min makes
    every value fail.
    """

    min_fn: BoundFunc
    max_fn: BoundFunc


Bounds = FixedBounds | DynamicBounds


def resolve_bounds(bounds: Bounds, instance: Any) -> tuple[int, int]:
    """Return the effective (min, max) for one evaluation."""
    if isinstance(bounds, DynamicBounds):
        return bounds.min_fn(instance), bounds.max_fn(instance)
    return bounds.min, bounds.max


def within_bounds(length: int, min_length: int, max_length: int) -> bool:
    """Check length against min and max, where max may be UNBOUNDED."""
    return length >= min_length and (
        max_length == UNBOUNDED or length <= max_length
    )
